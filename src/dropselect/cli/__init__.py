"""CLI argument parser and dispatch for dropselect."""

import argparse

from dropselect.cli.demo import demo as _demo
from dropselect.cli.web import web as _web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    parser = argparse.ArgumentParser(
        prog="dropselect",
        description="Searchable dropdown select for the terminal",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- demo ---
    demo_p = nouns.add_parser("demo", help="Run the demo select", parents=[common])
    demo_p.add_argument("--options", dest="options_file", help="JSON file with a list of options")
    demo_p.add_argument("--label-key", default="label", help="Field holding each option's label (default: label)")
    demo_p.set_defaults(func=_demo)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the demo in a browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.add_argument("--options", dest="options_file", help="JSON file with a list of options")
    web_p.add_argument("--label-key", default="label", help="Field holding each option's label (default: label)")
    web_p.set_defaults(func=_web)

    # no noun = demo
    parser.set_defaults(func=_demo, options_file=None, label_key="label")

    return parser
