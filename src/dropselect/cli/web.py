"""Handler for 'dropselect web'."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from dropselect.cli._common import error, load_options


def web(args) -> int:
    dropselect = shutil.which("dropselect")
    if dropselect is None:
        return error("dropselect not found on PATH")

    command = [dropselect, "demo", "--label-key", args.label_key]
    if args.options_file:
        # Fail here rather than inside every browser session.
        try:
            load_options(args.options_file)
        except ValueError as e:
            return error(str(e))
        command += ["--options", args.options_file]

    server = Server(
        shlex.join(command),
        host=args.host,
        port=args.port,
        title="dropselect",
    )

    print(f"serving demo at http://{args.host}:{args.port}", file=sys.stderr)
    server.serve()
    return 0
