"""Entry point for dropselect CLI."""

import sys

from dropselect.cli import build_parser


def main():
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
