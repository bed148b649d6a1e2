"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def error(msg: str) -> int:
    """Print an error to stderr and return the failure exit code."""
    print(f"error: {msg}", file=sys.stderr)
    return 1


def load_options(path: str) -> list:
    """Read a JSON list of options (strings or objects) from *path*.

    Raises ValueError if the file is missing, malformed or not a list.
    """
    try:
        data = json.loads(Path(path).read_text())
    except OSError as e:
        raise ValueError(f"cannot read {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of options")
    return data
