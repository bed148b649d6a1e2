"""Option labels and query filtering."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

Option = Any


def option_label(option: Option, key: str) -> str:
    """Return the display label of an option.

    Strings are their own label. Mappings are read with ``option.get(key)``,
    anything else with ``getattr``. A missing label is ``""``.
    """
    if isinstance(option, str):
        return option
    if isinstance(option, Mapping):
        label = option.get(key)
    else:
        label = getattr(option, key, None)
    if label is None:
        return ""
    return str(label)


def filter_options(options: Sequence[Option], query: str, key: str) -> list[Option]:
    """Return the options whose label contains *query*, case-insensitively.

    An empty query returns all options. Original order is kept, nothing is ranked.
    """
    if query == "":
        return list(options)
    query_lower = query.lower()
    return [opt for opt in options if query_lower in option_label(opt, key).lower()]


class OptionFilter:
    """Holds the option list and the subsequence visible for the last query."""

    def __init__(self, options: Sequence[Option], key: str = "label") -> None:
        self._options = options
        self.key = key
        self.query = ""
        self.filtered: list[Option] = list(options)

    @property
    def options(self) -> Sequence[Option]:
        return self._options

    def filter(self, query: str) -> list[Option]:
        self.query = query
        self.filtered = filter_options(self._options, query, self.key)
        return self.filtered

    def set_options(self, options: Sequence[Option], key: str | None = None) -> None:
        """Replace the options (and optionally the label key), keeping the query."""
        self._options = options
        if key is not None:
            self.key = key
        self.filter(self.query)
