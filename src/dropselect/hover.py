"""Keyboard/pointer highlight over the filtered options."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from dropselect.options import Option


@dataclass(frozen=True)
class HoverState:
    index: int = -1
    option: Option | None = None


class HoverNavigator:
    """Tracks which filtered option is highlighted and moves the highlight.

    The filtered sequence is not owned here; *source* returns the current one
    on every call. ``index`` is either -1 (nothing hovered, option is None) or
    a valid position in that sequence with ``option == filtered[index]``.
    Moving only cycles an existing hover: next/prev do nothing at -1.
    """

    def __init__(self, source: Callable[[], Sequence[Option]]) -> None:
        self._source = source
        self.index = -1
        self.option: Option | None = None

    @property
    def state(self) -> HoverState:
        return HoverState(self.index, self.option)

    def _set(self, index: int) -> None:
        filtered = self._source()
        if 0 <= index < len(filtered):
            self.index = index
            self.option = filtered[index]
        else:
            self.clear()

    def clear(self) -> None:
        self.index = -1
        self.option = None

    def hover_first(self) -> None:
        # An empty list has nothing hoverable, so this lands on -1 rather than 0.
        self._set(0)

    def hover_option(self, option: Option) -> None:
        filtered = self._source()
        if option in filtered:
            self._set(list(filtered).index(option))
        else:
            self.clear()

    def hover_next(self) -> None:
        if self.index < 0:
            return
        index = self.index + 1
        if index > len(self._source()) - 1:
            index = 0
        self._set(index)

    def hover_prev(self) -> None:
        if self.index < 0:
            return
        index = self.index - 1
        if index < 0:
            index = len(self._source()) - 1
        self._set(index)
