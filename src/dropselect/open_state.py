"""Open/closed state of the option list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from dropselect.hover import HoverNavigator
from dropselect.options import Option

logger = logging.getLogger(__name__)


class OpenStateController:
    """Opens and closes the list, re-initialising the hover on each transition.

    On open the committed value is hovered if it is still visible, otherwise
    the first visible option. On close the hover is cleared.
    """

    def __init__(
        self,
        hover: HoverNavigator,
        filtered: Callable[[], Sequence[Option]],
        committed: Callable[[], Option | None],
    ) -> None:
        self._hover = hover
        self._filtered = filtered
        self._committed = committed
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    def toggle(self) -> None:
        self._set(not self._is_open)

    def open(self) -> None:
        self._set(True)

    def close(self) -> None:
        self._set(False)

    def _set(self, is_open: bool) -> None:
        if is_open == self._is_open:
            return
        self._is_open = is_open
        logger.debug("list %s", "opened" if is_open else "closed")
        if is_open:
            self.rehover()
        else:
            self._hover.clear()

    def rehover(self) -> None:
        """Hover the committed value if visible, else the first visible option."""
        value = self._committed()
        if value is not None and value in self._filtered():
            self._hover.hover_option(value)
        else:
            self._hover.hover_first()
