"""Keep the hovered or selected option scrolled into view."""

from __future__ import annotations

from typing import Any

from textual.css.query import NoMatches

from dropselect.options import Option

HOVERED_SELECTOR = ".item.-hovered"
SELECTED_SELECTOR = ".item.-selected"


def scroll_to_item(list_widget: Any, selector: str) -> None:
    """Centre the first item of *list_widget* matching *selector*, animated.

    A missing list or a missing item is skipped.
    """
    if list_widget is None:
        return
    try:
        item = list_widget.query_one(selector)
    except NoMatches:
        return
    list_widget.scroll_to_center(item, animate=True)


class ScrollSynchronizer:
    """Scrolls on two independent triggers: hover changes and the list opening."""

    def __init__(self) -> None:
        self._hovered: Option | None = None

    def hover_changed(self, list_widget: Any, hovered: Option | None) -> None:
        """Scroll to the hovered item when the hover moves to a new option."""
        previous, self._hovered = self._hovered, hovered
        if hovered is not None and hovered is not previous:
            self._schedule(list_widget, HOVERED_SELECTOR)

    def list_rendered(self, list_widget: Any, value: Option | None) -> None:
        """Scroll to the selected item when the list appears with a value set."""
        if list_widget is not None and value is not None:
            self._schedule(list_widget, SELECTED_SELECTOR)

    def _schedule(self, list_widget: Any, selector: str) -> None:
        if list_widget is None:
            return
        # Wait for the rendering layer to apply item classes.
        list_widget.call_after_refresh(scroll_to_item, list_widget, selector)
