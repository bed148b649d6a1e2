"""Translate raw widget events into filter/hover/open actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from dropselect.hover import HoverNavigator
from dropselect.open_state import OpenStateController
from dropselect.options import OptionFilter

if TYPE_CHECKING:
    from dropselect.controller import Ref, SelectProps

logger = logging.getLogger(__name__)

COMMIT_KEYS = ("enter", "tab")


class InputEventRouter:
    """Sequences engine calls for container and input events.

    Holds no state; everything lives in the filter, hover and open-state
    objects it is given. Keys use Textual names ("down", "up", "enter",
    "tab", "escape").
    """

    def __init__(
        self,
        options: OptionFilter,
        hover: HoverNavigator,
        open_state: OpenStateController,
        props: Callable[[], SelectProps],
        input_ref: Ref,
    ) -> None:
        self._options = options
        self._hover = hover
        self._open_state = open_state
        self._props = props
        self._input_ref = input_ref

    def on_container_click(self, event: Any) -> None:
        input_widget = self._input_ref.current
        if input_widget is not None:
            input_widget.focus()
        self._open_state.toggle()

    def on_container_pointer_down(self, event: Any) -> None:
        # Keep focus on the input so an item's click lands before focus loss closes the list.
        if event.widget is not self._input_ref.current:
            event.prevent_default()

    def on_input_keydown(self, event: Any) -> None:
        key = event.key
        if key == "down":
            event.prevent_default()
            if self._open_state.is_open:
                self._hover.hover_next()
            else:
                self._open_state.open()
        elif key == "up":
            event.prevent_default()
            self._hover.hover_prev()
        elif key in COMMIT_KEYS:
            hovered = self._hover.option
            if hovered is not None:
                self._open_state.close()
                self.propose(hovered)
        elif key == "escape":
            self._open_state.close()

    def on_input_changed(self, event: Any) -> None:
        if not self._open_state.is_open:
            self._open_state.open()
        self._options.filter(event.value)
        self._open_state.rehover()

    def on_input_focus_lost(self, event: Any) -> None:
        self._open_state.close()

    def propose(self, option: Any) -> None:
        """Hand *option* to the host's change callback."""
        on_change = self._props().on_change
        logger.debug("proposing %r", option)
        if on_change is not None:
            on_change(option)
