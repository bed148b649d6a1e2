"""Demo application: pick one of a handful of numbered items."""

from __future__ import annotations

from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.widgets import Input, Static

from dropselect.options import Option, option_label
from dropselect.ui.select import DropSelect

ITEMS = [
    {"value": 1, "label": "One"},
    {"value": 2, "label": "Two"},
    {"value": 3, "label": "Three"},
    {"value": 4, "label": "Four"},
    {"value": 5, "label": "Five"},
]


class SelectDemoApp(App):
    """A select over the given options plus a line echoing the choice."""

    CSS = """
    Screen {
        padding: 1 2;
    }
    #selected {
        margin-top: 1;
    }
    """

    TITLE = "dropselect"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, options: Sequence[Option] | None = None, option_label_key: str = "label") -> None:
        super().__init__()
        self._options = list(options) if options is not None else ITEMS
        self._label_key = option_label_key
        self.selected: Option | None = None

    def compose(self) -> ComposeResult:
        yield DropSelect(self._options, option_label_key=self._label_key, placeholder="Select...")
        yield Static("", id="selected")
        yield Input(placeholder="Somewhere else", id="outside")

    def on_drop_select_changed(self, event: DropSelect.Changed) -> None:
        self.selected = event.option
        event.select.value = event.option
        message = ""
        if event.option is not None:
            message = f"You've selected {option_label(event.option, self._label_key)}."
        self.query_one("#selected", Static).update(message)
