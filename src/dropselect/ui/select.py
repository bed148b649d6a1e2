"""Searchable single-select dropdown widget."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.events import Blur, Click, Enter, Key, MouseDown
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from dropselect.controller import SelectController, SelectProps, SelectState
from dropselect.options import Option, option_label
from dropselect.ui.listeners import ListenerMixin


class SelectContainer(ListenerMixin, Vertical):
    """Outer box of the select. Emits ``click`` and ``pointerdown``."""

    def __init__(self, *children: Widget, **kwargs) -> None:
        super().__init__(*children, **kwargs)
        self._init_listeners()

    def on_click(self, event: Click) -> None:
        self._emit("click", event)

    def on_mouse_down(self, event: MouseDown) -> None:
        self._emit("pointerdown", event)


class SelectInput(ListenerMixin, Input):
    """Query input. Emits ``keydown``, ``input`` and ``focusout``."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._init_listeners()

    def _on_key(self, event: Key) -> None:
        # Runs before Input's own key handling; listeners may prevent_default.
        self._emit("keydown", event)

    def on_input_changed(self, event: Input.Changed) -> None:
        self._emit("input", event)

    def on_blur(self, event: Blur) -> None:
        self._emit("focusout", event)


class SelectList(VerticalScroll):
    """Scrollable list of option items. Never takes focus from the input."""

    can_focus = False


class OptionItem(Static):
    """One option in the list."""

    class Hovered(Message):
        """Posted when the pointer enters the item."""

        def __init__(self, item: OptionItem) -> None:
            super().__init__()
            self.item = item

    class Selected(Message):
        """Posted when the item is clicked."""

        def __init__(self, item: OptionItem) -> None:
            super().__init__()
            self.item = item

    def __init__(self, option: Option, label: str, **kwargs) -> None:
        super().__init__(label, markup=False, **kwargs)
        self.option = option
        self.add_class("item")

    def on_enter(self, event: Enter) -> None:
        self.post_message(self.Hovered(self))

    def on_click(self, event: Click) -> None:
        # The click keeps bubbling so the container toggles the list closed.
        self.post_message(self.Selected(self))


class DropSelect(Widget):
    """A text input with a filterable list of options; pick one with keys or mouse.

    The widget is controlled: it never stores the chosen option itself. It
    posts ``Changed`` and the host is expected to set ``value`` in response.
    """

    DEFAULT_CSS = """
    DropSelect {
        height: auto;
    }

    SelectContainer {
        height: auto;
    }

    SelectList {
        height: auto;
        max-height: 8;
        background: $surface;
        display: none;
    }

    SelectList.-visible {
        display: block;
    }

    OptionItem {
        width: 100%;
        padding: 0 1;
    }

    OptionItem.-selected {
        text-style: bold;
    }

    OptionItem.-hovered {
        background: $primary-darken-1;
    }
    """

    class Changed(Message):
        """Posted when the user picks an option."""

        def __init__(self, select: DropSelect, option: Option | None) -> None:
            super().__init__()
            self.select = select
            self.option = option

        @property
        def control(self) -> DropSelect:
            return self.select

    def __init__(
        self,
        options: Sequence[Option],
        *,
        value: Option | None = None,
        option_label_key: str = "label",
        placeholder: str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._placeholder = placeholder
        self._items: list[OptionItem] = []
        self._rendered_options: tuple | None = None
        self.controller = SelectController(
            SelectProps(options, value, self._propose, option_label_key),
            on_render=self._render_state,
        )

    def compose(self) -> ComposeResult:
        with SelectContainer():
            yield SelectInput(placeholder=self._placeholder)
            yield SelectList()

    def on_mount(self) -> None:
        refs = self.controller.refs
        refs.container.bind(self.query_one(SelectContainer))
        refs.input.bind(self.query_one(SelectInput))
        self.controller.attach()
        self._render_state(self.controller.state)

    def on_unmount(self) -> None:
        self.controller.detach()
        self.controller.refs.container.unbind()
        self.controller.refs.input.unbind()

    @property
    def value(self) -> Option | None:
        return self.controller.props.value

    @value.setter
    def value(self, value: Option | None) -> None:
        self.controller.set_props(replace(self.controller.props, value=value))

    @property
    def state(self) -> SelectState:
        return self.controller.state

    def set_options(self, options: Sequence[Option]) -> None:
        """Replace the option list."""
        self.controller.set_props(replace(self.controller.props, options=options))

    def _propose(self, option: Option | None) -> None:
        self.post_message(self.Changed(self, option))

    def _label(self, option: Option) -> str:
        return option_label(option, self.controller.props.option_label_key)

    def _render_state(self, state: SelectState) -> None:
        # Nothing to draw into until on_mount has bound the handles.
        if self.controller.refs.container.current is None:
            return
        value = self.controller.props.value
        container = self.query_one(SelectContainer)
        option_list = self.query_one(SelectList)
        input_widget = self.query_one(SelectInput)

        container.set_class(state.is_open, "-open")
        option_list.set_class(state.is_open, "-visible")
        input_widget.placeholder = self._label(value) if value is not None else self._placeholder

        if not state.is_open:
            self.controller.refs.list.unbind()
            return

        if state.filtered_options != self._rendered_options:
            option_list.remove_children()
            self._items = [OptionItem(opt, self._label(opt)) for opt in state.filtered_options]
            self._rendered_options = state.filtered_options
            self._apply_item_classes(value)
            option_list.mount_all(self._items)
        else:
            self._apply_item_classes(value)
        self.controller.refs.list.bind(option_list)

    def _apply_item_classes(self, value: Option | None) -> None:
        # Items mirror the filtered options, so the hover index picks exactly one.
        hovered_index = self.controller.hovered_index
        for index, item in enumerate(self._items):
            item.set_class(index == hovered_index, "-hovered")
            item.set_class(value is not None and item.option == value, "-selected")

    def on_option_item_hovered(self, event: OptionItem.Hovered) -> None:
        event.stop()
        self.controller.hover(event.item.option)

    def on_option_item_selected(self, event: OptionItem.Selected) -> None:
        event.stop()
        self.controller.commit(event.item.option)
