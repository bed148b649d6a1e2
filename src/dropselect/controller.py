"""Composition of the select engine and its event subscriptions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any

from dropselect.hover import HoverNavigator
from dropselect.open_state import OpenStateController
from dropselect.options import Option, OptionFilter
from dropselect.router import InputEventRouter
from dropselect.scroll import ScrollSynchronizer

logger = logging.getLogger(__name__)


@dataclass
class SelectProps:
    """What the host passes in on each render pass.

    ``value`` is owned by the host; the controller only proposes a new one
    through ``on_change``.
    """

    options: Sequence[Option]
    value: Option | None = None
    on_change: Callable[[Option | None], None] | None = None
    option_label_key: str = "label"


@dataclass(frozen=True)
class SelectState:
    is_open: bool = False
    hovered_option: Option | None = None
    filtered_options: tuple = ()


class Ref:
    """A slot the rendering layer binds a widget into."""

    def __init__(self, on_bind: Callable[[Any], None] | None = None) -> None:
        self.current: Any = None
        self._on_bind = on_bind

    def bind(self, widget: Any) -> None:
        if widget is self.current:
            return
        self.current = widget
        if self._on_bind is not None:
            self._on_bind(widget)

    def unbind(self) -> None:
        self.bind(None)


@dataclass
class SelectRefs:
    container: Ref = field(default_factory=Ref)
    input: Ref = field(default_factory=Ref)
    list: Ref = field(default_factory=Ref)


class SelectController:
    """Owns the filter, hover and open state of one select widget.

    The rendering layer binds ``refs`` to its container, input and list
    widgets, calls ``attach()`` once they are mounted and ``detach()`` when
    they go away. ``state`` is recomputed after every action and handed to
    ``on_render``.
    """

    def __init__(
        self,
        props: SelectProps,
        on_render: Callable[[SelectState], None] | None = None,
    ) -> None:
        self.props = props
        self.on_render = on_render
        self.refs = SelectRefs(list=Ref(self._list_bound))

        self._filter = OptionFilter(props.options, props.option_label_key)
        self._hover = HoverNavigator(lambda: self._filter.filtered)
        self._open_state = OpenStateController(
            self._hover,
            lambda: self._filter.filtered,
            lambda: self.props.value,
        )
        self._router = InputEventRouter(
            self._filter,
            self._hover,
            self._open_state,
            lambda: self.props,
            self.refs.input,
        )
        self._scroll = ScrollSynchronizer()
        self._subscriptions: ExitStack | None = None
        self.state = self._snapshot()

    # -- state ---------------------------------------------------------------

    def _snapshot(self) -> SelectState:
        return SelectState(
            is_open=self._open_state.is_open,
            hovered_option=self._hover.option,
            filtered_options=tuple(self._filter.filtered),
        )

    def _publish(self) -> SelectState:
        self.state = self._snapshot()
        if self.on_render is not None:
            self.on_render(self.state)
        self._scroll.hover_changed(self.refs.list.current, self.state.hovered_option)
        return self.state

    def _list_bound(self, widget: Any) -> None:
        self._scroll.list_rendered(widget, self.props.value)

    @property
    def hovered_index(self) -> int:
        return self._hover.index

    @property
    def query(self) -> str:
        return self._filter.query

    # -- props ---------------------------------------------------------------

    def set_props(self, props: SelectProps) -> SelectState:
        """Replace the props; a new option list is re-filtered with the current query."""
        previous = self.props
        self.props = props
        if props.options is not previous.options or props.option_label_key != previous.option_label_key:
            self._filter.set_options(props.options, props.option_label_key)
            if self._open_state.is_open:
                self._open_state.rehover()
            else:
                self._hover.clear()
        return self._publish()

    # -- actions -------------------------------------------------------------

    def open(self) -> SelectState:
        self._open_state.open()
        return self._publish()

    def close(self) -> SelectState:
        self._open_state.close()
        return self._publish()

    def toggle(self) -> SelectState:
        self._open_state.toggle()
        return self._publish()

    def hover(self, option: Option) -> SelectState:
        """Highlight *option*, e.g. when the pointer moves over its item."""
        self._hover.hover_option(option)
        return self._publish()

    def commit(self, option: Option) -> SelectState:
        """Propose *option* to the host, closing the list if it is open."""
        self._open_state.close()
        self._router.propose(option)
        return self._publish()

    def _routed(self, handler: Callable[[Any], None]) -> Callable[[Any], None]:
        def dispatch(event: Any) -> None:
            handler(event)
            self._publish()

        return dispatch

    # -- lifecycle -----------------------------------------------------------

    @property
    def is_attached(self) -> bool:
        return self._subscriptions is not None

    def attach(self) -> None:
        """Subscribe to the bound container and input widgets.

        Either every subscription is made or, if one fails, the ones already
        made are released before the error propagates.
        """
        if self._subscriptions is not None:
            return
        router = self._router
        container = self.refs.container.current
        input_widget = self.refs.input.current
        wanted = []
        if container is not None:
            wanted += [
                (container, "click", router.on_container_click),
                (container, "pointerdown", router.on_container_pointer_down),
            ]
        if input_widget is not None:
            wanted += [
                (input_widget, "keydown", router.on_input_keydown),
                (input_widget, "input", router.on_input_changed),
                (input_widget, "focusout", router.on_input_focus_lost),
            ]
        with ExitStack() as stack:
            for target, event_type, handler in wanted:
                stack.callback(target.listen(event_type, self._routed(handler)))
            self._subscriptions = stack.pop_all()
        logger.debug("attached %d listeners", len(wanted))

    def detach(self) -> None:
        """Release every subscription made by ``attach()``."""
        if self._subscriptions is None:
            return
        subscriptions, self._subscriptions = self._subscriptions, None
        subscriptions.close()
        logger.debug("detached")

    @contextmanager
    def attached(self):
        """Context manager that keeps the listeners subscribed for its body."""
        self.attach()
        try:
            yield self
        finally:
            self.detach()
