"""Interaction engine for a searchable single-select dropdown."""

from dropselect.controller import Ref, SelectController, SelectProps, SelectRefs, SelectState
from dropselect.hover import HoverNavigator, HoverState
from dropselect.open_state import OpenStateController
from dropselect.options import OptionFilter, filter_options, option_label
from dropselect.router import InputEventRouter
from dropselect.scroll import ScrollSynchronizer, scroll_to_item

__all__ = [
    "HoverNavigator",
    "HoverState",
    "InputEventRouter",
    "OpenStateController",
    "OptionFilter",
    "Ref",
    "ScrollSynchronizer",
    "SelectController",
    "SelectProps",
    "SelectRefs",
    "SelectState",
    "filter_options",
    "option_label",
    "scroll_to_item",
]
