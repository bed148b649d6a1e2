"""Textual UI for dropselect."""

from dropselect.ui.listeners import ListenerMixin
from dropselect.ui.select import DropSelect, OptionItem, SelectContainer, SelectInput, SelectList

__all__ = [
    "DropSelect",
    "ListenerMixin",
    "OptionItem",
    "SelectContainer",
    "SelectInput",
    "SelectList",
]
