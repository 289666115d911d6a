"""Core data structures for chat text representation."""

from chat_rgb.core.color import Color, RenderMode
from chat_rgb.core.component import ClickAction, ClickEvent, HoverAction, HoverEvent, TextComponent
from chat_rgb.core.errors import InvalidColorFormat, UnknownActionKind
from chat_rgb.core.palette import PaletteEntry

__all__ = [
    "Color",
    "RenderMode",
    "TextComponent",
    "ClickAction",
    "ClickEvent",
    "HoverAction",
    "HoverEvent",
    "PaletteEntry",
    "InvalidColorFormat",
    "UnknownActionKind",
]
