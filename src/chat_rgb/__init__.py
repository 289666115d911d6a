"""
chat-rgb: Python library for chat color markup

Normalize color markup, expand gradients and build JSON text components.

Quick Start:
    >>> import chat_rgb as rgb
    >>> comp = rgb.from_markup("<#FF0000>Sunset</#FFAA00> &lnow")
    >>> print(comp.to_json())
    >>> print(rgb.to_legacy("{#55FF55}green"))

Features:
    - Legacy `&` / § codes, `&x&R&R&G&G&B&B`, `{#RRGGBB}` and `&#RRGGBB` colors
    - CMI, HTML, Iridescent and Kyori gradient tags
    - <rainbowNNN> tags
    - Nearest-color downgrade to the 16-color legacy palette
    - Component trees with click/hover events, JSON in and out
"""

__version__ = "0.1.0"

# Core types
from chat_rgb.core.color import Color, RenderMode
from chat_rgb.core.component import ClickAction, HoverAction, TextComponent
from chat_rgb.core.errors import InvalidColorFormat, UnknownActionKind

# Pipeline
from chat_rgb.codec.legacy import colorize
from chat_rgb.codec.markup_parser import from_markup
from chat_rgb.codec.pipeline import ColorPipeline, default_pipeline

# JSON
from chat_rgb.render.json_format import JsonParser, JsonRenderer


def from_json(json_str: str) -> TextComponent:
    """Parse chat JSON (or, failing that, markup) into a component."""
    return JsonParser().parse(json_str)


def to_legacy(text: str) -> str:
    """Convert markup to legacy § codes using the default pipeline."""
    return default_pipeline().convert_rgb_to_legacy(text)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "RenderMode",
    "TextComponent",
    "ClickAction",
    "HoverAction",
    "InvalidColorFormat",
    "UnknownActionKind",
    # Pipeline
    "colorize",
    "ColorPipeline",
    "default_pipeline",
    "from_markup",
    "to_legacy",
    # JSON
    "JsonParser",
    "JsonRenderer",
    "from_json",
]
