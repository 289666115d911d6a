"""Markup normalization, gradient expansion and parsing."""

from chat_rgb.codec.legacy import colorize, strip_codes, trailing_active_codes
from chat_rgb.codec.markup_parser import MarkupParser, from_markup
from chat_rgb.codec.pipeline import ColorPipeline, default_pipeline

__all__ = [
    "colorize",
    "strip_codes",
    "trailing_active_codes",
    "ColorPipeline",
    "default_pipeline",
    "MarkupParser",
    "from_markup",
]
