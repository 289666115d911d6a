"""Renderers for outputting component trees to various formats."""

from chat_rgb.render.legacy import LegacyRenderer
from chat_rgb.render.text import FlatRenderer, TextRenderer
from chat_rgb.render.json_format import JsonParser, JsonRenderer

__all__ = ["LegacyRenderer", "FlatRenderer", "TextRenderer", "JsonRenderer", "JsonParser"]
