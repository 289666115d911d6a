"""Render components to chat JSON and parse them back.

Fields that are unset are left out entirely, so `None` styles keep
inheriting on the receiving side.

Example output:
{
  "text": "",
  "extra": [
    {"text": "Hello ", "color": "red"},
    {"text": "World", "color": "#FF8800", "bold": true,
     "clickEvent": {"action": "open_url", "value": "https://example.org"}}
  ]
}

A bare JSON string is read as {"text": <string>}. Input that is not JSON
at all, or JSON that is not shaped like a component, is parsed as markup
instead of failing.
"""

import json
import logging
from typing import TYPE_CHECKING, Any

from chat_rgb.core.color import Color, RenderMode
from chat_rgb.core.component import ClickAction, HoverAction, TextComponent
from chat_rgb.core.constants import EMPTY_TEXT, EMPTY_TRANSLATABLE
from chat_rgb.core.errors import InvalidColorFormat

if TYPE_CHECKING:
    from chat_rgb.codec.pipeline import ColorPipeline

logger = logging.getLogger(__name__)

# Component attribute -> JSON key, in output order
STYLE_KEYS = (
    ("bold", "bold"),
    ("italic", "italic"),
    ("underlined", "underlined"),
    ("strikethrough", "strikethrough"),
    ("obfuscated", "obfuscated"),
)


class JsonRenderer:
    """
    Render a TextComponent to chat JSON.

    The render mode is a parameter of the renderer, never state on the
    colors, so one tree can be rendered in both modes at once.
    """

    def __init__(
        self,
        render_mode: RenderMode = RenderMode.RGB,
        indent: int | None = None,
    ):
        """
        Args:
            render_mode: RGB writes hex colors, LEGACY the nearest palette name
            indent: JSON indentation (None for compact)
        """
        self.render_mode = render_mode
        self.indent = indent

    def render(self, component: TextComponent) -> str:
        """Render component to JSON string."""
        data = self.to_dict(component)
        separators = (",", ":") if self.indent is None else None
        return json.dumps(data, indent=self.indent, separators=separators, ensure_ascii=False)

    def render_component(
        self,
        component: TextComponent,
        send_translatable_if_empty: bool = False,
    ) -> str | None:
        """
        Render with the empty-component shortcuts.

        A component without children renders as None when it has no text,
        and as an empty text (or empty translatable) object when its text
        is empty.
        """
        if not component.extra:
            if component.text is None:
                return None
            if component.text == "":
                return EMPTY_TRANSLATABLE if send_translatable_if_empty else EMPTY_TEXT
        return self.render(component)

    def to_dict(self, component: TextComponent) -> dict[str, Any]:
        """Convert component to dictionary."""
        result: dict[str, Any] = {}

        if component.text is not None:
            result["text"] = component.text
        if component.color is not None:
            result["color"] = component.color.to_json_value(self.render_mode)
        for attr, key in STYLE_KEYS:
            value = getattr(component, attr)
            if value is not None:
                result[key] = value

        if component.click is not None:
            result["clickEvent"] = {
                "action": component.click.action.value,
                "value": component.click.value,
            }
        if component.hover is not None:
            value = component.hover.value
            result["hoverEvent"] = {
                "action": component.hover.action.value,
                "value": self.to_dict(value) if isinstance(value, TextComponent) else value,
            }
        if component.extra:
            result["extra"] = [self.to_dict(child) for child in component.extra]

        return result


class JsonParser:
    """
    Parse chat JSON back to a TextComponent.

    Unknown click/hover actions raise UnknownActionKind; they mean the
    producer and consumer disagree, so they are not papered over.
    """

    def __init__(self, pipeline: "ColorPipeline | None" = None):
        """
        Args:
            pipeline: ColorPipeline used when input falls back to markup
        """
        self.pipeline = pipeline

    def parse(self, json_str: str) -> TextComponent:
        """Parse JSON string to TextComponent."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse json object, reading as markup: %s", json_str)
            logger.debug("JSON error: %s", e)
            return self._from_markup(json_str)

        if isinstance(data, str):
            return TextComponent(data)
        if not isinstance(data, dict):
            logger.warning("Expected a JSON object or string, reading as markup: %s", json_str)
            return self._from_markup(json_str)
        try:
            return self.from_dict(data)
        except (KeyError, TypeError, AttributeError, InvalidColorFormat):
            # UnknownActionKind is not caught here
            logger.warning("Malformed component json, reading as markup: %s", json_str, exc_info=True)
            return self._from_markup(json_str)

    def from_dict(self, data: dict[str, Any]) -> TextComponent:
        """Convert dictionary to TextComponent."""
        text = data.get("text")
        color = data.get("color")
        component = TextComponent(
            text=None if text is None else str(text),
            color=Color.from_name(color) if color is not None else None,
            bold=self._parse_bool(data, "bold"),
            italic=self._parse_bool(data, "italic"),
            underlined=self._parse_bool(data, "underlined"),
            strikethrough=self._parse_bool(data, "strikethrough"),
            obfuscated=self._parse_bool(data, "obfuscated"),
        )

        if "clickEvent" in data:
            click = data["clickEvent"]
            component = component.with_click(
                ClickAction.from_name(click["action"]),
                str(click.get("value", "")),
            )
        if "hoverEvent" in data:
            hover = data["hoverEvent"]
            component = component.with_hover(
                HoverAction.from_name(hover["action"]),
                self._parse_hover_value(hover.get("value", "")),
            )
        if "extra" in data:
            component = component.with_extra([self._parse_child(item) for item in data["extra"]])

        return component

    def _parse_bool(self, data: dict[str, Any], key: str) -> bool | None:
        """Read a flag; absent keys stay None, strings compare to 'true'."""
        if key not in data:
            return None
        value = data[key]
        if isinstance(value, bool):
            return value
        return str(value).lower() == "true"

    def _parse_hover_value(self, value: Any) -> str | TextComponent:
        if isinstance(value, dict):
            return self.from_dict(value)
        if isinstance(value, list):
            return TextComponent("").with_extra([self._parse_child(item) for item in value])
        return str(value)

    def _parse_child(self, item: Any) -> TextComponent:
        if isinstance(item, dict):
            return self.from_dict(item)
        return TextComponent(str(item))

    def _from_markup(self, text: str) -> TextComponent:
        from chat_rgb.codec.markup_parser import from_markup
        return from_markup(text, self.pipeline)
