"""TextComponent - a styled run of chat text and its children."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Union
from uuid import UUID

from chat_rgb.core.color import Color, RenderMode
from chat_rgb.core.errors import UnknownActionKind

if TYPE_CHECKING:
    from chat_rgb.codec.pipeline import ColorPipeline


class ClickAction(Enum):
    """What happens when a component is clicked."""
    OPEN_URL = "open_url"
    RUN_COMMAND = "run_command"
    CHANGE_PAGE = "change_page"
    SUGGEST_COMMAND = "suggest_command"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"

    @classmethod
    def from_name(cls, name: str) -> ClickAction:
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownActionKind(f"Unknown click action: {name!r}") from None


class HoverAction(Enum):
    """What a component shows while hovered."""
    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"

    @classmethod
    def from_name(cls, name: str) -> HoverAction:
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownActionKind(f"Unknown hover action: {name!r}") from None


@dataclass(frozen=True)
class ClickEvent:
    action: ClickAction
    value: str


@dataclass(frozen=True)
class HoverEvent:
    """A hover payload: plain text or a nested component."""
    action: HoverAction
    value: Union[str, TextComponent]


@dataclass(frozen=True)
class TextComponent:
    """
    One node of a chat component tree.

    Style fields left as None inherit from whatever is rendered before
    them; they are not the same as False. Children are rendered in order
    after this node's own text.

    Example:
        >>> comp = (TextComponent("Hello")
        ...     .with_color(Color.from_hex("#FF8800"))
        ...     .with_bold(True)
        ...     .with_click_open_url("https://example.org"))
    """
    text: str | None = None
    color: Color | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    click: ClickEvent | None = None
    hover: HoverEvent | None = None
    extra: tuple[TextComponent, ...] = ()

    @classmethod
    def optimized(cls, text: str, pipeline: ColorPipeline | None = None) -> TextComponent:
        """Parse `text` as markup only if it holds hex colors."""
        if "#" in text or "&x" in text or "§x" in text:
            from chat_rgb.codec.markup_parser import from_markup
            return from_markup(text, pipeline)
        return cls(text)

    # Effective flags (None counts as off)

    @property
    def is_bold(self) -> bool:
        return bool(self.bold)

    @property
    def is_italic(self) -> bool:
        return bool(self.italic)

    @property
    def is_underlined(self) -> bool:
        return bool(self.underlined)

    @property
    def is_strikethrough(self) -> bool:
        return bool(self.strikethrough)

    @property
    def is_obfuscated(self) -> bool:
        return bool(self.obfuscated)

    # Fluent copies

    def with_text(self, text: str | None) -> TextComponent:
        return replace(self, text=text)

    def with_color(self, color: Color | None) -> TextComponent:
        return replace(self, color=color)

    def with_bold(self, bold: bool | None) -> TextComponent:
        return replace(self, bold=bold)

    def with_italic(self, italic: bool | None) -> TextComponent:
        return replace(self, italic=italic)

    def with_underlined(self, underlined: bool | None) -> TextComponent:
        return replace(self, underlined=underlined)

    def with_strikethrough(self, strikethrough: bool | None) -> TextComponent:
        return replace(self, strikethrough=strikethrough)

    def with_obfuscated(self, obfuscated: bool | None) -> TextComponent:
        return replace(self, obfuscated=obfuscated)

    def with_extra(self, components: list[TextComponent] | tuple[TextComponent, ...]) -> TextComponent:
        return replace(self, extra=tuple(components))

    def add_extra(self, component: TextComponent) -> TextComponent:
        return replace(self, extra=self.extra + (component,))

    def with_click(self, action: ClickAction | None, value: str | None = None) -> TextComponent:
        if action is None:
            return replace(self, click=None)
        return replace(self, click=ClickEvent(action, value or ""))

    def with_click_open_url(self, url: str) -> TextComponent:
        return self.with_click(ClickAction.OPEN_URL, url)

    def with_click_run_command(self, command: str) -> TextComponent:
        return self.with_click(ClickAction.RUN_COMMAND, command)

    def with_click_change_page(self, page: int) -> TextComponent:
        return self.with_click(ClickAction.CHANGE_PAGE, str(page))

    def with_click_suggest_command(self, command: str) -> TextComponent:
        return self.with_click(ClickAction.SUGGEST_COMMAND, command)

    def with_click_copy_to_clipboard(self, text: str) -> TextComponent:
        return self.with_click(ClickAction.COPY_TO_CLIPBOARD, text)

    def with_hover(
        self,
        action: HoverAction | None,
        value: Union[str, TextComponent, None] = None,
    ) -> TextComponent:
        if action is None:
            return replace(self, hover=None)
        return replace(self, hover=HoverEvent(action, value if value is not None else ""))

    def with_hover_show_text(self, text: Union[str, TextComponent]) -> TextComponent:
        """Show text on hover; strings with hex colors are parsed as markup."""
        if isinstance(text, str):
            text = TextComponent.optimized(text)
        return self.with_hover(HoverAction.SHOW_TEXT, text)

    def with_hover_show_item(self, serialized_item: str) -> TextComponent:
        return self.with_hover(HoverAction.SHOW_ITEM, serialized_item)

    def with_hover_show_entity(self, entity_id: UUID, entity_type: str, custom_name: str) -> TextComponent:
        return self.with_hover(
            HoverAction.SHOW_ENTITY,
            f"{{id:{entity_id},type:{entity_type},name:{custom_name}}}",
        )

    def copy_formatting(self) -> TextComponent:
        """A new empty component carrying only this one's color and styles."""
        return TextComponent(
            color=self.color,
            bold=self.bold,
            italic=self.italic,
            underlined=self.underlined,
            strikethrough=self.strikethrough,
            obfuscated=self.obfuscated,
        )

    def clone(self) -> TextComponent:
        """Deep copy of this component and everything below it."""
        hover = self.hover
        if hover is not None and isinstance(hover.value, TextComponent):
            hover = HoverEvent(hover.action, hover.value.clone())
        return replace(
            self,
            hover=hover,
            extra=tuple(child.clone() for child in self.extra),
        )

    # Rendering shortcuts

    def to_legacy_text(self) -> str:
        """Render to legacy-coded text."""
        from chat_rgb.render.legacy import LegacyRenderer
        return LegacyRenderer().render(self)

    def to_flat_text(self) -> str:
        """Render to text with hex colors and style codes."""
        from chat_rgb.render.text import FlatRenderer
        return FlatRenderer().render(self)

    def to_plain_text(self) -> str:
        """Text of this component and its direct children, unstyled."""
        from chat_rgb.render.text import TextRenderer
        return TextRenderer().render(self)

    def to_json(self, rgb_supported: bool = True, send_translatable_if_empty: bool = False) -> str | None:
        """Serialize to JSON; see JsonRenderer.render_component."""
        from chat_rgb.render.json_format import JsonRenderer
        mode = RenderMode.RGB if rgb_supported else RenderMode.LEGACY
        return JsonRenderer(render_mode=mode).render_component(
            self, send_translatable_if_empty=send_translatable_if_empty
        )
