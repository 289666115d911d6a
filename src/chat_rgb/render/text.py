"""Render components to flat hex-coded text or plain text."""

from chat_rgb.core.component import TextComponent
from chat_rgb.render.legacy import style_codes


class FlatRenderer:
    """Render every run as `#RRGGBB` + style codes + text, no elision."""

    def render(self, component: TextComponent) -> str:
        """Render component tree to flat text."""
        parts: list[str] = []
        if component.color is not None:
            parts.append(component.color.hex)
        parts.append(style_codes(component))
        if component.text is not None:
            parts.append(component.text)
        for child in component.extra:
            parts.append(self.render(child))
        return ''.join(parts)


class TextRenderer:
    """Render a component to plain text without any styling."""

    def render(self, component: TextComponent) -> str:
        """Own text plus the text of direct children (grandchildren are not visited)."""
        parts: list[str] = []
        if component.text is not None:
            parts.append(component.text)
        parts.extend(child.text for child in component.extra if child.text is not None)
        return ''.join(parts)
