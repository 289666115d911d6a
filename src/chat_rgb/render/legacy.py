"""Render a component tree to legacy-coded text."""

from chat_rgb.core import palette
from chat_rgb.core.component import TextComponent


def style_codes(component: TextComponent) -> str:
    """Marker codes for the active styles, in bold/italic/underline/strike/obfuscated order."""
    flags = (
        component.is_bold,
        component.is_italic,
        component.is_underlined,
        component.is_strikethrough,
        component.is_obfuscated,
    )
    return ''.join(entry.legacy for entry, on in zip(palette.STYLE_ORDER, flags) if on)


class LegacyRenderer:
    """
    Render a TextComponent to § codes and text.

    Optimizes output by only emitting codes when the formatting of a run
    differs from the one written before it.
    """

    def render(self, component: TextComponent) -> str:
        """Render component tree to legacy text."""
        parts: list[str] = []
        self._append(component, parts, "")
        return ''.join(parts)

    def formatting(self, component: TextComponent) -> str:
        """Color code (white written as reset) followed by style codes."""
        prefix = ""
        if component.color is not None:
            legacy = component.color.legacy
            prefix = palette.RESET.legacy if legacy == palette.WHITE else legacy.legacy
        return prefix + style_codes(component)

    def _append(self, component: TextComponent, parts: list[str], previous: str) -> str:
        formatting = previous
        if component.text is not None:
            formatting = self.formatting(component)
            if formatting != previous:
                parts.append(formatting)
            parts.append(component.text)
        for child in component.extra:
            formatting = self._append(child, parts, formatting)
        return formatting
