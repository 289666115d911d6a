"""ColorPipeline - ordered markup normalizers and gradient expanders."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from chat_rgb.codec import gradients
from chat_rgb.codec.formatters import Formatter, ampersand_hex, bracket_hex, legacy_hex, make_rainbow
from chat_rgb.codec.gradients import Gradient
from chat_rgb.codec.legacy import colorize, trailing_active_codes
from chat_rgb.core import palette
from chat_rgb.core.color import Color
from chat_rgb.core.constants import AMPERSAND, LEGACY_OVERRIDE, MARKER
from chat_rgb.core.errors import InvalidColorFormat
from chat_rgb.core.palette import PaletteEntry

logger = logging.getLogger(__name__)

# A hex tag and its optional |c legacy fallback
_HEX_TAG = re.compile(r'#([0-9a-fA-F]{6})(?:\|[0-9a-fA-F])?')

# Rainbow text keeps these styles, collected once and applied to every character
_RAINBOW_STYLES = tuple(entry.code for entry in palette.STYLE_ORDER)


def legacy_override_at(text: str, index: int) -> PaletteEntry | None:
    """
    Return the forced fallback color of a `#RRGGBB|c` tag starting at `index`.

    None when the tag has no `|c` suffix or `c` is not a palette color.
    """
    if len(text) - index < 9 or text[index + 7] != LEGACY_OVERRIDE:
        return None
    entry = palette.by_code(text[index + 8])
    if entry is None or entry.is_style:
        return None
    return entry


class ColorPipeline:
    """
    Runs text through markup normalizers, then gradient expanders.

    Pipelines are immutable: the `with_*` methods return a new pipeline.
    The rainbow normalizer is bound to the pipeline that owns it so its
    colors follow that pipeline's RGB support.

    Example:
        >>> pipeline = default_pipeline().with_rgb_support(False)
        >>> pipeline.convert_rgb_to_legacy("{#FF5555}Hi")
        '§cHi'
    """

    def __init__(
        self,
        formatters: tuple[Formatter, ...] = (),
        gradients: tuple[Gradient, ...] = (),
        rgb_supported: bool = True,
        rainbow: bool = False,
    ):
        """
        Args:
            formatters: Normalizers applied in order
            gradients: Gradient expanders applied in order, after formatters
            rgb_supported: False to downgrade generated colors to the palette
            rainbow: Append the <rainbowNNN> normalizer bound to this pipeline
        """
        self.formatters = tuple(formatters)
        self.gradients = tuple(gradients)
        self.rgb_supported = rgb_supported
        self.rainbow_enabled = rainbow
        self._steps = self.formatters
        if rainbow:
            self._steps += (make_rainbow(self),)

    def _copy(self, **changes) -> ColorPipeline:
        options = {
            "formatters": self.formatters,
            "gradients": self.gradients,
            "rgb_supported": self.rgb_supported,
            "rainbow": self.rainbow_enabled,
        }
        options.update(changes)
        return ColorPipeline(**options)

    def with_formatter(self, formatter: Formatter) -> ColorPipeline:
        return self._copy(formatters=self.formatters + (formatter,))

    def with_gradient(self, gradient: Gradient) -> ColorPipeline:
        return self._copy(gradients=self.gradients + (gradient,))

    def with_rgb_support(self, rgb_supported: bool) -> ColorPipeline:
        return self._copy(rgb_supported=rgb_supported)

    def apply_formats(self, text: str, ignore_placeholders: bool = False) -> str:
        """Normalize every markup dialect to `#RRGGBB` and expand gradients."""
        for formatter in self._steps:
            text = formatter(text)
        for gradient in self.gradients:
            text = gradient(text, ignore_placeholders)
        return text

    def convert_rgb_to_legacy(self, text: str) -> str:
        """Normalize `text` and replace every hex color with its legacy code."""
        applied = self.apply_formats(colorize(text))
        if "#" not in applied:
            return applied

        parts: list[str] = []
        i = 0
        while i < len(applied):
            char = applied[i]
            if char != "#":
                parts.append(char)
                i += 1
                continue
            override = legacy_override_at(applied, i)
            try:
                color = Color.from_hex(applied[i:i + 7], override)
            except InvalidColorFormat:
                # Not a color tag - keep the literal '#'
                parts.append(char)
                i += 1
                continue
            parts.append(color.legacy.legacy)
            i += 9 if override is not None else 7
        return ''.join(parts)

    def to_platform_format(self, text: str) -> str:
        """
        Convert markup to the platform's inline form.

        With RGB support every `#RRGGBB` becomes `§x§R§R§G§G§B§B` and a
        `|c` fallback after it is dropped; without it the text is parsed and
        rendered as legacy codes.
        """
        if not self.rgb_supported:
            from chat_rgb.codec.markup_parser import from_markup
            return from_markup(text, self).to_legacy_text()
        applied = self.apply_formats(text)
        return _HEX_TAG.sub(
            lambda m: MARKER + "x" + ''.join(MARKER + digit for digit in m.group(1)),
            applied,
        )

    def create_rainbow(self, steps: int, saturation: float) -> list[Color]:
        """`steps` colors spread evenly around the hue circle."""
        colors: list[Color] = []
        for i in range(steps):
            color = Color.from_hsb(i / steps, saturation, saturation)
            if not self.rgb_supported:
                color = Color.from_palette(color.legacy)
            colors.append(color)
        return colors

    def rainbow(self, text: str, saturation: float) -> str:
        """
        Give every character of `text` its own hue.

        Style codes found anywhere in `text` are removed and repeated in
        front of every character, in bold/italic/underline/strikethrough/
        obfuscated order.
        """
        styles: list[str] = []
        for code in _RAINBOW_STYLES:
            found = False
            for form in (AMPERSAND + code, MARKER + code):
                if form in text:
                    text = text.replace(form, "")
                    found = True
            if found:
                styles.append(MARKER + code)
        style_prefix = ''.join(styles)

        colors = self.create_rainbow(len(text), saturation)
        parts: list[str] = []
        for color, char in zip(colors, text):
            if self.rgb_supported:
                tag = self.apply_formats(color.hex)
            else:
                tag = color.legacy.legacy
            parts.append(tag + style_prefix + char)
        return ''.join(parts)

    def last_color(self, text: str) -> PaletteEntry:
        """The palette color in effect at the end of `text` (white if none)."""
        if not text:
            return palette.WHITE
        codes = trailing_active_codes(self.convert_rgb_to_legacy(text))
        if not codes:
            return palette.WHITE
        entry = palette.by_code(codes[1])
        if entry is None or entry.is_style:
            return palette.WHITE
        return entry

    def __repr__(self) -> str:
        names = [step.__name__ for step in self._steps]
        names += [gradient.__name__ for gradient in self.gradients]
        return f"ColorPipeline({', '.join(names)}, rgb_supported={self.rgb_supported})"


@lru_cache(maxsize=None)
def default_pipeline() -> ColorPipeline:
    """The shared default pipeline: every built-in dialect, RGB enabled."""
    pipeline = ColorPipeline(
        formatters=(legacy_hex, bracket_hex, ampersand_hex),
        gradients=(gradients.cmi, gradients.html, gradients.iridescent, gradients.kyori),
        rgb_supported=True,
        rainbow=True,
    )
    logger.debug("Built default pipeline: %r", pipeline)
    return pipeline
