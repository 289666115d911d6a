"""
Markup normalizers - rewrite third-party hex color dialects to `#RRGGBB`.

Each normalizer is a plain `str -> str` function that returns its input
untouched when the dialect's marker substring is absent:

- legacy_hex:    &x&R&R&G&G&B&B  (or with the § marker)
- bracket_hex:   {#RRGGBB}
- ampersand_hex: &#RRGGBB
- rainbow:       <rainbowNNN>text</rainbow>  (needs a pipeline, see make_rainbow)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from chat_rgb.core.constants import MARKER

if TYPE_CHECKING:
    from chat_rgb.codec.pipeline import ColorPipeline

Formatter = Callable[[str], str]

_LEGACY_HEX = re.compile(f"[{MARKER}&]x((?:[{MARKER}&][0-9a-fA-F]){{6}})")
_BRACKET_HEX = re.compile(r'\{#([0-9a-fA-F]{6})\}')
_RAINBOW = re.compile(r'<rainbow([0-9]{1,3})>(.*?)</rainbow>')


def legacy_hex(text: str) -> str:
    """&x&R&R&G&G&B&B -> #RRGGBB"""
    if "&" not in text and MARKER + "x" not in text:
        return text
    # Digits sit at every second position after the marker pairs
    return _LEGACY_HEX.sub(lambda m: "#" + m.group(1)[1::2], text)


def bracket_hex(text: str) -> str:
    """{#RRGGBB} -> #RRGGBB"""
    if "{#" not in text:
        return text
    return _BRACKET_HEX.sub(r'#\1', text)


def ampersand_hex(text: str) -> str:
    """&#RRGGBB -> #RRGGBB"""
    if "&#" not in text:
        return text
    return text.replace("&#", "#")


def make_rainbow(pipeline: ColorPipeline) -> Formatter:
    """Build the <rainbowNNN> normalizer bound to `pipeline`."""

    def rainbow(text: str) -> str:
        if "<rainbow" not in text:
            return text

        def _expand(match: re.Match[str]) -> str:
            saturation = min(int(match.group(1)), 100) / 100
            return pipeline.rainbow(match.group(2), saturation)

        return _RAINBOW.sub(_expand, text)

    return rainbow
