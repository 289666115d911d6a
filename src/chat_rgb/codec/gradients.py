"""
Gradient expanders - replace a gradient span with one hex color per character.

Supported dialects:
- cmi:        {#RRGGBB>}text{#RRGGBB<}
- html:       <#RRGGBB>text</#RRGGBB>
- iridescent: <$#RRGGBB>text<$#RRGGBB>
- kyori:      <gradient:#RRGGBB:#RRGGBB>text</gradient>

Every expander takes `(text, ignore_placeholders)`. With
`ignore_placeholders` set, spans containing '%' are left alone so
unresolved placeholders like %player% survive until they are filled in.
"""

from __future__ import annotations

import re
from typing import Callable

from chat_rgb.codec.legacy import strip_codes, trailing_active_codes
from chat_rgb.core.color import Color
from chat_rgb.core.constants import LEGACY_OVERRIDE

Gradient = Callable[[str, bool], str]

_HEX = r'#[0-9a-fA-F]{6}'

_CMI = re.compile(rf'\{{(?P<start>{_HEX})>\}}(?P<text>[^{{]*)\{{(?P<end>{_HEX})<\}}')
_HTML = re.compile(rf'<(?P<start>{_HEX})>(?P<text>[^<]*)</(?P<end>{_HEX})>')
_IRIDESCENT = re.compile(rf'<\$(?P<start>{_HEX})>(?P<text>[^<]*)<\$(?P<end>{_HEX})>')
_KYORI = re.compile(rf'<gradient:(?P<start>{_HEX}):(?P<end>{_HEX})>(?P<text>[^<]*)</gradient>')


def as_gradient(start: Color, text: str, end: Color) -> str:
    """
    Color each character of `text` along a line from `start` to `end`.

    Legacy codes active at the end of `text` are lifted out and repeated
    before every character so styles like bold survive the expansion.
    A single character takes the start color.
    """
    codes = trailing_active_codes(text)
    plain = strip_codes(text)
    length = len(plain)
    suffix = LEGACY_OVERRIDE + start.legacy.code if start.forced else ""

    parts: list[str] = []
    for i, char in enumerate(plain):
        if length == 1:
            color = start
        else:
            color = Color.from_rgb(
                int(start.red + (end.red - start.red) * i / (length - 1)),
                int(start.green + (end.green - start.green) * i / (length - 1)),
                int(start.blue + (end.blue - start.blue) * i / (length - 1)),
            )
        parts.append(color.hex + suffix + codes + char)
    return ''.join(parts)


def _expand(pattern: re.Pattern[str], text: str, ignore_placeholders: bool) -> str:
    def _replace(match: re.Match[str]) -> str:
        if ignore_placeholders and "%" in match.group(0):
            return match.group(0)
        return as_gradient(
            Color.from_hex(match.group("start")),
            match.group("text"),
            Color.from_hex(match.group("end")),
        )

    return pattern.sub(_replace, text)


def cmi(text: str, ignore_placeholders: bool = False) -> str:
    if "{#" not in text:
        return text
    return _expand(_CMI, text, ignore_placeholders)


def html(text: str, ignore_placeholders: bool = False) -> str:
    if "<#" not in text:
        return text
    return _expand(_HTML, text, ignore_placeholders)


def iridescent(text: str, ignore_placeholders: bool = False) -> str:
    if "<$" not in text:
        return text
    return _expand(_IRIDESCENT, text, ignore_placeholders)


def kyori(text: str, ignore_placeholders: bool = False) -> str:
    if "<grad" not in text:
        return text
    return _expand(_KYORI, text, ignore_placeholders)
