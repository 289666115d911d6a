"""Legacy code utilities - `&` translation and lookback scans."""

from __future__ import annotations

import re

from chat_rgb.core.constants import ALL_CODES, AMPERSAND, COLOR_CODES, FORMAT_CODES, MARKER

_AMPERSAND_CODE = re.compile(f"&([{ALL_CODES}])")
_LEGACY_CODE = re.compile(f"[{MARKER}&]([{FORMAT_CODES}])")


def colorize(text: str) -> str:
    """Replace `&` + code with the legacy marker + lowercase code."""
    if AMPERSAND not in text:
        return text
    return _AMPERSAND_CODE.sub(lambda m: MARKER + m.group(1).lower(), text)


def trailing_active_codes(text: str) -> str:
    """
    Return the formatting codes still active at the end of `text`.

    Scans backwards collecting marker (or `&`) + code pairs. Style codes
    accumulate; the first color or reset code found ends the scan, since
    it would have cleared any styles before it.
    """
    codes: list[str] = []
    last = len(text) - 1
    for index in range(last - 1, -1, -1):
        if text[index] not in (MARKER, AMPERSAND):
            continue
        code = text[index + 1]
        if code not in FORMAT_CODES:
            continue
        codes.insert(0, MARKER + code)
        if code in COLOR_CODES:
            break
    return ''.join(codes)


def strip_codes(text: str) -> str:
    """Remove every marker (or `&`) + color/style code pair."""
    return _LEGACY_CODE.sub('', text)
