"""Shared constants for chat markup processing."""

# Legacy formatting marker (section sign)
MARKER = "§"
AMPERSAND = "&"

# Code characters that select a color or reset (these end a lookback scan)
COLOR_CODES = "0123456789AaBbCcDdEeFfRr"

# Color codes plus the five style codes
FORMAT_CODES = COLOR_CODES + "KkLlMmNnOo"

# Everything `&` may introduce, including the `x` of platform hex colors
ALL_CODES = FORMAT_CODES + "Xx"

# Separator between a hex color and its forced legacy fallback (#RRGGBB|c)
LEGACY_OVERRIDE = "|"

# Sentinel JSON forms for components with nothing to show
EMPTY_TEXT = '{"text":""}'
EMPTY_TRANSLATABLE = '{"translate":""}'
