"""The fixed legacy palette: 16 colors, 5 styles and reset."""

from dataclasses import dataclass

from chat_rgb.core.constants import MARKER


@dataclass(frozen=True)
class PaletteEntry:
    """
    One legacy formatting code.

    Colors carry a display RGB triple and hex string; styles and reset
    carry neither.
    """
    code: str
    network_id: int
    name: str
    hex: str | None = None
    rgb: tuple[int, int, int] | None = None

    @property
    def is_style(self) -> bool:
        """True for the style flags and reset (no display color)."""
        return self.rgb is None

    @property
    def legacy(self) -> str:
        """Marker form of this code, e.g. '§c'."""
        return MARKER + self.code


def _color(network_id: int, code: str, name: str, hex_code: str) -> PaletteEntry:
    value = int(hex_code[1:], 16)
    rgb = (value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF)
    return PaletteEntry(code, network_id, name, hex_code, rgb)


BLACK = _color(0, "0", "black", "#000000")
DARK_BLUE = _color(1, "1", "dark_blue", "#0000AA")
DARK_GREEN = _color(2, "2", "dark_green", "#00AA00")
DARK_AQUA = _color(3, "3", "dark_aqua", "#00AAAA")
DARK_RED = _color(4, "4", "dark_red", "#AA0000")
DARK_PURPLE = _color(5, "5", "dark_purple", "#AA00AA")
GOLD = _color(6, "6", "gold", "#FFAA00")
GRAY = _color(7, "7", "gray", "#AAAAAA")
DARK_GRAY = _color(8, "8", "dark_gray", "#555555")
BLUE = _color(9, "9", "blue", "#5555FF")
GREEN = _color(10, "a", "green", "#55FF55")
AQUA = _color(11, "b", "aqua", "#55FFFF")
RED = _color(12, "c", "red", "#FF5555")
LIGHT_PURPLE = _color(13, "d", "light_purple", "#FF55FF")
YELLOW = _color(14, "e", "yellow", "#FFFF55")
WHITE = _color(15, "f", "white", "#FFFFFF")

OBFUSCATED = PaletteEntry("k", 16, "obfuscated")
BOLD = PaletteEntry("l", 17, "bold")
STRIKETHROUGH = PaletteEntry("m", 18, "strikethrough")
UNDERLINE = PaletteEntry("n", 19, "underline")
ITALIC = PaletteEntry("o", 20, "italic")
RESET = PaletteEntry("r", 21, "reset")

# Declaration order matters: nearest-color ties go to the earlier entry
COLORS: tuple[PaletteEntry, ...] = (
    BLACK, DARK_BLUE, DARK_GREEN, DARK_AQUA, DARK_RED, DARK_PURPLE, GOLD, GRAY,
    DARK_GRAY, BLUE, GREEN, AQUA, RED, LIGHT_PURPLE, YELLOW, WHITE,
)
STYLES: tuple[PaletteEntry, ...] = (OBFUSCATED, BOLD, STRIKETHROUGH, UNDERLINE, ITALIC)
PALETTE: tuple[PaletteEntry, ...] = COLORS + STYLES + (RESET,)

# Order in which active styles are written after a color code
STYLE_ORDER: tuple[PaletteEntry, ...] = (BOLD, ITALIC, UNDERLINE, STRIKETHROUGH, OBFUSCATED)

# Colors paired with their display RGB for the nearest-color search
_COLOR_RGB: tuple[tuple[PaletteEntry, tuple[int, int, int]], ...] = tuple(
    (entry, entry.rgb) for entry in COLORS if entry.rgb is not None
)

_BY_CODE = {entry.code: entry for entry in PALETTE}
_BY_NAME = {entry.name: entry for entry in PALETTE}


def by_code(code: str) -> PaletteEntry | None:
    """Look up an entry by its code character (case-insensitive)."""
    return _BY_CODE.get(code.lower())


def by_name(name: str) -> PaletteEntry | None:
    """Look up an entry by its lowercase name (case-insensitive)."""
    return _BY_NAME.get(name.lower())


def from_rgb_exact(rgb: tuple[int, int, int]) -> PaletteEntry | None:
    """Return the color whose display RGB equals `rgb`, if any."""
    for entry in COLORS:
        if entry.rgb == rgb:
            return entry
    return None


def nearest_palette_entry(rgb: tuple[int, int, int]) -> PaletteEntry:
    """
    Find the palette color closest to `rgb`.

    Distance is the largest per-channel difference (Chebyshev), and the
    first color reaching the minimum wins.
    """
    red, green, blue = rgb
    best = WHITE
    best_dist = 9999
    for entry, (r, g, b) in _COLOR_RGB:
        dist = max(abs(r - red), abs(g - green), abs(b - blue))
        if dist < best_dist:
            best_dist = dist
            best = entry
    return best
