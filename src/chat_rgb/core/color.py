"""Color representation for chat text."""

import colorsys
import re
from dataclasses import dataclass
from enum import Enum

from chat_rgb.core import palette
from chat_rgb.core.errors import InvalidColorFormat
from chat_rgb.core.palette import PaletteEntry

HEX_PATTERN = re.compile(r'#[0-9a-fA-F]{6}')


class RenderMode(Enum):
    """How colors are written when a component is rendered."""
    RGB = "rgb"          # Full hex colors (palette names when exact)
    LEGACY = "legacy"    # Nearest 16-color palette name


@dataclass(frozen=True)
class Color:
    """
    An RGB text color with its legacy palette fallback.

    `legacy` is the nearest palette color unless the color was built with
    an explicit fallback, in which case `forced` is True.
    """
    rgb: tuple[int, int, int]
    hex: str
    legacy: PaletteEntry
    forced: bool = False

    @property
    def red(self) -> int:
        return self.rgb[0]

    @property
    def green(self) -> int:
        return self.rgb[1]

    @property
    def blue(self) -> int:
        return self.rgb[2]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise InvalidColorFormat(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        rgb = (r, g, b)
        return cls(rgb, f"#{r:02X}{g:02X}{b:02X}", palette.nearest_palette_entry(rgb))

    @classmethod
    def from_hex(cls, hex_code: str, legacy: PaletteEntry | None = None) -> "Color":
        """
        Create a Color from a `#RRGGBB` string.

        Passing `legacy` pins the palette fallback instead of searching
        for the nearest color.
        """
        if not HEX_PATTERN.fullmatch(hex_code):
            raise InvalidColorFormat(f"Expected #RRGGBB, got {hex_code!r}")
        value = int(hex_code[1:], 16)
        rgb = (value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF)
        if legacy is None:
            return cls(rgb, hex_code.upper(), palette.nearest_palette_entry(rgb))
        if legacy.is_style:
            raise InvalidColorFormat(f"Legacy fallback must be a color, got {legacy.name}")
        return cls(rgb, hex_code.upper(), legacy, forced=True)

    @classmethod
    def from_palette(cls, entry: PaletteEntry) -> "Color":
        """Create a Color from one of the 16 palette colors."""
        if entry.rgb is None or entry.hex is None:
            raise InvalidColorFormat(f"{entry.name} is not a palette color")
        return cls(entry.rgb, entry.hex, entry)

    @classmethod
    def from_name(cls, text: str) -> "Color":
        """Create a Color from JSON notation: '#RRGGBB' or a palette name."""
        if text.startswith("#"):
            return cls.from_hex(text)
        entry = palette.by_name(text)
        if entry is None or entry.is_style:
            raise InvalidColorFormat(f"Unknown color name: {text!r}")
        return cls.from_palette(entry)

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float) -> "Color":
        """Create a Color from hue/saturation/brightness in [0, 1]."""
        r, g, b = colorsys.hsv_to_rgb(hue % 1.0, saturation, brightness)
        return cls.from_rgb(int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))

    def to_json_value(self, mode: RenderMode = RenderMode.RGB) -> str:
        """Return the JSON `color` value for this color."""
        if mode == RenderMode.LEGACY:
            return self.legacy.name
        exact = palette.from_rgb_exact(self.rgb)
        if exact is not None:
            return exact.name
        return self.hex
