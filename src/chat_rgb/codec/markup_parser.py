"""Markup parser - turn legacy/hex coded text into a component tree."""

from __future__ import annotations

from chat_rgb.codec.legacy import colorize
from chat_rgb.codec.pipeline import ColorPipeline, default_pipeline, legacy_override_at
from chat_rgb.core import palette
from chat_rgb.core.color import Color
from chat_rgb.core.component import TextComponent
from chat_rgb.core.constants import MARKER
from chat_rgb.core.errors import InvalidColorFormat


class MarkupParser:
    """
    Single-pass parser from normalized markup to styled runs.

    Text accumulates into the current run. A style code starts a new run
    that keeps the previous color and styles; a color or reset code, or a
    `#RRGGBB` tag, starts a fresh run with only that color.
    """

    def __init__(self, pipeline: ColorPipeline | None = None):
        self.pipeline = pipeline or default_pipeline()
        self.components: list[TextComponent] = []
        self.current = TextComponent()
        self._buffer: list[str] = []

    def feed(self, text: str) -> None:
        """Normalize `text` and parse it into runs."""
        self._process_text(self.pipeline.apply_formats(colorize(text)))

    def _process_text(self, text: str) -> None:
        i = 0
        while i < len(text):
            char = text[i]
            if char == MARKER:
                i += 1
                if i >= len(text):
                    break
                entry = palette.by_code(text[i])
                if entry is not None:
                    self._handle_code(entry)
            elif char == "#":
                i = self._handle_hex(text, i)
            else:
                self._buffer.append(char)
            i += 1

    def _flush(self) -> bool:
        """Close the current run if it has text. Returns True if it did."""
        if not self._buffer:
            return False
        self.components.append(self.current.with_text(''.join(self._buffer)))
        self._buffer = []
        return True

    def _handle_code(self, entry: palette.PaletteEntry) -> None:
        if self._flush():
            self.current = self.current.copy_formatting()

        if entry is palette.BOLD:
            self.current = self.current.with_bold(True)
        elif entry is palette.ITALIC:
            self.current = self.current.with_italic(True)
        elif entry is palette.UNDERLINE:
            self.current = self.current.with_underlined(True)
        elif entry is palette.STRIKETHROUGH:
            self.current = self.current.with_strikethrough(True)
        elif entry is palette.OBFUSCATED:
            self.current = self.current.with_obfuscated(True)
        elif entry is palette.RESET:
            self.current = TextComponent(color=Color.from_palette(palette.WHITE))
        else:
            self.current = TextComponent(color=Color.from_palette(entry))

    def _handle_hex(self, text: str, i: int) -> int:
        """Handle a '#' at `i`; returns the index of the last consumed char."""
        override = legacy_override_at(text, i)
        try:
            color = Color.from_hex(text[i:i + 7], override)
        except InvalidColorFormat:
            self._buffer.append("#")
            return i
        self._flush()
        self.current = TextComponent(color=color)
        return i + (8 if override is not None else 6)

    def get_component(self) -> TextComponent:
        """Close the last run and return the root component."""
        self.components.append(self.current.with_text(''.join(self._buffer)))
        self._buffer = []
        root = TextComponent("").with_extra(self.components)
        self.components = []
        self.current = TextComponent()
        return root


def from_markup(text: str, pipeline: ColorPipeline | None = None) -> TextComponent:
    """
    Parse author markup into a component tree.

    `text` may use `&` or § codes, any hex dialect, gradients and rainbow
    tags. The result is a root with empty text whose children are the runs.
    """
    parser = MarkupParser(pipeline)
    parser.feed(text)
    return parser.get_component()
