"""Tests for the legacy, flat and plain text renderers."""

from chat_rgb.codec.markup_parser import from_markup
from chat_rgb.core import palette
from chat_rgb.core.color import Color
from chat_rgb.core.component import TextComponent
from chat_rgb.render.legacy import LegacyRenderer, style_codes
from chat_rgb.render.text import FlatRenderer, TextRenderer


class TestLegacyRenderer:
    """Tests for LegacyRenderer."""

    def test_runs(self) -> None:
        assert from_markup("&cHello &lWorld").to_legacy_text() == "§cHello §c§lWorld"

    def test_white_written_as_reset(self, white: Color) -> None:
        assert TextComponent("x", color=white).to_legacy_text() == "§rx"

    def test_repeated_formatting_elided(self, red: Color) -> None:
        root = TextComponent("").with_extra([
            TextComponent("a", color=red),
            TextComponent("b", color=red),
        ])
        assert root.to_legacy_text() == "§cab"

    def test_parent_formatting_carries_to_children(self, red: Color) -> None:
        root = TextComponent("P", color=red).add_extra(TextComponent("c", color=red))
        assert root.to_legacy_text() == "§cPc"

    def test_textless_node_passes_formatting_through(self, red: Color) -> None:
        root = TextComponent("a", color=red).add_extra(
            TextComponent(bold=True).add_extra(TextComponent("b", color=red))
        )
        assert root.to_legacy_text() == "§cab"

    def test_hex_downgraded(self) -> None:
        assert TextComponent("o", color=Color.from_hex("#FF8800")).to_legacy_text() == "§6o"

    def test_forced_fallback_used(self) -> None:
        comp = TextComponent("o", color=Color.from_hex("#FF8800", palette.DARK_RED))
        assert comp.to_legacy_text() == "§4o"

    def test_style_order(self) -> None:
        comp = TextComponent(
            "s", bold=True, italic=True, underlined=True, strikethrough=True, obfuscated=True,
        )
        assert LegacyRenderer().render(comp) == "§l§o§n§m§ks"

    def test_formatting(self, red: Color) -> None:
        renderer = LegacyRenderer()
        assert renderer.formatting(TextComponent("x")) == ""
        assert renderer.formatting(TextComponent("x", color=red, italic=True)) == "§c§o"


class TestStyleCodes:
    def test_false_and_none_are_off(self) -> None:
        assert style_codes(TextComponent(bold=False, italic=None, underlined=True)) == "§n"


class TestFlatRenderer:
    def test_runs(self) -> None:
        assert from_markup("&cHello &lWorld").to_flat_text() == "#FF5555Hello #FF5555§lWorld"

    def test_keeps_hex(self) -> None:
        assert FlatRenderer().render(TextComponent("o", color=Color.from_hex("#ff8800"))) == "#FF8800o"

    def test_no_elision(self, red: Color) -> None:
        root = TextComponent("").with_extra([
            TextComponent("a", color=red),
            TextComponent("b", color=red),
        ])
        assert root.to_flat_text() == "#FF5555a#FF5555b"


class TestTextRenderer:
    def test_strips_styling(self) -> None:
        assert from_markup("&cHello &lWorld").to_plain_text() == "Hello World"

    def test_direct_children_only(self) -> None:
        root = TextComponent("a").add_extra(TextComponent("b").add_extra(TextComponent("c")))
        assert TextRenderer().render(root) == "ab"

    def test_none_text_skipped(self) -> None:
        root = TextComponent().with_extra([TextComponent(), TextComponent("x")])
        assert root.to_plain_text() == "x"


class TestRenderModes:
    def test_one_tree_both_modes(self) -> None:
        comp = TextComponent("o", color=Color.from_hex("#FF8800"))
        legacy = comp.to_json(rgb_supported=False)
        rgb = comp.to_json(rgb_supported=True)
        assert '"gold"' in legacy
        assert '"#FF8800"' in rgb
        assert comp.color == Color.from_hex("#FF8800")
