"""Tests for JSON rendering and parsing."""

import json
import logging

import pytest

from chat_rgb.codec.markup_parser import from_markup
from chat_rgb.core.color import Color, RenderMode
from chat_rgb.core.component import HoverAction, TextComponent
from chat_rgb.core.errors import UnknownActionKind
from chat_rgb.render.json_format import JsonParser, JsonRenderer


def _round_trip(data: dict) -> dict:
    component = JsonParser().parse(json.dumps(data))
    return json.loads(JsonRenderer().render(component))


class TestJsonRenderer:
    """Tests for JsonRenderer."""

    def test_unset_fields_omitted(self) -> None:
        assert JsonRenderer().render(TextComponent("x")) == '{"text":"x"}'

    def test_false_is_written(self) -> None:
        assert JsonRenderer().to_dict(TextComponent("x", bold=False)) == {"text": "x", "bold": False}

    def test_markup_tree(self) -> None:
        assert from_markup("&cHi").to_json() == '{"text":"","extra":[{"text":"Hi","color":"red"}]}'

    def test_render_modes(self) -> None:
        comp = TextComponent("x", color=Color.from_hex("#FF8800"))
        assert JsonRenderer(RenderMode.RGB).to_dict(comp)["color"] == "#FF8800"
        assert JsonRenderer(RenderMode.LEGACY).to_dict(comp)["color"] == "gold"

    def test_events(self) -> None:
        comp = (
            TextComponent("x")
            .with_click_open_url("https://example.org")
            .with_hover_show_text(TextComponent("tip", bold=True))
        )
        assert JsonRenderer().to_dict(comp) == {
            "text": "x",
            "clickEvent": {"action": "open_url", "value": "https://example.org"},
            "hoverEvent": {"action": "show_text", "value": {"text": "tip", "bold": True}},
        }

    def test_non_ascii_kept(self) -> None:
        assert JsonRenderer().render(TextComponent("§ é")) == '{"text":"§ é"}'

    def test_indent(self) -> None:
        assert "\n" in JsonRenderer(indent=2).render(TextComponent("x", bold=True))

    def test_render_component_shortcuts(self) -> None:
        renderer = JsonRenderer()
        assert renderer.render_component(TextComponent()) is None
        assert renderer.render_component(TextComponent("")) == '{"text":""}'
        assert renderer.render_component(TextComponent(""), send_translatable_if_empty=True) == '{"translate":""}'
        assert renderer.render_component(TextComponent("").add_extra(TextComponent("a"))) == '{"text":"","extra":[{"text":"a"}]}'


class TestJsonParser:
    """Tests for JsonParser."""

    def test_round_trip(self) -> None:
        data = {"text": "hi", "bold": True, "color": "red"}
        assert _round_trip(data) == data

    def test_round_trip_events(self) -> None:
        data = {
            "text": "x",
            "clickEvent": {"action": "run_command", "value": "/help"},
            "hoverEvent": {"action": "show_text", "value": {"text": "tip", "color": "gold"}},
        }
        assert _round_trip(data) == data

    def test_hex_color(self) -> None:
        comp = JsonParser().parse('{"text":"x","color":"#ff8800"}')
        assert comp.color == Color.from_hex("#FF8800")

    def test_hover_string_value(self) -> None:
        comp = JsonParser().parse('{"text":"x","hoverEvent":{"action":"show_item","value":"{id:stone}"}}')
        assert comp.hover.action is HoverAction.SHOW_ITEM
        assert comp.hover.value == "{id:stone}"

    def test_hover_list_value(self) -> None:
        comp = JsonParser().parse('{"text":"x","hoverEvent":{"action":"show_text","value":["a",{"text":"b"}]}}')
        assert comp.hover.value == TextComponent("").with_extra([TextComponent("a"), TextComponent("b")])

    def test_extra_strings(self) -> None:
        comp = JsonParser().parse('{"text":"","extra":["a",{"text":"b"}]}')
        assert comp.extra == (TextComponent("a"), TextComponent("b"))

    def test_bool_strings(self) -> None:
        comp = JsonParser().parse('{"text":"x","bold":"true","italic":"false"}')
        assert comp.bold is True
        assert comp.italic is False

    def test_missing_color(self) -> None:
        assert JsonParser().parse('{"text":"x"}').color is None

    def test_bare_string(self) -> None:
        assert JsonParser().parse('"hello"') == TextComponent("hello")

    def test_unknown_action(self) -> None:
        with pytest.raises(UnknownActionKind):
            JsonParser().parse('{"text":"x","clickEvent":{"action":"explode","value":"y"}}')

    def test_unknown_action_in_child(self) -> None:
        with pytest.raises(UnknownActionKind):
            JsonParser().parse('{"text":"","extra":[{"text":"x","hoverEvent":{"action":"nope","value":"y"}}]}')


class TestMarkupFallback:
    def test_invalid_json(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chat_rgb.render.json_format"):
            comp = JsonParser().parse("&cNot json")
        assert comp == from_markup("&cNot json")
        assert "reading as markup" in caplog.text

    def test_non_object_value(self) -> None:
        assert JsonParser().parse("42") == from_markup("42")
        assert JsonParser().parse("[1, 2]") == from_markup("[1, 2]")

    @pytest.mark.parametrize("raw", [
        '{"text":"x","color":"crimson"}',
        '{"text":"a","color":"#GG0000"}',
        '{"text":"a","color":5}',
        '{"text":"a","extra":5}',
        '{"text":"a","clickEvent":{"value":"x"}}',
        '{"text":"a","hoverEvent":"oops"}',
    ])
    def test_wrongly_shaped_object(self, raw: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chat_rgb.render.json_format"):
            comp = JsonParser().parse(raw)
        assert comp == from_markup(raw)
        assert "reading as markup" in caplog.text
