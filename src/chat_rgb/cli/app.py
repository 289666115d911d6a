"""Typer CLI application."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console

from chat_rgb.codec.markup_parser import from_markup
from chat_rgb.codec.pipeline import ColorPipeline, default_pipeline
from chat_rgb.core.color import RenderMode
from chat_rgb.core.constants import AMPERSAND, MARKER
from chat_rgb.render.json_format import JsonParser, JsonRenderer

NO_RGB_ENV = "CHAT_RGB_NO_RGB"


def _pipeline(no_rgb: bool) -> ColorPipeline:
    pipeline = default_pipeline()
    return pipeline.with_rgb_support(False) if no_rgb else pipeline


def _show_markers(text: str, ampersand: bool) -> str:
    return text.replace(MARKER, AMPERSAND) if ampersand else text


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="chat-rgb",
        help="Normalize chat color markup, expand gradients and build JSON components.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    # Output is printed verbatim; rich markup would eat [brackets] in user text
    console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
    err_console = Console(stderr=True)

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """chat-rgb - chat color markup toolkit."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @app.command("format")
    def format_(
        text: Annotated[str, typer.Argument(help="Markup to normalize")],
        ignore_placeholders: Annotated[bool, typer.Option("--ignore-placeholders", "-p", help="Leave gradients containing % untouched")] = False,
        no_rgb: Annotated[bool, typer.Option("--no-rgb", envvar=NO_RGB_ENV, help="Target clients without RGB support")] = False,
    ) -> None:
        """Rewrite every color dialect to #RRGGBB and expand gradients."""
        console.print(_pipeline(no_rgb).apply_formats(text, ignore_placeholders))

    @app.command()
    def legacy(
        text: Annotated[str, typer.Argument(help="Markup to convert")],
        ampersand: Annotated[bool, typer.Option("--ampersand", "-a", help="Write codes with & instead of §")] = False,
    ) -> None:
        """Downgrade all colors to the 16-color legacy palette."""
        console.print(_show_markers(default_pipeline().convert_rgb_to_legacy(text), ampersand))

    @app.command("json")
    def to_json(
        text: Annotated[str, typer.Argument(help="Markup to convert")],
        no_rgb: Annotated[bool, typer.Option("--no-rgb", envvar=NO_RGB_ENV, help="Write nearest legacy color names")] = False,
        indent: Annotated[Optional[int], typer.Option("--indent", "-i", help="JSON indentation")] = None,
    ) -> None:
        """Parse markup and print the component JSON."""
        pipeline = _pipeline(no_rgb)
        mode = RenderMode.LEGACY if no_rgb else RenderMode.RGB
        component = from_markup(text, pipeline)
        console.print(JsonRenderer(render_mode=mode, indent=indent).render(component))

    @app.command()
    def read(
        json_text: Annotated[str, typer.Argument(help="Component JSON")],
        flat: Annotated[bool, typer.Option("--flat", help="Print hex colors instead of legacy codes")] = False,
        plain: Annotated[bool, typer.Option("--plain", help="Print text only")] = False,
        ampersand: Annotated[bool, typer.Option("--ampersand", "-a", help="Write codes with & instead of §")] = False,
    ) -> None:
        """Parse component JSON and print it as text."""
        if flat and plain:
            err_console.print("[red]--flat and --plain are mutually exclusive[/]")
            raise typer.Exit(1)
        component = JsonParser().parse(json_text)
        if plain:
            console.print(component.to_plain_text())
        elif flat:
            console.print(_show_markers(component.to_flat_text(), ampersand))
        else:
            console.print(_show_markers(component.to_legacy_text(), ampersand))

    @app.command()
    def rainbow(
        text: Annotated[str, typer.Argument(help="Text to color")],
        saturation: Annotated[int, typer.Option("--saturation", "-s", min=0, max=100, help="Saturation and brightness, in percent")] = 100,
        no_rgb: Annotated[bool, typer.Option("--no-rgb", envvar=NO_RGB_ENV, help="Use legacy colors only")] = False,
    ) -> None:
        """Give every character its own hue."""
        console.print(_pipeline(no_rgb).rainbow(text, saturation / 100))

    return app
