"""Typer CLI application with translation and server commands."""

import json
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from morse_translator.codec.morse import decode, encode
from morse_translator.core.table import DEFAULT_TABLE


def _input_text(words: Optional[list[str]]) -> str:
    """Join positional words, or read stdin when none were given."""
    if words:
        return ' '.join(words)
    return sys.stdin.read().rstrip('\r\n')


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="morse-translator",
        help="Translate text to Morse code and back, or serve the translator over HTTP.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)
    # Morse symbols such as '---' must not be parsed as options
    positional_only = {"ignore_unknown_options": True, "allow_interspersed_args": False}

    @app.command("encode", context_settings=positional_only)
    def encode_command(
        text: Annotated[Optional[list[str]], typer.Argument(help="Text to encode (stdin if omitted)")] = None,
    ) -> None:
        """Encode text as Morse code."""
        print(encode(_input_text(text)))

    @app.command("decode", context_settings=positional_only)
    def decode_command(
        morse: Annotated[Optional[list[str]], typer.Argument(help="Morse symbols to decode (stdin if omitted)")] = None,
    ) -> None:
        """Decode Morse code back to text."""
        print(decode(_input_text(morse)))

    @app.command()
    def table(
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the character/symbol table."""
        if json_output:
            print(json.dumps(dict(DEFAULT_TABLE.forward), indent=2))
            return

        grid = Table(title="Morse Code Table")
        grid.add_column("Char", style="bold cyan", justify="center")
        grid.add_column("Symbol", style="green")
        for char, symbol in DEFAULT_TABLE.forward.items():
            label = "space" if char == ' ' else char
            grid.add_row(Text(label), Text(symbol))
        console.print(grid)

    @app.command()
    def serve(
        host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
        port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
        prefix: Annotated[Optional[str], typer.Option("--prefix", help="Path prefix for translation routes")] = None,
        log_level: Annotated[Optional[str], typer.Option("--log-level", "-l", help="Logging level")] = None,
    ) -> None:
        """Run the HTTP translator with uvicorn."""
        import uvicorn

        from morse_translator.api.app import create_app as create_api
        from morse_translator.config import ServerConfig
        from morse_translator.log import configure_logging

        try:
            config = ServerConfig.from_env().with_overrides(
                host=host, port=port, prefix=prefix, log_level=log_level,
            )
        except ValueError as exc:
            err_console.print(f"[red]Invalid configuration: {exc}[/]")
            raise typer.Exit(1)

        configure_logging(config.log_level)
        console.print(
            f"[bold]Serving[/] on http://{config.host}:{config.port}{config.prefix or '/'}"
        )
        uvicorn.run(
            create_api(config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )

    return app
