"""Command-line entry point for doclingo."""

import logging
import sys
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from typer.core import TyperCommand

from . import __version__
from .arguments import parse_arguments
from .errors import DoclingoError
from .languages import list_languages
from .translator import get_translator

USAGE = "Usage: doclingo <languageCode> [filePath] [--model <id>|--model=<id>]"

RAW_ARGS_KEY = "doclingo.raw_args"

app = typer.Typer(
    name="doclingo",
    help="Translate Markdown documents with Gemini.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Send doclingo logs to stderr through rich."""
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("doclingo")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False


def handle_error(error: Exception) -> NoReturn:
    """Report a failure on stderr and exit with its code."""
    if isinstance(error, DoclingoError):
        err_console.print(f"[red]{escape(error.message)}[/red]", soft_wrap=True)
        if error.show_usage:
            err_console.print(f"[dim]{escape(USAGE)}[/dim]", soft_wrap=True)
        raise typer.Exit(error.exit_code)

    message = str(error) or "An unknown error occurred."
    err_console.print(f"[red]Unexpected error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def print_languages():
    """Print all preset languages in a table."""
    table = Table(title="Language Presets")
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="white")

    for code, name in sorted(list_languages().items()):
        table.add_row(code, name)

    console.print(table)
    console.print("[dim]Other codes are accepted with neutral style instructions.[/dim]")


def version_callback(value: bool):
    if value:
        console.print(f"doclingo {__version__}")
        raise typer.Exit()


class RawArgsCommand(TyperCommand):
    """Keep the untouched argument vector for parse_arguments.

    Click drops ``--`` and the options it knows before the command runs, so
    the raw tokens are stored on the context first.
    """

    def parse_args(self, ctx, args):
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@app.command(cls=RawArgsCommand, context_settings={"ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="LANGUAGE [FILE]",
        help="Target language code (e.g. ja, zh-TW) and optional Markdown file; reads stdin without a file",
        show_default=False,
    ),
    languages: bool = typer.Option(
        False,
        "--list-languages",
        help="List language presets and exit",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Translate a Markdown document into LANGUAGE.

    Use --model <id> (or --model=<id>, -m <id>) to pick a Gemini model or a
    full endpoint URL, and --verbose (-v) to log request details to stderr.
    GEMINI_API_KEY must be set.

    Examples:

        doclingo ja README.md

        cat README.md | doclingo zh-TW --model gemini-2.5-pro
    """
    if languages:
        print_languages()
        return

    try:
        parsed = parse_arguments(ctx.meta.get(RAW_ARGS_KEY, args or []))
        translator = get_translator()
        configure_logging("DEBUG" if parsed.verbose else translator.config.log_level)
        translation = translator.translate_document(parsed)
    except Exception as e:
        handle_error(e)

    sys.stdout.write(translation)
    sys.stdout.flush()


if __name__ == "__main__":
    app()
