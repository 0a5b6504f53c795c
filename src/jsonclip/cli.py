"""Command line interface for jsonclip."""

import logging
import sys
from typing import IO

import click

from jsonclip import __version__
from jsonclip import clipboard
from jsonclip.config import Config
from jsonclip.errors import EmptyInput
from jsonclip.errors import JsonclipError
from jsonclip.errors import PathNotFound
from jsonclip.errors import UnexpectedError
from jsonclip.parser import parse
from jsonclip.path import NotFound
from jsonclip.path import extract
from jsonclip.presenter import clipboard_text
from jsonclip.presenter import format_plain
from jsonclip.presenter import render

logger = logging.getLogger(__name__)

EXAMPLES = """\b
Examples:
  jsonclip                            Format clipboard JSON
  jsonclip --path user.name           Extract nested value
  jsonclip --path 'items[0].price'    Extract from an array
  jsonclip --copy                     Format and copy back to clipboard
  cat data.json | jsonclip            Format from stdin
  curl -s api.example.com | jsonclip  Format API response
"""

MUTED = "bright_black"


def stdin_is_interactive(stream: IO[str]) -> bool:
    return stream.isatty()


def acquire_input(stream: IO[str]) -> str:
    """
    Reads the document from piped stdin, or from the clipboard otherwise.

    Piped input is stripped of surrounding whitespace. Raises EmptyInput
    when no text was obtained.
    """
    if stdin_is_interactive(stream):
        logger.debug("Reading JSON from clipboard")
        text = clipboard.read_text()
    else:
        logger.debug("Reading JSON from stdin")
        text = stream.read().strip()

    if not text.strip():
        raise EmptyInput()

    logger.debug("Acquired %d characters of input", len(text))
    return text


def run(config: Config, stream: IO[str]) -> None:
    """Acquire, parse, optionally extract, render and optionally copy."""
    data = parse(acquire_input(stream))

    if config.path:
        value = extract(data, config.path)
        if value is NotFound:
            raise PathNotFound(config.path)

        click.echo(render(value, config.color))
        if config.copy:
            clipboard.write_text(clipboard_text(value))
            click.echo(click.style("✓ Copied to clipboard", fg=MUTED))
        return

    click.echo(render(data, config.color))
    if config.copy:
        clipboard.write_text(format_plain(data))
        click.echo(click.style("✓ Formatted JSON copied to clipboard", fg=MUTED))


def report(error: JsonclipError) -> None:
    click.echo(click.style(f"❌ {error.title}", fg="red"), err=True)
    if error.detail:
        click.echo(click.style(error.detail, fg=MUTED), err=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )
    logging.getLogger("jsonclip").setLevel(level)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]}, epilog=EXAMPLES
)
@click.option(
    "-p",
    "--path",
    metavar="PATH",
    help="Extract value at a dot/bracket path (e.g., user.name).",
)
@click.option(
    "-c", "--copy", is_flag=True, help="Write formatted JSON back to clipboard."
)
@click.option("--no-color", is_flag=True, help="Disable syntax highlighting.")
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="jsonclip",
    message="%(prog)s v%(version)s",
)
@click.pass_context
def cli(ctx: click.Context, path: str | None, copy: bool, no_color: bool) -> None:
    """Zero-config JSON formatter and inspector for clipboard data.

    Reads JSON from the clipboard, or from stdin when input is piped,
    validates it and prints it with syntax highlighting.
    """
    try:
        config = Config.from_options(path, copy, not no_color)
        _configure_logging(config.log_level)
        run(config, sys.stdin)
    except JsonclipError as exc:
        error = exc
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        error = UnexpectedError(str(exc))
    else:
        return

    report(error)
    ctx.exit(error.exit_code)


def main() -> None:
    cli(prog_name="jsonclip")
