"""CLI entry point for perfectfour.

Usage:
  perfectfour NUMBER            Spell NUMBER, count its letters, spell the count... until "four"
  perfectfour -- -42            Negative numbers work with or without the ``--`` separator
  perfectfour -v NUMBER         Debug logging on stderr
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from perfectfour.chain import IterationLimitError, ParseFailureError, parse_number, run_chain
from perfectfour.config import load_config
from perfectfour.formatter import display_chain, make_console
from perfectfour.wordify import MagnitudeOutOfRangeError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Spell a number in English, count the letters, and repeat until reaching four.",
    rich_markup_mode="rich",
    add_completion=False,
)
console = make_console()
err_console = make_console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


# Unknown "options" fall through as positionals so "-42" is read as a number
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    number: Annotated[
        str | None,
        typer.Argument(help="Signed decimal integer of any length", show_default=False),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", "-m", min=1, help="Give up after this many iterations"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="JSON file with driver settings"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each step to stderr"),
    ] = False,
) -> None:
    """Print the spell-and-count chain from NUMBER down to four."""
    _configure_logging(verbose)

    if number is None:
        _fail("Provide a number as an argument")

    try:
        config = load_config(config_path)
        if max_iterations is not None:
            config.max_iterations = max_iterations
    except FileNotFoundError:
        _fail(f"Config file not found: {config_path}")
    except OSError as e:
        _fail(f"Cannot read config file {config_path}: {e.strerror or e}")
    except ValueError as e:
        _fail(f"Invalid config file {config_path}: {e}")

    try:
        start = parse_number(number)
        result = run_chain(start, config)
    except ParseFailureError as e:
        _fail(str(e))
    except MagnitudeOutOfRangeError as e:
        _fail(str(e))
    except IterationLimitError as e:
        logger.debug("Chain stopped at %r", e.steps[-1].word)
        _fail(str(e))

    display_chain(result, console=console, show_summary=config.show_summary)
