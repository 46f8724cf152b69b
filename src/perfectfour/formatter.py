"""Rich display formatting for chain output.

Output is plain text: chain lines can be hundreds of characters long for
large inputs, so the console never soft-wraps them and markup/highlighting
are disabled for the spelled words.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from perfectfour.models import ChainResult, ChainStep

CLOSING_MESSAGE = "Four is the perfect number."


def capitalize_first(word: str) -> str:
    """Uppercase the first character only, leaving the rest unchanged.

    Unlike ``str.capitalize()`` this never lowercases the remainder.
    """
    return word[:1].upper() + word[1:]


def format_step(step: ChainStep) -> str:
    """Render a step as ``"{index}: {Word} is {length}"``.

    The length is that of the lowercase word; capitalization is display-only.
    """
    return f"{step.index}: {capitalize_first(step.word)} is {step.length}"


def format_summary(iterations: int) -> str:
    return f"It took {iterations} iterations to reach four."


def make_console(stderr: bool = False, file: IO[str] | None = None) -> Console:
    """Console that writes long lines unbroken and leaves :shortcodes: as typed."""
    return Console(file=file, stderr=stderr, soft_wrap=True, highlight=False, emoji=False)


def display_chain(
    result: ChainResult,
    console: Console | None = None,
    show_summary: bool = True,
) -> None:
    """Print every chain step followed by the closing message and summary.

    Args:
        result: Completed chain.
        console: Rich console (creates one on stdout if not provided).
        show_summary: Print the closing message and iteration count.
    """
    console = console or make_console()

    for step in result.steps:
        console.print(format_step(step), markup=False)

    if show_summary:
        console.print(CLOSING_MESSAGE, markup=False)
        console.print()
        console.print(format_summary(result.iterations), markup=False)
