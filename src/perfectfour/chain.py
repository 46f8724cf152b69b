"""Spell-and-count chain: spell a number, count its letters, spell the count.

Every English spelling shrinks quickly under this transform and settles on
"four", the one number-word whose length equals its value:

    >>> from perfectfour.chain import run_chain
    >>> [s.word for s in run_chain(0).steps]
    ['zero', 'four']
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from perfectfour.config import ChainConfig
from perfectfour.constants import DEFAULT_MAX_ITERATIONS, MAX_SUPPORTED_DIGITS
from perfectfour.models import ChainResult, ChainStep
from perfectfour.wordify import MagnitudeOutOfRangeError, wordify

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only; int() alone would also accept "1_000" and "١٢"
_NUMBER_RE = re.compile(r"([+-]?)([0-9]+)")


class ParseFailureError(ValueError):
    """Raised when text is not a base-10 signed integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Argument must be a number, instead received `{text}`")


class IterationLimitError(RuntimeError):
    """Raised when the chain has not reached "four" within the allowed transforms."""

    def __init__(self, limit: int, steps: list[ChainStep]) -> None:
        self.limit = limit
        self.steps = steps
        super().__init__(f"Did not reach four within {limit} iterations")


def parse_number(text: str) -> int:
    """Parse a signed decimal integer of any length.

    Args:
        text: Command-line text such as ``"-42"`` or ``"+1000000"``.
            Surrounding whitespace is ignored.

    Returns:
        The parsed integer.

    Raises:
        ParseFailureError: If *text* is not an optional sign followed by digits.
        MagnitudeOutOfRangeError: If the number is too large to spell.
    """
    match = _NUMBER_RE.fullmatch(text.strip())
    if match is None:
        raise ParseFailureError(text)

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # Checked before int() so the interpreter's str->int digit cap never applies
    if len(digits) > MAX_SUPPORTED_DIGITS:
        raise MagnitudeOutOfRangeError(len(digits))

    number = int(digits)
    return -number if sign == "-" else number


def iterate_chain(start: int, max_iterations: int | None = DEFAULT_MAX_ITERATIONS) -> Iterator[ChainStep]:
    """Yield each spelled number until the word is "four".

    The terminal "four" step is yielded too, then the iterator stops.

    Args:
        start: Starting integer.
        max_iterations: Maximum number of transforms (spell, count, re-spell)
            before giving up, or ``None`` for no limit.

    Raises:
        IterationLimitError: If "four" is not reached within *max_iterations*.
        MagnitudeOutOfRangeError: If *start* is too large to spell.
    """
    steps: list[ChainStep] = []
    value = start
    index = 1
    while True:
        step = ChainStep(index=index, value=value, word=wordify(value))
        steps.append(step)
        logger.debug("Step %d: %r has %d characters", step.index, step.word, step.length)
        yield step

        if step.is_fixed_point:
            return

        if max_iterations is not None and index > max_iterations:
            raise IterationLimitError(max_iterations, steps)

        value = step.length
        index += 1


def run_chain(start: int, config: ChainConfig | None = None) -> ChainResult:
    """Run the chain to completion and collect every step.

    Args:
        start: Starting integer.
        config: Driver settings; defaults are used when omitted.

    Returns:
        ChainResult whose last step is always the "four" step.
    """
    config = config or ChainConfig()
    result = ChainResult(start=start)
    result.steps.extend(iterate_chain(start, config.max_iterations))
    logger.debug("Reached four from %d after %d iterations", result.start, result.iterations)
    return result
