"""Spell integers of arbitrary size as English words.

Example:
    >>> from perfectfour.wordify import wordify
    >>> wordify(-1_000_123)
    'negative one million one hundred twenty-three'

Words are collected as a list of fragments and joined with single spaces, so
a zero remainder simply contributes no fragment. There is never an embedded
"zero" and never stray whitespace.
"""

from __future__ import annotations

import logging

from perfectfour.constants import MAX_SUPPORTED_DIGITS, ONES, SCALE_NAMES, TENS

logger = logging.getLogger(__name__)

_MAX_SUPPORTED = 1000 ** len(SCALE_NAMES)


class MagnitudeOutOfRangeError(ValueError):
    """Raised when a number needs a scale name beyond ``SCALE_NAMES``."""

    def __init__(self, digits: int, max_digits: int = MAX_SUPPORTED_DIGITS) -> None:
        self.digits = digits
        self.max_digits = max_digits
        super().__init__(
            f"Number has {digits} digits; at most {max_digits} digits "
            f"can be spelled (largest scale is '{SCALE_NAMES[-1]}')"
        )


def wordify(number: int) -> str:
    """Spell an integer in English.

    Args:
        number: Any integer whose magnitude is below ``10**306``.

    Returns:
        Lowercase spelling, e.g. ``"one hundred twenty-three"``. Tens and
        ones are hyphenated; no "and" is inserted.

    Raises:
        TypeError: If *number* is not an ``int`` (``bool`` is rejected too).
        MagnitudeOutOfRangeError: If the magnitude needs a scale name past
            "centillion".
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"wordify() expects an int, got {type(number).__name__}")

    if number < 0:
        return f"negative {wordify(-number)}"
    if number == 0:
        return ONES[0]
    if number >= _MAX_SUPPORTED:
        raise MagnitudeOutOfRangeError(_digit_count(number))

    return " ".join(_fragments(number))


def _fragments(number: int) -> list[str]:
    """Return the words for ``0 < number < 1000 ** len(SCALE_NAMES)``."""
    if number < 20:
        return [ONES[number]]

    if number < 100:
        tens, ones = divmod(number, 10)
        if ones == 0:
            return [TENS[tens]]
        return [f"{TENS[tens]}-{ONES[ones]}"]

    if number < 1000:
        hundreds, rest = divmod(number, 100)
        words = [ONES[hundreds], "hundred"]
        if rest:
            words.extend(_fragments(rest))
        return words

    power = scale_index(number)
    amount, rest = divmod(number, 1000**power)
    words = _fragments(amount)
    words.append(SCALE_NAMES[power])
    if rest:
        words.extend(_fragments(rest))
    return words


def scale_index(number: int) -> int:
    """Largest ``p`` such that ``number // 1000**p > 0``.

    Args:
        number: A positive integer.

    Returns:
        Index into ``SCALE_NAMES`` (0 for numbers below one thousand).
    """
    digits = _digit_count(number)
    power = (digits - 1) // 3
    logger.debug("Scale index %d for a %d-digit number", power, digits)
    return power


def _digit_count(number: int) -> int:
    # bit_length keeps this exact without str(), which is capped for huge ints
    number = abs(number)
    if number == 0:
        return 1
    # Float estimate is floor(log10(n)) or one below it; the 10**estimate
    # comparison below settles which, so the count is exact at any size
    estimate = max(1, int(number.bit_length() * 0.30102999566398120))
    if 10**estimate <= number:
        return estimate + 1
    return estimate
