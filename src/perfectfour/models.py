"""Data models for one run of the spell-and-count chain."""

from __future__ import annotations

from dataclasses import dataclass, field

from perfectfour.constants import FIXED_POINT_WORD


@dataclass(slots=True, frozen=True)
class ChainStep:
    """One spelled number in the chain.

    ``index`` is 1-based and matches the printed line number.
    """

    index: int
    value: int
    word: str

    @property
    def length(self) -> int:
        """Character count of the lowercase spelling (Unicode code points)."""
        return len(self.word)

    @property
    def is_fixed_point(self) -> bool:
        return self.word == FIXED_POINT_WORD


@dataclass(slots=True)
class ChainResult:
    """Every step from the starting number down to "four"."""

    start: int
    steps: list[ChainStep] = field(default_factory=list)

    @property
    def iterations(self) -> int:
        """Number of transforms applied; the terminal "four" line is not counted."""
        return max(len(self.steps) - 1, 0)
