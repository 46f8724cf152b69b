"""Spell numbers in English and follow the letter counts down to four."""

__version__ = "0.1.0"

from perfectfour.chain import IterationLimitError, ParseFailureError, parse_number, run_chain
from perfectfour.models import ChainResult, ChainStep
from perfectfour.wordify import MagnitudeOutOfRangeError, wordify

__all__ = [
    "ChainResult",
    "ChainStep",
    "IterationLimitError",
    "MagnitudeOutOfRangeError",
    "ParseFailureError",
    "parse_number",
    "run_chain",
    "wordify",
    "__version__",
]
