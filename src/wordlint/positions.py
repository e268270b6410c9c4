"""
Position calculators.

Each calculator returns exactly one position value per token, in document
order. The value is only used to measure distances between repeated words.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .coordinates import line_numbers
from .models import PositionMode
from .tokenization import tokenize


def word_positions(text: str) -> List[int]:
    """Return the 1-based ordinal of every token across the whole document."""
    return list(range(1, len(tokenize(text)) + 1))


def line_positions(text: str) -> List[int]:
    """Return the 1-based line number of every token."""
    return line_numbers(text)


def percentage_positions(text: str) -> List[float]:
    """Return each token's ordinal as a percentage of the total token count."""
    ordinals = word_positions(text)
    if not ordinals:
        return []
    total = len(ordinals)
    return [(ordinal / total) * 100 for ordinal in ordinals]


_CALCULATORS: Dict[PositionMode, Callable[[str], List]] = {
    PositionMode.WORD: word_positions,
    PositionMode.LINE: line_positions,
    PositionMode.PERCENTAGE: percentage_positions,
}


def compute_positions(text: str, mode: PositionMode | str | None) -> List:
    """Compute position values for the requested mode (unknown modes count words)."""
    return _CALCULATORS[PositionMode.from_name(mode)](text)
