"""
Word records and the transforms applied to them before matching.

Lemmas come straight from whitespace tokenization and therefore keep their
punctuation, which lets a check catch repeated transitions such as
"Furthermore,". The normalizers below return new sequences and never touch a
word's position or coordinates.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import replace
from typing import Iterable, List, Sequence

from .coordinates import column_numbers, line_numbers
from .errors import LengthMismatchError
from .models import PositionMode, Word
from .positions import compute_positions
from .tokenization import tokenize

LOGGER = logging.getLogger(__name__)


def zip_words(
    lemmas: Sequence[str],
    positions: Sequence,
    lines: Sequence[int],
    columns: Sequence[int],
) -> List[Word]:
    """Combine parallel sequences index-for-index into Word records."""
    lengths = {
        "lemmas": len(lemmas),
        "positions": len(positions),
        "lines": len(lines),
        "columns": len(columns),
    }
    if len(set(lengths.values())) > 1:
        raise LengthMismatchError(lengths)
    return [
        Word(lemma=lemma, position=position, line=line, column=column)
        for lemma, position, line, column in zip(lemmas, positions, lines, columns)
    ]


def build_words(
    text: str, mode: PositionMode | str | None = PositionMode.WORD
) -> List[Word]:
    """Tokenize text into Word records using the requested position mode."""
    resolved = PositionMode.from_name(mode)
    words = zip_words(
        tokenize(text),
        compute_positions(text, resolved),
        line_numbers(text),
        column_numbers(text),
    )
    LOGGER.debug("Built %d words (mode=%s)", len(words), resolved.value)
    return words


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def strip_punctuation(words: Iterable[Word]) -> List[Word]:
    """Remove punctuation characters from every lemma."""
    return [
        replace(word, lemma="".join(c for c in word.lemma if not _is_punctuation(c)))
        for word in words
    ]


def lowercase(words: Iterable[Word]) -> List[Word]:
    """Lowercase every lemma."""
    return [replace(word, lemma=word.lemma.lower()) for word in words]


def apply_blacklist(words: Iterable[Word], entries: Iterable[str]) -> List[Word]:
    """Drop words whose lemma exactly matches a blacklist entry."""
    blocked = set(entries)
    return [word for word in words if word.lemma not in blocked]


def apply_whitelist(words: Iterable[Word], entries: Iterable[str]) -> List[Word]:
    """Keep only words whose lemma exactly matches a whitelist entry."""
    allowed = set(entries)
    return [word for word in words if word.lemma in allowed]


def filter_min_length(words: Iterable[Word], min_length: int) -> List[Word]:
    """Keep words whose lemma is strictly longer than ``min_length``."""
    return [word for word in words if len(word.lemma) > min_length]
