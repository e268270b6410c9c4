from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Tuple, TypeVar

P = TypeVar("P", int, float)


class PositionMode(str, Enum):
    """How a word's position is measured when computing distances."""

    WORD = "word"
    LINE = "line"
    PERCENTAGE = "percentage"

    @classmethod
    def from_name(cls, name: str | PositionMode | None) -> PositionMode:
        """Resolve a mode name, falling back to word counting for unknown values."""
        if isinstance(name, PositionMode):
            return name
        if not name:
            return cls.WORD
        normalized = name.lower().strip()
        for mode in cls:
            if mode.value == normalized:
                return mode
        return cls.WORD


@dataclass(frozen=True, slots=True)
class Word(Generic[P]):
    """A token from a document with its position value and 1-based coordinates."""

    lemma: str
    position: P
    line: int
    column: int

    @property
    def coordinate(self) -> Tuple[int, int]:
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class WordPair(Generic[P]):
    """Two occurrences of the same lemma and the distance between them."""

    first: Word[P]
    second: Word[P]
    distance: P

    @property
    def lemma(self) -> str:
        return self.first.lemma


@dataclass(slots=True)
class AnalysisResult:
    """Matched words and reported pairs for a single document."""

    doc_id: str
    mode: PositionMode
    word_count: int
    matches: List[Word]
    pairs: List[WordPair]


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str
