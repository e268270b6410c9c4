from __future__ import annotations


class WordlintError(RuntimeError):
    """Base class for errors raised while analyzing a document."""


class LengthMismatchError(WordlintError):
    """Raised when the parallel sequences used to build words differ in length."""

    def __init__(self, lengths: dict[str, int]) -> None:
        self.lengths = dict(lengths)
        detail = ", ".join(f"{name}={size}" for name, size in self.lengths.items())
        super().__init__(f"Cannot build words from sequences of unequal length ({detail})")


class PositionTypeMismatchError(WordlintError):
    """Raised when distances are requested between positions of different modes."""
