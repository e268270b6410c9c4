from __future__ import annotations

from typing import List


def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace, keeping punctuation attached to words."""
    return text.split()


def split_lines(text: str) -> List[str]:
    """Split text into lines on newline characters only."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def tokenize_lines(text: str) -> List[List[str]]:
    """Tokenize each line of the text separately."""
    return [tokenize(line) for line in split_lines(text)]
