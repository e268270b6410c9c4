from __future__ import annotations

import logging
from typing import List, Tuple

from .tokenization import split_lines, tokenize, tokenize_lines

LOGGER = logging.getLogger(__name__)


def line_numbers(text: str) -> List[int]:
    """Return the 1-based line number of every token in document order."""
    numbers: List[int] = []
    for line_no, tokens in enumerate(tokenize_lines(text), start=1):
        numbers.extend([line_no] * len(tokens))
    return numbers


def align_columns(line: str, tokens: List[str]) -> List[int]:
    """
    Locate the 1-based starting column of each token within a single line.

    The scan walks the line left to right. A token starts at the next
    non-whitespace character equal to its first character; the scan then
    skips the full length of the token before looking for the next one.
    When a token cannot be found the scan stops, so the result is shorter
    than ``tokens``.
    """
    columns: List[int] = []
    cursor = 0
    for token in tokens:
        while cursor < len(line) and (
            line[cursor].isspace() or line[cursor] != token[0]
        ):
            cursor += 1
        if cursor >= len(line):
            LOGGER.warning(
                "Could not align token %r; %d token(s) left without a column",
                token,
                len(tokens) - len(columns),
            )
            break
        columns.append(cursor + 1)
        cursor += len(token)
    return columns


def column_numbers(text: str) -> List[int]:
    """Return the 1-based column of every token in document order."""
    columns: List[int] = []
    for line in split_lines(text):
        columns.extend(align_columns(line, tokenize(line)))
    return columns


def compute_coordinates(text: str) -> List[Tuple[int, int]]:
    """Return (line, column) pairs for every token that could be aligned."""
    return list(zip(line_numbers(text), column_numbers(text)))
