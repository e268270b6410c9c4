from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from .errors import PositionTypeMismatchError
from .models import Word


def is_duplicate(a: Word, b: Word) -> bool:
    """Return True when two words share a lemma but sit at different coordinates."""
    return a.lemma == b.lemma and a.coordinate != b.coordinate


def find_duplicates(words: Iterable[Word]) -> List[Word]:
    """
    Return every word whose lemma recurs at another coordinate, sorted by lemma.

    A word is emitted once for each distinct-coordinate partner it matches,
    so a lemma occurring three times yields six records. Records that share a
    coordinate are the same word and are considered only once.
    """
    unique: Dict[Tuple[int, int], Word] = {}
    for word in words:
        unique.setdefault(word.coordinate, word)

    buckets: Dict[str, List[Word]] = defaultdict(list)
    for word in unique.values():
        buckets[word.lemma].append(word)

    matches: List[Word] = []
    for word in unique.values():
        partners = sum(
            1 for other in buckets[word.lemma] if is_duplicate(word, other)
        )
        matches.extend([word] * partners)
    return sorted(matches, key=lambda word: word.lemma)


def distance(a: Word, b: Word):
    """Return ``a.position - b.position``; the sign depends on argument order."""
    if isinstance(a.position, float) != isinstance(b.position, float):
        raise PositionTypeMismatchError(
            f"Cannot compare positions {a.position!r} and {b.position!r} from different modes"
        )
    return a.position - b.position
