from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from .matching import distance
from .models import Word, WordPair


def build_word_pairs(matches: Iterable[Word], max_distance: float) -> List[WordPair]:
    """
    Pair each occurrence of a matched lemma with the next one in the document.

    Only pairs whose distance is at most ``max_distance`` are kept. Pairs are
    ordered by the coordinate of their first word.
    """
    grouped: Dict[str, Dict[Tuple[int, int], Word]] = defaultdict(dict)
    for word in matches:
        grouped[word.lemma].setdefault(word.coordinate, word)

    pairs: List[WordPair] = []
    for occurrences in grouped.values():
        ordered = sorted(occurrences.values(), key=lambda word: word.coordinate)
        for earlier, later in zip(ordered, ordered[1:]):
            gap = distance(later, earlier)
            if gap <= max_distance or math.isclose(gap, max_distance):
                pairs.append(WordPair(first=earlier, second=later, distance=gap))

    pairs.sort(key=lambda pair: (pair.first.coordinate, pair.second.coordinate))
    return pairs
