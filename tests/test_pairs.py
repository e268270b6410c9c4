import math

from wordlint.matching import find_duplicates
from wordlint.pairs import build_word_pairs
from wordlint.words import build_words


def test_consecutive_occurrences_are_paired():
    matches = find_duplicates(build_words("alpha beta alpha gamma alpha"))
    pairs = build_word_pairs(matches, max_distance=10)
    assert [(p.first.position, p.second.position, p.distance) for p in pairs] == [
        (1, 3, 2),
        (3, 5, 2),
    ]
    assert all(p.lemma == "alpha" for p in pairs)


def test_pairs_beyond_max_distance_are_dropped():
    matches = find_duplicates(build_words("alpha beta alpha"))
    assert build_word_pairs(matches, max_distance=1) == []


def test_line_mode_pairs():
    text = "alpha beta\nalpha\n\n\nalpha"
    matches = find_duplicates(build_words(text, "line"))
    pairs = build_word_pairs(matches, max_distance=2)
    assert len(pairs) == 1
    assert pairs[0].first.coordinate == (1, 1)
    assert pairs[0].second.coordinate == (2, 1)
    assert pairs[0].distance == 1


def test_pairs_ordered_by_first_coordinate():
    matches = find_duplicates(build_words("zeta alpha zeta alpha"))
    pairs = build_word_pairs(matches, max_distance=5)
    assert [p.lemma for p in pairs] == ["zeta", "alpha"]


def test_percentage_pairs_at_exact_limit_are_kept():
    tokens = [f"word{i}" for i in range(1, 21)]
    tokens[8] = tokens[10] = "echo"
    matches = find_duplicates(build_words(" ".join(tokens), "percentage"))
    pairs = build_word_pairs(matches, max_distance=10.0)
    assert len(pairs) == 1
    assert math.isclose(pairs[0].distance, 10.0)
