"""Edit-distance based approximate token matching.

Supplements the fixed typo table in :mod:`barista.nlu.normalizer` for callers
that need typo recovery on open vocabularies (tag names, people, tools). It is
not used by intent scoring.
"""

from __future__ import annotations

from collections.abc import Iterable

MIN_FUZZY_LENGTH = 3


def levenshtein_distance(first: str, second: str) -> int:
    """Return the unit-cost insertion/deletion/substitution distance."""

    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        table[i][0] = i
    for j in range(cols + 1):
        table[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if first[i - 1] == second[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j],
                    table[i][j - 1],
                    table[i - 1][j - 1],
                )

    return table[rows][cols]


def fuzzy_threshold(first: str, second: str) -> int:
    """Maximum distance tolerated between two tokens of these lengths."""

    longest = max(len(first), len(second))
    if longest <= 5:
        return 1
    if longest <= 8:
        return 2
    return 3


def is_fuzzy_match(token: str, target: str) -> bool:
    """Check whether two tokens are within the length-scaled edit threshold.

    Tokens shorter than three characters never match.
    """

    if len(token) < MIN_FUZZY_LENGTH or len(target) < MIN_FUZZY_LENGTH:
        return False

    return levenshtein_distance(token, target) <= fuzzy_threshold(token, target)


def closest_match(token: str, vocabulary: Iterable[str]) -> str | None:
    """Pick the vocabulary word nearest to ``token`` that fuzzy-matches it.

    Ties keep the earliest candidate.

    Args:
        token: Possibly misspelled token.
        vocabulary: Known words to recover.

    Returns:
        The closest matching word, or None if nothing is within threshold.
    """

    lowered = token.lower()
    best: str | None = None
    best_distance = 0
    for candidate in vocabulary:
        target = candidate.lower()
        if not is_fuzzy_match(lowered, target):
            continue
        distance = levenshtein_distance(lowered, target)
        if best is None or distance < best_distance:
            best, best_distance = candidate, distance
    return best
