"""Edit-distance metrics: Levenshtein and Damerau-Levenshtein (OSA).

Both metrics fill a full (len(a)+1) x (len(b)+1) dynamic-programming matrix
over codepoints. Similarities normalize the distance by the longer input.
"""

from typing import List

from fuzzysim._utils import as_sequence


def _initial_matrix(m: int, n: int) -> List[List[int]]:
    # Row 0 and column 0 hold the cost of building from / down to empty.
    matrix = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        matrix[i][0] = i
    for j in range(n + 1):
        matrix[0][j] = j
    return matrix


def _normalized(distance: int, a: str, b: str) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - distance / max_len


def levenshtein(a: str, b: str) -> int:
    """
    Compute Levenshtein (edit) distance between two strings.

    Insertions, deletions and substitutions each cost 1. Strings are
    compared codepoint by codepoint, so a combining accent counts as its
    own character.

    Args:
        a: First string
        b: Second string

    Returns:
        The minimum number of single-character edits needed to transform a into b.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(m*n) for the full DP matrix.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("", "abc")
        3
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    matrix = _initial_matrix(m, n)
    for i in range(1, m + 1):
        row, prev = matrix[i], matrix[i - 1]
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            row[j] = min(
                prev[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
    return matrix[m][n]


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Compute normalized Levenshtein similarity (0.0 to 1.0).

    Defined as ``1 - distance / max(len(a), len(b))``. Two empty strings
    have similarity 1.0.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    return _normalized(levenshtein(a, b), a, b)


def damerau_levenshtein(a: str, b: str) -> int:
    """
    Compute Damerau-Levenshtein distance (includes transpositions).

    This is the optimal string alignment (OSA) variant: an adjacent swap
    costs one edit, but a transposed pair cannot be edited again afterwards.
    It can therefore exceed the unrestricted Damerau-Levenshtein distance.

    Args:
        a: First string
        b: Second string

    Returns:
        The restricted edit distance.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(m*n) for the full DP matrix (transposition lookup needs row i-2).

    Example:
        >>> damerau_levenshtein("CA", "AC")  # One transposition
        1
        >>> damerau_levenshtein("CA", "ABC")  # Unrestricted variant gives 2
        3
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    matrix = _initial_matrix(m, n)
    for i in range(1, m + 1):
        row, prev = matrix[i], matrix[i - 1]
        ca = a[i - 1]
        for j in range(1, n + 1):
            cb = b[j - 1]
            cost = 0 if ca == cb else 1
            best = min(prev[j] + 1, row[j - 1] + 1, prev[j - 1] + cost)
            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb:
                best = min(best, matrix[i - 2][j - 2] + cost)
            row[j] = best
    return matrix[m][n]


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    """Compute normalized Damerau-Levenshtein (OSA) similarity (0.0 to 1.0)."""
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    return _normalized(damerau_levenshtein(a, b), a, b)


__all__ = [
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
]
