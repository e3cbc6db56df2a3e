"""Hamming distance for equal-length strings.

Strings of different lengths have no Hamming distance; both functions return
None in that case instead of raising, and callers must branch on it.
"""

from typing import Optional

from fuzzysim._utils import as_sequence


def hamming(a: str, b: str) -> Optional[int]:
    """
    Compute Hamming distance between two equal-length strings.

    Returns:
        Number of positions with different codepoints, or None if the
        strings have different lengths.

    Complexity:
        Time: O(n) where n is the string length.
        Space: O(1) constant.

    Example:
        >>> hamming("karolin", "kathrin")
        3
        >>> hamming("abc", "abcd") is None
        True
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    if len(a) != len(b):
        return None
    return sum(1 for ca, cb in zip(a, b) if ca != cb)


def hamming_similarity(a: str, b: str) -> Optional[float]:
    """
    Compute normalized Hamming similarity (0.0 to 1.0).

    Returns:
        ``1 - distance / len(a)``, 1.0 for two empty strings, or None if the
        strings have different lengths.

    Example:
        >>> hamming_similarity("abc", "axc")
        0.666...  # 2 out of 3 match
    """
    distance = hamming(a, b)
    if distance is None:
        return None
    length = len(a)
    if length == 0:
        return 1.0
    return 1.0 - distance / length


__all__ = ["hamming", "hamming_similarity"]
