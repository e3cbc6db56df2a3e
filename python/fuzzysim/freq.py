"""MostFreqK metrics over the K most frequent characters of each string.

A string is summarized by its top-K frequency vector: the K characters with
the highest counts, ties broken by ascending codepoint. Distances and
similarities compare only these vectors, so they are cheap but coarse.
"""

import math
from collections import Counter
from typing import Dict, List, Tuple

from fuzzysim._utils import as_sequence, validate_k

FrequencyEntry = Tuple[str, int]


def character_frequencies(s: str) -> Dict[str, int]:
    """Count occurrences of each codepoint in s."""
    return dict(Counter(as_sequence(s, "s")))


def most_frequent_k(s: str, k: int = 2) -> List[FrequencyEntry]:
    """
    Return the k most frequent characters of s with their counts.

    Entries are ordered by descending count; equal counts are ordered by
    ascending character, which makes the selection deterministic.

    Example:
        >>> most_frequent_k("research", 2)
        [('e', 2), ('r', 2)]
    """
    k = validate_k(k)
    entries = sorted(character_frequencies(s).items(), key=lambda item: (-item[1], item[0]))
    return entries[:k]


def most_freq_k_distance(a: str, b: str, k: int = 2) -> int:
    """
    Compute the MostFreqK distance between two strings.

    Characters in both top-K vectors contribute the absolute difference of
    their counts; characters in only one vector contribute their full count.

    If exactly one string is empty the distance is the fixed penalty
    ``max(len(a), len(b)) * k``, regardless of the other string's
    frequencies.

    Args:
        a: First string
        b: Second string
        k: Number of most frequent characters to compare (default 2)

    Raises:
        ValidationError: If k is not a non-negative int.

    Example:
        >>> most_freq_k_distance("aabb", "aacc")
        4
        >>> most_freq_k_distance("abc", "")
        6
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    k = validate_k(k)
    if not a and not b:
        return 0
    if not a or not b:
        return max(len(a), len(b)) * k

    top_a = dict(most_frequent_k(a, k))
    top_b = dict(most_frequent_k(b, k))

    distance = 0
    for char, count in top_a.items():
        if char in top_b:
            distance += abs(count - top_b[char])
        else:
            distance += count
    for char, count in top_b.items():
        if char not in top_a:
            distance += count
    return distance


def most_freq_k_similarity(a: str, b: str, k: int = 2) -> float:
    """
    Compute MostFreqK similarity (0.0 to 1.0).

    Defined as ``1 - distance / (max(len(a), len(b)) * k)``; 1.0 when that
    denominator is zero.
    """
    distance = most_freq_k_distance(a, b, k)
    max_possible = max(len(a), len(b)) * k
    if max_possible == 0:
        return 1.0
    return 1.0 - distance / max_possible


def _normalized_vector(entries: List[FrequencyEntry]) -> Dict[str, float]:
    total = sum(count for _, count in entries)
    return {char: count / total for char, count in entries}


def normalized_most_freq_k_similarity(a: str, b: str, k: int = 2) -> float:
    """
    Compute cosine similarity of the normalized top-K frequency vectors.

    Each count is divided by the sum of counts inside its own top-K vector
    (not by the string length). The cosine runs over the union of both
    vectors' characters, treating missing characters as weight 0.

    Two empty strings score 1.0, a single empty string scores 0.0, and so
    does any pair where a vector has zero magnitude (k == 0).

    Example:
        >>> normalized_most_freq_k_similarity("research", "seeking")
        0.632...
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    k = validate_k(k)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    vec_a = _normalized_vector(most_frequent_k(a, k))
    vec_b = _normalized_vector(most_frequent_k(b, k))

    dot = 0.0
    magnitude_a = 0.0
    magnitude_b = 0.0
    # Sorted iteration keeps the float sums identical when a and b are swapped.
    for char in sorted(vec_a.keys() | vec_b.keys()):
        va = vec_a.get(char, 0.0)
        vb = vec_b.get(char, 0.0)
        dot += va * vb
        magnitude_a += va * va
        magnitude_b += vb * vb

    magnitude = math.sqrt(magnitude_a * magnitude_b)
    if magnitude == 0.0:
        return 0.0
    return min(1.0, dot / magnitude)


__all__ = [
    "character_frequencies",
    "most_frequent_k",
    "most_freq_k_distance",
    "most_freq_k_similarity",
    "normalized_most_freq_k_similarity",
]
