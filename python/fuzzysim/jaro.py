"""Jaro and Jaro-Winkler similarity."""

from typing import List, Tuple

from fuzzysim._utils import as_sequence, validate_unit_interval

# Winkler's prefix bonus only looks at the first few characters.
MAX_PREFIX_LENGTH = 4

# Larger scales could push the boosted score above 1.0.
MAX_PREFIX_SCALE = 1.0 / MAX_PREFIX_LENGTH


def _match_flags(a: str, b: str) -> Tuple[List[bool], List[bool], int]:
    len_a, len_b = len(a), len(b)
    # Negative windows (strings of length 1) collapse to same-position matching.
    window = max(0, max(len_a, len_b) // 2 - 1)

    a_matched = [False] * len_a
    b_matched = [False] * len_b
    matches = 0
    for i, ch in enumerate(a):
        start = max(0, i - window)
        end = min(i + window + 1, len_b)
        for j in range(start, end):
            if b_matched[j] or b[j] != ch:
                continue
            a_matched[i] = True
            b_matched[j] = True
            matches += 1
            break
    return a_matched, b_matched, matches


def jaro_similarity(a: str, b: str) -> float:
    """
    Compute Jaro similarity (0.0 to 1.0).

    Good for short strings and name matching. Characters match when they are
    equal and no further apart than ``max(len(a), len(b)) // 2 - 1``
    positions; half the number of out-of-order matches counts as
    transpositions.

    Two empty strings score 1.0, a single empty string scores 0.0.

    Complexity:
        Time: O(m*n) worst case, typically O(m+n) for similar strings.
        Space: O(m+n) for matching character tracking.

    Example:
        >>> jaro_similarity("MARTHA", "MARHTA")
        0.944...
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    len_a, len_b = len(a), len(b)
    if len_a == 0 and len_b == 0:
        return 1.0
    if len_a == 0 or len_b == 0:
        return 0.0

    a_matched, b_matched, matches = _match_flags(a, b)
    if matches == 0:
        return 0.0

    out_of_order = 0
    k = 0
    for i in range(len_a):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if a[i] != b[k]:
            out_of_order += 1
        k += 1
    transpositions = out_of_order // 2

    m = float(matches)
    return (m / len_a + m / len_b + (m - transpositions) / m) / 3.0


def common_prefix_length(a: str, b: str, limit: int = MAX_PREFIX_LENGTH) -> int:
    """Length of the shared case-insensitive prefix of a and b, capped at limit."""
    a = as_sequence(a, "a").lower()
    b = as_sequence(b, "b").lower()
    length = 0
    for ca, cb in zip(a[:limit], b[:limit]):
        if ca != cb:
            break
        length += 1
    return length


def jaro_winkler_similarity(a: str, b: str, prefix_scale: float = 0.1) -> float:
    """
    Compute Jaro-Winkler similarity (0.0 to 1.0).

    Extends Jaro similarity by giving extra weight to common prefixes.
    Excellent for name matching. The prefix is compared case-insensitively
    and capped at 4 characters; the Jaro part is case-sensitive.

    Args:
        a: First string
        b: Second string
        prefix_scale: Weight given to each common prefix character
            (default 0.1, must be in [0.0, 0.25])

    Raises:
        ValidationError: If prefix_scale is outside [0.0, 0.25].

    Example:
        >>> jaro_winkler_similarity("MARTHA", "MARHTA")
        0.961...
    """
    scale = validate_unit_interval(prefix_scale, "prefix_scale", upper=MAX_PREFIX_SCALE)
    jaro = jaro_similarity(a, b)
    prefix = common_prefix_length(a, b)
    return jaro + prefix * scale * (1.0 - jaro)


__all__ = ["jaro_similarity", "jaro_winkler_similarity", "common_prefix_length"]
