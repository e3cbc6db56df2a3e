"""Internal utilities for fuzzysim."""

import math
from typing import Union

from fuzzysim.enums import Algorithm
from fuzzysim.exceptions import AlgorithmError, ValidationError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

# Accepted spellings that map onto an enum value
_ALIASES = {
    "damerau": "damerau_levenshtein",
    "damerau-levenshtein": "damerau_levenshtein",
    "osa": "damerau_levenshtein",
    "jaro-winkler": "jaro_winkler",
    "token": "token_based",
    "tokens": "token_based",
    "mostfreqk": "most_freq_k",
    "normalizedmostfreqk": "normalized_most_freq_k",
}


def as_sequence(value: str, name: str = "value") -> str:
    """Validate an input string and return it as a codepoint sequence.

    Python strings index by Unicode codepoint, so the string itself is the
    sequence every metric works on. No case folding, no Unicode
    normalization and no grapheme segmentation is applied.

    Raises:
        TypeError: If value is not a str.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """Convert a string algorithm name to its Algorithm member.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        The matching Algorithm member.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        <Algorithm.JARO_WINKLER: 'jaro_winkler'>
        >>> normalize_algorithm("Levenshtein")
        <Algorithm.LEVENSHTEIN: 'levenshtein'>
    """
    if isinstance(algorithm, Algorithm):
        return algorithm

    if isinstance(algorithm, str):
        algo_lower = algorithm.strip().lower()
        algo_lower = _ALIASES.get(algo_lower, algo_lower)
        if algo_lower in VALID_ALGORITHMS:
            return Algorithm(algo_lower)
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def validate_k(k: int) -> int:
    """Check that k is a non-negative integer."""
    if isinstance(k, bool) or not isinstance(k, int):
        raise ValidationError(f"k must be a non-negative int, got {type(k).__name__}")
    if k < 0:
        raise ValidationError(f"k must be >= 0, got {k}")
    return k


def validate_unit_interval(value: float, name: str, upper: float = 1.0) -> float:
    """Check that value is a finite number in [0.0, upper]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value) or not 0.0 <= value <= upper:
        raise ValidationError(f"{name} must be in range [0.0, {upper}], got {value}")
    return float(value)


def validate_limit(limit: int) -> int:
    """Check that limit is a positive integer."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValidationError(f"limit must be a positive int, got {limit!r}")
    return limit


__all__ = [
    "VALID_ALGORITHMS",
    "as_sequence",
    "normalize_algorithm",
    "validate_k",
    "validate_limit",
    "validate_unit_interval",
]
