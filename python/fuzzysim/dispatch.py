"""Single entry point that routes to a metric by Algorithm selector."""

from typing import Optional, Union

from fuzzysim._utils import as_sequence, normalize_algorithm
from fuzzysim.edit import (
    damerau_levenshtein,
    damerau_levenshtein_similarity,
    levenshtein,
    levenshtein_similarity,
)
from fuzzysim.enums import Algorithm
from fuzzysim.exceptions import AlgorithmError
from fuzzysim.freq import (
    most_freq_k_distance,
    most_freq_k_similarity,
    normalized_most_freq_k_similarity,
)
from fuzzysim.hamming import hamming, hamming_similarity
from fuzzysim.jaro import jaro_winkler_similarity
from fuzzysim.tokens import token_similarity, token_sort_similarity


def combined_similarity(a: str, b: str) -> float:
    """
    Best score across Levenshtein, Damerau-Levenshtein, Jaro-Winkler and
    token-sort similarity.

    The set of metrics is fixed. Hamming, token Jaccard and MostFreqK are
    not part of it.
    """
    return max(
        levenshtein_similarity(a, b),
        damerau_levenshtein_similarity(a, b),
        jaro_winkler_similarity(a, b),
        token_sort_similarity(a, b),
    )


def similarity(
    a: str,
    b: str,
    algorithm: Union[str, Algorithm] = Algorithm.COMBINED,
) -> float:
    """
    Compute similarity (0.0 to 1.0) using the selected algorithm.

    Args:
        a: First string
        b: Second string
        algorithm: Algorithm enum member or its string value:
            - "levenshtein": Normalized Levenshtein similarity
            - "damerau_levenshtein": Normalized Damerau-Levenshtein (OSA) similarity
            - "jaro_winkler": Jaro-Winkler similarity
            - "token_based": max(token Jaccard, token-sort similarity)
            - "combined": combined_similarity() (default)
            - "hamming": Hamming similarity, 0.0 if the lengths differ
            - "most_freq_k": MostFreqK similarity with k=2
            - "normalized_most_freq_k": Normalized MostFreqK similarity with k=2

    Raises:
        AlgorithmError: If the algorithm name is not recognized.

    Example:
        >>> similarity("hello world", "world hello", algorithm="token_based")
        1.0
    """
    algo = normalize_algorithm(algorithm)
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")

    if algo is Algorithm.LEVENSHTEIN:
        return levenshtein_similarity(a, b)
    elif algo is Algorithm.DAMERAU_LEVENSHTEIN:
        return damerau_levenshtein_similarity(a, b)
    elif algo is Algorithm.JARO_WINKLER:
        return jaro_winkler_similarity(a, b)
    elif algo is Algorithm.TOKEN_BASED:
        return max(token_similarity(a, b), token_sort_similarity(a, b))
    elif algo is Algorithm.COMBINED:
        return combined_similarity(a, b)
    elif algo is Algorithm.HAMMING:
        score = hamming_similarity(a, b)
        # Length mismatch is folded into the lowest score.
        return score if score is not None else 0.0
    elif algo is Algorithm.MOST_FREQ_K:
        return most_freq_k_similarity(a, b)
    elif algo is Algorithm.NORMALIZED_MOST_FREQ_K:
        return normalized_most_freq_k_similarity(a, b)
    raise AlgorithmError(f"Unhandled algorithm: {algo!r}")


def distance(
    a: str,
    b: str,
    algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
) -> Optional[int]:
    """
    Compute an integer distance using the selected algorithm.

    Only "levenshtein", "damerau_levenshtein", "hamming" and "most_freq_k"
    define a distance. Hamming returns None when the lengths differ.

    Raises:
        AlgorithmError: If the algorithm has no integer distance.
    """
    algo = normalize_algorithm(algorithm)

    if algo is Algorithm.LEVENSHTEIN:
        return levenshtein(a, b)
    elif algo is Algorithm.DAMERAU_LEVENSHTEIN:
        return damerau_levenshtein(a, b)
    elif algo is Algorithm.HAMMING:
        return hamming(a, b)
    elif algo is Algorithm.MOST_FREQ_K:
        return most_freq_k_distance(a, b)
    raise AlgorithmError(
        f"Algorithm '{algo.value}' has no integer distance. "
        "Valid: ['damerau_levenshtein', 'hamming', 'levenshtein', 'most_freq_k']"
    )


__all__ = ["combined_similarity", "similarity", "distance"]
