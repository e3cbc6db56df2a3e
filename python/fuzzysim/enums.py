"""Enums for fuzzysim API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    This enum provides type-safe algorithm selection for `similarity()` and
    the batch helpers. String values are accepted wherever an Algorithm is.

    Example:
        >>> from fuzzysim import Algorithm, similarity
        >>> similarity("kitten", "sitting", algorithm=Algorithm.LEVENSHTEIN)
        0.5714285714285714
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including adjacent transpositions (OSA variant)"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with prefix weighting, good for short strings and names"""

    TOKEN_BASED = "token_based"
    """Best of token Jaccard and token-sort similarity, ignores word order"""

    COMBINED = "combined"
    """Best score across Levenshtein, Damerau-Levenshtein, Jaro-Winkler and token-sort"""

    HAMMING = "hamming"
    """Hamming similarity (0.0 when lengths differ)"""

    MOST_FREQ_K = "most_freq_k"
    """Similarity over the K most frequent characters (k=2)"""

    NORMALIZED_MOST_FREQ_K = "normalized_most_freq_k"
    """Cosine similarity over normalized top-K character frequencies (k=2)"""


__all__ = ["Algorithm"]
