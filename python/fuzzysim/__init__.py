"""
fuzzysim - String similarity metrics

A pure-Python library of edit-distance and similarity metrics for fuzzy
matching, deduplication, spell-correction and record linkage. Every metric
compares two strings codepoint by codepoint and is a pure function, safe to
call from many threads at once.

Example usage:
    >>> import fuzzysim as fs

    # Edit distances
    >>> fs.levenshtein("kitten", "sitting")
    3
    >>> fs.damerau_levenshtein("CA", "AC")
    1

    # Normalized similarities
    >>> fs.jaro_winkler_similarity("MARTHA", "MARHTA")
    0.961...
    >>> fs.token_similarity("hello world", "world hello")
    1.0

    # Hamming is only defined for equal lengths
    >>> fs.hamming("abc", "abcd") is None
    True

    # One entry point for every algorithm
    >>> fs.similarity("kitten", "sitting", algorithm=fs.Algorithm.COMBINED)
    0.746...
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Register the .strsim expression namespace
import fuzzysim.expr  # noqa: F401
from fuzzysim import batch
from fuzzysim.dispatch import combined_similarity, distance, similarity
from fuzzysim.edit import (
    damerau_levenshtein,
    damerau_levenshtein_similarity,
    levenshtein,
    levenshtein_similarity,
)
from fuzzysim.enums import Algorithm
from fuzzysim.exceptions import AlgorithmError, FuzzySimError, ValidationError
from fuzzysim.freq import (
    character_frequencies,
    most_freq_k_distance,
    most_freq_k_similarity,
    most_frequent_k,
    normalized_most_freq_k_similarity,
)
from fuzzysim.hamming import hamming, hamming_similarity
from fuzzysim.jaro import jaro_similarity, jaro_winkler_similarity
from fuzzysim.polars_ext import dedupe_series, match_series
from fuzzysim.tokens import token_similarity, token_sort_similarity, tokenize

try:
    __version__ = _get_version("fuzzysim")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzySimError",
    "ValidationError",
    "AlgorithmError",
    # Enums
    "Algorithm",
    # Edit distance
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    # Jaro family
    "jaro_similarity",
    "jaro_winkler_similarity",
    # Token family
    "tokenize",
    "token_similarity",
    "token_sort_similarity",
    # Hamming
    "hamming",
    "hamming_similarity",
    # MostFreqK
    "character_frequencies",
    "most_frequent_k",
    "most_freq_k_distance",
    "most_freq_k_similarity",
    "normalized_most_freq_k_similarity",
    # Dispatcher
    "combined_similarity",
    "similarity",
    "distance",
    # Batch processing
    "batch",
    # Polars integration
    "match_series",
    "dedupe_series",
]


# Convenience aliases
edit_distance = levenshtein
