"""Batch operations API for fuzzysim.

This module provides list-based helpers on top of `fuzzysim.similarity()`:
scoring a query against many strings, picking the best matches, aligned
pairwise scores, full similarity matrices and duplicate grouping. Each
comparison is an independent pure call, so the helpers hold no state
between invocations.

Example usage:
    >>> import fuzzysim.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [r.text for r in results]
    ['hello', 'hallo', 'world']

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"], algorithm="levenshtein")
    [0.8, 0.8]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from fuzzysim._utils import (
    as_sequence,
    normalize_algorithm,
    validate_limit,
    validate_unit_interval,
)
from fuzzysim.dispatch import similarity as _similarity
from fuzzysim.exceptions import ValidationError

if TYPE_CHECKING:
    from fuzzysim.enums import Algorithm

logger = logging.getLogger(__name__)

__all__ = [
    "MatchResult",
    "DeduplicationResult",
    "similarity",
    "best_matches",
    "deduplicate",
    "pairwise",
    "similarity_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """
    Result from batch similarity and best-match searches.

    Attributes:
        text: The compared string
        score: Similarity score (0.0-1.0)
        id: Index of the string in the input list

    Supports equality comparison and hashing for use in sets and as dict keys.
    """

    text: str
    score: float
    id: Optional[int] = None


@dataclass
class DeduplicationResult:
    """Result from deduplication operation."""

    groups: list[list[str]] = field(default_factory=list)
    unique: list[str] = field(default_factory=list)
    total_duplicates: int = 0


class UnionFind:
    """Union-Find data structure for efficient clustering."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, x: int) -> int:
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = self.parent[x]
        return x

    def union(self, x: int, y: int) -> None:
        px, py = self.find(x), self.find(y)
        if px == py:
            return
        if self.rank[px] < self.rank[py]:
            px, py = py, px
        self.parent[py] = px
        if self.rank[px] == self.rank[py]:
            self.rank[px] += 1


def _check_strings(strings: list[str], name: str) -> list[str]:
    return [as_sequence(s, f"{name}[{i}]") for i, s in enumerate(strings)]


def similarity(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum).
            See `fuzzysim.similarity()` for the options.

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result's `id` is the original index in the input list.
    """
    algo = normalize_algorithm(algorithm)
    query = as_sequence(query, "query")
    strings = _check_strings(strings, "strings")
    logger.debug("Scoring %d strings with %s", len(strings), algo.value)
    return [
        MatchResult(text=s, score=_similarity(s, query, algo), id=i)
        for i, s in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending, and returns the top
    matches up to the specified limit. Equal scores keep input order.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If limit is not positive or min_similarity is
            outside [0.0, 1.0].

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> [m.text for m in matches]
        ['apple', 'apply']
    """
    limit = validate_limit(limit)
    min_similarity = validate_unit_interval(min_similarity, "min_similarity")
    scored = [r for r in similarity(strings, query, algorithm) if r.score >= min_similarity]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[:limit]


def deduplicate(
    strings: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
    min_similarity: float = 0.8,
) -> DeduplicationResult:
    """Find duplicate groups in a list of strings.

    Strings with similarity >= min_similarity are grouped together using
    Union-Find clustering, so similarity is applied transitively. Every pair
    is compared, which is O(N^2) in the number of strings.

    Args:
        strings: List of strings to deduplicate.
        algorithm: Similarity algorithm to use (string or Algorithm enum).
        min_similarity: Minimum similarity score to consider strings as
            duplicates (default: 0.8).

    Returns:
        DeduplicationResult with:
            - groups: List of duplicate groups, in order of first appearance
            - unique: List of strings that have no duplicates
            - total_duplicates: Total count of strings inside groups

    Example:
        >>> result = deduplicate(["hello", "hallo", "world"], algorithm="levenshtein")
        >>> result.groups
        [['hello', 'hallo']]
        >>> result.unique
        ['world']
    """
    algo = normalize_algorithm(algorithm)
    min_similarity = validate_unit_interval(min_similarity, "min_similarity")
    strings = _check_strings(strings, "strings")
    n = len(strings)
    logger.debug("Deduplicating %d strings with %s", n, algo.value)

    uf = UnionFind(n)
    for i in range(n):
        for j in range(i + 1, n):
            if _similarity(strings[i], strings[j], algo) >= min_similarity:
                uf.union(i, j)

    members: dict[int, list[int]] = {}
    for i in range(n):
        members.setdefault(uf.find(i), []).append(i)

    groups: list[list[str]] = []
    unique: list[str] = []
    for indices in sorted(members.values(), key=lambda idx: idx[0]):
        if len(indices) > 1:
            groups.append([strings[i] for i in indices])
        else:
            unique.append(strings[indices[0]])

    return DeduplicationResult(
        groups=groups,
        unique=unique,
        total_duplicates=sum(len(g) for g in groups),
    )


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Similarity algorithm to use (string or Algorithm enum).

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    algo = normalize_algorithm(algorithm)
    left = _check_strings(left, "left")
    right = _check_strings(right, "right")
    return [_similarity(a, b, algo) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: str | Algorithm = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Similar to scipy.spatial.distance.cdist, but returning similarities.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    algo = normalize_algorithm(algorithm)
    queries = _check_strings(queries, "queries")
    choices = _check_strings(choices, "choices")
    logger.debug(
        "Building %dx%d similarity matrix with %s", len(queries), len(choices), algo.value
    )
    return [[_similarity(q, c, algo) for c in choices] for q in queries]
