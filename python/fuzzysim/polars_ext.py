"""Series-level matching and deduplication on Polars.

Functions in This Module
------------------------
- ``match_series()``: Match query Series against target Series
- ``dedupe_series()``: Deduplicate a Series, grouping similar values

Example Usage
-------------
>>> import polars as pl
>>> import fuzzysim as fs
>>>
>>> queries = pl.Series(["apple", "banana"])
>>> targets = pl.Series(["appel", "banan", "cherry"])
>>> fs.match_series(queries, targets, min_similarity=0.7)
"""

import logging
from typing import Union

import polars as pl

from fuzzysim._utils import normalize_algorithm, validate_unit_interval
from fuzzysim.batch import UnionFind
from fuzzysim.dispatch import similarity as _similarity
from fuzzysim.enums import Algorithm

logger = logging.getLogger(__name__)


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, finds all target values above the similarity threshold.
    Null queries and null targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        algorithm: Similarity algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score,
        sorted by query_idx then score descending.
    """
    algo = normalize_algorithm(algorithm)
    min_similarity = validate_unit_interval(min_similarity, "min_similarity")
    queries = query_series.to_list()
    targets = target_series.to_list()
    logger.debug("Matching %d queries against %d targets", len(queries), len(targets))

    rows = []
    for query_idx, query in enumerate(queries):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            score = _similarity(str(query), str(target), algo)
            if score >= min_similarity:
                rows.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": score,
                    }
                )

    schema = {
        "query_idx": pl.Int64,
        "query": pl.Utf8,
        "target_idx": pl.Int64,
        "target": pl.Utf8,
        "score": pl.Float64,
    }
    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema).sort(
        ["query_idx", "score"], descending=[False, True], maintain_order=True
    )


def dedupe_series(
    series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.8,
) -> "pl.DataFrame":
    """
    Deduplicate a Series by grouping similar values.

    The first value of every group is its canonical member. Null values
    each form their own group.

    Args:
        series: Series of strings to deduplicate
        algorithm: Similarity algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity to consider values duplicates

    Returns:
        DataFrame with columns: value, group_id, is_canonical

    Example:
        >>> series = pl.Series(["hello", "hallo", "world"])
        >>> dedupe_series(series, algorithm="levenshtein")
    """
    algo = normalize_algorithm(algorithm)
    min_similarity = validate_unit_interval(min_similarity, "min_similarity")
    values = series.to_list()
    n = len(values)
    logger.debug("Deduplicating series of %d values", n)

    uf = UnionFind(n)
    for i in range(n):
        if values[i] is None:
            continue
        for j in range(i + 1, n):
            if values[j] is None:
                continue
            if _similarity(str(values[i]), str(values[j]), algo) >= min_similarity:
                uf.union(i, j)

    group_ids: dict[int, int] = {}
    group_col = []
    canonical_col = []
    for i in range(n):
        root = uf.find(i)
        is_new = root not in group_ids
        if is_new:
            group_ids[root] = len(group_ids)
        group_col.append(group_ids[root])
        canonical_col.append(is_new)

    return pl.DataFrame(
        {
            "value": pl.Series(values, dtype=pl.Utf8),
            "group_id": pl.Series(group_col, dtype=pl.Int64),
            "is_canonical": pl.Series(canonical_col, dtype=pl.Boolean),
        }
    )


__all__ = ["match_series", "dedupe_series"]
