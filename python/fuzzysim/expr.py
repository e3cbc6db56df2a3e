"""Polars expression namespace for string similarity.

This module registers a `.strsim` namespace on Polars expressions, enabling
chainable similarity scoring directly in Polars expression contexts. Every
row is scored with the pure-Python metrics through ``map_elements``.

Null cells compare as the empty string, except in `best_match` where a null
query yields a null match.

Warning:
    ``map_elements`` runs Python per row. For large frames prefer building
    the scores once with `fuzzysim.batch` and attaching them as a column.

Example:
    >>> import polars as pl
    >>> import fuzzysim  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").strsim.is_similar("John", min_similarity=0.8)
    ... )
"""

import logging
from typing import Union

import polars as pl

from fuzzysim._utils import normalize_algorithm, validate_unit_interval
from fuzzysim.batch import best_matches
from fuzzysim.dispatch import distance as _distance
from fuzzysim.dispatch import similarity as _similarity
from fuzzysim.enums import Algorithm

logger = logging.getLogger(__name__)


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("strsim")
class StrSimExprNamespace:
    """
    String similarity namespace for Polars expressions.

    Provides chainable methods for similarity scoring directly on columns.
    Access via `.strsim` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Similarity algorithm to use (string or Algorithm enum)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").strsim.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").strsim.similarity(pl.col("name2"))
            ... )
        """
        algo = normalize_algorithm(algorithm)
        logger.debug("Registering %s similarity expression", algo.value)
        return self._pairwise(other, lambda a, b: _similarity(a, b, algo), pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        algorithm: Union[str, Algorithm] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").strsim.is_similar("John", min_similarity=0.85))
        """
        min_similarity = validate_unit_interval(min_similarity, "min_similarity")
        return self.similarity(other, algorithm=algorithm) >= min_similarity

    def distance(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = "levenshtein",
    ) -> pl.Expr:
        """
        Calculate an integer distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: One of "levenshtein", "damerau_levenshtein", "hamming"
                or "most_freq_k"

        Returns:
            Expression producing integer distances. Hamming yields null where
            the lengths differ.

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").strsim.distance("John")
            ... )
        """
        algo = normalize_algorithm(algorithm)
        # Fail at expression build time rather than inside the row loop
        _distance("", "", algo)
        return self._pairwise(other, lambda a, b: _distance(a, b, algo), pl.Int64)

    def best_match(
        self,
        choices: list[str],
        algorithm: Union[str, Algorithm] = "jaro_winkler",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            algorithm: Similarity algorithm to use (string or Algorithm enum)
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").strsim.best_match(categories)
            ... )
        """
        algo = normalize_algorithm(algorithm)
        min_similarity = validate_unit_interval(min_similarity, "min_similarity")

        def find_best(value):
            if value is None:
                return None
            results = best_matches(
                choices, str(value), algorithm=algo, limit=1, min_similarity=min_similarity
            )
            return results[0].text if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)
