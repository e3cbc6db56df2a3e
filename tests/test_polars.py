"""Tests for Polars integration: the .strsim namespace and Series helpers."""

import polars as pl
import pytest

import fuzzysim as fs
from fuzzysim.polars_ext import dedupe_series, match_series


class TestSimilarityExpression:
    """Tests for .strsim.similarity."""

    def test_literal(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.select(
            score=pl.col("name").strsim.similarity("John", algorithm="levenshtein")
        )
        assert result["score"].to_list() == [1.0, 0.75, 0.25]
        assert result["score"].dtype == pl.Float64

    def test_column_to_column(self):
        df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        result = df.select(
            score=pl.col("a").strsim.similarity(pl.col("b"), algorithm="levenshtein")
        )
        assert result["score"].to_list() == [0.8, 0.8]

    def test_matches_dispatcher(self):
        pairs = [("MARTHA", "MARHTA"), ("kitten", "sitting"), ("東京", "京都")]
        df = pl.DataFrame({"a": [p[0] for p in pairs], "b": [p[1] for p in pairs]})
        for algorithm in fs.Algorithm:
            scores = df.select(s=pl.col("a").strsim.similarity(pl.col("b"), algorithm=algorithm))
            assert scores["s"].to_list() == [fs.similarity(a, b, algorithm) for a, b in pairs]

    def test_null_compares_as_empty(self):
        df = pl.DataFrame({"a": ["abc", None]}, schema={"a": pl.Utf8})
        result = df.select(s=pl.col("a").strsim.similarity("abc", algorithm="levenshtein"))
        assert result["s"].to_list() == [1.0, 0.0]

    def test_unknown_algorithm(self):
        with pytest.raises(fs.AlgorithmError):
            pl.col("a").strsim.similarity("x", algorithm="soundex")


class TestIsSimilarExpression:
    """Tests for .strsim.is_similar."""

    def test_filter(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.filter(
            pl.col("name").strsim.is_similar("John", min_similarity=0.7, algorithm="levenshtein")
        )
        assert result["name"].to_list() == ["John", "Jon"]

    def test_invalid_threshold(self):
        with pytest.raises(fs.ValidationError):
            pl.col("name").strsim.is_similar("John", min_similarity=2.0)


class TestDistanceExpression:
    """Tests for .strsim.distance."""

    def test_levenshtein(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.select(d=pl.col("name").strsim.distance("John"))
        assert result["d"].to_list() == [0, 1, 3]
        assert result["d"].dtype == pl.Int64

    def test_hamming_mismatch_is_null(self):
        df = pl.DataFrame({"code": ["abcd", "abc", "abce"]})
        result = df.select(d=pl.col("code").strsim.distance("abcd", algorithm="hamming"))
        assert result["d"].to_list() == [0, None, 1]

    def test_no_integer_distance(self):
        with pytest.raises(fs.AlgorithmError):
            pl.col("name").strsim.distance("John", algorithm="jaro_winkler")


class TestBestMatchExpression:
    """Tests for .strsim.best_match."""

    def test_best_match(self):
        df = pl.DataFrame({"raw": ["appel", "banan", None]}, schema={"raw": pl.Utf8})
        result = df.select(
            m=pl.col("raw").strsim.best_match(["apple", "banana", "cherry"], algorithm="levenshtein")
        )
        assert result["m"].to_list() == ["apple", "banana", None]

    def test_threshold_yields_null(self):
        df = pl.DataFrame({"raw": ["zzz"]})
        result = df.select(
            m=pl.col("raw").strsim.best_match(["apple"], min_similarity=0.9)
        )
        assert result["m"].to_list() == [None]


class TestMatchSeries:
    """Tests for match_series function."""

    def test_basic_match(self):
        queries = pl.Series(["hello"])
        targets = pl.Series(["hallo", "world", "hello"])
        result = match_series(queries, targets, algorithm="levenshtein", min_similarity=0.5)

        assert result.columns == ["query_idx", "query", "target_idx", "target", "score"]
        assert result["target_idx"].to_list() == [2, 0]
        assert result["score"].to_list() == [1.0, 0.8]

    def test_empty_series(self):
        queries = pl.Series([], dtype=pl.Utf8)
        targets = pl.Series(["apple", "banana"])
        result = match_series(queries, targets)

        assert len(result) == 0
        assert "score" in result.columns

    def test_no_matches(self):
        queries = pl.Series(["xyz"])
        targets = pl.Series(["apple", "banana"])
        result = match_series(queries, targets, min_similarity=0.9)

        assert len(result) == 0

    def test_nulls_skipped(self):
        queries = pl.Series(["abc", None], dtype=pl.Utf8)
        targets = pl.Series([None, "abc"], dtype=pl.Utf8)
        result = match_series(queries, targets, algorithm="levenshtein")

        assert result["query_idx"].to_list() == [0]
        assert result["target_idx"].to_list() == [1]


class TestDedupeSeries:
    """Tests for dedupe_series function."""

    def test_basic_dedup(self):
        series = pl.Series(["hello", "hallo", "world", "hello"])
        result = dedupe_series(series, algorithm="levenshtein", min_similarity=0.8)

        assert result.columns == ["value", "group_id", "is_canonical"]
        assert result["group_id"].to_list() == [0, 0, 1, 0]
        assert result["is_canonical"].to_list() == [True, False, True, False]

    def test_nulls_are_singletons(self):
        series = pl.Series([None, None, "a"], dtype=pl.Utf8)
        result = dedupe_series(series)

        assert result["group_id"].to_list() == [0, 1, 2]

    def test_exported_from_package(self):
        assert fs.dedupe_series is dedupe_series
        assert fs.match_series is match_series


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
