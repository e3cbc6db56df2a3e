"""
Edge case tests for fuzzysim.

Tests cover:
- Null/None handling
- Empty strings
- Long strings
- Unicode edge cases (combining chars, ZWJ sequences, astral planes)
- Adversarial inputs (repeated patterns)
"""

import pytest

import fuzzysim as fs

TWO_ARG_FUNCTIONS = [
    fs.levenshtein,
    fs.levenshtein_similarity,
    fs.damerau_levenshtein,
    fs.damerau_levenshtein_similarity,
    fs.jaro_similarity,
    fs.jaro_winkler_similarity,
    fs.token_similarity,
    fs.token_sort_similarity,
    fs.hamming,
    fs.hamming_similarity,
    fs.most_freq_k_distance,
    fs.most_freq_k_similarity,
    fs.normalized_most_freq_k_similarity,
    fs.combined_similarity,
    fs.similarity,
]


class TestNullNoneHandling:
    """Tests for null/None input handling."""

    @pytest.mark.parametrize("func", TWO_ARG_FUNCTIONS, ids=lambda f: f.__name__)
    def test_none_raises(self, func):
        """None input should raise TypeError."""
        with pytest.raises(TypeError):
            func(None, "hello")
        with pytest.raises(TypeError):
            func("hello", None)
        with pytest.raises(TypeError):
            func(None, None)

    @pytest.mark.parametrize("func", TWO_ARG_FUNCTIONS, ids=lambda f: f.__name__)
    def test_bytes_rejected(self, func):
        with pytest.raises(TypeError):
            func(b"hello", "hello")

    def test_error_names_argument(self):
        with pytest.raises(TypeError, match="b must be str, got int"):
            fs.levenshtein("abc", 3)


class TestEmptyStrings:
    """Both-empty and one-empty policies across all metrics."""

    @pytest.mark.parametrize(
        "func",
        [
            fs.levenshtein_similarity,
            fs.damerau_levenshtein_similarity,
            fs.jaro_similarity,
            fs.jaro_winkler_similarity,
            fs.token_similarity,
            fs.token_sort_similarity,
            fs.hamming_similarity,
            fs.most_freq_k_similarity,
            fs.normalized_most_freq_k_similarity,
            fs.combined_similarity,
        ],
        ids=lambda f: f.__name__,
    )
    def test_both_empty_is_one(self, func):
        assert func("", "") == 1.0

    @pytest.mark.parametrize(
        "func",
        [
            fs.levenshtein_similarity,
            fs.damerau_levenshtein_similarity,
            fs.jaro_similarity,
            fs.jaro_winkler_similarity,
            fs.token_similarity,
            fs.token_sort_similarity,
            fs.most_freq_k_similarity,
            fs.normalized_most_freq_k_similarity,
            fs.combined_similarity,
        ],
        ids=lambda f: f.__name__,
    )
    def test_one_empty_is_zero(self, func):
        assert func("", "abc") == 0.0
        assert func("abc", "") == 0.0

    @pytest.mark.parametrize("algorithm", list(fs.Algorithm))
    def test_dispatcher_both_empty(self, algorithm):
        assert fs.similarity("", "", algorithm) == 1.0

    def test_one_empty_hamming_not_applicable(self):
        assert fs.hamming("", "abc") is None
        assert fs.similarity("", "abc", "hamming") == 0.0


class TestLongStrings:
    """Tests for long inputs."""

    def test_levenshtein_long(self):
        a = "a" * 300
        b = "b" * 300
        assert fs.levenshtein(a, b) == 300
        assert fs.levenshtein(a, a + "b") == 1

    def test_damerau_long_swaps(self):
        a = "ab" * 150
        b = "ba" * 150
        # Both strings are length 300: delete leading "a", append trailing "a"
        assert fs.damerau_levenshtein(a, b) == 2
        assert fs.damerau_levenshtein(a, b) <= fs.levenshtein(a, b)

    def test_most_freq_k_long(self):
        a = "x" * 10_000 + "y" * 5_000
        b = "y" * 10_000 + "x" * 5_000
        assert fs.most_freq_k_distance(a, b) == 10_000


class TestUnicode:
    """Codepoint-level behavior on non-ASCII input."""

    def test_combining_character_is_separate(self):
        decomposed = "cafe\u0301"
        precomposed = "caf\u00e9"
        assert len(decomposed) == 5
        assert fs.levenshtein(decomposed, precomposed) == 2
        assert fs.hamming(decomposed, precomposed) is None

    def test_astral_plane(self):
        assert fs.levenshtein("\U0001F600", "\U0001F601") == 1
        assert fs.hamming("a\U0001F600", "a\U0001F601") == 1

    def test_zwj_sequence(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert fs.levenshtein(family, "") == 5
        assert fs.most_frequent_k(family, 1) == [("\u200d", 2)]

    def test_cjk(self):
        assert fs.levenshtein("君子和而不同", "小人同而不和") == 4
        assert fs.damerau_levenshtein("君子和而不同", "小人同而不和") == 4
        assert fs.jaro_winkler_similarity("君子和而不同", "小人同而不和") == pytest.approx(5 / 9)

    def test_turkish_dotted_i_prefix(self):
        # "İ".lower() is two codepoints; the prefix bonus runs on lowered text
        sim = fs.jaro_winkler_similarity("İstanbul", "istanbul")
        assert 0.0 <= sim <= 1.0


class TestAdversarialInputs:
    """Repeated patterns and degenerate alphabets."""

    def test_repeated_pattern(self):
        assert fs.levenshtein("ab" * 50, "ba" * 50) == 2
        assert fs.jaro_similarity("aaaa", "aaaa") == 1.0

    def test_single_character_alphabet(self):
        assert fs.most_frequent_k("aaaa", 3) == [("a", 4)]
        assert fs.normalized_most_freq_k_similarity("aaaa", "a") == pytest.approx(1.0)
        assert fs.most_freq_k_distance("aaaa", "a") == 3
