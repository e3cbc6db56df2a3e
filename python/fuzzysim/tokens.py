"""Token-based similarity: word-set Jaccard and token-sort ratio."""

from typing import List

from fuzzysim._utils import as_sequence
from fuzzysim.edit import levenshtein_similarity


def tokenize(s: str) -> List[str]:
    """
    Lower-case a string and split it on the space character.

    Only ``" "`` separates tokens; tabs and newlines stay inside tokens.
    Empty tokens from leading, trailing or repeated spaces are dropped.

    Example:
        >>> tokenize("  Hello   World ")
        ['hello', 'world']
    """
    s = as_sequence(s, "s")
    return [token for token in s.lower().split(" ") if token]


def token_similarity(a: str, b: str) -> float:
    """
    Compute Jaccard similarity of the token sets of a and b.

    Word order and repeated words are ignored. Two strings without tokens
    score 1.0; if only one has tokens the score is 0.0.

    Example:
        >>> token_similarity("hello world", "world hello")
        1.0
        >>> token_similarity("hello world", "hello")
        0.5
    """
    tokens_a = set(tokenize(a))
    tokens_b = set(tokenize(b))
    if not tokens_a and not tokens_b:
        return 1.0
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def token_sort_similarity(a: str, b: str) -> float:
    """
    Compute Levenshtein similarity after sorting the tokens of each string.

    Tokens are sorted by codepoint and re-joined with single spaces, so word
    order stops mattering while spelling differences inside words still do.

    Example:
        >>> token_sort_similarity("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear")
        1.0
    """
    sorted_a = " ".join(sorted(tokenize(a)))
    sorted_b = " ".join(sorted(tokenize(b)))
    return levenshtein_similarity(sorted_a, sorted_b)


__all__ = ["tokenize", "token_similarity", "token_sort_similarity"]
