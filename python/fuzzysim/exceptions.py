"""Exception types raised by fuzzysim.

Expected edge cases (empty inputs, Hamming length mismatch) never raise;
these exceptions are reserved for invalid parameters and unknown algorithms.
"""


class FuzzySimError(Exception):
    """Base class for all fuzzysim errors."""


class ValidationError(FuzzySimError, ValueError):
    """Raised when a parameter is outside its valid range."""


class AlgorithmError(FuzzySimError, ValueError):
    """Raised when an algorithm name is not recognized or not supported."""


__all__ = ["FuzzySimError", "ValidationError", "AlgorithmError"]
