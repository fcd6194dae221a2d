"""Exceptions raised by the scoring core."""


class ScoringError(Exception):
    """Base exception for scoring-layer errors."""
    pass


class InvalidCallContract(ScoringError, TypeError):
    """Raised when score()/compare_across() receive malformed arguments.

    Missing catalog entries and unknown profile fields are not errors; they
    degrade score quality, never availability.
    """
    pass
