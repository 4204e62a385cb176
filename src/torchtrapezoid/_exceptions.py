"""Exceptions for trapezoidal integration."""


class TrapezoidError(Exception):
    """Base exception for trapezoidal integration."""

    pass


class InvalidDimensionError(TrapezoidError, IndexError):
    """Integration dimension is out of range for the input."""

    pass


class SampleCountMismatchError(TrapezoidError, ValueError):
    """1-D sample points disagree with the number of samples along ``dim``."""

    pass


class SampleRankError(TrapezoidError, ValueError):
    """Sample points have more dimensions than the sampled values."""

    pass


class UnsupportedDTypeError(TrapezoidError, TypeError):
    """Boolean input, or non-real scalar spacing."""

    pass


class TrapezoidWarning(UserWarning):
    """Warning for trapezoidal integration issues (e.g., dropped gradients)."""

    pass
