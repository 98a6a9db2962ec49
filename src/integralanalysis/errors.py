"""
Exception Taxonomy
==================
Every failure raised by the engine derives from IntegralAnalysisError.

Classes:
    InvalidParameterError: Bad counts, empty or reversed intervals, non-finite bounds.
    EvaluationError: The sampled function raised or returned NaN/Infinity.
    NonDeterministicFunctionError: The function cannot be sampled reproducibly.

There is no convergence error: every routine performs a fixed number of
evaluations and always returns an approximation.
"""
from __future__ import annotations

from typing import Optional


class IntegralAnalysisError(Exception):
    """Base class for all errors raised by the package."""


class InvalidParameterError(IntegralAnalysisError, ValueError):
    """Raised when a resolution, count or interval argument is not usable."""


class EvaluationError(IntegralAnalysisError, ArithmeticError):
    """
    Raised when the sampled function fails at a specific x.

    Attributes:
        x: The abscissa at which the evaluation failed.
        value: The non-finite value returned, or None if the function raised.
    """

    def __init__(self, x: float, value: Optional[float] = None, reason: str = "") -> None:
        self.x = x
        self.value = value
        if value is not None:
            message = f"Function returned non-finite value {value!r} at x={x!r}"
        else:
            message = f"Function evaluation failed at x={x!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NonDeterministicFunctionError(IntegralAnalysisError):
    """Raised when a non-reproducible function is routed through a sampling routine."""
