"""
Result Primitives
=================
Immutable value types produced by the engine. They carry plain numbers only;
scaling them to a drawing surface is up to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from integralanalysis.errors import InvalidParameterError
from integralanalysis.utils import require_finite


@dataclass(frozen=True)
class Domain:
    """
    A bounded interval [lo, hi] with lo < hi.

    Used both for the x-domain of a function and for its value range.
    """
    lo: float
    hi: float

    def __post_init__(self) -> None:
        lo = require_finite("lo", self.lo)
        hi = require_finite("hi", self.hi)
        if not lo < hi:
            raise InvalidParameterError(f"Interval must satisfy lo < hi, got [{lo}, {hi}].")
        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)

    @property
    def width(self) -> float:
        return self.hi - self.lo

    def as_tuple(self) -> tuple[float, float]:
        return self.lo, self.hi

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi

    @classmethod
    def coerce(cls, value: DomainLike) -> Domain:
        """Accept a Domain or any (lo, hi) pair."""
        if isinstance(value, Domain):
            return value
        try:
            lo, hi = value
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(f"Expected an interval (lo, hi), got {value!r}.") from e
        return cls(lo, hi)


# Value ranges share the interval type
ValueRange = Domain

DomainLike = Union[Domain, Sequence[float]]


@dataclass(frozen=True)
class Point:
    """An evaluated sample (x, f(x))."""
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """
    One Riemann rectangle over [x, x + width].

    The height is signed; draw it from `bottom` to `top`.
    """
    x: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return min(0.0, self.height)

    @property
    def top(self) -> float:
        return max(0.0, self.height)

    @property
    def signed_area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Segment:
    """A maximal contiguous x-interval [start, end) of a level set."""
    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Slice:
    """
    Horizontal band of a level-set decomposition.

    Attributes:
        y_base: Lower edge of the band (or the probe height).
        height: Band height in value units.
        segments: Ordered, non-overlapping x-intervals where the samples fall in the band.
        measure: In-band cell count times cell width.
    """
    y_base: float
    height: float
    segments: tuple[Segment, ...] = field(default_factory=tuple)
    measure: float = 0.0

    @property
    def segment_length(self) -> float:
        """Total width of the segments."""
        return sum(segment.length for segment in self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments


@dataclass(frozen=True)
class MeasureCurvePoint:
    """Measure mu of the super-level set {x : f(x) > t}."""
    t: float
    mu: float
