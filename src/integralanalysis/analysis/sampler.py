from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

import numpy as np

from integralanalysis.config import DEFAULT_POLYLINE_POINTS
from integralanalysis.errors import EvaluationError
from integralanalysis.model.primitives import Domain, DomainLike, Point
from integralanalysis.utils import require_count

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

ScalarFunction = Callable[[float], float]


def sample_points(lo: float, hi: float, steps: int) -> npt.NDArray[np.float64]:
    """
    Generate `steps + 1` evenly spaced values from `lo` towards `hi`.

    Values are computed as lo + i * (hi - lo) / steps, so the last one may miss
    `hi` by the rounding of the step. A degenerate interval (lo == hi) gives
    `steps + 1` copies of `lo`.

    Args:
        lo: Start of the interval.
        hi: End of the interval.
        steps: Number of sub-intervals (>= 1).

    Returns:
        Array of shape (steps + 1,).
    """
    steps = require_count("steps", steps)
    step = (hi - lo) / steps
    return lo + np.arange(steps + 1, dtype=np.float64) * step


def sample(domain: DomainLike, steps: int) -> npt.NDArray[np.float64]:
    """Uniform `steps + 1` point grid over a validated domain."""
    domain = Domain.coerce(domain)
    return sample_points(domain.lo, domain.hi, steps)


def cell_edges(domain: DomainLike, cells: int) -> npt.NDArray[np.float64]:
    """
    Edges of `cells` equal cells, with the final edge pinned to `domain.hi`.
    """
    domain = Domain.coerce(domain)
    edges = sample_points(domain.lo, domain.hi, cells)
    edges[-1] = domain.hi
    return edges


def evaluate(fn: ScalarFunction, x: float) -> float:
    """
    Evaluate `fn` at `x`, refusing silent failures.

    Raises:
        EvaluationError: If `fn` raises, or returns NaN/Infinity.
    """
    x = float(x)
    try:
        y = float(fn(x))
    except EvaluationError:
        raise
    except Exception as e:
        raise EvaluationError(x, reason=f"{type(e).__name__}: {e}") from e
    if not math.isfinite(y):
        raise EvaluationError(x, value=y)
    return y


def evaluate_many(fn: ScalarFunction, xs: Iterable[float]) -> npt.NDArray[np.float64]:
    """Evaluate `fn` at every x in order; the first failure propagates."""
    return np.array([evaluate(fn, x) for x in xs], dtype=np.float64)


def function_points(
    fn: ScalarFunction,
    domain: DomainLike,
    steps: int = DEFAULT_POLYLINE_POINTS,
) -> Iterator[Point]:
    """
    Lazily yield the polyline of the graph of `fn`.

    Args:
        fn: Function to evaluate.
        domain: Interval to cover, both ends included.
        steps: Number of points (>= 2).

    Yields:
        Points ordered by increasing x.
    """
    domain = Domain.coerce(domain)
    steps = require_count("steps", steps, minimum=2)
    xs = sample_points(domain.lo, domain.hi, steps - 1)
    xs[-1] = domain.hi
    for x in xs:
        yield Point(x=float(x), y=evaluate(fn, x))
