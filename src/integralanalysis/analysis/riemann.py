from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from integralanalysis.analysis.sampler import ScalarFunction, evaluate
from integralanalysis.config import Resolution, effective_partitions
from integralanalysis.errors import EvaluationError, InvalidParameterError
from integralanalysis.model.primitives import Domain, DomainLike, Rectangle
from integralanalysis.utils import require_count

logger = logging.getLogger(__name__)


class RiemannRule(StrEnum):
    """Where inside each sub-interval the function is sampled."""
    LEFT = "left"
    RIGHT = "right"
    MIDPOINT = "midpoint"

    @classmethod
    def coerce(cls, value: str) -> RiemannRule:
        """Accept a RiemannRule or its string value."""
        try:
            return cls(value)
        except ValueError as e:
            available = ", ".join(r.value for r in cls)
            raise InvalidParameterError(f"Unsupported Riemann rule {value!r}. Available: {available}.") from e


@dataclass(frozen=True)
class RiemannResult:
    """
    Outcome of a Riemann partial sum.

    Attributes:
        rectangles: One rectangle per sub-interval, empty when construction was skipped.
        sum: Sum of f(x_i) * dx in evaluation order.
        partitions: Number of sub-intervals used.
        rule: Sample point rule.
        dx: Width of each sub-interval.
        failures: x values left out of the sum because their evaluation failed.
    """
    rectangles: tuple[Rectangle, ...]
    sum: float
    partitions: int
    rule: RiemannRule
    dx: float
    failures: tuple[float, ...] = field(default_factory=tuple)


def sample_point(lo: float, dx: float, index: int, rule: RiemannRule) -> float:
    """Sample abscissa of sub-interval `index` under `rule`."""
    match rule:
        case RiemannRule.LEFT:
            return lo + index * dx
        case RiemannRule.RIGHT:
            return lo + (index + 1) * dx
        case RiemannRule.MIDPOINT:
            return lo + (index + 0.5) * dx
        case _:
            raise InvalidParameterError(f"Unsupported Riemann rule: {rule}.")


def riemann_sum(
    fn: ScalarFunction,
    domain: DomainLike,
    partitions: int,
    rule: RiemannRule = RiemannRule.MIDPOINT,
    *,
    build_rectangles: bool = True,
    skip_failures: bool = False,
) -> RiemannResult:
    """
    Compute the Riemann partial sum of `fn` over `domain`.

    Args:
        fn: Function to integrate.
        domain: Interval [lo, hi] with lo < hi.
        partitions: Number of uniform sub-intervals (>= 1).
        rule: LEFT, RIGHT or MIDPOINT sample point. The last RIGHT sample is
            exactly domain.hi.
        build_rectangles: If False, only the sum is computed.
        skip_failures: If True, a sample whose evaluation fails is left out of
            the sum and reported in `failures` instead of aborting the call.

    Raises:
        InvalidParameterError: If `partitions` < 1, the domain is empty or the
            rule is unknown.
        EvaluationError: If a sample fails and `skip_failures` is False.

    Returns:
        A RiemannResult.
    """
    domain = Domain.coerce(domain)
    partitions = require_count("partitions", partitions)
    rule = RiemannRule.coerce(rule)

    dx = domain.width / partitions
    total = 0.0
    rectangles: list[Rectangle] = []
    failures: list[float] = []

    for i in range(partitions):
        x_sample = sample_point(domain.lo, dx, i, rule)
        if rule is RiemannRule.RIGHT and i == partitions - 1:
            # lo + n * dx can round past hi
            x_sample = domain.hi
        try:
            height = evaluate(fn, x_sample)
        except EvaluationError as e:
            if not skip_failures:
                raise
            logger.warning(f"Skipping sample at x={e.x}: {e}")
            failures.append(e.x)
            continue

        total += height * dx
        if build_rectangles:
            rectangles.append(Rectangle(x=domain.lo + i * dx, width=dx, height=height))

    logger.debug(f"Riemann sum ({rule}, n={partitions}) over [{domain.lo}, {domain.hi}] = {total}")

    return RiemannResult(
        rectangles=tuple(rectangles),
        sum=total,
        partitions=partitions,
        rule=rule,
        dx=dx,
        failures=tuple(failures),
    )


def riemann_sum_at(
    fn: ScalarFunction,
    domain: DomainLike,
    partitions: int,
    rule: RiemannRule = RiemannRule.MIDPOINT,
    resolution: Resolution = Resolution.STANDARD,
    *,
    skip_failures: bool = False,
) -> RiemannResult:
    """
    Riemann sum under a resolution policy.

    FINE stands in for the limit n -> infinity: it uses FINE_PARTITIONS
    sub-intervals and skips rectangle construction. STANDARD is a plain call
    with the caller's partition count.
    """
    resolution = Resolution(resolution)
    n = effective_partitions(require_count("partitions", partitions), resolution)
    return riemann_sum(
        fn,
        domain,
        n,
        rule,
        build_rectangles=resolution is Resolution.STANDARD,
        skip_failures=skip_failures,
    )
