"""
Curve/Integral Composer
=======================
Builds the measure-vs-level curve mu(t) from repeated Measure Engine calls and
integrates it over t.

By Fubini, integrating mu(t) = |{x : f(x) > t}| over t in [0, max f] gives the
area of {(x, t) : 0 <= t <= f(x)}, i.e. the integral of a non-negative f. The
result is an independent approximation on its own grid, so it agrees with a
Riemann sum only within sampling error.
"""
from __future__ import annotations

import logging

from integralanalysis.analysis.measure import superlevel_measure
from integralanalysis.analysis.sampler import ScalarFunction, sample
from integralanalysis.config import DEFAULT_CURVE_STEPS, INTEGRATION_STEPS
from integralanalysis.model.primitives import Domain, DomainLike, MeasureCurvePoint
from integralanalysis.utils import require_count, require_finite

logger = logging.getLogger(__name__)


def measure_curve(
    fn: ScalarFunction,
    domain: DomainLike,
    value_range: DomainLike,
    steps: int = DEFAULT_CURVE_STEPS,
) -> list[MeasureCurvePoint]:
    """
    Sample mu(t) at `steps + 1` evenly spaced thresholds spanning `value_range`.

    Returns:
        Points ordered by increasing t; mu is non-increasing along the list.
    """
    domain = Domain.coerce(domain)
    value_range = Domain.coerce(value_range)
    steps = require_count("steps", steps)

    return [
        MeasureCurvePoint(t=float(t), mu=superlevel_measure(fn, domain, t))
        for t in sample(value_range, steps)
    ]


def integrate_measure_curve(
    fn: ScalarFunction,
    domain: DomainLike,
    value_range: DomainLike,
    steps: int = INTEGRATION_STEPS,
) -> float:
    """
    Midpoint-rule approximation of the integral of mu(t) over `value_range`.

    Args:
        fn: Function whose super-level sets are measured.
        domain: x-interval.
        value_range: Interval of thresholds to integrate over.
        steps: Number of threshold cells (>= 1).

    Returns:
        Sum of mu(t_mid_i) * dt, always >= 0.
    """
    domain = Domain.coerce(domain)
    value_range = Domain.coerce(value_range)
    steps = require_count("steps", steps)

    dt = value_range.width / steps
    total = 0.0
    for i in range(steps):
        t = value_range.lo + (i + 0.5) * dt
        total += superlevel_measure(fn, domain, t) * dt

    logger.debug(f"Integral of mu(t) over [{value_range.lo}, {value_range.hi}] = {total}")
    return total


def area_range(value_range: DomainLike) -> Domain:
    """
    Threshold interval of the region {0 <= t <= f(x)}: the lower end clamped at 0.
    """
    value_range = Domain.coerce(value_range)
    return Domain(max(0.0, value_range.lo), value_range.hi)


def accumulated_area(
    fn: ScalarFunction,
    domain: DomainLike,
    value_range: DomainLike,
    t: float,
    steps: int = INTEGRATION_STEPS,
) -> float:
    """
    Area of the region below f between the floor of `area_range` and height t.

    Returns 0 when t is at or below the floor.
    """
    floor = area_range(value_range).lo
    t = require_finite("t", t)
    if t <= floor:
        return 0.0
    return integrate_measure_curve(fn, domain, (floor, t), steps=steps)
