"""
Measure Engine
==============
Approximates the Lebesgue measure of the super-level set {x : f(x) > t}.

The domain is cut into `samples` equal cells; a cell counts towards the
measure when f at its left edge is strictly above t. This left-edge indicator
sum mis-counts by at most one cell width (domain width / samples) for every
point where f crosses t or jumps over it. That bound is what callers should
expect; the result is never exact.
"""
from __future__ import annotations

import logging

from integralanalysis.analysis.sampler import ScalarFunction, evaluate_many, sample
from integralanalysis.config import DEFAULT_MEASURE_SAMPLES
from integralanalysis.model.primitives import Domain, DomainLike
from integralanalysis.utils import require_count, require_finite

logger = logging.getLogger(__name__)


def superlevel_measure(
    fn: ScalarFunction,
    domain: DomainLike,
    t: float,
    samples: int = DEFAULT_MEASURE_SAMPLES,
) -> float:
    """
    Measure of {x in domain : f(x) > t}.

    Args:
        fn: Function to probe.
        domain: Interval [lo, hi] with lo < hi.
        t: Threshold.
        samples: Number of cells (>= 1).

    Raises:
        InvalidParameterError: For a bad domain, sample count or threshold.
        EvaluationError: If `fn` fails at a sample.

    Returns:
        The measure, between 0 and the domain width (up to rounding).
    """
    domain = Domain.coerce(domain)
    samples = require_count("samples", samples)
    t = require_finite("t", t)

    dx = domain.width / samples
    left_edges = sample(domain, samples)[:-1]
    values = evaluate_many(fn, left_edges)

    measure = 0.0
    for above in values > t:
        if above:
            measure += dx

    logger.debug(f"mu(f > {t}) over [{domain.lo}, {domain.hi}] with {samples} cells = {measure}")
    return measure


def measure_error_bound(domain: DomainLike, samples: int = DEFAULT_MEASURE_SAMPLES) -> float:
    """Width of one cell: the mis-count allowed per crossing of the threshold."""
    domain = Domain.coerce(domain)
    return domain.width / require_count("samples", samples)
