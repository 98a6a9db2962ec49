"""
Level-Set Slicer
================
Cuts the value range of a function into horizontal bands and recovers, for
each band, the x-intervals where the function falls inside it.

The domain is always scanned with SLICE_SAMPLES cells, whatever the number of
bands. Each cell [x_j, x_j+1) is represented by f(x_j). Consecutive in-band
cells are merged into one Segment by a two-state fold (OUTSIDE/INSIDE):
    OUTSIDE -> INSIDE  opens a run at the cell's left edge,
    INSIDE  -> OUTSIDE closes it at the left edge of the first cell outside,
    a run still open after the last cell closes at domain.hi.
A band's measure is its in-band cell count times the cell width, so it equals
the total segment length up to rounding.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from functools import reduce
from typing import TYPE_CHECKING, Iterable

import numpy as np

from integralanalysis.analysis.sampler import ScalarFunction, cell_edges, evaluate_many
from integralanalysis.config import SLICE_SAMPLES, band_tolerance
from integralanalysis.errors import InvalidParameterError
from integralanalysis.model.primitives import Domain, DomainLike, Segment, Slice
from integralanalysis.utils import require_count, require_finite

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class ScanPhase(StrEnum):
    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True)
class ScanState:
    """Accumulator of the run-merge fold."""
    phase: ScanPhase = ScanPhase.OUTSIDE
    run_start: float = 0.0
    hits: int = 0
    segments: tuple[Segment, ...] = ()


def _advance(state: ScanState, cell: tuple[float, bool]) -> ScanState:
    x, in_band = cell
    match state.phase, in_band:
        case ScanPhase.OUTSIDE, True:
            return replace(state, phase=ScanPhase.INSIDE, run_start=x, hits=state.hits + 1)
        case ScanPhase.INSIDE, True:
            return replace(state, hits=state.hits + 1)
        case ScanPhase.INSIDE, False:
            return replace(
                state,
                phase=ScanPhase.OUTSIDE,
                segments=state.segments + (Segment(state.run_start, x),),
            )
        case _:
            return state


def merge_runs(edges: npt.NDArray[np.float64], in_band: Iterable[bool]) -> ScanState:
    """
    Merge consecutive in-band cells into segments.

    Args:
        edges: Cell edges, one more than the number of flags.
        in_band: One flag per cell, ordered by x.

    Returns:
        Final scan state, with any open run closed at edges[-1].
    """
    flags = [bool(flag) for flag in in_band]
    if len(edges) != len(flags) + 1:
        raise InvalidParameterError(f"Expected {len(flags) + 1} edges for {len(flags)} cells, got {len(edges)}.")

    lefts = [float(x) for x in edges[:-1]]
    final = reduce(_advance, zip(lefts, flags), ScanState())

    if final.phase is ScanPhase.INSIDE:
        final = replace(
            final,
            phase=ScanPhase.OUTSIDE,
            segments=final.segments + (Segment(final.run_start, float(edges[-1])),),
        )
    return final


def _scan_grid(fn: ScalarFunction, domain: Domain) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Cell edges and the function value at every left edge."""
    edges = cell_edges(domain, SLICE_SAMPLES)
    return edges, evaluate_many(fn, edges[:-1])


def _make_slice(
    edges: npt.NDArray[np.float64],
    in_band: npt.NDArray[np.bool_],
    y_base: float,
    height: float,
    dx: float,
) -> Slice:
    state = merge_runs(edges, in_band)
    return Slice(y_base=y_base, height=height, segments=state.segments, measure=state.hits * dx)


def band_bounds(value_range: DomainLike, level_count: int) -> npt.NDArray[np.float64]:
    """
    The `level_count + 1` band boundaries of a value range.

    Band i spans [bounds[i], bounds[i + 1]); adjacent bands share a boundary
    value exactly, so no sample can fall into two bands or between them.
    """
    value_range = Domain.coerce(value_range)
    level_count = require_count("level_count", level_count)
    dy = value_range.width / level_count
    return value_range.lo + np.arange(level_count + 1, dtype=np.float64) * dy


def level_slices(
    fn: ScalarFunction,
    domain: DomainLike,
    value_range: DomainLike,
    level_count: int,
) -> list[Slice]:
    """
    Simple-function decomposition: disjoint bands of the value range.

    Band i holds the samples with bounds[i] <= f(x) < bounds[i + 1]. The last
    band is closed and widened by band_tolerance() so that samples at the
    range maximum are kept.

    Args:
        fn: Function to decompose.
        domain: x-interval to scan.
        value_range: Interval of values to band.
        level_count: Number of bands (>= 1).

    Returns:
        One Slice per band, ordered from the bottom of the range.
    """
    domain = Domain.coerce(domain)
    value_range = Domain.coerce(value_range)
    bounds = band_bounds(value_range, level_count)
    dy = value_range.width / level_count
    tol = band_tolerance(value_range.lo, value_range.hi)

    edges, values = _scan_grid(fn, domain)
    dx = domain.width / SLICE_SAMPLES

    slices: list[Slice] = []
    for i in range(level_count):
        y_lower = float(bounds[i])
        if i == level_count - 1:
            in_band = (values >= y_lower) & (values <= value_range.hi + tol)
        else:
            in_band = (values >= y_lower) & (values < bounds[i + 1])
        slices.append(_make_slice(edges, in_band, y_lower, dy, dx))

    logger.debug(f"Decomposed [{value_range.lo}, {value_range.hi}] into {level_count} disjoint bands.")
    return slices


def layer_cake_slices(
    fn: ScalarFunction,
    domain: DomainLike,
    value_range: DomainLike,
    level_count: int,
) -> list[Slice]:
    """
    Layer-cake decomposition: band i covers {x : f(x) >= bounds[i]}.

    The bands are nested, each one containing every band above it.
    """
    domain = Domain.coerce(domain)
    value_range = Domain.coerce(value_range)
    bounds = band_bounds(value_range, level_count)
    dy = value_range.width / level_count

    edges, values = _scan_grid(fn, domain)
    dx = domain.width / SLICE_SAMPLES

    slices = [
        _make_slice(edges, values >= bounds[i], float(bounds[i]), dy, dx)
        for i in range(level_count)
    ]
    logger.debug(f"Built {level_count} layer-cake bands over [{value_range.lo}, {value_range.hi}].")
    return slices


def slice_at(fn: ScalarFunction, domain: DomainLike, t: float, dt: float) -> Slice:
    """
    Single super-level slice {x : f(x) >= t} at an arbitrary probe height.

    Args:
        fn: Function to probe.
        domain: x-interval to scan.
        t: Probe height, not necessarily aligned with any band grid.
        dt: Height to report for the slice (>= 0).
    """
    domain = Domain.coerce(domain)
    t = require_finite("t", t)
    dt = require_finite("dt", dt)
    if dt < 0:
        raise InvalidParameterError(f"'dt' must be >= 0, got {dt}.")

    edges, values = _scan_grid(fn, domain)
    dx = domain.width / SLICE_SAMPLES
    return _make_slice(edges, values >= t, t, dt, dx)


def simple_function_sum(slices: Iterable[Slice]) -> float:
    """
    Lower simple-function sum: each band's base height times its measure.
    """
    return sum(s.y_base * s.measure for s in slices)
