"""
Result Plots
============
Draws engine results with matplotlib. These functions only consume the
returned rectangles, slices and curve points; nothing here feeds back into
the computation.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np
from matplotlib import colormaps
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectanglePatch

from integralanalysis.analysis.sampler import ScalarFunction, function_points
from integralanalysis.model.primitives import DomainLike, MeasureCurvePoint, Slice

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from integralanalysis.analysis.model import IntegralModel
    from integralanalysis.analysis.riemann import RiemannResult

logger = logging.getLogger(__name__)


def plot_function(ax: Axes, fn: ScalarFunction, domain: DomainLike) -> None:
    """Draw the polyline of the graph of `fn`."""
    points = list(function_points(fn, domain))
    ax.plot([p.x for p in points], [p.y for p in points], 'k', lw=1.5)


def plot_riemann(ax: Axes, fn: ScalarFunction, domain: DomainLike, result: RiemannResult) -> None:
    """
    Draw the Riemann rectangles below the graph.

    Each rectangle spans from min(0, height) to max(0, height).
    """
    for rect in result.rectangles:
        color = 'tab:blue' if rect.height >= 0 else 'tab:red'
        ax.add_patch(RectanglePatch(
            (rect.x, rect.bottom),
            rect.width,
            rect.top - rect.bottom,
            facecolor=color,
            edgecolor='white',
            alpha=0.4,
            lw=0.5,
        ))
    plot_function(ax, fn, domain)
    ax.axhline(0.0, color='gray', lw=0.5)
    ax.set_title(f"Riemann ({result.rule}, n={result.partitions}) ≈ {result.sum:.4f}")
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")


def plot_slices(ax: Axes, slices: Sequence[Slice], title: str = "Level sets") -> None:
    """Draw every segment of every slice as a horizontal bar at its band height."""
    colors = _band_colors(len(slices))
    for color, band in zip(colors, slices):
        for segment in band.segments:
            ax.add_patch(RectanglePatch(
                (segment.start, band.y_base),
                segment.length,
                band.height,
                facecolor=color,
                alpha=0.6,
                lw=0,
            ))
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("t")


def plot_measure_curve(ax: Axes, points: Iterable[MeasureCurvePoint]) -> None:
    """Draw mu(t) rotated: t on the vertical axis, measure on the horizontal one."""
    points = list(points)
    ax.plot([p.mu for p in points], [p.t for p in points], 'm', lw=2)
    ax.set_title("Measure of {f > t}")
    ax.set_xlabel("μ")
    ax.set_ylabel("t")


def _band_colors(n: int) -> list[tuple[float, float, float, float]]:
    cmap = colormaps["viridis"]
    return [cmap(v) for v in np.linspace(0.1, 0.9, max(n, 1))]


def save_overview(model: IntegralModel, path: str | os.PathLike, partitions: int, levels: int) -> Path:
    """
    Save a three-panel figure: Riemann rectangles, disjoint level sets, measure curve.

    Args:
        model: Model of the function to draw.
        path: Output image path; parent folders are created.
        partitions: Riemann partition count.
        levels: Number of value bands.

    Returns:
        The written path.
    """
    spec = model.spec
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = Figure(figsize=(14, 4.5), layout="constrained")
    ax_riemann, ax_slices, ax_curve = fig.subplots(1, 3)

    plot_riemann(ax_riemann, spec.fn, spec.domain, model.riemann(partitions))

    plot_slices(ax_slices, model.level_slices(levels), title=f"Simple function, {levels} bands")
    plot_function(ax_slices, spec.fn, spec.domain)

    plot_measure_curve(ax_curve, model.measure_curve())

    for ax in (ax_riemann, ax_slices):
        ax.set_xlim(spec.domain.lo, spec.domain.hi)
        ax.set_ylim(min(spec.value_range.lo, 0.0), spec.value_range.hi)
        ax.grid(visible=True, which='major', linestyle='-', color='gray', lw=0.3)

    fig.suptitle(spec.name)
    fig.savefig(path, dpi=140)
    logger.info(f"Saved overview of {spec.key} to {path}")
    return path
