"""
Integral Model
==============
Binds the sampling engine to one FunctionSpec.

Why is this class needed?
-------------------------
1. Routing: non-deterministic specs never reach a sampling routine; their
   theory note is served instead.
2. Memoization: results are cached per (operation, parameters), so a
   presentation layer can ask again on every redraw without resampling.
3. Defaults: the function's domain and value range are filled in for every call.

Note: This module is pure Python/NumPy and knows nothing about plotting.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from integralanalysis.analysis import composer, measure, riemann, slicer
from integralanalysis.analysis.riemann import RiemannResult, RiemannRule
from integralanalysis.config import DEFAULT_CURVE_STEPS, Resolution
from integralanalysis.errors import NonDeterministicFunctionError
from integralanalysis.model.functions import FunctionSpec
from integralanalysis.model.primitives import MeasureCurvePoint, Slice
from integralanalysis.utils import require_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegralSummary:
    """Side-by-side Riemann and Lebesgue estimates for one function."""
    name: str
    riemann_sum: float
    partitions: int
    rule: RiemannRule
    simple_function_sum: float
    levels: int
    lebesgue_integral: float
    reference_integral: float


class IntegralModel:
    """
    Class representing the analysis of a single function.
    """

    def __init__(self, spec: FunctionSpec) -> None:
        """
        Initialize the model with a function specification.

        Args:
            spec: The function, its domain and value range.
        """
        self.spec = spec
        self._cache: dict[Hashable, Any] = {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(spec='{self.spec.key}', cached={len(self._cache)})"

    @property
    def is_samplable(self) -> bool:
        return self.spec.deterministic

    def explain(self) -> str:
        """Theory-only explanation for functions that cannot be sampled."""
        return self.spec.theory_note or self.spec.description

    def clear_cache(self) -> None:
        self._cache.clear()

    def _cached(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        if not self.spec.deterministic:
            raise NonDeterministicFunctionError(
                f"'{self.spec.name}' is not reproducible and cannot be sampled. {self.explain()}"
            )
        if key not in self._cache:
            logger.debug(f"Computing {key} for {self.spec.key}")
            self._cache[key] = compute()
        return self._cache[key]

    # --------------------------------------------------------------------------
    # Riemann
    # --------------------------------------------------------------------------
    def riemann(
        self,
        partitions: int,
        rule: RiemannRule = RiemannRule.MIDPOINT,
        resolution: Resolution = Resolution.STANDARD,
    ) -> RiemannResult:
        rule = RiemannRule.coerce(rule)
        resolution = Resolution(resolution)
        return self._cached(
            ("riemann", partitions, rule, resolution),
            lambda: riemann.riemann_sum_at(self.spec.fn, self.spec.domain, partitions, rule, resolution),
        )

    # --------------------------------------------------------------------------
    # Lebesgue
    # --------------------------------------------------------------------------
    def measure(self, t: float) -> float:
        """Measure of the super-level set {f > t}."""
        return self._cached(
            ("measure", t),
            lambda: measure.superlevel_measure(self.spec.fn, self.spec.domain, t),
        )

    def level_slices(self, levels: int) -> tuple[Slice, ...]:
        return self._cached(
            ("level_slices", levels),
            lambda: tuple(slicer.level_slices(self.spec.fn, self.spec.domain, self.spec.value_range, levels)),
        )

    def layer_cake(self, levels: int) -> tuple[Slice, ...]:
        """Nested bands over the area range (value range clamped at 0)."""
        area = composer.area_range(self.spec.value_range)
        return self._cached(
            ("layer_cake", levels),
            lambda: tuple(slicer.layer_cake_slices(self.spec.fn, self.spec.domain, area, levels)),
        )

    def slice_at(self, t: float, levels: int) -> Slice:
        """Probe slice at height t, as tall as one of `levels` area bands."""
        area = composer.area_range(self.spec.value_range)
        dt = area.width / require_count("levels", levels)
        return self._cached(
            ("slice_at", t, levels),
            lambda: slicer.slice_at(self.spec.fn, self.spec.domain, t, dt),
        )

    def simple_function_sum(self, levels: int) -> float:
        return slicer.simple_function_sum(self.level_slices(levels))

    def measure_curve(self, steps: int = DEFAULT_CURVE_STEPS) -> tuple[MeasureCurvePoint, ...]:
        return self._cached(
            ("measure_curve", steps),
            lambda: tuple(composer.measure_curve(self.spec.fn, self.spec.domain, self.spec.value_range, steps)),
        )

    def lebesgue_integral(self) -> float:
        """Integral of mu(t) over the area range."""
        area = composer.area_range(self.spec.value_range)
        return self._cached(
            ("lebesgue_integral",),
            lambda: composer.integrate_measure_curve(self.spec.fn, self.spec.domain, area),
        )

    def accumulated_area(self, t: float) -> float:
        return self._cached(
            ("accumulated_area", t),
            lambda: composer.accumulated_area(self.spec.fn, self.spec.domain, self.spec.value_range, t),
        )

    # --------------------------------------------------------------------------
    # Report
    # --------------------------------------------------------------------------
    def summary(
        self,
        partitions: int,
        levels: int,
        rule: RiemannRule = RiemannRule.MIDPOINT,
        resolution: Resolution = Resolution.STANDARD,
    ) -> IntegralSummary:
        result = self.riemann(partitions, rule, resolution)
        return IntegralSummary(
            name=self.spec.name,
            riemann_sum=result.sum,
            partitions=result.partitions,
            rule=result.rule,
            simple_function_sum=self.simple_function_sum(levels),
            levels=levels,
            lebesgue_integral=self.lebesgue_integral(),
            reference_integral=self._cached(("reference",), self.spec.reference_integral),
        )
