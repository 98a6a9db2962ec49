"""Function specifications and the catalog of example functions."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Dict, Optional

import numpy as np
from scipy import integrate

from integralanalysis.errors import NonDeterministicFunctionError
from integralanalysis.model.primitives import Domain

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class FunctionKey(StrEnum):
    X_SQUARED = "x_squared"
    SINE = "sine"
    LINEAR = "linear"
    QUADRATIC_PEAK = "quadratic_peak"
    STEP = "step"
    DIRICHLET = "dirichlet"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class FunctionSpec:
    """
    A real function on a bounded domain, with the value range used to band it.

    `fn` must be side-effect free. Specs flagged `deterministic=False` cannot be
    sampled reproducibly and are explained through `theory_note` instead.
    """
    key: str
    name: str
    fn: Callable[[float], float]
    domain: Domain
    value_range: Domain
    description: str = ""
    deterministic: bool = True
    theory_note: str = ""

    # Known discontinuities, handed to the reference quadrature
    breakpoints: tuple[float, ...] = field(default_factory=tuple)

    def __call__(self, x: float) -> float:
        return self.fn(x)

    def reference_integral(self) -> float:
        """
        Integral over the domain by adaptive quadrature (scipy.integrate.quad).

        Only used to judge the fixed-grid approximations; the engine itself never
        adapts its sampling.
        """
        if not self.deterministic:
            raise NonDeterministicFunctionError(f"'{self.name}' has no reproducible integral. {self.theory_note}")

        points = [p for p in self.breakpoints if self.domain.lo < p < self.domain.hi] or None
        value, abserr = integrate.quad(self.fn, self.domain.lo, self.domain.hi, points=points, limit=200)
        logger.debug(f"Reference integral of {self.name}: {value} (abs. error {abserr:.2e})")
        return float(value)


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
def _step(x: float) -> float:
    if x < 0.3:
        return 0.2
    if x < 0.7:
        return 0.8
    return 0.5


class DirichletProxy:
    """
    Visual stand-in for the indicator of the rationals: a coin flip per call.

    Each instance owns its generator; pass `seed` for a repeatable sequence.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def __call__(self, x: float) -> float:
        return 1.0 if self._rng.random() > 0.5 else 0.0


ALL_FUNCTIONS: Dict[FunctionKey, FunctionSpec] = {
    FunctionKey.X_SQUARED: FunctionSpec(
        key=FunctionKey.X_SQUARED,
        name="f(x) = x²",
        fn=lambda x: x * x,
        domain=Domain(0.0, 1.0),
        value_range=Domain(0.0, 1.2),
        description="A standard continuous function. Ideal for seeing convergence.",
    ),
    FunctionKey.SINE: FunctionSpec(
        key=FunctionKey.SINE,
        name="f(x) = sin(πx)",
        fn=lambda x: math.sin(math.pi * x),
        domain=Domain(0.0, 2.0),
        value_range=Domain(-1.2, 1.2),
        description="A symmetric curve with a negative lobe.",
    ),
    FunctionKey.LINEAR: FunctionSpec(
        key=FunctionKey.LINEAR,
        name="f(x) = 2x",
        fn=lambda x: 2 * x,
        domain=Domain(0.0, 1.0),
        value_range=Domain(0.0, 2.2),
        description="Linear growth.",
    ),
    FunctionKey.QUADRATIC_PEAK: FunctionSpec(
        key=FunctionKey.QUADRATIC_PEAK,
        name="f(x) = -(x - 3)² + 4",
        fn=lambda x: -(x - 3) ** 2 + 4,
        domain=Domain(1.0, 5.0),
        value_range=Domain(0.0, 4.5),
        description="Symmetric hill; every horizontal slice is a single interval.",
    ),
    FunctionKey.STEP: FunctionSpec(
        key=FunctionKey.STEP,
        name="Step Function",
        fn=_step,
        domain=Domain(0.0, 1.0),
        value_range=Domain(0.0, 1.0),
        description="A function with jumps; its level sets are unions of flat pieces.",
        breakpoints=(0.3, 0.7),
    ),
    FunctionKey.DIRICHLET: FunctionSpec(
        key=FunctionKey.DIRICHLET,
        name="Dirichlet Function",
        fn=DirichletProxy(),
        domain=Domain(0.0, 1.0),
        value_range=Domain(0.0, 1.2),
        description="1 if rational, 0 if irrational.",
        deterministic=False,
        theory_note=(
            "The indicator of the rationals is discontinuous everywhere, so its Riemann sums "
            "never settle and it is not Riemann integrable. The rationals are countable and have "
            "Lebesgue measure 0, so mu({f > t}) = 0 for every t >= 0 and the Lebesgue integral is 0. "
            "A computer cannot sample it: floating-point numbers are all rational."
        ),
    ),
}


def get_function(key: str) -> FunctionSpec:
    """Look up a catalog entry by key."""
    try:
        return ALL_FUNCTIONS[FunctionKey(key)]
    except ValueError as e:
        available = ", ".join(k.value for k in FunctionKey)
        raise KeyError(f"Unknown function '{key}'. Available: {available}.") from e
