"""
Configuration & Resolution Policy
=================================
This module is the central registry for the engine's fixed resolutions and
numerical tolerances.

Two resolutions are independent of each other:
1. x-sampling density (SLICE_SAMPLES, DEFAULT_MEASURE_SAMPLES) decides where
   the function is evaluated when detecting level sets.
2. y-banding density (the caller's level count) decides only how the value
   range is cut into bands.
Changing the number of bands never changes the x-resolution of detection.

Exports:
    Resolution: "standard" or "fine" sampling policy.
    effective_partitions: Partition count after applying a Resolution.
    band_tolerance: Inclusive slack for the top band of a value range.
"""
from enum import StrEnum

from integralanalysis.errors import InvalidParameterError


# Measure Engine: cells per superlevel_measure() call
DEFAULT_MEASURE_SAMPLES: int = 400

# Level-Set Slicer: cells scanned per band, independent of the level count
SLICE_SAMPLES: int = 400

# Curve/Integral Composer
DEFAULT_CURVE_STEPS: int = 100
INTEGRATION_STEPS: int = 400

# Stand-in for n -> infinity in the Riemann "fine" mode
FINE_PARTITIONS: int = 1000

# Points in the polyline of a function graph
DEFAULT_POLYLINE_POINTS: int = 200

# Top band upper bound is widened by max(BAND_ABS_TOL, BAND_REL_TOL * span)
BAND_REL_TOL: float = 1e-3
BAND_ABS_TOL: float = 1e-12


class Resolution(StrEnum):
    """Sampling policy requested by the caller."""
    STANDARD = "standard"
    FINE = "fine"


def effective_partitions(partitions: int, resolution: Resolution = Resolution.STANDARD) -> int:
    """
    Resolve the partition count actually used for a Riemann sum.

    Args:
        partitions: Partition count chosen by the caller.
        resolution: FINE replaces the count with FINE_PARTITIONS.

    Returns:
        The partition count to sample with.
    """
    match Resolution(resolution):
        case Resolution.FINE:
            return FINE_PARTITIONS
        case _:
            return partitions


def band_tolerance(lo: float, hi: float) -> float:
    """
    Absolute slack added to the closed upper bound of the last band.

    Scales with the span of the value range so that samples sitting exactly
    on the range maximum (up to rounding) land in the top band whatever the
    units of the function are.
    """
    if not hi > lo:
        raise InvalidParameterError(f"Value range must satisfy lo < hi, got [{lo}, {hi}].")
    return max(BAND_ABS_TOL, BAND_REL_TOL * (hi - lo))
