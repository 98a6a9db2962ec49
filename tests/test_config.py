import pytest

from integralanalysis.config import (
    BAND_ABS_TOL,
    BAND_REL_TOL,
    FINE_PARTITIONS,
    Resolution,
    band_tolerance,
    effective_partitions,
)
from integralanalysis.errors import InvalidParameterError


@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (0.0, 1.0, 1e-3),
        (0.0, 1000.0, 1.0),
        (-1.2, 1.2, 2.4e-3),
        (0.0, 1e-6, 1e-9),
    ],
)
def test_band_tolerance_is_relative_to_the_span(lo, hi, expected):
    assert band_tolerance(lo, hi) == pytest.approx(expected)


def test_band_tolerance_has_an_absolute_floor():
    assert band_tolerance(0.0, 1e-12) == BAND_ABS_TOL
    assert band_tolerance(5.0, 5.0 + 1e-11) == BAND_ABS_TOL
    assert BAND_REL_TOL * 1e-11 < BAND_ABS_TOL


@pytest.mark.parametrize("lo, hi", [(1.0, 1.0), (2.0, 1.0)])
def test_band_tolerance_needs_a_non_empty_range(lo, hi):
    with pytest.raises(InvalidParameterError):
        band_tolerance(lo, hi)


def test_effective_partitions():
    assert effective_partitions(7) == 7
    assert effective_partitions(7, "standard") == 7
    assert effective_partitions(7, Resolution.FINE) == FINE_PARTITIONS
