import math

import pytest
from hypothesis import given, settings, strategies as st

from integralanalysis.analysis.measure import measure_error_bound, superlevel_measure
from integralanalysis.errors import EvaluationError, InvalidParameterError


def linear(x):
    return 2 * x


def sine(x):
    return math.sin(math.pi * x)


def test_half_of_linear_is_above_one():
    mu = superlevel_measure(linear, (0.0, 1.0), 1.0)
    assert abs(mu - 0.5) <= measure_error_bound((0.0, 1.0)) + 1e-12


def test_threshold_below_minimum_gives_full_width():
    assert superlevel_measure(linear, (0.0, 1.0), -1.0) == pytest.approx(1.0)


def test_threshold_above_maximum_gives_zero():
    assert superlevel_measure(linear, (0.0, 1.0), 3.0) == 0.0


def test_inequality_is_strict():
    assert superlevel_measure(lambda x: 1.0, (0.0, 1.0), 1.0) == 0.0
    assert superlevel_measure(lambda x: 1.0, (0.0, 1.0), 0.999) == pytest.approx(1.0)


def test_negative_values_are_measured_like_any_other():
    # sin(pi x) on [0, 2] is below -0.5 on (7/6, 11/6)
    mu = superlevel_measure(sine, (0.0, 2.0), -0.5)
    assert mu == pytest.approx(2.0 - 2.0 / 3.0, abs=2 * measure_error_bound((0.0, 2.0)))


def test_error_bound_is_one_cell():
    assert measure_error_bound((1.0, 5.0), 400) == pytest.approx(0.01)


def test_same_inputs_same_measure():
    assert superlevel_measure(sine, (0.0, 2.0), 0.3) == superlevel_measure(sine, (0.0, 2.0), 0.3)


def test_resolution_changes_only_the_cell_width():
    coarse = superlevel_measure(linear, (0.0, 1.0), 1.0, samples=10)
    assert coarse == pytest.approx(0.4)


@pytest.mark.parametrize("samples", [0, -10])
def test_non_positive_samples_fail(samples):
    with pytest.raises(InvalidParameterError):
        superlevel_measure(linear, (0.0, 1.0), 0.5, samples=samples)


def test_non_finite_threshold_fails():
    with pytest.raises(InvalidParameterError):
        superlevel_measure(linear, (0.0, 1.0), math.nan)


def test_evaluation_failure_propagates():
    with pytest.raises(EvaluationError):
        superlevel_measure(lambda x: math.log(x), (0.0, 1.0), 0.0)


@settings(max_examples=30, deadline=None)
@given(
    t1=st.floats(min_value=-1.5, max_value=1.5),
    t2=st.floats(min_value=-1.5, max_value=1.5),
)
def test_measure_is_monotone_in_threshold(t1, t2):
    lo, hi = min(t1, t2), max(t1, t2)
    assert superlevel_measure(sine, (0.0, 2.0), lo) >= superlevel_measure(sine, (0.0, 2.0), hi)


@settings(max_examples=30, deadline=None)
@given(t=st.floats(min_value=-3.0, max_value=3.0))
def test_measure_stays_within_the_domain(t):
    mu = superlevel_measure(sine, (0.0, 2.0), t)
    assert 0.0 <= mu <= 2.0 + 1e-9
