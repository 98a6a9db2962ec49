import pytest

from integralanalysis.analysis.model import IntegralModel
from integralanalysis.analysis.riemann import RiemannRule
from integralanalysis.config import FINE_PARTITIONS, SLICE_SAMPLES, Resolution
from integralanalysis.errors import InvalidParameterError, NonDeterministicFunctionError
from integralanalysis.model.functions import FunctionKey, get_function


def test_results_are_memoized(counted_spec):
    spec, fn = counted_spec
    model = IntegralModel(spec)

    first = model.level_slices(4)
    second = model.level_slices(4)

    assert first is second
    assert fn.calls == SLICE_SAMPLES


def test_different_parameters_are_cached_separately(counted_spec):
    spec, fn = counted_spec
    model = IntegralModel(spec)

    model.riemann(10)
    model.riemann(10, RiemannRule.LEFT)
    model.riemann(10, "left")

    assert fn.calls == 20


def test_clear_cache_forces_resampling(counted_spec):
    spec, fn = counted_spec
    model = IntegralModel(spec)

    model.measure(1.0)
    model.clear_cache()
    model.measure(1.0)

    assert fn.calls == 800


def test_failed_calls_are_not_cached(counted_spec):
    spec, _ = counted_spec
    model = IntegralModel(spec)

    with pytest.raises(InvalidParameterError):
        model.riemann(0)
    assert "cached=0" in repr(model)


def test_fine_riemann():
    model = IntegralModel(get_function(FunctionKey.X_SQUARED))
    result = model.riemann(5, resolution=Resolution.FINE)
    assert result.partitions == FINE_PARTITIONS
    assert result.sum == pytest.approx(1 / 3, abs=1e-6)


def test_summary_agrees_across_methods():
    summary = IntegralModel(get_function(FunctionKey.LINEAR)).summary(partitions=1000, levels=22)

    assert summary.reference_integral == pytest.approx(1.0)
    assert summary.riemann_sum == pytest.approx(1.0, rel=0.01)
    assert summary.lebesgue_integral == pytest.approx(1.0, rel=0.01)
    assert summary.simple_function_sum < summary.lebesgue_integral
    assert summary.partitions == 1000
    assert summary.levels == 22


def test_layer_cake_uses_the_area_range():
    model = IntegralModel(get_function(FunctionKey.SINE))
    slices = model.layer_cake(6)

    assert slices[0].y_base == 0.0
    assert slices[0].measure == pytest.approx(1.0, abs=0.02)


def test_slice_at_uses_band_height():
    model = IntegralModel(get_function(FunctionKey.QUADRATIC_PEAK))
    cut = model.slice_at(3.0, levels=9)

    assert cut.height == pytest.approx(0.5)
    assert len(cut.segments) == 1
    assert cut.measure == pytest.approx(2.0, abs=0.03)

    with pytest.raises(InvalidParameterError):
        model.slice_at(3.0, levels=0)


def test_accumulated_area_and_curve():
    model = IntegralModel(get_function(FunctionKey.LINEAR))
    assert model.accumulated_area(1.0) == pytest.approx(0.75, rel=0.01)
    assert len(model.measure_curve(20)) == 21


def test_dirichlet_never_reaches_the_sampler():
    model = IntegralModel(get_function(FunctionKey.DIRICHLET))

    assert not model.is_samplable
    assert "not Riemann integrable" in model.explain()

    calls = [
        lambda: model.riemann(10),
        lambda: model.riemann(10, resolution=Resolution.FINE),
        lambda: model.measure(0.5),
        lambda: model.level_slices(4),
        lambda: model.layer_cake(4),
        lambda: model.slice_at(0.5, 4),
        lambda: model.measure_curve(),
        lambda: model.lebesgue_integral(),
        lambda: model.accumulated_area(0.5),
        lambda: model.summary(10, 4),
    ]
    for call in calls:
        with pytest.raises(NonDeterministicFunctionError):
            call()


def test_unknown_rule_is_rejected_before_sampling(counted_spec):
    spec, fn = counted_spec
    model = IntegralModel(spec)
    with pytest.raises(InvalidParameterError):
        model.riemann(10, "trapezoid")
    assert fn.calls == 0
