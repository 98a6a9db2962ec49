import pytest

from integralanalysis.errors import NonDeterministicFunctionError
from integralanalysis.model.functions import ALL_FUNCTIONS, DirichletProxy, FunctionKey, get_function


def test_catalog_is_complete():
    assert set(ALL_FUNCTIONS) == set(FunctionKey)
    for key, spec in ALL_FUNCTIONS.items():
        assert spec.key == key
        assert spec.domain.lo < spec.domain.hi
        assert spec.value_range.lo < spec.value_range.hi


@pytest.mark.parametrize(
    "key, expected",
    [
        (FunctionKey.X_SQUARED, 1 / 3),
        (FunctionKey.SINE, 0.0),
        (FunctionKey.LINEAR, 1.0),
        (FunctionKey.QUADRATIC_PEAK, 32 / 3),
        (FunctionKey.STEP, 0.53),
    ],
)
def test_reference_integrals(key, expected):
    assert ALL_FUNCTIONS[key].reference_integral() == pytest.approx(expected, abs=1e-8)


def test_spec_is_callable():
    assert get_function("linear")(0.25) == 0.5


def test_step_values():
    step = get_function(FunctionKey.STEP)
    assert [step(x) for x in (0.1, 0.5, 0.9)] == [0.2, 0.8, 0.5]


def test_dirichlet_is_flagged():
    spec = get_function("dirichlet")
    assert spec.deterministic is False
    assert "measure 0" in spec.theory_note
    with pytest.raises(NonDeterministicFunctionError):
        spec.reference_integral()


def test_dirichlet_proxy_owns_its_generator():
    first, second = DirichletProxy(seed=7), DirichletProxy(seed=7)
    draws = [first(0.5) for _ in range(20)]

    assert draws == [second(0.5) for _ in range(20)]
    assert set(draws) <= {0.0, 1.0}
    assert isinstance(get_function("dirichlet").fn, DirichletProxy)


def test_unknown_function():
    with pytest.raises(KeyError):
        get_function("tangent")
