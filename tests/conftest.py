import pytest

from integralanalysis.model.functions import FunctionSpec
from integralanalysis.model.primitives import Domain


class CallCounter:
    """Wraps a function and counts its evaluations."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.fn(x)


@pytest.fixture
def counter():
    return CallCounter


@pytest.fixture
def counted_spec():
    """A deterministic spec whose evaluations are counted."""
    fn = CallCounter(lambda x: 2 * x)
    spec = FunctionSpec(
        key="counted_linear",
        name="f(x) = 2x (counted)",
        fn=fn,
        domain=Domain(0.0, 1.0),
        value_range=Domain(0.0, 2.2),
    )
    return spec, fn
