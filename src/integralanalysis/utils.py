import math
import numbers

from integralanalysis.errors import InvalidParameterError


def require_count(name: str, value: int, minimum: int = 1) -> int:
    """Validate an integer resolution parameter (partitions, samples, levels, steps)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"'{name}' must be an integer, got {value!r}.")
    if value < minimum:
        raise InvalidParameterError(f"'{name}' must be >= {minimum}, got {value}.")
    return int(value)


def require_finite(name: str, value: float) -> float:
    """Validate a real-valued parameter such as a threshold or a bound."""
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"'{name}' must be a real number, got {value!r}.") from e
    if not math.isfinite(value):
        raise InvalidParameterError(f"'{name}' must be finite, got {value}.")
    return value
