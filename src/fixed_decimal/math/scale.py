import functools

from fixed_decimal.constants import MAX_DECIMAL_PLACES, MIN_DECIMAL_PLACES
from fixed_decimal.exceptions import FixedDecimalValueError, InvalidPrecision


def pow10(exp: int) -> int:
    """
    Compute 10**exp for a non-negative exponent.

    The result is unbounded, so callers narrowing it to a fixed width must check the range.
    """

    if exp < 0:
        raise FixedDecimalValueError(message=f"Exponent must be non-negative, got {exp}")
    return 10**exp


@functools.cache
def _fractional(decimal_places: int) -> int:
    return pow10(decimal_places)


def fractional(decimal_places: int) -> int:
    """
    Get the scale factor 10**D for a decimal with D decimal places.

    Valid precisions are those whose scale factor fits in a uint128, i.e. 0 <= D <= 38.
    """

    if (
        isinstance(decimal_places, bool)
        or not isinstance(decimal_places, int)
        or not (MIN_DECIMAL_PLACES <= decimal_places <= MAX_DECIMAL_PLACES)
    ):
        raise InvalidPrecision(decimal_places)
    return _fractional(decimal_places)


def scale_factor(from_decimals: int, to_decimals: int) -> int:
    """
    Get the multiplier (scaling up) or divisor (scaling down) between two precisions.
    """

    return pow10(abs(to_decimals - from_decimals))
