import math

from fixed_decimal.constants import MAX_UINT128, MAX_UINT256, MIN_UINT128, MIN_UINT256
from fixed_decimal.exceptions import DecimalOverflow, DecimalUnderflow, DivideByZero


def mulmod(x: int, y: int, k: int) -> int:
    if k == 0:
        raise DivideByZero
    return (x * y) % k


def div_rounding_up(x: int, y: int) -> int:
    """
    Perform an x//y floored division, rounding up any remainder.
    """

    if y == 0:
        raise DivideByZero
    # x and y are unsigned, so negative value floor division workarounds are unnecessary
    return x // y + (x % y > 0)


# adapted from OpenZeppelin's SafeCast checks, which throw an exception if the
# input value exceeds the maximum value for this type
def to_uint128(x: int) -> int:
    if x < MIN_UINT128:
        raise DecimalUnderflow(message=f"{x} is less than the minimum uint128 value")
    if x > MAX_UINT128:
        raise DecimalOverflow(message=f"{x} greater than maximum uint128 value")
    return x


def to_uint256(x: int) -> int:
    if x < MIN_UINT256:
        raise DecimalUnderflow(message=f"{x} is less than the minimum uint256 value")
    if x > MAX_UINT256:
        raise DecimalOverflow(message=f"{x} greater than maximum uint256 value")
    return x


def isqrt(x: int) -> int:
    """
    The integer square root of a uint256 value, rounded down.
    """

    return math.isqrt(to_uint256(x))
