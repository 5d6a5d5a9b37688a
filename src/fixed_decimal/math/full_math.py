from fixed_decimal.exceptions import DecimalOverflow, DivideByZero
from fixed_decimal.math.functions import mulmod, to_uint256


def muldiv(
    a: int,
    b: int,
    denominator: int,
) -> int:
    """
    Calculate a * b / denominator, rounded down, using a uint256 intermediate.

    Multiplying two uint128 values directly can overflow long before the rescaled result would, so
    the product is formed in double width and only the quotient is expected to fit the caller's
    target width. Python integers do not overflow, so the width is enforced by explicit range
    checks on the inputs and on the intermediate product.
    """

    to_uint256(a)
    to_uint256(b)
    to_uint256(denominator)

    if denominator == 0:
        raise DivideByZero

    product = a * b
    if product.bit_length() > 256:
        raise DecimalOverflow(message="Intermediate product does not fit in uint256")

    return product // denominator


def muldiv_rounding_up(a: int, b: int, denominator: int) -> int:
    result = muldiv(a, b, denominator)
    if mulmod(a, b, denominator) > 0:
        return to_uint256(result + 1)
    return result
