"""
Conversion between decimal strings and atomic values.

Strings follow the grammar `<digits>[.<digits>]` with ASCII digits only. Signs, exponents,
whitespace and digit separators are rejected.
"""

from fixed_decimal.config import settings
from fixed_decimal.constants import MAX_UINT128
from fixed_decimal.exceptions import DecimalOverflow, FixedDecimalTypeError, InvalidFormat
from fixed_decimal.logging import logger
from fixed_decimal.math.scale import fractional


def _is_digits(text: str) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as superscripts
    return text.isascii() and text.isdigit()


def parse_atomics(text: str, decimal_places: int, *, truncate: bool = False) -> int:
    """
    Parse a decimal string into the atomic value of a decimal with `decimal_places` digits.

    A fractional part shorter than the precision is right-padded with zeros. A longer fractional
    part is rejected unless `truncate` is set, in which case the excess digits are discarded
    (truncation toward zero, not rounding). This is a silent loss of precision for the caller, so
    it must be requested explicitly.
    """

    if not isinstance(text, str):
        raise FixedDecimalTypeError(message=f"Expected a string, got {type(text).__name__}")

    if not text:
        raise InvalidFormat(text, "empty string")
    if len(text) > settings.parser.max_input_length:
        raise InvalidFormat(
            text, f"length {len(text)} exceeds maximum {settings.parser.max_input_length}"
        )

    integer_part, point, fractional_part = text.partition(".")
    if "." in fractional_part:
        raise InvalidFormat(text, "more than one decimal point")
    if not _is_digits(integer_part):
        raise InvalidFormat(text, f"invalid integer part {integer_part!r}")
    if point and not _is_digits(fractional_part):
        raise InvalidFormat(text, f"invalid fractional part {fractional_part!r}")

    if len(fractional_part) > settings.parser.max_fractional_digits:
        raise InvalidFormat(
            text,
            f"{len(fractional_part)} fractional digits exceeds maximum "
            f"{settings.parser.max_fractional_digits}",
        )

    if len(fractional_part) > decimal_places:
        if not truncate:
            raise InvalidFormat(
                text, f"too many decimal places: {len(fractional_part)} (max {decimal_places})"
            )
        logger.debug(
            f"Truncating {text!r} from {len(fractional_part)} to {decimal_places} decimal places"
        )
        fractional_part = fractional_part[:decimal_places]

    scale = fractional(decimal_places)
    atomics = int(integer_part) * scale
    if decimal_places:
        atomics += int(fractional_part.ljust(decimal_places, "0"))

    if atomics > MAX_UINT128:
        raise DecimalOverflow(message=f"Decimal string {text!r} exceeds the uint128 atomic range")

    return atomics


def format_atomics(atomics: int, decimal_places: int) -> str:
    """
    Format an atomic value as the canonical string with exactly `decimal_places` fractional
    digits, e.g. 1_500_000 with 6 decimal places is "1.500000".
    """

    integer, fraction = divmod(atomics, fractional(decimal_places))
    if decimal_places == 0:
        return str(integer)
    return f"{integer}.{fraction:0{decimal_places}d}"


def format_compact(atomics: int, decimal_places: int) -> str:
    """
    Format an atomic value with trailing fractional zeros removed, e.g. "1.5" or "1".
    """

    integer, fraction = divmod(atomics, fractional(decimal_places))
    if fraction == 0:
        return str(integer)
    return f"{integer}.{fraction:0{decimal_places}d}".rstrip("0")
