"""
Storage and wire encoding for decimal values.

Values are encoded as their canonical decimal string. Decoding re-parses the string into the target
type and truncates any digits beyond its precision, so a value written under one precision can be
read back under another. Values of the legacy 18 decimal type encode to the same string as a
`Decimal18`, and their atomic values are identical.
"""

from typing import Any

import pydantic_core
import ujson

from fixed_decimal.decimal import Decimal, resolve_decimal_type
from fixed_decimal.exceptions import FixedDecimalTypeError, InvalidFormat


def encode(value: Decimal) -> str:
    if not isinstance(value, Decimal):
        raise FixedDecimalTypeError(message=f"Expected a Decimal, got {type(value).__name__}")
    return str(value)


def decode(text: str, target: type[Decimal] | int) -> Decimal:
    """
    Decode a serialized decimal string as the target type, given as a decimal type or a number of
    decimal places. Digits beyond the target precision are truncated.
    """

    return resolve_decimal_type(target).from_str(text, truncate=True)


def to_json(value: Decimal) -> str:
    """
    Encode as a JSON string literal, e.g. '"1.500000"'.
    """

    return ujson.dumps(encode(value))


def from_json(data: str | bytes, target: type[Decimal] | int) -> Decimal:
    try:
        payload: Any = pydantic_core.from_json(data)
    except ValueError as exc:
        text = data.decode(errors="replace") if isinstance(data, bytes) else data
        raise InvalidFormat(text, f"malformed JSON: {exc}") from exc
    if not isinstance(payload, str):
        raise InvalidFormat(repr(payload), "expected a JSON string")
    return decode(payload, target)
