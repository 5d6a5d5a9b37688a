from fixed_decimal.exceptions.base import (
    FixedDecimalError,
    FixedDecimalTypeError,
    FixedDecimalValueError,
)
from fixed_decimal.exceptions.decimal import (
    DecimalError,
    DecimalOverflow,
    DecimalUnderflow,
    DivideByZero,
    InvalidFormat,
    InvalidPrecision,
    PrecisionConversionOverflow,
    PrecisionMismatch,
)

from . import base, decimal

__all__ = (
    "DecimalError",
    "DecimalOverflow",
    "DecimalUnderflow",
    "DivideByZero",
    "FixedDecimalError",
    "FixedDecimalTypeError",
    "FixedDecimalValueError",
    "InvalidFormat",
    "InvalidPrecision",
    "PrecisionConversionOverflow",
    "PrecisionMismatch",
    "base",
    "decimal",
)
