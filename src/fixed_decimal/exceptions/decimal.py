from typing import Any

from fixed_decimal.exceptions.base import FixedDecimalError


class DecimalError(FixedDecimalError):
    """
    Exception raised by decimal construction, arithmetic, and conversion helpers.
    """


# 2nd level exceptions for Decimal types
class InvalidFormat(DecimalError):
    """
    Raised when a string does not match the `<digits>[.<digits>]` decimal grammar.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(message=f"Invalid decimal string {text!r}: {reason}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.text, self.reason)


class DecimalOverflow(DecimalError):
    """
    Raised when a result or intermediate value exceeds the uint128 range of the atomic value.
    """

    def __init__(self, message: str = "Overflow in Decimal operation") -> None:
        self.message = message
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.message,)


class DecimalUnderflow(DecimalOverflow):
    """
    Raised when a result would be negative.
    """

    def __init__(self, message: str = "Underflow in Decimal operation") -> None:
        super().__init__(message=message)


class PrecisionConversionOverflow(DecimalOverflow):
    """
    Raised when scaling a value up to a higher precision does not fit in the atomic value.
    """

    def __init__(self, from_decimals: int, to_decimals: int) -> None:
        self.from_decimals = from_decimals
        self.to_decimals = to_decimals
        super().__init__(
            message=f"Precision conversion overflow: cannot convert from {from_decimals} to "
            f"{to_decimals} decimals"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.from_decimals, self.to_decimals)


class DivideByZero(DecimalError):
    def __init__(self, message: str = "Division by zero") -> None:
        self.message = message
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.message,)


class PrecisionMismatch(DecimalError):
    """
    Raised when two decimals with different precisions are combined without an explicit
    conversion.
    """

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            message=f"Cannot combine decimals with {left} and {right} decimal places. "
            "Convert one operand with to_precision() first."
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.left, self.right)


class InvalidPrecision(DecimalError):
    """
    Raised when a decimal type is requested for a precision whose scale factor does not fit in a
    uint128.
    """

    def __init__(self, decimal_places: object) -> None:
        self.decimal_places = decimal_places
        super().__init__(message=f"Unsupported number of decimal places: {decimal_places!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.decimal_places,)
