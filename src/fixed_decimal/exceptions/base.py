class FixedDecimalError(Exception):
    """
    Root of every exception raised by fixed_decimal.

    Decimal failures (malformed strings, overflow, division by zero, mixed precisions) derive from
    `DecimalError`; misuse of the API derives from `FixedDecimalTypeError` or
    `FixedDecimalValueError`. Catching `FixedDecimalError` therefore separates this package's
    errors from those raised by Python itself or by pydantic.

    When given, the human-readable description is stored on `.message` and used as `str(exc)`.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class FixedDecimalValueError(FixedDecimalError): ...


class FixedDecimalTypeError(FixedDecimalError): ...
