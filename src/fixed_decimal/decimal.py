"""
Fixed-point decimal values with a per-type number of decimal places.

A value of `Decimal[D]` stores an unsigned 128-bit atomic integer and represents `atomics / 10**D`.
Each precision is a distinct subclass created on demand by `decimal_type` and cached, so values of
different precisions never compare equal and cannot be combined without an explicit
`to_precision` call.

Every fallible operation comes in up to three forms:
    - the plain method or operator raises `DecimalOverflow`, `DecimalUnderflow` or `DivideByZero`
    - the `checked_*` method returns `None` instead of raising
    - the `saturating_*` method clamps the result to `MAX` or `ZERO`
"""

import functools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler, TypeAdapter
from pydantic_core import core_schema

from fixed_decimal.constants import LEGACY_DECIMAL_PLACES, MAX_DECIMAL_PLACES, MAX_UINT128
from fixed_decimal.exceptions import (
    DecimalError,
    DecimalOverflow,
    DecimalUnderflow,
    DivideByZero,
    FixedDecimalTypeError,
    FixedDecimalValueError,
    InvalidFormat,
    PrecisionConversionOverflow,
    PrecisionMismatch,
)
from fixed_decimal.logging import logger
from fixed_decimal.math.full_math import muldiv, muldiv_rounding_up
from fixed_decimal.math.functions import div_rounding_up, isqrt, to_uint128
from fixed_decimal.math.scale import fractional, pow10, scale_factor
from fixed_decimal.parsing import format_atomics, format_compact, parse_atomics
from fixed_decimal.validation.values import ValidatedUint32, ValidatedUint64

_uint32_adapter: TypeAdapter[int] = TypeAdapter(ValidatedUint32)
_uint64_adapter: TypeAdapter[int] = TypeAdapter(ValidatedUint64)


def _uint128_operand(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FixedDecimalTypeError(message=f"Expected an int, got {type(value).__name__}")
    return to_uint128(value)


def _checked[T](operation: Callable[[], T]) -> T | None:
    try:
        return operation()
    except (DecimalOverflow, DivideByZero):
        return None


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Decimal:
    """
    A fixed-point decimal. Use a concrete precision such as `Decimal[6]` or `Decimal6` to create
    values; the base class only exists for `isinstance` checks and shared behavior.
    """

    atomics: int

    DECIMAL_PLACES: ClassVar[int]
    FRACTIONAL: ClassVar[int]
    ZERO: ClassVar["Decimal"]
    ONE: ClassVar["Decimal"]
    MAX: ClassVar["Decimal"]

    def __post_init__(self) -> None:
        if type(self) is Decimal:
            raise FixedDecimalTypeError(
                message="Decimal has no precision. Use a concrete type such as Decimal[6]."
            )
        _uint128_operand(self.atomics)

    def __class_getitem__(cls, decimal_places: int) -> type["Decimal"]:
        return decimal_type(decimal_places)

    def __reduce__(self) -> tuple[Any, ...]:
        # Types are created at runtime, so rebuild them from the precision when unpickling
        return _restore, (self.DECIMAL_PLACES, self.atomics)

    # ========== Construction ==========

    @classmethod
    def raw(cls, atomics: int) -> Self:
        """
        Wrap raw atomic units, e.g. `Decimal6.raw(1_500_000)` is 1.5.
        """

        return cls(atomics)

    @classmethod
    def from_str(cls, text: str, *, truncate: bool = False) -> Self:
        """
        Parse a `<digits>[.<digits>]` string.

        Input with more fractional digits than the precision raises `InvalidFormat` unless
        `truncate` is set, which discards the extra digits.
        """

        return cls(parse_atomics(text, cls.DECIMAL_PLACES, truncate=truncate))

    @classmethod
    def checked_from_str(cls, text: str, *, truncate: bool = False) -> Self | None:
        """
        Parse like `from_str`, returning `None` for malformed or out of range input.
        """

        try:
            return cls.from_str(text, truncate=truncate)
        except (InvalidFormat, DecimalOverflow):
            return None

    @classmethod
    def from_int(cls, value: int) -> Self:
        """
        Convert an unscaled integer, e.g. 5 becomes 5.0.
        """

        return cls(to_uint128(_uint128_operand(value) * cls.FRACTIONAL))

    @classmethod
    def from_atomics(cls, atomics: int, decimal_places: int) -> Self:
        """
        Create a value from atomic units expressed with `decimal_places` digits, scaling to this
        type's precision. Scaling down truncates; scaling up raises `DecimalOverflow` if the result
        does not fit.
        """

        atomics = _uint128_operand(atomics)
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
            raise FixedDecimalTypeError(
                message=f"Expected an int, got {type(decimal_places).__name__}"
            )
        if decimal_places < 0:
            raise FixedDecimalValueError(message="Decimal places must be non-negative")

        if decimal_places < cls.DECIMAL_PLACES:
            return cls(to_uint128(atomics * pow10(cls.DECIMAL_PLACES - decimal_places)))
        if decimal_places - cls.DECIMAL_PLACES > MAX_DECIMAL_PLACES:
            # A uint128 is below 10**39, so the quotient is zero
            return cls.ZERO
        return cls(atomics // pow10(decimal_places - cls.DECIMAL_PLACES))

    @classmethod
    def _from_fraction(cls, value: int, per: int) -> Self:
        value = _uint64_adapter.validate_python(value)
        return cls(to_uint128(muldiv(value, cls.FRACTIONAL, per)))

    @classmethod
    def percent(cls, x: int) -> Self:
        """
        Create from a percentage, e.g. `percent(50)` is 0.5.
        """

        return cls._from_fraction(x, 100)

    @classmethod
    def permille(cls, x: int) -> Self:
        """
        Create from a permille value, e.g. `permille(125)` is 0.125.
        """

        return cls._from_fraction(x, 1_000)

    @classmethod
    def bps(cls, x: int) -> Self:
        """
        Create from basis points, e.g. `bps(50)` is 0.005.
        """

        return cls._from_fraction(x, 10_000)

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> Self:
        """
        Create the truncated ratio `numerator / denominator` of two unscaled integers.
        """

        numerator = _uint128_operand(numerator)
        denominator = _uint128_operand(denominator)
        if denominator == 0:
            raise DivideByZero(message="Denominator must not be zero")
        return cls(to_uint128(muldiv(numerator, cls.FRACTIONAL, denominator)))

    @classmethod
    def checked_from_ratio(cls, numerator: int, denominator: int) -> Self | None:
        return _checked(lambda: cls.from_ratio(numerator, denominator))

    @classmethod
    def from_legacy(cls, value: "Decimal") -> Self:
        """
        Convert a value of the legacy 18 decimal type into this precision.
        """

        if not isinstance(value, Decimal):
            raise FixedDecimalTypeError(message=f"Expected a Decimal, got {type(value).__name__}")
        if value.DECIMAL_PLACES != LEGACY_DECIMAL_PLACES:
            raise PrecisionMismatch(LEGACY_DECIMAL_PLACES, value.DECIMAL_PLACES)
        return value.to_precision(cls)

    @classmethod
    def sum(cls, values: Iterable["Decimal"]) -> Self:
        if cls is Decimal:
            raise FixedDecimalTypeError(message="Use a concrete type such as Decimal[6].sum()")
        return functools.reduce(lambda total, value: total.add(value), values, cls.ZERO)

    @classmethod
    def product(cls, values: Iterable["Decimal"]) -> Self:
        if cls is Decimal:
            raise FixedDecimalTypeError(message="Use a concrete type such as Decimal[6].product()")
        return functools.reduce(lambda total, value: total.mul(value), values, cls.ONE)

    # ========== Accessors ==========

    @property
    def decimal_places(self) -> int:
        return self.DECIMAL_PLACES

    def is_zero(self) -> bool:
        return self.atomics == 0

    def _same_precision(self, other: object) -> Self:
        if not isinstance(other, Decimal):
            raise FixedDecimalTypeError(message=f"Expected a Decimal, got {type(other).__name__}")
        if other.DECIMAL_PLACES != self.DECIMAL_PLACES:
            raise PrecisionMismatch(self.DECIMAL_PLACES, other.DECIMAL_PLACES)
        return other  # type: ignore[return-value]

    def _new(self, atomics: int) -> Self:
        return type(self)(to_uint128(atomics))

    # ========== Precision Conversion ==========

    def to_precision(self, target: "type[Decimal] | int") -> "Decimal":
        """
        Convert to another precision, given as a decimal type or a number of decimal places.

        Scaling down divides the atomic value and truncates toward zero. The discarded digits are
        lost and converting back will not restore them. Scaling up multiplies the atomic value and
        raises `PrecisionConversionOverflow` if the result does not fit in a uint128.
        """

        target_type = resolve_decimal_type(target)
        from_decimals = self.DECIMAL_PLACES
        to_decimals = target_type.DECIMAL_PLACES

        if to_decimals == from_decimals:
            return target_type(self.atomics)

        factor = scale_factor(from_decimals, to_decimals)
        if to_decimals > from_decimals:
            scaled = self.atomics * factor
            if scaled > MAX_UINT128:
                raise PrecisionConversionOverflow(from_decimals, to_decimals)
            return target_type(scaled)

        result = target_type(self.atomics // factor)
        if self.atomics % factor:
            logger.debug(f"Truncated {self!r} to {result!r}")
        return result

    def try_to_precision(self, target: "type[Decimal] | int") -> "Decimal | None":
        """
        Convert to another precision, returning `None` if scaling up would overflow.
        """

        try:
            return self.to_precision(target)
        except PrecisionConversionOverflow:
            return None

    def to_legacy(self) -> "Decimal":
        """
        Convert to the legacy 18 decimal type. With 18 decimal places the atomic value is unchanged.
        """

        return self.to_precision(LEGACY_DECIMAL_PLACES)

    # ========== Arithmetic ==========

    def add(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self._new(self.atomics + other.atomics)

    def sub(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self._new(self.atomics - other.atomics)

    def mul(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self._new(muldiv(self.atomics, other.atomics, self.FRACTIONAL))

    def div(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        if other.is_zero():
            raise DivideByZero
        return self._new(muldiv(self.atomics, self.FRACTIONAL, other.atomics))

    def rem(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        if other.is_zero():
            raise DivideByZero
        return self._new(self.atomics % other.atomics)

    def pow(self, exp: int) -> Self:
        """
        Raise to a uint32 power by repeated multiplication. Each step truncates to the type's
        precision, matching a sequence of `*` operations.
        """

        if isinstance(exp, bool) or not isinstance(exp, int):
            raise FixedDecimalTypeError(message=f"Expected an int, got {type(exp).__name__}")
        exp = _uint32_adapter.validate_python(exp)

        if exp == 0:
            return self.ONE
        if exp == 1 or self.is_zero() or self == self.ONE:
            return self

        result = self
        for _ in range(1, exp):
            result = result.mul(self)
            if result.is_zero():
                break
        return result

    def sqrt(self) -> Self:
        """
        The square root, truncated to the type's precision.

        sqrt(a / s) == sqrt(a * s) / s, so the atomic value is rescaled by the fractional factor
        before taking the integer square root.
        """

        return self._new(isqrt(self.atomics * self.FRACTIONAL))

    def checked_add(self, other: "Decimal") -> Self | None:
        return _checked(lambda: self.add(other))

    def checked_sub(self, other: "Decimal") -> Self | None:
        return _checked(lambda: self.sub(other))

    def checked_mul(self, other: "Decimal") -> Self | None:
        return _checked(lambda: self.mul(other))

    def checked_div(self, other: "Decimal") -> Self | None:
        return _checked(lambda: self.div(other))

    def checked_rem(self, other: "Decimal") -> Self | None:
        return _checked(lambda: self.rem(other))

    def checked_pow(self, exp: int) -> Self | None:
        return _checked(lambda: self.pow(exp))

    def saturating_add(self, other: "Decimal") -> Self:
        result = self.checked_add(other)
        return self.MAX if result is None else result

    def saturating_sub(self, other: "Decimal") -> Self:
        result = self.checked_sub(other)
        return self.ZERO if result is None else result

    def saturating_mul(self, other: "Decimal") -> Self:
        result = self.checked_mul(other)
        return self.MAX if result is None else result

    def saturating_pow(self, exp: int) -> Self:
        result = self.checked_pow(exp)
        return self.MAX if result is None else result

    # ========== Operations with unscaled integers ==========

    def mul_floor(self, value: int) -> int:
        """
        Multiply an unscaled integer by this value, rounding down, e.g. 2.5 * 1000 = 2500.
        """

        return to_uint128(muldiv(self.atomics, _uint128_operand(value), self.FRACTIONAL))

    def mul_ceil(self, value: int) -> int:
        """
        Multiply an unscaled integer by this value, rounding up any fractional remainder.
        """

        return to_uint128(
            muldiv_rounding_up(self.atomics, _uint128_operand(value), self.FRACTIONAL)
        )

    def div_int(self, value: int) -> Self:
        """
        Divide by an unscaled integer, e.g. 10.0 / 2 = 5.0.
        """

        value = _uint128_operand(value)
        if value == 0:
            raise DivideByZero
        return self._new(self.atomics // value)

    def uint_div(self, value: int) -> int:
        """
        Divide an unscaled integer by this value, rounding down, e.g. 1000 / 2.5 = 400.
        """

        value = _uint128_operand(value)
        if self.is_zero():
            raise DivideByZero
        return to_uint128(muldiv(value, self.FRACTIONAL, self.atomics))

    # ========== Rounding & Comparisons ==========

    def floor(self) -> Self:
        return self._new(self.atomics // self.FRACTIONAL * self.FRACTIONAL)

    def ceil(self) -> Self:
        floor = self.floor()
        if floor == self:
            return floor
        return floor.add(self.ONE)

    def to_uint_floor(self) -> int:
        return self.atomics // self.FRACTIONAL

    def to_uint_ceil(self) -> int:
        return div_rounding_up(self.atomics, self.FRACTIONAL)

    def min(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self if self.atomics < other.atomics else other

    def max(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self if self.atomics > other.atomics else other

    def abs_diff(self, other: "Decimal") -> Self:
        other = self._same_precision(other)
        return self._new(abs(self.atomics - other.atomics))

    # ========== Formatting ==========

    def to_compact_str(self) -> str:
        """
        Format without trailing fractional zeros, e.g. "1.5" instead of "1.500000".
        """

        return format_compact(self.atomics, self.DECIMAL_PLACES)

    def __str__(self) -> str:
        return format_atomics(self.atomics, self.DECIMAL_PLACES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    # ========== Operators ==========

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.DECIMAL_PLACES == other.DECIMAL_PLACES and self.atomics == other.atomics

    def __hash__(self) -> int:
        return hash((self.DECIMAL_PLACES, self.atomics))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.atomics < self._same_precision(other).atomics

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.atomics <= self._same_precision(other).atomics

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.atomics > self._same_precision(other).atomics

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.atomics >= self._same_precision(other).atomics

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __add__(self, other: object) -> Self:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Self | int":
        if isinstance(other, Decimal):
            return self.mul(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_floor(other)
        return NotImplemented

    def __rmul__(self, other: object) -> int:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_floor(other)
        return NotImplemented

    def __truediv__(self, other: object) -> Self:
        if isinstance(other, Decimal):
            return self.div(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.div_int(other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> int:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.uint_div(other)
        return NotImplemented

    def __mod__(self, other: object) -> Self:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.rem(other)

    def __pow__(self, exp: int) -> Self:
        return self.pow(exp)

    def __neg__(self) -> Self:
        if self.is_zero():
            return self
        raise DecimalUnderflow(message="Negation of non-zero Decimal is not supported")

    def __pos__(self) -> Self:
        return self

    # ========== Pydantic ==========

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """
        Validate from an instance of the same type or from a decimal string, and serialize to the
        canonical string.
        """

        if cls is Decimal:
            raise FixedDecimalTypeError(
                message="Model fields must use a concrete type such as Decimal[6]."
            )

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls._validate_serialized),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, info_arg=False, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def _validate_serialized(cls, value: str) -> Self:
        try:
            return cls.from_str(value, truncate=True)
        except DecimalError as exc:
            # pydantic only converts ValueError and AssertionError into validation errors
            raise ValueError(exc.message) from exc


def _restore(decimal_places: int, atomics: int) -> Decimal:
    return decimal_type(decimal_places)(atomics)


@functools.cache
def _create_decimal_type(decimal_places: int) -> type[Decimal]:
    name = f"Decimal{decimal_places}"
    cls = type(
        name,
        (Decimal,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "DECIMAL_PLACES": decimal_places,
            "FRACTIONAL": fractional(decimal_places),
        },
    )
    cls.ZERO = cls(0)
    cls.ONE = cls(cls.FRACTIONAL)
    cls.MAX = cls(MAX_UINT128)
    logger.debug(f"Created decimal type {name} with scale factor {cls.FRACTIONAL}")
    return cls


def decimal_type(decimal_places: int) -> type[Decimal]:
    """
    Get the decimal type with the given number of decimal places. The same type object is returned
    for every call with the same precision.

    Raises `InvalidPrecision` unless 0 <= decimal_places <= 38.
    """

    # Validates the precision before it reaches the cache
    fractional(decimal_places)
    return _create_decimal_type(decimal_places)


def resolve_decimal_type(target: type[Decimal] | int) -> type[Decimal]:
    """
    Accept either a concrete decimal type or a number of decimal places.
    """

    if isinstance(target, type) and issubclass(target, Decimal) and target is not Decimal:
        return target
    if isinstance(target, int) and not isinstance(target, bool):
        return decimal_type(target)
    raise FixedDecimalTypeError(message=f"Expected a decimal type or precision, got {target!r}")


Decimal6 = decimal_type(6)
Decimal9 = decimal_type(9)
Decimal12 = decimal_type(12)
Decimal18 = decimal_type(18)

# The default precision, and the ecosystem's fixed 18 decimal type
CustomDecimal = Decimal6
LegacyDecimal = Decimal18
