import pydantic
import pytest

from fixed_decimal import Decimal, Decimal6, Decimal9, Decimal18, decode, encode, from_json, to_json
from fixed_decimal.exceptions import FixedDecimalTypeError, InvalidFormat, InvalidPrecision


def test_encode():
    assert encode(Decimal6.from_str("1.5")) == "1.500000"
    assert encode(Decimal6.ZERO) == "0.000000"
    assert encode(Decimal18.from_str("1.5")) == "1.500000000000000000"
    assert encode(Decimal[0].from_int(42)) == "42"

    with pytest.raises(FixedDecimalTypeError):
        encode("1.5")  # type: ignore[arg-type]


def test_decode():
    assert decode("1.500000", Decimal6) == Decimal6.from_str("1.5")
    assert decode("1.5", 6) == Decimal6.from_str("1.5")
    assert type(decode("1.5", 9)) is Decimal9

    with pytest.raises(InvalidFormat):
        decode("abc", Decimal6)
    with pytest.raises(InvalidPrecision):
        decode("1.5", 39)


def test_cross_precision_decoding():
    # A value stored at one precision can be read back at another
    stored = encode(Decimal6.from_str("1.5"))
    assert decode(stored, Decimal18) == Decimal18.from_str("1.5")

    # Reading at a lower precision truncates
    stored = encode(Decimal18.from_str("1.123456789012345678"))
    assert decode(stored, Decimal6) == Decimal6.from_str("1.123456")


@pytest.mark.parametrize(
    "value",
    [Decimal6.ZERO, Decimal6.ONE, Decimal6.MAX, Decimal9.from_str("0.000000001"), Decimal18.MAX],
)
def test_encode_decode(value: Decimal):
    assert decode(encode(value), type(value)) == value
    assert from_json(to_json(value), type(value)) == value


def test_json():
    assert to_json(Decimal6.from_str("1.5")) == '"1.500000"'
    assert from_json('"1.500000"', Decimal6) == Decimal6.from_str("1.5")
    assert from_json(b'"1.5"', 18) == Decimal18.from_str("1.5")

    with pytest.raises(InvalidFormat):
        from_json("1.5", Decimal6)
    with pytest.raises(InvalidFormat):
        from_json('{"value": "1.5"}', Decimal6)

    # Malformed JSON is reported like any other malformed input
    with pytest.raises(InvalidFormat):
        from_json('"1.5', Decimal6)
    with pytest.raises(InvalidFormat):
        from_json(b"\xff", Decimal6)
    with pytest.raises(InvalidFormat):
        from_json("", Decimal6)


class Position(pydantic.BaseModel):
    price: Decimal6
    size: Decimal[18]


def test_model_fields():
    position = Position(price="1.5", size=Decimal18.from_str("2"))  # type: ignore[arg-type]
    assert position.price == Decimal6.from_str("1.5")
    assert position.size == Decimal18.from_str("2")

    assert position.model_dump() == {"price": "1.500000", "size": "2.000000000000000000"}
    assert position.model_dump_json() == '{"price":"1.500000","size":"2.000000000000000000"}'

    assert Position.model_validate_json(position.model_dump_json()) == position

    # Extra digits are truncated when validating a serialized value
    assert Position(price="1.1234567", size="0").price == Decimal6.from_str("1.123456")  # type: ignore[arg-type]


def test_model_field_validation():
    with pytest.raises(pydantic.ValidationError):
        Position(price="-1.5", size="0")  # type: ignore[arg-type]
    with pytest.raises(pydantic.ValidationError):
        Position(price=Decimal9.ONE, size="0")  # type: ignore[arg-type]
    with pytest.raises(pydantic.ValidationError):
        Position(price=1.5, size="0")  # type: ignore[arg-type]
    with pytest.raises(pydantic.ValidationError):
        Position.model_validate_json('{"price": 1.5, "size": "0"}')


def test_base_class_is_not_a_valid_field_type():
    with pytest.raises(FixedDecimalTypeError):

        class Invalid(pydantic.BaseModel):
            value: Decimal
