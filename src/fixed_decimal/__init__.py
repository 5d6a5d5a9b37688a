from .config import settings
from .decimal import (
    CustomDecimal,
    Decimal,
    Decimal6,
    Decimal9,
    Decimal12,
    Decimal18,
    LegacyDecimal,
    decimal_type,
    resolve_decimal_type,
)
from .logging import logger
from .version import __version__

# isort: split

from . import exceptions, serialization
from .serialization import decode, encode, from_json, to_json

__all__ = (
    "CustomDecimal",
    "Decimal",
    "Decimal6",
    "Decimal9",
    "Decimal12",
    "Decimal18",
    "LegacyDecimal",
    "__version__",
    "decimal_type",
    "decode",
    "encode",
    "exceptions",
    "from_json",
    "logger",
    "resolve_decimal_type",
    "serialization",
    "settings",
    "to_json",
)
