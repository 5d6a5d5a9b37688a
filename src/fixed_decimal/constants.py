__all__ = (
    "LEGACY_DECIMAL_PLACES",
    "MAX_DECIMAL_PLACES",
    "MAX_UINT32",
    "MAX_UINT64",
    "MAX_UINT128",
    "MAX_UINT256",
    "MIN_DECIMAL_PLACES",
    "MIN_UINT32",
    "MIN_UINT64",
    "MIN_UINT128",
    "MIN_UINT256",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MIN_UINT32 = _min_uint(32)
MAX_UINT32 = _max_uint(32)

MIN_UINT64 = _min_uint(64)
MAX_UINT64 = _max_uint(64)

MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

MIN_UINT256 = _min_uint(256)
MAX_UINT256 = _max_uint(256)

# 10**38 is the largest power of ten that fits in a uint128
MIN_DECIMAL_PLACES = 0
MAX_DECIMAL_PLACES = len(str(MAX_UINT128)) - 1

# Precision of the ecosystem's fixed 18-digit decimal type
LEGACY_DECIMAL_PLACES = 18
