from typing import Annotated

from pydantic import Field

from fixed_decimal.constants import MAX_UINT32, MAX_UINT64, MIN_UINT32, MIN_UINT64

type ValidatedUint32 = Annotated[int, Field(strict=True, ge=MIN_UINT32, le=MAX_UINT32)]
type ValidatedUint64 = Annotated[int, Field(strict=True, ge=MIN_UINT64, le=MAX_UINT64)]
