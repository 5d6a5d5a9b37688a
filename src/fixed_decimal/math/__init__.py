from . import full_math as FullMath
from . import functions as Functions
from . import scale as Scale

__all__ = (
    "FullMath",
    "Functions",
    "Scale",
)
