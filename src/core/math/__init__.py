"""
Core math modules

WAD fixed-point арифметика для token amounts и ставок с явной
обработкой переполнений.
"""

# Constants
from src.core.math.common import (
    BIPS_SCALER,
    HALF_WAD,
    PACKED_LEN,
    PERCENT_SCALER,
    SCALE,
    U64_MAX,
    U128_MAX,
    U192_MAX,
    WAD,
)

# Errors and results
from src.core.math.errors import (
    Err,
    MathError,
    MathException,
    MathResult,
    Ok,
)

# Width policy
from src.core.math.uint import (
    U8,
    U64,
    U128,
    U192,
    UintWidth,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    exp10,
    require_uint,
    try_narrow,
)

# Fixed-point types
from src.core.math.scaled import ScaledValue
from src.core.math.rate import Rate
from src.core.math.decimal import Decimal

# Binary codec
from src.core.math.codec import (
    pack,
    pack_into,
    unpack,
    unpack_from,
)

__all__ = [
    # Constants
    "BIPS_SCALER",
    "HALF_WAD",
    "PACKED_LEN",
    "PERCENT_SCALER",
    "SCALE",
    "U64_MAX",
    "U128_MAX",
    "U192_MAX",
    "WAD",
    # Errors and results
    "Err",
    "MathError",
    "MathException",
    "MathResult",
    "Ok",
    # Width policy
    "U8",
    "U64",
    "U128",
    "U192",
    "UintWidth",
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "exp10",
    "require_uint",
    "try_narrow",
    # Fixed-point types
    "ScaledValue",
    "Rate",
    "Decimal",
    # Binary codec
    "pack",
    "pack_into",
    "unpack",
    "unpack_from",
]
