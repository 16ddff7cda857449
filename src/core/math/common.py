"""
Common constants — WAD scale and integer bounds

Все fixed-point значения хранятся как целое число, умноженное на WAD (10^18).
Константы ниже: единственный источник масштаба для Decimal и Rate.
"""

from typing import Final

# =============================================================================
# МАСШТАБ (WAD)
# =============================================================================

# Количество дробных десятичных разрядов
SCALE: Final[int] = 18

# Масштаб fixed-point значений: 1.0 == WAD
WAD: Final[int] = 10**SCALE

# Половина WAD для round-half-up
HALF_WAD: Final[int] = WAD // 2

# 1% в масштабе WAD
PERCENT_SCALER: Final[int] = WAD // 100

# 1 bps (0.01%) в масштабе WAD
BIPS_SCALER: Final[int] = WAD // 10_000


# =============================================================================
# ГРАНИЦЫ БЕЗЗНАКОВЫХ ЦЕЛЫХ
# =============================================================================

U64_MAX: Final[int] = 2**64 - 1
U128_MAX: Final[int] = 2**128 - 1
U192_MAX: Final[int] = 2**192 - 1


# =============================================================================
# BINARY CODEC
# =============================================================================

# Длина упакованного значения: u128 little-endian
PACKED_LEN: Final[int] = 16
