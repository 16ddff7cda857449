"""
Rate — компактное fixed-point значение для ставок и процентов

Хранение: u128, масштаб WAD. Предназначен для ставок (interest rate,
collateral factor, fee), которым не нужно вмещать произведение двух
token amounts. Любая операция, результат которой выходит за u128,
возвращает Err, даже если аналогичная операция над Decimal успешна.

Поддерживаемые пары операндов:
    Rate + Rate, Rate - Rate
    Rate × Rate, Rate × u64
    Rate ÷ Rate, Rate ÷ u64
"""

from typing import ClassVar, TypeVar

from src.core.math.common import WAD
from src.core.math.scaled import ScaledValue
from src.core.math.uint import U64, U128, UintWidth, require_uint

R = TypeVar("R", bound="Rate")


class Rate(ScaledValue):
    """Ставка (u128) с точностью 18 дробных знаков"""

    WIDTH: ClassVar[UintWidth] = U128

    @classmethod
    def from_u64(cls: type[R], val: int) -> R:
        """
        Создание Rate из целого числа.

        U64_MAX × WAD < 2^128, поэтому конверсия всегда успешна.
        """
        require_uint(val, "val", U64)
        return cls(val * WAD)
