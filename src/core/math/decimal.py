"""
Decimal — широкое fixed-point значение для token amounts

Хранение: u192, масштаб WAD. Token amounts ограничены u64, и ширина u192
вмещает произведение amount × u64 в масштабе WAD без переполнения
(U64_MAX × WAD × U64_MAX < 2^192). Произведение двух Decimal на верхней
границе u64 диапазона не помещается и возвращает Err(MUL_OVERFLOW).

Поддерживаемые пары операндов:
    Decimal + Decimal, Decimal - Decimal
    Decimal × Decimal, Decimal × Rate, Decimal × u64
    Decimal ÷ Decimal, Decimal ÷ Rate, Decimal ÷ u64

Rate продвигается в Decimal без потерь (zero-extension raw значения).
Обратная конверсия Decimal → Rate не предоставляется.
"""

from typing import Any, ClassVar, TypeVar

from src.core.math.common import WAD
from src.core.math.rate import Rate
from src.core.math.scaled import ScaledValue
from src.core.math.uint import U64, U128, U192, UintWidth, require_uint

D = TypeVar("D", bound="Decimal")


class Decimal(ScaledValue):
    """Token amount (u192) с точностью 18 дробных знаков"""

    WIDTH: ClassVar[UintWidth] = U192

    @classmethod
    def from_u64(cls: type[D], val: int) -> D:
        """Создание Decimal из целого числа u64: raw = val × WAD"""
        require_uint(val, "val", U64)
        return cls(val * WAD)

    @classmethod
    def from_u128(cls: type[D], val: int) -> D:
        """
        Создание Decimal из целого числа u128: raw = val × WAD

        U128_MAX × WAD < 2^192, поэтому конверсия всегда успешна.
        """
        require_uint(val, "val", U128)
        return cls(val * WAD)

    @classmethod
    def from_rate(cls: type[D], rate: Rate) -> D:
        """
        Продвижение Rate в Decimal (widening, без потерь).

        Raises:
            TypeError: Если rate не Rate
        """
        if not isinstance(rate, Rate):
            raise TypeError(f"rate must be a Rate, got {type(rate).__name__}")
        return cls(rate.value)

    @classmethod
    def _coerce_scaled(cls: type[D], rhs: Any, op: str) -> D:
        if isinstance(rhs, Rate):
            return cls.from_rate(rhs)
        return super()._coerce_scaled(rhs, op)
