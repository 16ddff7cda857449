"""
Unsigned Width Policy — checked примитивы для беззнаковых целых фиксированной ширины

Python int не ограничен по размеру, поэтому ширина хранения (u64/u128/u192)
задаётся явно через UintWidth, и каждая операция проверяет результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого wrap-around: выход за ширину → Err, а не усечение
2. Отрицательные значения не существуют (вычитание с заёмом → Err)
3. Деление на ноль → Err(DIVIDED_BY_ZERO), никогда ZeroDivisionError
4. Float не используется нигде
5. Операнд вне [0, width.max_value] → ValueError: это ошибка вызывающего, а не Err
"""

from dataclasses import dataclass

from src.core.math.errors import Err, MathError, MathResult, Ok


# =============================================================================
# ШИРИНА ХРАНЕНИЯ
# =============================================================================


@dataclass(frozen=True)
class UintWidth:
    """Беззнаковое целое шириной bits бит."""

    bits: int

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """True если 0 <= value <= max_value"""
        return 0 <= value <= self.max_value

    def __str__(self) -> str:
        return f"u{self.bits}"


U8 = UintWidth(8)
U64 = UintWidth(64)
U128 = UintWidth(128)
U192 = UintWidth(192)


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def require_uint(value: int, name: str, width: UintWidth) -> int:
    """
    Валидация беззнакового целого заданной ширины.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        width: Допустимая ширина

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне [0, width.max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not width.contains(value):
        raise ValueError(f"{name} must fit in {width} (0..{width.max_value}), got {value}")

    return value


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_add(a: int, b: int, width: UintWidth) -> MathResult[int]:
    """a + b или Err(ADD_OVERFLOW) при переносе за ширину"""
    require_uint(a, "a", width)
    require_uint(b, "b", width)
    result = a + b
    if result > width.max_value:
        return Err(MathError.ADD_OVERFLOW)
    return Ok(result)


def checked_sub(a: int, b: int, width: UintWidth) -> MathResult[int]:
    """a - b или Err(SUB_UNDERFLOW) если b > a"""
    require_uint(a, "a", width)
    require_uint(b, "b", width)
    if b > a:
        return Err(MathError.SUB_UNDERFLOW)
    return Ok(a - b)


def checked_mul(a: int, b: int, width: UintWidth) -> MathResult[int]:
    """a * b или Err(MUL_OVERFLOW) при выходе за ширину"""
    require_uint(a, "a", width)
    require_uint(b, "b", width)
    result = a * b
    if result > width.max_value:
        return Err(MathError.MUL_OVERFLOW)
    return Ok(result)


def checked_div(a: int, b: int, width: UintWidth) -> MathResult[int]:
    """
    Целочисленное деление с округлением вниз.

    Частное беззнаковых значений не может превысить делимое,
    поэтому единственная ошибка это нулевой делитель.
    """
    require_uint(a, "a", width)
    require_uint(b, "b", width)
    if b == 0:
        return Err(MathError.DIVIDED_BY_ZERO)
    return Ok(a // b)


def try_narrow(value: int, width: UintWidth, error: MathError) -> MathResult[int]:
    """
    Сужение значения до меньшей ширины.

    Args:
        value: Исходное значение
        width: Целевая ширина
        error: Ошибка, если value не помещается

    Returns:
        Ok(value) если помещается, иначе Err(error)

    Raises:
        TypeError: Если value не int
        ValueError: Если value отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if not width.contains(value):
        return Err(error)
    return Ok(value)


def exp10(exponent: int, width: UintWidth) -> MathResult[int]:
    """
    10^exponent в пределах ширины.

    Raises:
        ValueError: Если exponent вне 0..255
    """
    require_uint(exponent, "exponent", U8)
    return try_narrow(10**exponent, width, MathError.MUL_OVERFLOW)
