"""
Тесты для Unsigned Width Policy

Проверяет:
1. Границы u8/u64/u128/u192
2. Checked add/sub/mul/div на границах ширины
3. Валидацию входных параметров и операндов
4. Масштаб: WAD == 10^SCALE
"""

import pytest

from src.core.math.common import SCALE, U64_MAX, U128_MAX, U192_MAX, WAD
from src.core.math.errors import Err, MathError, Ok
from src.core.math.uint import (
    U8,
    U64,
    U128,
    U192,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    exp10,
    require_uint,
    try_narrow,
)


class TestUintWidth:
    """Тесты ширины хранения"""

    def test_max_values(self) -> None:
        """max_value == 2^bits - 1"""
        assert U8.max_value == 255
        assert U64.max_value == U64_MAX
        assert U128.max_value == U128_MAX
        assert U192.max_value == U192_MAX

    def test_contains(self) -> None:
        """contains принимает только 0..max_value"""
        assert U64.contains(0)
        assert U64.contains(U64_MAX)
        assert not U64.contains(U64_MAX + 1)
        assert not U64.contains(-1)

    def test_str(self) -> None:
        """Имя ширины в стиле u128"""
        assert str(U128) == "u128"


class TestCheckedArithmetic:
    """Тесты checked примитивов"""

    def test_add_at_boundary(self) -> None:
        """Сумма ровно U64_MAX допустима, на единицу больше: ADD_OVERFLOW"""
        assert checked_add(U64_MAX - 1, 1, U64) == Ok(U64_MAX)
        assert checked_add(U64_MAX, 1, U64) == Err(MathError.ADD_OVERFLOW)

    def test_sub_underflow(self) -> None:
        """Вычитание с заёмом: SUB_UNDERFLOW"""
        assert checked_sub(2, 2, U64) == Ok(0)
        assert checked_sub(1, 2, U64) == Err(MathError.SUB_UNDERFLOW)

    def test_mul_at_boundary(self) -> None:
        """2^64 помещается в u128, но не в u64"""
        assert checked_mul(2**63, 2, U128) == Ok(2**64)
        assert checked_mul(2**63, 2, U64) == Err(MathError.MUL_OVERFLOW)

    def test_div_floors(self) -> None:
        """Деление округляет вниз"""
        assert checked_div(7, 2, U64) == Ok(3)
        assert checked_div(0, 5, U64) == Ok(0)

    def test_div_by_zero(self) -> None:
        """Деление на ноль: Err, не ZeroDivisionError"""
        assert checked_div(7, 0, U64) == Err(MathError.DIVIDED_BY_ZERO)

    def test_try_narrow(self) -> None:
        """Сужение до u64 на границе"""
        assert try_narrow(U64_MAX, U64, MathError.UNABLE_TO_ROUND_U64) == Ok(U64_MAX)
        assert try_narrow(U64_MAX + 1, U64, MathError.UNABLE_TO_ROUND_U64) == Err(
            MathError.UNABLE_TO_ROUND_U64
        )

    def test_try_narrow_negative_rejected(self) -> None:
        """Отрицательное значение не сужается, а отклоняется"""
        with pytest.raises(ValueError, match="value must be non-negative"):
            try_narrow(-1, U64, MathError.UNABLE_TO_ROUND_U64)

    def test_exp10_matches_wad(self) -> None:
        """Масштаб WAD равен 10^SCALE"""
        assert exp10(SCALE, U192) == Ok(WAD)

    def test_exp10_overflow(self) -> None:
        """10^39 не помещается в u128"""
        assert exp10(0, U64) == Ok(1)
        assert exp10(38, U128) == Ok(10**38)
        assert exp10(39, U128) == Err(MathError.MUL_OVERFLOW)

    def test_exp10_negative_exponent_rejected(self) -> None:
        """Отрицательный показатель дал бы float"""
        with pytest.raises(ValueError, match="exponent must fit in u8"):
            exp10(-1, U64)


class TestOperandValidation:
    """Тесты проверки операндов checked примитивов"""

    @pytest.mark.parametrize("op", [checked_add, checked_sub, checked_mul, checked_div])
    def test_negative_operand_rejected(self, op) -> None:
        """Отрицательный операнд: ValueError, а не отрицательный результат"""
        with pytest.raises(ValueError, match="a must fit in u64"):
            op(-5, 1, U64)
        with pytest.raises(ValueError, match="b must fit in u64"):
            op(5, -1, U64)

    @pytest.mark.parametrize("op", [checked_add, checked_sub, checked_mul, checked_div])
    def test_operand_wider_than_width_rejected(self, op) -> None:
        """Операнд шире ширины операции отклоняется"""
        with pytest.raises(ValueError, match="a must fit in u64"):
            op(U64_MAX + 10, 1, U64)

    def test_sub_checks_width(self) -> None:
        """checked_sub учитывает ширину, даже если разность помещается"""
        with pytest.raises(ValueError, match="a must fit in u64"):
            checked_sub(U64_MAX + 10, 0, U64)

    def test_float_operand_rejected(self) -> None:
        """Float операнд не допускается"""
        with pytest.raises(TypeError, match="b must be an int"):
            checked_mul(1, 0.5, U64)  # type: ignore[arg-type]


class TestRequireUint:
    """Тесты валидации входов"""

    def test_valid_value_returned(self) -> None:
        """Валидное значение возвращается без изменений"""
        assert require_uint(255, "percent", U8) == 255

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value: int) -> None:
        """Значение вне u8 отклоняется"""
        with pytest.raises(ValueError, match="percent must fit in u8"):
            require_uint(value, "percent", U8)

    @pytest.mark.parametrize("value", ["1", 1.0, True, None])
    def test_not_int(self, value: object) -> None:
        """Не-int (включая bool) отклоняется"""
        with pytest.raises(TypeError, match="val must be an int"):
            require_uint(value, "val", U64)  # type: ignore[arg-type]
