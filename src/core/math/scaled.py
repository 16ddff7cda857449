"""
Scaled Value — общая fixed-point основа для Decimal и Rate

Значение хранится как беззнаковое целое value = true_value × WAD.
Decimal и Rate различаются только шириной хранения (WIDTH), поэтому
конструкторы, округление, отображение и checked арифметика реализованы
здесь один раз.

ПРАВИЛА МАСШТАБА:
    add/sub:     raw ± raw                  (один масштаб, без коррекции)
    mul scaled:  (raw_a × raw_b) // WAD     (произведение в масштабе WAD², делим один раз)
    div scaled:  (raw_a × WAD) // raw_b     (частное в масштабе 1, умножаем заранее)
    mul/div int: raw × n, raw // n          (целый операнд не масштабирован)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= value <= WIDTH.max_value всегда (проверяется при создании)
2. Значения immutable: каждая операция возвращает новый экземпляр
3. Ошибки арифметики возвращаются как Err(MathError), а не exception
4. Float не используется нигде
"""

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.math.common import (
    BIPS_SCALER,
    HALF_WAD,
    PERCENT_SCALER,
    SCALE,
    WAD,
)
from src.core.math.errors import MathError, MathResult, Ok
from src.core.math.uint import (
    U8,
    U64,
    U128,
    UintWidth,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    require_uint,
    try_narrow,
)

S = TypeVar("S", bound="ScaledValue")


@dataclass(frozen=True, order=True, repr=False)
class ScaledValue:
    """
    Беззнаковое fixed-point значение с масштабом WAD (10^18).

    Подклассы задают WIDTH: ширину хранения raw значения.
    Сравнение, порядок и hash определены только между значениями
    одного типа (Decimal никогда не равен Rate).
    """

    WIDTH: ClassVar[UintWidth]

    value: int

    def __post_init__(self) -> None:
        if not hasattr(type(self), "WIDTH"):
            raise TypeError(f"{type(self).__name__} is abstract: use Decimal or Rate")
        require_uint(self.value, "value", self.WIDTH)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls: type[S]) -> S:
        """Zero"""
        return cls(0)

    @classmethod
    def one(cls: type[S]) -> S:
        """One"""
        return cls(WAD)

    @classmethod
    def from_percent(cls: type[S], percent: int) -> S:
        """
        Создание значения из целого процента.

        Args:
            percent: Процент 0..255 (например, 50 → 0.5)

        Raises:
            ValueError: Если percent вне 0..255
        """
        require_uint(percent, "percent", U8)
        return cls(percent * PERCENT_SCALER)

    @classmethod
    def from_bips(cls: type[S], bips: int) -> S:
        """
        Создание значения из basis points (1 bps = 1/10000).

        Умножение выполняется в ширине хранения, а не в u64, поэтому
        большие bips не переполняются: U64_MAX × BIPS_SCALER < 2^111.

        Args:
            bips: Basis points (u64)

        Raises:
            ValueError: Если bips вне диапазона u64
        """
        require_uint(bips, "bips", U64)
        return cls(checked_mul(bips, BIPS_SCALER, cls.WIDTH).unwrap())

    @classmethod
    def from_scaled_val(cls: type[S], scaled_val: int) -> S:
        """
        Создание значения из уже масштабированного raw (u128).

        Raises:
            ValueError: Если scaled_val вне диапазона u128
        """
        require_uint(scaled_val, "scaled_val", U128)
        return cls(scaled_val)

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_scaled_val(self) -> MathResult[int]:
        """Raw значение, если оно помещается в u128"""
        return try_narrow(self.value, U128, MathError.UNABLE_TO_ROUND_U128)

    def try_round_u64(self) -> MathResult[int]:
        """
        Округление до ближайшего целого (round-half-up).

        (raw + HALF_WAD) // WAD

        Returns:
            Ok(u64) или Err:
            - ADD_OVERFLOW: raw + HALF_WAD вышло за ширину
            - UNABLE_TO_ROUND_U64: результат больше U64_MAX
        """
        return (
            checked_add(HALF_WAD, self.value, self.WIDTH)
            .and_then(lambda raw: checked_div(raw, WAD, self.WIDTH))
            .and_then(lambda rounded: try_narrow(rounded, U64, MathError.UNABLE_TO_ROUND_U64))
        )

    def try_ceil_u64(self) -> MathResult[int]:
        """
        Округление вверх: (raw + WAD - 1) // WAD

        Returns:
            Ok(u64) или Err (ADD_OVERFLOW / UNABLE_TO_ROUND_U64)
        """
        return (
            checked_sub(WAD, 1, self.WIDTH)
            .and_then(lambda wad_minus_one: checked_add(wad_minus_one, self.value, self.WIDTH))
            .and_then(lambda raw: checked_div(raw, WAD, self.WIDTH))
            .and_then(lambda ceiled: try_narrow(ceiled, U64, MathError.UNABLE_TO_ROUND_U64))
        )

    def try_floor_u64(self) -> MathResult[int]:
        """Округление вниз: raw // WAD"""
        return checked_div(self.value, WAD, self.WIDTH).and_then(
            lambda floored: try_narrow(floored, U64, MathError.UNABLE_TO_ROUND_U64)
        )

    # =========================================================================
    # CHECKED ARITHMETIC
    # =========================================================================

    @classmethod
    def _coerce_scaled(cls: type[S], rhs: Any, op: str) -> S:
        """
        Приведение scaled операнда к типу cls.

        Базовое правило: только тот же тип. Decimal расширяет его
        (Rate продвигается в Decimal).

        Raises:
            TypeError: Если пара типов не поддерживается
        """
        if type(rhs) is cls:
            return rhs
        raise TypeError(f"{cls.__name__}.{op} does not support {type(rhs).__name__} operand")

    def _require_same_type(self: S, rhs: Any, op: str) -> S:
        if type(rhs) is not type(self):
            raise TypeError(
                f"{type(self).__name__}.{op} requires {type(self).__name__}, got {type(rhs).__name__}"
            )
        return rhs

    def try_add(self: S, rhs: S) -> MathResult[S]:
        """
        Сложение значений одного типа.

        Returns:
            Ok(сумма) или Err(ADD_OVERFLOW)

        Raises:
            TypeError: Если rhs другого типа (сложение разных масштабов не определено)
        """
        other = self._require_same_type(rhs, "try_add")
        return checked_add(self.value, other.value, self.WIDTH).map(type(self))

    def try_sub(self: S, rhs: S) -> MathResult[S]:
        """
        Вычитание значений одного типа.

        Returns:
            Ok(разность) или Err(SUB_UNDERFLOW) если rhs > self
        """
        other = self._require_same_type(rhs, "try_sub")
        return checked_sub(self.value, other.value, self.WIDTH).map(type(self))

    def try_mul(self: S, rhs: Any) -> MathResult[S]:
        """
        Умножение на целое (u64) или на scaled значение.

        - int: raw × n, без коррекции масштаба
        - scaled: (raw × rhs.raw) // WAD; каждый шаг проверяется отдельно

        Returns:
            Ok(произведение) или Err(MUL_OVERFLOW)
        """
        if isinstance(rhs, int):
            factor = require_uint(rhs, "rhs", U64)
            return checked_mul(self.value, factor, self.WIDTH).map(type(self))

        other = self._coerce_scaled(rhs, "try_mul")
        return (
            checked_mul(self.value, other.value, self.WIDTH)
            .and_then(lambda raw: checked_div(raw, WAD, self.WIDTH))
            .map(type(self))
        )

    def try_div(self: S, rhs: Any) -> MathResult[S]:
        """
        Деление на целое (u64) или на scaled значение.

        - int: raw // n, без коррекции масштаба
        - scaled: (raw × WAD) // rhs.raw; MUL_OVERFLOW проверяется до деления

        Returns:
            Ok(частное) или Err (MUL_OVERFLOW / DIVIDED_BY_ZERO)
        """
        if isinstance(rhs, int):
            divisor = require_uint(rhs, "rhs", U64)
            return checked_div(self.value, divisor, self.WIDTH).map(type(self))

        other = self._coerce_scaled(rhs, "try_div")
        return (
            checked_mul(self.value, WAD, self.WIDTH)
            .and_then(lambda raw: checked_div(raw, other.value, self.WIDTH))
            .map(type(self))
        )

    def try_pow(self: S, exp: int) -> MathResult[S]:
        """
        Возведение в целую степень (exponentiation by squaring).

        Args:
            exp: Показатель степени (u64); exp == 0 → one()

        Returns:
            Ok(self^exp) или Err(MUL_OVERFLOW)
        """
        require_uint(exp, "exp", U64)

        result = type(self).one()
        base = self
        while exp:
            if exp & 1:
                step = result.try_mul(base)
                if step.is_err():
                    return step
                result = step.unwrap()
            exp >>= 1
            if exp:
                # Квадрат нужен только если остались биты показателя
                squared = base.try_mul(base)
                if squared.is_err():
                    return squared
                base = squared.unwrap()
        return Ok(result)

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        scaled_val = str(self.value)
        if len(scaled_val) <= SCALE:
            return "0." + scaled_val.zfill(SCALE)
        return f"{scaled_val[:-SCALE]}.{scaled_val[-SCALE:]}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True, when_used="always"
            ),
        )

    @staticmethod
    def _serialize(value: "ScaledValue", info: core_schema.SerializationInfo) -> Any:
        # JSON: строка цифр (u128/u192 не помещаются в double).
        # Python: raw int, иначе pydantic разворачивает dataclass в dict
        if info.mode_is_json():
            return str(value.value)
        return value.value

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": "^[0-9]+$",
            "description": f"{cls.__name__} raw value scaled by 10^{SCALE}",
        }

    @classmethod
    def _validate(cls: type[S], value: Any) -> S:
        """
        Валидация входа pydantic.

        Принимает экземпляр (с продвижением Rate → Decimal), raw int
        или строку цифр raw значения.

        Raises:
            ValueError: Если вход невалиден (pydantic превращает в ValidationError)
        """
        if isinstance(value, ScaledValue):
            try:
                return cls._coerce_scaled(value, "validate")
            except TypeError as e:
                raise ValueError(str(e)) from e

        if isinstance(value, str):
            if not (value.isascii() and value.isdigit()):
                raise ValueError(f"{cls.__name__} raw value must be a string of digits, got {value!r}")
            value = int(value)

        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{cls.__name__} expects int or str raw value, got {type(value).__name__}")

        if not cls.WIDTH.contains(value):
            raise ValueError(f"{cls.__name__} raw value must fit in {cls.WIDTH}, got {value}")

        return cls(value)
