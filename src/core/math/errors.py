"""
Math Errors — таксономия ошибок fixed-point арифметики

Каждая fallible операция возвращает явный результат:
- Ok(value): успешный результат
- Err(MathError): одна из шести ошибок арифметики

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна арифметическая операция не бросает exception для MathError
   (только Err.unwrap() превращает ошибку в MathException по запросу вызывающего)
2. Ошибки не содержат данных кроме вида (kind)
3. custom_code == порядковый номер в enum
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Generic, NoReturn, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# ERROR KINDS
# =============================================================================


class MathError(IntEnum):
    """
    Вид ошибки fixed-point арифметики.

    Значение члена равно порядковому номеру, который хост использует
    как custom error code.
    """

    ADD_OVERFLOW = 0
    SUB_UNDERFLOW = 1
    MUL_OVERFLOW = 2
    DIVIDED_BY_ZERO = 3
    UNABLE_TO_ROUND_U64 = 4
    UNABLE_TO_ROUND_U128 = 5

    @property
    def message(self) -> str:
        """Короткое описание ошибки"""
        return _MESSAGES[self]

    @property
    def custom_code(self) -> int:
        """Numeric code для хоста (custom application error)"""
        return int(self)

    @staticmethod
    def error_type() -> str:
        """Категория ошибки при декодировании numeric code"""
        return "Math Error"

    @classmethod
    def from_custom_code(cls, code: int) -> "MathError":
        """
        Обратное преобразование custom code → MathError.

        Raises:
            ValueError: Если code не соответствует ни одной ошибке
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown {cls.error_type()} code: {code}") from None

    def __str__(self) -> str:
        return self.message


_MESSAGES: dict[MathError, str] = {
    MathError.ADD_OVERFLOW: "AddOverflow",
    MathError.SUB_UNDERFLOW: "Underflow",
    MathError.MUL_OVERFLOW: "MulOverflow",
    MathError.DIVIDED_BY_ZERO: "DividedByZero",
    MathError.UNABLE_TO_ROUND_U64: "UnableToRoundU64",
    MathError.UNABLE_TO_ROUND_U128: "UnableToRoundU128",
}


class MathException(ArithmeticError):
    """
    MathError, поднятый как exception.

    Возникает только при явном Err.unwrap(), для вызывающего кода,
    который прерывает всю операцию при первой ошибке.
    """

    def __init__(self, error: MathError):
        super().__init__(f"{MathError.error_type()}: {error.message}")
        self.error = error


# =============================================================================
# RESULT VALUES
# =============================================================================


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Успешный результат операции."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok({self.value!r})")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: "Callable[[T], MathResult[U]]") -> "MathResult[U]":
        return fn(self.value)


@dataclass(frozen=True)
class Err:
    """Результат операции с ошибкой арифметики."""

    error: MathError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Превращает ошибку в exception.

        Raises:
            MathException: Всегда
        """
        logger.debug("Unwrapping math fault: %s", self.error.message)
        raise MathException(self.error)

    def unwrap_err(self) -> MathError:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable) -> "Err":
        return self

    def and_then(self, fn: Callable) -> "Err":
        return self


MathResult = Union[Ok[T], Err]
