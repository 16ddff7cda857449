"""
Binary Codec — фиксированная 16-байтовая упаковка scaled значений

Формат: raw значение как u128 little-endian (старший байт: индекс 15).
Decimal, raw которого не помещается в u128, не упаковывается:
pack возвращает Err(UNABLE_TO_ROUND_U128), как и остальные операции.

Round-trip: unpack(pack(d).unwrap()) == d для любого d с raw <= U128_MAX.
"""

import logging
from typing import Optional, TypeVar, Union

from src.core.math.common import PACKED_LEN
from src.core.math.decimal import Decimal
from src.core.math.errors import MathResult, Ok
from src.core.math.scaled import ScaledValue

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=ScaledValue)

WritableBuffer = Union[bytearray, memoryview]


def pack(value: ScaledValue) -> MathResult[bytes]:
    """
    Упаковка значения в 16 байт.

    Args:
        value: Decimal или Rate

    Returns:
        Ok(16 байт little-endian) или Err(UNABLE_TO_ROUND_U128)
    """
    scaled_val = value.to_scaled_val()
    if scaled_val.is_err():
        logger.warning("%r cannot be packed: %s", value, scaled_val.unwrap_err().message)
        return scaled_val
    return Ok(scaled_val.unwrap().to_bytes(PACKED_LEN, "little"))


def pack_into(value: ScaledValue, buffer: WritableBuffer, offset: int = 0) -> MathResult[None]:
    """
    Упаковка значения в buffer[offset:offset + 16].

    При ошибке buffer не изменяется.

    Raises:
        ValueError: Если в buffer меньше 16 байт после offset
    """
    _require_span(len(buffer), offset)

    packed = pack(value)
    if packed.is_err():
        return packed

    buffer[offset : offset + PACKED_LEN] = packed.unwrap()
    return Ok(None)


def unpack(data: bytes, cls: Optional[type[S]] = None) -> S:
    """
    Распаковка первых 16 байт в значение.

    Args:
        data: Байты (читаются первые 16)
        cls: Целевой тип (default: Decimal)

    Raises:
        ValueError: Если data короче 16 байт
    """
    return unpack_from(data, 0, cls)


def unpack_from(data: Union[bytes, bytearray, memoryview], offset: int = 0, cls: Optional[type[S]] = None) -> S:
    """Распаковка 16 байт, начиная с offset"""
    _require_span(len(data), offset)

    target = cls or Decimal
    scaled_val = int.from_bytes(bytes(data[offset : offset + PACKED_LEN]), "little")
    logger.debug("Unpacked %s raw value %d at offset %d", target.__name__, scaled_val, offset)
    return target.from_scaled_val(scaled_val)


def _require_span(length: int, offset: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    if length - offset < PACKED_LEN:
        raise ValueError(
            f"buffer must hold {PACKED_LEN} bytes at offset {offset}, got {max(length - offset, 0)}"
        )
