"""Convert arbitrary values to booleans, numbers and strings."""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any, TypeVar

__all__ = ["UnsupportedConversionError", "to", "to_optional", "to_e"]

T = TypeVar("T", bool, int, float, str)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)|nan",
    re.IGNORECASE,
)
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_BYTES_TYPES = (bytes, bytearray, memoryview)


class UnsupportedConversionError(ValueError):
    """Raised when a value's type cannot be converted to the requested type."""

    def __init__(self, value: Any = None, target: type | None = None) -> None:
        if target is None:
            message = "unsupported type conversion"
        else:
            message = (
                f"unsupported type conversion: {type(value).__name__} "
                f"to {target.__name__}"
            )
        super().__init__(message)


def _invalid_syntax(text: str) -> ValueError:
    return ValueError(f'parsing "{text}": invalid syntax')


def _decode(data: bytes | bytearray | memoryview) -> str:
    return bytes(data).decode("utf-8", errors="surrogateescape")


def _trim_decimal(text: str) -> str:
    """Drop a fractional part made only of zeros, e.g. ``"1.00"`` to ``"1"``."""
    integer_part, dot, decimal_part = text.partition(".")
    if not dot:
        return text
    integer_part = integer_part or "0"
    decimal_part = decimal_part.rstrip("0")
    return f"{integer_part}.{decimal_part}" if decimal_part else integer_part


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise _invalid_syntax(text)


def _parse_int(text: str) -> int:
    trimmed = _trim_decimal(text)
    if not _INT_PATTERN.fullmatch(trimmed):
        raise _invalid_syntax(text)
    return int(trimmed)


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise _invalid_syntax(text)
    return float(text)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def _to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, numbers.Complex):
        return value != 0
    if isinstance(value, str):
        return _parse_bool(str.__str__(value))
    if isinstance(value, _BYTES_TYPES):
        return _parse_bool(_decode(value))
    raise UnsupportedConversionError(value, bool)


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(float(value)):
            raise ValueError(f"cannot convert {value!r} to an integer")
        return int(value)
    if isinstance(value, str):
        return _parse_int(str.__str__(value))
    if isinstance(value, _BYTES_TYPES):
        return _parse_int(_decode(value))
    raise UnsupportedConversionError(value, int)


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError as exc:
            raise ValueError(f"{value!r} is out of range for a float") from exc
    if isinstance(value, str):
        return _parse_float(str.__str__(value))
    if isinstance(value, _BYTES_TYPES):
        return _parse_float(_decode(value))
    raise UnsupportedConversionError(value, float)


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(float(value))
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, _BYTES_TYPES):
        return _decode(value)
    if isinstance(value, BaseException) or _has_own_str(value):
        return str(value)
    raise UnsupportedConversionError(value, str)


def _converter(target: Any):
    if not isinstance(target, type):
        raise TypeError(f"conversion target must be a type, got {target!r}")
    if issubclass(target, bool):
        return _to_bool
    if issubclass(target, int):
        return _to_int
    if issubclass(target, float):
        return _to_float
    if issubclass(target, str):
        return _to_str
    raise TypeError(f"cannot convert to {target.__name__}")


def to_e(target: type[T], value: Any) -> T:
    """Convert ``value`` to ``target``, raising ``ValueError`` on failure.

    ``target`` is ``bool``, ``int``, ``float``, ``str`` or a subclass of one
    of them. Types that cannot be converted at all raise
    :class:`UnsupportedConversionError`; malformed text raises ``ValueError``.
    """
    result = _converter(target)(value)
    if type(result) is not target:
        result = target(result)
    return result


def to(target: type[T], value: Any) -> T:
    """Convert ``value`` to ``target``, returning its zero value on failure."""
    converter = _converter(target)
    try:
        result = converter(value)
        return result if type(result) is target else target(result)
    except ValueError:
        return target()


def to_optional(target: type[T], value: Any) -> T | None:
    """Convert ``value`` to ``target``, returning ``None`` on failure."""
    _converter(target)
    try:
        return to_e(target, value)
    except ValueError:
        return None