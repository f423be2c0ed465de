"""Strict conversion of command arguments into typed values."""

from __future__ import annotations

import math
import string
import struct
from enum import Enum, auto
from typing import Union

__all__ = [
    "BadConversion",
    "Target",
    "parse_unsigned",
    "parse_signed",
    "parse_bool",
    "parse_char",
    "parse_float",
    "from_string",
]

_DIGITS = frozenset(string.digits)


class BadConversion(ValueError):
    """Raised when a string cannot be interpreted as the requested type."""

    def __init__(self, message: str = "") -> None:
        super().__init__(
            message
            or "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


class Target(Enum):
    """Types a string argument can be converted into."""

    STRING = auto()
    NULL = auto()
    BOOL = auto()
    CHAR = auto()
    SIGNED_CHAR = auto()
    SHORT = auto()
    INT = auto()
    LONG = auto()
    LONG_LONG = auto()
    UNSIGNED_CHAR = auto()
    UNSIGNED_SHORT = auto()
    UNSIGNED_INT = auto()
    UNSIGNED_LONG = auto()
    UNSIGNED_LONG_LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    LONG_DOUBLE = auto()


_SIGNED_BITS = {
    Target.SIGNED_CHAR: 8,
    Target.SHORT: 16,
    Target.INT: 32,
    Target.LONG: 64,
    Target.LONG_LONG: 64,
}

_UNSIGNED_BITS = {
    Target.UNSIGNED_CHAR: 8,
    Target.UNSIGNED_SHORT: 16,
    Target.UNSIGNED_INT: 32,
    Target.UNSIGNED_LONG: 64,
    Target.UNSIGNED_LONG_LONG: 64,
}

_PYTHON_TYPES = {
    str: Target.STRING,
    type(None): Target.NULL,
    bool: Target.BOOL,
    int: Target.LONG_LONG,
    float: Target.DOUBLE,
}


def _digits(text: str, bits: int) -> int:
    if not text or not all(c in _DIGITS for c in text):
        raise BadConversion()
    try:
        value = int(text)
    except ValueError as exc:
        raise BadConversion() from exc
    if value >= 1 << bits:
        raise BadConversion()
    return value


def parse_unsigned(text: str, bits: int) -> int:
    """Parse an unsigned integer of ``bits`` width, with an optional '+'."""
    if not text:
        raise BadConversion()
    if text[0] == "+":
        text = text[1:]
    return _digits(text, bits)


def parse_signed(text: str, bits: int) -> int:
    """Parse a two's-complement integer of ``bits`` width."""
    if not text:
        raise BadConversion()
    limit = 1 << (bits - 1)
    if text[0] == "-":
        value = _digits(text[1:], bits)
        if value > limit:
            raise BadConversion()
        return -value
    if text[0] == "+":
        text = text[1:]
    value = _digits(text, bits)
    if value > limit - 1:
        raise BadConversion()
    return value


def parse_bool(text: str) -> bool:
    """Parse 'true', 'false' or an integer equal to 1 or 0."""
    if text == "true":
        return True
    if text == "false":
        return False
    value = parse_signed(text, 64)
    if value == 1:
        return True
    if value == 0:
        return False
    raise BadConversion()


def parse_char(text: str) -> str:
    """Accept exactly one character."""
    if len(text) != 1:
        raise BadConversion()
    return text


def _is_infinity_literal(text: str) -> bool:
    return text.lstrip("+-").lower() in ("inf", "infinity")


def parse_float(text: str) -> float:
    """Parse a double-precision number; the whole string must be consumed."""
    if not text or any(c.isspace() for c in text) or "_" in text:
        raise BadConversion()
    try:
        value = float(text)
    except ValueError:
        if not text.lstrip("+-").lower().startswith("0x"):
            raise BadConversion() from None
        try:
            value = float.fromhex(text)
        except (ValueError, OverflowError) as exc:
            raise BadConversion() from exc
    if math.isinf(value) and not _is_infinity_literal(text):
        raise BadConversion()
    return value


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise BadConversion() from exc


def from_string(text: str, target: Union[Target, type]) -> object:
    """Convert ``text`` to ``target``, a Target or one of str, bool, int, float, NoneType."""
    if not isinstance(target, Target):
        try:
            target = _PYTHON_TYPES[target]
        except (KeyError, TypeError):
            raise TypeError(f"unsupported conversion target: {target!r}") from None
    if target is Target.STRING:
        return text
    if target is Target.NULL:
        return None
    if target is Target.BOOL:
        return parse_bool(text)
    if target is Target.CHAR:
        return parse_char(text)
    if target in _SIGNED_BITS:
        return parse_signed(text, _SIGNED_BITS[target])
    if target in _UNSIGNED_BITS:
        return parse_unsigned(text, _UNSIGNED_BITS[target])
    if target is Target.FLOAT:
        return _to_float32(parse_float(text))
    return parse_float(text)