"""
Scalar value model shared by all dialects.

Python has a single ``int`` and a single ``float``; the target languages do
not. The marker types below (``Byte``, ``Short``, ``Int``, ``Long``,
``Float``, ``Double``, ``Char``) carry the width information, either on the
value itself or on the annotation that declares a property.
"""

import math
import struct
import types
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Type

from .errors import UnsupportedTypeError


class ScalarKind(Enum):
    """Literal kinds understood by the value formatters."""

    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    CHAR = "char"
    DECIMAL = "decimal"
    ENUM = "enum"
    STRING = "string"


INT_KINDS = (ScalarKind.BYTE, ScalarKind.SHORT, ScalarKind.INT, ScalarKind.LONG)
FLOAT_KINDS = (ScalarKind.FLOAT, ScalarKind.DOUBLE)


class _SizedInt(int):
    bits = 64

    def __new__(cls, value=0):
        value = int(value)
        low = -(1 << (cls.bits - 1))
        high = (1 << (cls.bits - 1)) - 1
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in a {cls.bits}-bit {cls.__name__}")
        return super().__new__(cls, value)

    def __repr__(self):
        return f"{type(self).__name__}({int(self)})"


class Byte(_SizedInt):
    bits = 8


class Short(_SizedInt):
    bits = 16


class Int(_SizedInt):
    bits = 32


class Long(_SizedInt):
    bits = 64


class Float(float):
    """Single precision float; the value is rounded to binary32."""

    def __new__(cls, value=0.0):
        value = float(value)
        if math.isfinite(value):
            try:
                value = struct.unpack("<f", struct.pack("<f", value))[0]
            except OverflowError:
                value = math.copysign(math.inf, value)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Float({float32_repr(self)})"


class Double(float):
    def __repr__(self):
        return f"Double({float(self)!r})"


class Char(str):
    """A single character."""

    def __new__(cls, value="\0"):
        if len(value) != 1:
            raise ValueError(f"Char needs exactly one character, got {value!r}")
        return super().__new__(cls, value)


INT32_RANGE = (-(1 << 31), (1 << 31) - 1)
INT64_RANGE = (-(1 << 63), (1 << 63) - 1)

_KIND_RANGES = {
    ScalarKind.BYTE: (-(1 << 7), (1 << 7) - 1),
    ScalarKind.SHORT: (-(1 << 15), (1 << 15) - 1),
    ScalarKind.INT: INT32_RANGE,
    ScalarKind.LONG: INT64_RANGE,
}

# Checked in order: subclasses before their bases
_TYPE_KINDS = (
    (bool, ScalarKind.BOOLEAN),
    (Byte, ScalarKind.BYTE),
    (Short, ScalarKind.SHORT),
    (Int, ScalarKind.INT),
    (Long, ScalarKind.LONG),
    (int, ScalarKind.INT),
    (Float, ScalarKind.FLOAT),
    (Double, ScalarKind.DOUBLE),
    (float, ScalarKind.DOUBLE),
    (Decimal, ScalarKind.DECIMAL),
    (Char, ScalarKind.CHAR),
    (str, ScalarKind.STRING),
)

# Values with no literal form and no bean semantics
UNSUPPORTED_VALUE_TYPES = (
    complex,
    bytes,
    bytearray,
    memoryview,
    range,
    slice,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    types.GeneratorType,
    types.CoroutineType,
)


def scalar_kind(cls: Type) -> Optional[ScalarKind]:
    """Return the scalar kind of a type, or None for non-scalar types."""
    if not isinstance(cls, type):
        return None
    if issubclass(cls, Enum):
        return ScalarKind.ENUM
    for base, kind in _TYPE_KINDS:
        if issubclass(cls, base):
            return kind
    return None


def resolve_kind(cls: Type, value: Any) -> ScalarKind:
    """
    Resolve the literal kind used to write ``value`` declared as ``cls``.

    A bare ``int`` widens to long when it does not fit in 32 bits.

    Raises:
        UnsupportedTypeError: If the type is not a scalar or the value does
            not fit in 64 bits
    """
    kind = scalar_kind(cls)
    if kind is None:
        raise UnsupportedTypeError(cls)
    if kind in INT_KINDS:
        number = int(value)
        low, high = _KIND_RANGES[kind]
        if kind == ScalarKind.INT:
            low, high = INT64_RANGE
        if not low <= number <= high:
            raise UnsupportedTypeError(
                cls, f"Integer {number} does not fit in a {kind.value}"
            )
        if kind == ScalarKind.INT and not INT32_RANGE[0] <= number <= INT32_RANGE[1]:
            return ScalarKind.LONG
    return kind


def is_scalar(value: Any) -> bool:
    return scalar_kind(type(value)) is not None


def is_sequence(value: Any) -> bool:
    """Ordered sequences and sets, excluding text and binary types."""
    if isinstance(value, (str, bytes, bytearray, memoryview, range)):
        return False
    return isinstance(value, (Sequence, Set))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_unsupported(value: Any) -> bool:
    return isinstance(value, UNSUPPORTED_VALUE_TYPES)


def float32_repr(value: float) -> str:
    """Shortest decimal text that reads back to the same binary32 value."""
    packed = struct.pack("<f", value)
    for digits in range(1, 10):
        text = f"{value:.{digits}g}"
        if struct.pack("<f", float(text)) == packed:
            break
    if "e" not in text and "." not in text:
        text += ".0"
    return text


def float64_repr(value: float) -> str:
    return repr(float(value))


def accepts(declared_kind: ScalarKind, value: Any) -> bool:
    """True when ``value`` can be written as a literal of ``declared_kind``."""
    value_kind = scalar_kind(type(value))
    if value_kind is None or value_kind == ScalarKind.ENUM:
        return False
    if declared_kind in INT_KINDS:
        return value_kind in INT_KINDS
    if declared_kind in FLOAT_KINDS:
        return value_kind in INT_KINDS + FLOAT_KINDS
    if declared_kind == ScalarKind.DECIMAL:
        return value_kind in INT_KINDS + FLOAT_KINDS + (ScalarKind.DECIMAL,)
    if declared_kind == ScalarKind.CHAR:
        return value_kind == ScalarKind.CHAR or (
            value_kind == ScalarKind.STRING and len(value) == 1
        )
    if declared_kind == ScalarKind.STRING:
        return value_kind in (ScalarKind.STRING, ScalarKind.CHAR)
    return declared_kind == value_kind
