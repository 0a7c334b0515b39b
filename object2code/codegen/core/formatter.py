"""
Literal formatting for scalar values.

``ValueFormatter.format`` resolves the scalar kind of a type and dispatches
to a ``format_<kind>`` method. Dialects subclass it to supply their own
surface syntax.
"""

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Type

from .errors import UnsupportedTypeError
from .values import Float, ScalarKind, float32_repr, float64_repr, resolve_kind


class ValueFormatter(ABC):
    """Renders scalar values as literal expressions."""

    def __init__(self, type_namer: Callable[[Type], str]):
        """
        Args:
            type_namer: Function giving the qualified target name of a type,
                used for enum constants
        """
        self.type_name = type_namer

    def format(self, cls: Type, value: Any) -> str:
        """
        Format ``value`` as a literal of type ``cls``.

        Raises:
            UnsupportedTypeError: If ``cls`` is not a supported scalar type
        """
        kind = resolve_kind(cls, value)
        if kind == ScalarKind.ENUM:
            if not isinstance(value, Enum):
                raise UnsupportedTypeError(
                    cls, f"Value {value!r} is not a member of {cls.__qualname__}"
                )
            return self.format_enum(type(value), value)
        handler = getattr(self, f"format_{kind.value}")
        return handler(value)

    def format_value(self, value: Any) -> str:
        """Format a value using its own runtime type."""
        return self.format(type(value), value)

    # Shared text helpers

    @staticmethod
    def float_text(value: Any) -> str:
        return float32_repr(Float(value))

    @staticmethod
    def double_text(value: Any) -> str:
        return float64_repr(value)

    @staticmethod
    def decimal_text(value: Any) -> str:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    @staticmethod
    def is_finite(value: Any) -> bool:
        return math.isfinite(float(value))

    # Per-kind hooks

    @abstractmethod
    def format_byte(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_short(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_int(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_long(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_float(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_double(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_boolean(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_char(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_decimal(self, value: Any) -> str:
        pass

    @abstractmethod
    def format_enum(self, cls: Type, value: Enum) -> str:
        pass

    @abstractmethod
    def format_string(self, value: Any) -> str:
        pass
