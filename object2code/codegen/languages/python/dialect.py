"""
Python dialect.

Writes Python statements that rebuild an object graph:

    testBean0 = pkg.TestBean()
    testBean0.my_int = 255
"""

import math
from collections.abc import Set
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Type

from ...core.dialect import Dialect
from ...core.formatter import ValueFormatter
from ...core.introspection import PropertyDescriptor
from ...core.templates import TemplateError
from ...core.values import ScalarKind, scalar_kind
from .config import IMPLICIT_MODULES, PYTHON_RESERVED_WORDS, PYTHON_TYPE_MAP

_SCALAR_NAMES = {
    ScalarKind.BYTE: "int",
    ScalarKind.SHORT: "int",
    ScalarKind.INT: "int",
    ScalarKind.LONG: "int",
    ScalarKind.FLOAT: "float",
    ScalarKind.DOUBLE: "float",
    ScalarKind.BOOLEAN: "bool",
    ScalarKind.CHAR: "str",
    ScalarKind.DECIMAL: "decimal.Decimal",
    ScalarKind.STRING: "str",
}


class PythonValueFormatter(ValueFormatter):
    """Python literal syntax; integer and float widths collapse to int and float."""

    def format_byte(self, value: Any) -> str:
        return str(int(value))

    format_short = format_byte
    format_int = format_byte
    format_long = format_byte

    def format_float(self, value: Any) -> str:
        if not self.is_finite(value):
            return self._non_finite(float(value))
        return self.float_text(value)

    def format_double(self, value: Any) -> str:
        if not self.is_finite(value):
            return self._non_finite(float(value))
        return self.double_text(value)

    def format_boolean(self, value: Any) -> str:
        return "True" if value else "False"

    def format_char(self, value: Any) -> str:
        return repr(str(value))

    def format_decimal(self, value: Any) -> str:
        return f"decimal.Decimal({self.decimal_text(value)!r})"

    def format_enum(self, cls: Type, value: Enum) -> str:
        return f"{self.type_name(cls)}.{value.name}"

    def format_string(self, value: Any) -> str:
        return repr(str(value))

    @staticmethod
    def _non_finite(value: float) -> str:
        if math.isnan(value):
            return "float('nan')"
        if value > 0:
            return "float('inf')"
        return "float('-inf')"


class PythonDialect(Dialect):
    """Dialect writing Python statements."""

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_formatter(self) -> ValueFormatter:
        return PythonValueFormatter(self.type_name)

    def type_name(self, cls: Type) -> str:
        """
        Importable name of a class.

        Builtins stay bare, tuples and frozensets become their mutable
        counterparts and everything else is ``module.QualName``.
        """
        if cls in PYTHON_TYPE_MAP:
            return PYTHON_TYPE_MAP[cls]

        kind = scalar_kind(cls)
        if kind is not None and kind != ScalarKind.ENUM:
            return _SCALAR_NAMES[kind]

        qualname = cls.__qualname__.rsplit("<locals>.", 1)[-1]
        module = getattr(cls, "__module__", None)
        if not module or module in IMPLICIT_MODULES:
            return qualname
        return f"{module}.{qualname}"

    def new_instance(self, cls: Type, type_name: str) -> str:
        return f"{type_name}()"

    def missing_constructor(self, type_name: str) -> str:
        return f"None  # Could not generate code for {type_name}: no no-argument constructor"

    def null_literal(self) -> str:
        return "None"

    def declaration(self, type_name: str, variable: str, expression: str) -> str:
        return f"{variable} = {expression}"

    def set_statement(
        self, variable: str, prop: PropertyDescriptor, expression: str
    ) -> str:
        if prop.write_method:
            return f"{variable}.{prop.write_method}({expression})"
        return f"{variable}.{prop.name} = {expression}"

    def add_statement(self, variable: str, container: Any, expression: str) -> str:
        if isinstance(container, Set):
            return f"{variable}.add({expression})"
        return f"{variable}.append({expression})"

    def put_statement(self, variable: str, key: str, value: str) -> str:
        return f"{variable}[{key}] = {value}"

    # Fixture rendering

    def imports_for(self, classes: Iterable[Type]) -> List[str]:
        modules = {
            c.__module__
            for c in classes
            if c not in PYTHON_TYPE_MAP and c.__module__ not in IMPLICIT_MODULES
        }
        return [f"import {module}" for module in sorted(modules)]

    def fixture_context(self, result: Any, name: str) -> Dict[str, Any]:
        if not name.isidentifier() or name in PYTHON_RESERVED_WORDS:
            raise TemplateError(f"Invalid Python identifier: {name!r}")

        context = super().fixture_context(result, name)
        context["root_expression"] = result.root_expression or "None"
        return context
