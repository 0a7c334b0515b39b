"""
Java dialect.

Writes Java statements that rebuild a Python object graph:

    pkg.TestBean testBean0 = new pkg.TestBean();
    testBean0.setMyInt(255);
"""

import math
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Type

from ...core.dialect import Dialect
from ...core.formatter import ValueFormatter
from ...core.introspection import PropertyDescriptor
from ...core.naming import capitalize
from ...core.templates import TemplateError
from ...core.values import ScalarKind, scalar_kind
from .config import (
    JAVA_IMPORT_MAP,
    JAVA_RESERVED_WORDS,
    JAVA_TYPE_MAP,
    UNQUALIFIED_MODULES,
)

_PRIMITIVE_NAMES = {
    ScalarKind.BYTE: "byte",
    ScalarKind.SHORT: "short",
    ScalarKind.INT: "int",
    ScalarKind.LONG: "long",
    ScalarKind.FLOAT: "float",
    ScalarKind.DOUBLE: "double",
    ScalarKind.BOOLEAN: "boolean",
    ScalarKind.CHAR: "char",
    ScalarKind.DECIMAL: "java.math.BigDecimal",
    ScalarKind.STRING: "String",
}


def qualified_name(cls: Type) -> str:
    """Dotted ``module.QualName`` of a class, without enclosing function scopes."""
    qualname = cls.__qualname__.rsplit("<locals>.", 1)[-1]
    module = getattr(cls, "__module__", None)
    if not module or module in UNQUALIFIED_MODULES:
        return qualname
    return f"{module}.{qualname}"


class JavaValueFormatter(ValueFormatter):
    """Java literal syntax."""

    def format_byte(self, value: Any) -> str:
        return f"(byte) {int(value)}"

    def format_short(self, value: Any) -> str:
        return f"(short){int(value)}"

    def format_int(self, value: Any) -> str:
        return str(int(value))

    def format_long(self, value: Any) -> str:
        return f"{int(value)}l"

    def format_float(self, value: Any) -> str:
        if not self.is_finite(value):
            return self._non_finite("Float", float(value))
        return f"{self.float_text(value)}f"

    def format_double(self, value: Any) -> str:
        if not self.is_finite(value):
            return self._non_finite("Double", float(value))
        return self.double_text(value)

    def format_boolean(self, value: Any) -> str:
        return "true" if value else "false"

    def format_char(self, value: Any) -> str:
        if value == "\0":
            return "''"
        return f"'{value}'"

    def format_decimal(self, value: Any) -> str:
        return f'new BigDecimal("{self.decimal_text(value)}")'

    def format_enum(self, cls: Type, value: Enum) -> str:
        return f"{self.type_name(cls)}.{value.name}"

    def format_string(self, value: Any) -> str:
        # Embedded quotes and control characters are written as they are
        return f'"{value}"'

    @staticmethod
    def _non_finite(box: str, value: float) -> str:
        if math.isnan(value):
            return f"{box}.NaN"
        if value > 0:
            return f"{box}.POSITIVE_INFINITY"
        return f"{box}.NEGATIVE_INFINITY"


class JavaDialect(Dialect):
    """Dialect writing Java statements."""

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def create_formatter(self) -> ValueFormatter:
        return JavaValueFormatter(self.type_name)

    def type_name(self, cls: Type) -> str:
        """
        Java name of a Python class.

        Explicit ``type_names`` overrides from the custom config win, then
        containers and scalars map to their Java counterparts; other classes
        keep their dotted Python name.
        """
        qualified = qualified_name(cls)
        overrides = self.config.custom.get("type_names", {})
        if qualified in overrides:
            return overrides[qualified]

        if cls in JAVA_TYPE_MAP:
            return JAVA_TYPE_MAP[cls]

        kind = scalar_kind(cls)
        if kind is not None and kind != ScalarKind.ENUM:
            return _PRIMITIVE_NAMES[kind]

        return qualified

    def new_instance(self, cls: Type, type_name: str) -> str:
        return f"new {type_name}()"

    def missing_constructor(self, type_name: str) -> str:
        return (
            f"null /* Could not generate code for {type_name} "
            "there is no no-args constructor */"
        )

    def null_literal(self) -> str:
        return "null"

    def declaration(self, type_name: str, variable: str, expression: str) -> str:
        return f"{type_name} {variable} = {expression};"

    def set_statement(
        self, variable: str, prop: PropertyDescriptor, expression: str
    ) -> str:
        method = prop.write_method or f"set{capitalize(prop.name)}"
        return f"{variable}.{method}({expression});"

    def add_statement(self, variable: str, container: Any, expression: str) -> str:
        return f"{variable}.add({expression});"

    def put_statement(self, variable: str, key: str, value: str) -> str:
        return f"{variable}.put({key}, {value});"

    # Fixture rendering

    def imports_for(self, classes: Iterable[Type]) -> List[str]:
        return sorted({JAVA_IMPORT_MAP[c] for c in classes if c in JAVA_IMPORT_MAP})

    def fixture_context(self, result: Any, name: str) -> Dict[str, Any]:
        class_name = self.config.custom.get("fixture_class", "Fixtures")
        for identifier in (name, class_name):
            if not identifier.isidentifier() or identifier in JAVA_RESERVED_WORDS:
                raise TemplateError(f"Invalid Java identifier: {identifier!r}")

        context = super().fixture_context(result, name)
        context["class_name"] = class_name
        context["root_type"] = result.root_type or "Object"
        context["root_expression"] = result.root_expression or "null"
        return context
