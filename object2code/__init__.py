"""
object2code: serialize Python object graphs as source code.

    >>> from object2code import object2code
    >>> print(object2code([1, 2]))
    java.util.ArrayList arrayList0 = new java.util.ArrayList();
    arrayList0.add(1);
    arrayList0.add(2);
"""

from typing import Optional, Union

from .codegen.core import (
    AccessError,
    BeanIntrospector,
    Byte,
    Char,
    CodeOutputStream,
    Dialect,
    Double,
    Extensions,
    Float,
    Int,
    IntrospectionError,
    Long,
    PropertyDescriptor,
    SerializationError,
    SerializationResult,
    SerializerConfig,
    Short,
    SinkWriteError,
    UnsupportedTypeError,
    load_config,
    object2code,
    serialize,
)
from .codegen.registry import (
    RegistryError,
    get_dialect,
    list_supported_languages,
    register_dialect,
)

__version__ = "0.1.0"


def render_fixture(
    result: SerializationResult,
    dialect: Union[str, Dialect, None] = None,
    name: Optional[str] = None,
) -> str:
    """
    Wrap a serialization result into a complete source file.

    Args:
        result: Successful SerializationResult
        dialect: Dialect instance or name, defaults to the result's language
        name: Fixture class method or function name

    Returns:
        Rendered fixture source
    """
    if not isinstance(dialect, Dialect):
        dialect = get_dialect(dialect or result.metadata.get("language", "java"))
    return dialect.render_fixture(result, name)


__all__ = [
    "object2code",
    "serialize",
    "render_fixture",
    "CodeOutputStream",
    "SerializationResult",
    "Extensions",
    "SerializerConfig",
    "load_config",
    "Dialect",
    "get_dialect",
    "register_dialect",
    "list_supported_languages",
    "BeanIntrospector",
    "PropertyDescriptor",
    "Byte",
    "Short",
    "Int",
    "Long",
    "Float",
    "Double",
    "Char",
    "SerializationError",
    "UnsupportedTypeError",
    "IntrospectionError",
    "AccessError",
    "SinkWriteError",
    "RegistryError",
    "__version__",
]
