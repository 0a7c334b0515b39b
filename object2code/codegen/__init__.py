"""
object2code serialization module.

Turns Python object graphs into statements of a target language.
"""

from .core import (
    CodeOutputStream,
    Dialect,
    Extensions,
    SerializationResult,
    SerializerConfig,
    object2code,
    serialize,
)
from .registry import (
    DialectRegistry,
    RegistryError,
    get_dialect,
    get_language_info,
    is_language_supported,
    list_supported_languages,
    register_dialect,
)

__all__ = [
    "CodeOutputStream",
    "Dialect",
    "DialectRegistry",
    "Extensions",
    "RegistryError",
    "SerializationResult",
    "SerializerConfig",
    "get_dialect",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
    "object2code",
    "register_dialect",
    "serialize",
]
