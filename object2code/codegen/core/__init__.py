"""
Core serialization components.

Provides the object graph walker and the building blocks shared by all
dialects.
"""

from .config import ConfigError, ConfigManager, SerializerConfig, load_config
from .dialect import Dialect
from .errors import (
    AccessError,
    IntrospectionError,
    SerializationError,
    SinkWriteError,
    UnsupportedTypeError,
)
from .extensions import Extensions
from .formatter import ValueFormatter
from .introspection import BeanIntrospector, Introspector, PropertyDescriptor
from .naming import NamingRegistry, capitalize, decapitalize
from .stream import CodeOutputStream, SerializationResult, object2code, serialize
from .templates import TemplateEngine, TemplateError, create_template_engine
from .values import Byte, Char, Double, Float, Int, Long, ScalarKind, Short
from .walker import GraphWalker

__all__ = [
    # Entry points
    "CodeOutputStream",
    "SerializationResult",
    "object2code",
    "serialize",
    "GraphWalker",
    # Errors
    "SerializationError",
    "UnsupportedTypeError",
    "IntrospectionError",
    "AccessError",
    "SinkWriteError",
    # Extension points
    "Extensions",
    "Introspector",
    "BeanIntrospector",
    "PropertyDescriptor",
    # Values and formatting
    "ScalarKind",
    "Byte",
    "Short",
    "Int",
    "Long",
    "Float",
    "Double",
    "Char",
    "ValueFormatter",
    # Naming
    "NamingRegistry",
    "capitalize",
    "decapitalize",
    # Dialects and configuration
    "Dialect",
    "SerializerConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
