"""
Java dialect module.

Writes Java statements (declarations, setters, add and put calls) that
rebuild a Python object graph, and wraps them into fixture classes.
"""

from .config import JAVA_TYPE_MAP, get_java_reserved_words
from .dialect import JavaDialect, JavaValueFormatter, qualified_name

__all__ = [
    "JavaDialect",
    "JavaValueFormatter",
    "JAVA_TYPE_MAP",
    "get_java_reserved_words",
    "qualified_name",
    "create_java_dialect",
]


def create_java_dialect(config=None, **kwargs) -> JavaDialect:
    """
    Create a Java dialect.

    Args:
        config: SerializerConfig instance, defaults to the Java defaults
        **kwargs: Overrides applied on top of the defaults

    Returns:
        Configured JavaDialect instance
    """
    if config is None:
        from ...core.config import load_config

        config = load_config("java", custom_config=kwargs or None)

    return JavaDialect(config)
