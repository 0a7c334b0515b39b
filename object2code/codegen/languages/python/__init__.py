"""
Python dialect module.

Writes Python statements (assignments, setter calls, append/add and item
assignments) that rebuild an object graph, and wraps them into fixture
functions.
"""

from .config import get_python_builtin_names, get_python_reserved_words
from .dialect import PythonDialect, PythonValueFormatter

__all__ = [
    "PythonDialect",
    "PythonValueFormatter",
    "get_python_reserved_words",
    "get_python_builtin_names",
    "create_python_dialect",
]


def create_python_dialect(config=None, **kwargs) -> PythonDialect:
    """Create a Python dialect, from the Python defaults unless ``config`` is given."""
    if config is None:
        from ...core.config import load_config

        config = load_config("python", custom_config=kwargs or None)

    return PythonDialect(config)
