"""
Python-specific type mappings and reserved words.
"""

import builtins
import keyword
from typing import Set

# Types written as a different builtin, since the statements mutate them
PYTHON_TYPE_MAP = {
    tuple: "list",
    frozenset: "set",
}

# Modules whose classes need no import
IMPLICIT_MODULES = {"builtins", "__main__"}

PYTHON_RESERVED_WORDS = set(keyword.kwlist) | set(keyword.softkwlist)

PYTHON_BUILTIN_NAMES = set(dir(builtins))


def get_python_reserved_words() -> Set[str]:
    """Get Python reserved words."""
    return PYTHON_RESERVED_WORDS.copy()


def get_python_builtin_names() -> Set[str]:
    """Get Python builtin names."""
    return PYTHON_BUILTIN_NAMES.copy()
