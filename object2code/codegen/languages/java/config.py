"""
Java-specific type mappings and reserved words.
"""

from collections import Counter, OrderedDict, defaultdict, deque
from decimal import Decimal
from typing import Set

from ...core.values import Byte, Char, Double, Float, Int, Long, Short

# Python types written as their Java counterparts
JAVA_TYPE_MAP = {
    bool: "boolean",
    int: "int",
    float: "double",
    str: "String",
    Decimal: "java.math.BigDecimal",
    Byte: "byte",
    Short: "short",
    Int: "int",
    Long: "long",
    Float: "float",
    Double: "double",
    Char: "char",
    object: "java.lang.Object",
    # Containers
    list: "java.util.ArrayList",
    tuple: "java.util.ArrayList",
    deque: "java.util.ArrayDeque",
    set: "java.util.HashSet",
    frozenset: "java.util.HashSet",
    dict: "java.util.LinkedHashMap",
    OrderedDict: "java.util.LinkedHashMap",
    defaultdict: "java.util.LinkedHashMap",
    Counter: "java.util.LinkedHashMap",
}

# Imports needed by literals, keyed by the Python type
JAVA_IMPORT_MAP = {
    Decimal: "import java.math.BigDecimal;",
}

# Modules whose classes are written without a package prefix
UNQUALIFIED_MODULES = {"builtins", "__main__"}

JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "true",
    "false",
    "null",
}


def get_java_reserved_words() -> Set[str]:
    """Get Java reserved words."""
    return JAVA_RESERVED_WORDS.copy()
