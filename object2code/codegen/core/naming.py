"""
Variable naming for generated code.

Each emitted instance gets a name built from its type's simple name and a
counter: the first ``pkg.TestBean`` is ``testBean0``, the second
``testBean1``. A registry lives for exactly one traversal.
"""

import re
from typing import Dict, List, Tuple


def decapitalize(name: str) -> str:
    """
    Lower the first letter of a name, JavaBeans style.

    Names starting with two upper case letters are left alone, so ``URL``
    stays ``URL`` while ``TestBean`` becomes ``testBean``.
    """
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def capitalize(name: str) -> str:
    """Upper the first letter and keep the rest untouched."""
    return name[:1].upper() + name[1:]


def simple_name(type_name: str) -> str:
    """Last dotted segment of a qualified type name."""
    return type_name.rsplit(".", 1)[-1]


def clean_identifier(name: str, fallback: str = "object") -> str:
    """Replace characters that cannot appear in an identifier."""
    cleaned = re.sub(r"[^a-zA-Z0-9_]", "_", name)
    cleaned = cleaned.strip("_")

    # Ensure doesn't start with number
    if cleaned and cleaned[0].isdigit():
        cleaned = f"_{cleaned}"

    return cleaned or fallback


class NamingRegistry:
    """Hands out unique variable names per type for one traversal."""

    def __init__(self):
        self._counters: Dict[str, int] = {}
        self._assigned: List[Tuple[str, str]] = []

    def name_for(self, type_name: str) -> str:
        """
        Return the next variable name for an instance of ``type_name``.

        Args:
            type_name: Qualified type name as rendered by the dialect

        Returns:
            Decapitalized simple name followed by the counter
        """
        # Counted per base name so types sharing a simple name never collide
        base = self.base_name(type_name)
        count = self._counters.get(base, -1) + 1
        self._counters[base] = count

        name = f"{base}{count}"
        self._assigned.append((type_name, name))
        return name

    def count(self, type_name: str) -> int:
        """Number of names handed out for the base name of ``type_name``."""
        return self._counters.get(self.base_name(type_name), -1) + 1

    @staticmethod
    def base_name(type_name: str) -> str:
        return decapitalize(clean_identifier(simple_name(type_name)))

    @property
    def assigned(self) -> List[Tuple[str, str]]:
        """(type name, variable name) pairs in assignment order."""
        return list(self._assigned)

    def reset(self):
        self._counters.clear()
        self._assigned.clear()
