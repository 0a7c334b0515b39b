"""
Emitters for sequences and mappings.

Both follow the same discipline: the container has already been declared
empty by the walker, then one add/put statement is written per element in
the container's own iteration order. Elements, keys and values are resolved
through the walker, so shared and cyclic references are honoured.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Iterable

from ...logging_config import get_logger

if TYPE_CHECKING:
    from .walker import GraphWalker

logger = get_logger(__name__)


class ContainerSerializer:
    """Writes the contents of sequences and mappings."""

    def __init__(self, walker: "GraphWalker"):
        self.walker = walker

    def write_sequence(self, sequence: Iterable[Any], name: str, depth: int):
        """
        Write one add statement per element.

        Args:
            sequence: Source sequence or set
            name: Variable bound to the container
            depth: Depth of the container itself
        """
        dialect = self.walker.dialect
        written = 0
        for item in sequence:
            expression = self.walker.resolve(item, depth + 1)
            if expression is None:
                continue
            self.walker.statement(dialect.add_statement(name, sequence, expression))
            written += 1
        logger.debug("Wrote %d elements into %s", written, name)

    def write_mapping(self, mapping: Mapping, name: str, depth: int):
        """
        Write one put statement per entry.

        Keys and values are resolved independently; an entry whose key or
        value lies beyond the recursion budget is left out.
        """
        dialect = self.walker.dialect
        written = 0
        for key, value in mapping.items():
            key_expression = self.walker.resolve(key, depth + 1)
            value_expression = self.walker.resolve(value, depth + 1)
            if key_expression is None or value_expression is None:
                continue
            self.walker.statement(
                dialect.put_statement(name, key_expression, value_expression)
            )
            written += 1
        logger.debug("Wrote %d entries into %s", written, name)
