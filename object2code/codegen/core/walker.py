"""
Object graph walker.

``GraphWalker.walk`` visits one root object and writes the statements that
rebuild it. Every visit goes through the same steps:

1. run the processors; a ``None`` root writes nothing
2. return the bound name of an object that was already visited
3. return scalar and enum literals directly (written out only for the root)
4. bind a variable name before descending, so cycles terminate
5. declare the variable (container, constructor generator, no-argument
   constructor or a placeholder when there is none)
6. fill containers, or emit one setter per property for other objects
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Set, Type

from ...logging_config import get_logger
from .containers import ContainerSerializer
from .errors import AccessError, SerializationError, UnsupportedTypeError
from .extensions import Extensions
from .introspection import BeanIntrospector, Introspector, PropertyDescriptor
from .naming import NamingRegistry
from .values import (
    ScalarKind,
    accepts,
    is_mapping,
    is_sequence,
    is_unsupported,
    scalar_kind,
)

logger = get_logger(__name__)


class GraphWalker:
    """Depth-first emitter for one object graph at a time."""

    def __init__(
        self,
        dialect,
        emit: Callable[[str], None],
        extensions: Optional[Extensions] = None,
        introspector: Optional[Introspector] = None,
        max_depth: int = 0,
        only_properties_with_matching_field: bool = False,
        line_ending: str = "\n",
    ):
        """
        Args:
            dialect: Target dialect producing the statement text
            emit: Append-only sink receiving text as it is produced
            extensions: Constructor generators, field filters and processors
            introspector: Property enumerator, BeanIntrospector by default
            max_depth: Recursion budget, 0 for unlimited
            only_properties_with_matching_field: Skip properties without a
                backing field
            line_ending: Terminator written after every statement
        """
        self.dialect = dialect
        self.formatter = dialect.formatter
        self.emit = emit
        self.extensions = extensions if extensions is not None else Extensions()
        self.introspector = introspector or BeanIntrospector()
        self.max_depth = max_depth
        self.only_properties_with_matching_field = only_properties_with_matching_field
        self.line_ending = line_ending
        self.containers = ContainerSerializer(self)
        self._reset()

    def _reset(self):
        self.names = NamingRegistry()
        self._identity: Dict[int, str] = {}
        # Keeps visited objects alive so their ids cannot be reused mid-walk
        self._pinned: List[Any] = []
        self.statements: List[str] = []
        self.classes_used: Set[Type] = set()
        self.warnings: List[str] = []
        self.root_type: Optional[str] = None

    def walk(self, obj: Any) -> Optional[str]:
        """
        Emit the statements that rebuild ``obj``.

        Returns:
            The root's variable name, its literal for scalars and enums, or
            None when the root is None
        """
        self._reset()
        try:
            return self._visit(obj, 0, top_level=True)
        except RecursionError as e:
            raise SerializationError(
                "Object graph is too deep to serialize; set max_depth to bound it"
            ) from e

    def resolve(self, value: Any, depth: int) -> Optional[str]:
        """
        Expression for a nested value at ``depth``.

        Returns:
            A variable name or literal, the null literal for None, or None when
            the value lies beyond the recursion budget
        """
        return self._visit(value, depth)

    def statement(self, text: str):
        """Write one complete statement to the sink."""
        self.statements.append(text)
        self.emit(text + self.line_ending)

    def is_bound(self, obj: Any) -> bool:
        return id(obj) in self._identity

    def within_budget(self, depth: int) -> bool:
        return self.max_depth == 0 or depth <= self.max_depth

    # Visiting

    def _visit(self, obj: Any, depth: int, top_level: bool = False) -> Optional[str]:
        obj = self.extensions.process(obj)

        if obj is None:
            if top_level:
                logger.warning("Given object is null.")
                return None
            return self.dialect.null_literal()

        bound = self._identity.get(id(obj))
        if bound is not None:
            return bound

        cls = type(obj)
        if scalar_kind(cls) is not None:
            literal = self._literal(cls, obj)
            if top_level:
                self.root_type = self.dialect.type_name(cls)
                self.emit(literal)
            return literal

        if is_unsupported(obj) or isinstance(obj, type):
            logger.error("Unsupported value of type %s", cls.__qualname__)
            raise UnsupportedTypeError(cls)

        if not self.within_budget(depth):
            logger.debug(
                "Not descending into %s at depth %d (max %d)",
                cls.__qualname__,
                depth,
                self.max_depth,
            )
            return None

        type_name = self.dialect.type_name(cls)
        name = self._bind(obj, type_name)
        if top_level:
            self.root_type = type_name

        if is_mapping(obj):
            self._declare(type_name, name, self.dialect.new_instance(cls, type_name))
            self.containers.write_mapping(obj, name, depth)
            return name
        if is_sequence(obj):
            self._declare(type_name, name, self.dialect.new_instance(cls, type_name))
            self.containers.write_sequence(obj, name, depth)
            return name

        generator = self.extensions.constructor_generator(cls)
        if generator is not None:
            # The generator is fully responsible for the instance
            self._declare(type_name, name, self._generate(generator, obj, type_name))
            return name

        if not self.introspector.has_no_arg_constructor(cls):
            message = f"{type_name} has no no-argument constructor"
            logger.warning("Could not generate code for %s", message)
            self.warnings.append(message)
            self._declare(type_name, name, self.dialect.missing_constructor(type_name))
            return name

        self._declare(type_name, name, self.dialect.new_instance(cls, type_name))
        self._populate(obj, cls, type_name, name, depth)
        return name

    def _populate(self, obj: Any, cls: Type, type_name: str, name: str, depth: int):
        for prop in self.introspector.properties_of(cls, obj):
            if not self.extensions.is_included(cls, prop.name):
                continue

            if self.only_properties_with_matching_field and not prop.has_field:
                logger.info("Skipping property without matching field: %s", prop.name)
                continue

            if not prop.readable:
                logger.warning("Could not find read method for: %s", prop.name)
                continue

            value = prop.read(obj)
            if value is None or isinstance(value, type):
                continue

            expression = self._property_expression(prop, value, depth)
            if expression is None:
                continue

            if not prop.writable:
                # Still visited above so the value gets a name for later references
                logger.warning("Can not find write method for: %s %s", type_name, prop.name)
                continue

            self.statement(self.dialect.set_statement(name, prop, expression))

    def _property_expression(
        self, prop: PropertyDescriptor, value: Any, depth: int
    ) -> Optional[str]:
        declared_kind = scalar_kind(prop.declared_type)
        if (
            declared_kind is not None
            and declared_kind != ScalarKind.ENUM
            and accepts(declared_kind, value)
        ):
            # Scalar-typed property: the declared width decides the literal
            return self._literal(prop.declared_type, value)
        return self._visit(value, depth + 1)

    # Helpers

    def _literal(self, cls: Type, value: Any) -> str:
        if isinstance(value, Enum):
            self.classes_used.add(type(value))
        elif scalar_kind(cls) == ScalarKind.DECIMAL:
            self.classes_used.add(Decimal)
        return self.formatter.format(cls, value)

    def _bind(self, obj: Any, type_name: str) -> str:
        name = self.names.name_for(type_name)
        self._identity[id(obj)] = name
        self._pinned.append(obj)
        self.classes_used.add(type(obj))
        return name

    def _declare(self, type_name: str, name: str, expression: str):
        self.statement(self.dialect.declaration(type_name, name, expression))

    @staticmethod
    def _generate(generator: Callable[[Any], str], obj: Any, type_name: str) -> str:
        try:
            return str(generator(obj))
        except Exception as e:
            raise AccessError(
                f"Constructor generator for {type_name} failed: {e}"
            ) from e

    @property
    def identity_map(self) -> Dict[int, str]:
        return dict(self._identity)
