"""
Caller-owned extension points for the serializer.

An ``Extensions`` instance holds three independent settings:

* constructor generators: per type, a function returning the construction
  expression for an instance; the walker then emits no property statements
  for that instance
* field includes: per type, an allow-list of property names
* processors: an ordered chain of functions applied to every object before
  it is inspected (e.g. to unwrap proxies)

The instance is passed to each stream or call, so separate callers never
share state.
"""

from typing import Any, Callable, Dict, List, Optional, Set, Type

from ...logging_config import get_logger

logger = get_logger(__name__)

ConstructorGenerator = Callable[[Any], str]
Processor = Callable[[Any], Any]


class Extensions:
    """Constructor generators, field allow-lists and processors."""

    def __init__(self):
        self._constructor_generators: Dict[Type, ConstructorGenerator] = {}
        self._field_includes: Dict[Type, Set[str]] = {}
        self._processors: List[Processor] = []

    # Constructor generators

    def set_constructor_generator(self, cls: Type, generator: ConstructorGenerator):
        """
        Register a constructor generator for a type.

        Args:
            cls: Concrete type the generator applies to
            generator: Function mapping an instance to its construction expression
        """
        if not callable(generator):
            raise TypeError(f"Constructor generator for {cls!r} must be callable")
        self._constructor_generators[cls] = generator
        logger.debug("Constructor generator set for %s", cls.__qualname__)

    def clear_constructor_generator(self, cls: Type):
        self._constructor_generators.pop(cls, None)

    def constructor_generator(self, cls: Type) -> Optional[ConstructorGenerator]:
        return self._constructor_generators.get(cls)

    # Field includes

    def include_field(self, cls: Type, field_name: str):
        """Only emit ``field_name`` (and other included fields) for ``cls``."""
        self._field_includes.setdefault(cls, set()).add(field_name)
        logger.debug("Field %s included for %s", field_name, cls.__qualname__)

    def clear_includes(self, cls: Type):
        self._field_includes.pop(cls, None)

    def included_fields(self, cls: Type) -> Optional[Set[str]]:
        """Allow-list for ``cls``, or None when every field is included."""
        includes = self._field_includes.get(cls)
        return set(includes) if includes is not None else None

    def is_included(self, cls: Type, field_name: str) -> bool:
        includes = self._field_includes.get(cls)
        return includes is None or field_name in includes

    # Processors

    def add_processor(self, processor: Processor):
        if not callable(processor):
            raise TypeError("Processor must be callable")
        self._processors.append(processor)

    def clear_processors(self):
        self._processors.clear()

    @property
    def processors(self) -> List[Processor]:
        return list(self._processors)

    def process(self, obj: Any) -> Any:
        """Run ``obj`` through every processor in registration order."""
        for processor in self._processors:
            obj = processor(obj)
        return obj

    # Lifecycle

    def reset(self):
        """Remove every registration."""
        self._constructor_generators.clear()
        self._field_includes.clear()
        self._processors.clear()

    def copy(self) -> "Extensions":
        other = Extensions()
        other._constructor_generators = dict(self._constructor_generators)
        other._field_includes = {
            cls: set(fields) for cls, fields in self._field_includes.items()
        }
        other._processors = list(self._processors)
        return other

    def __repr__(self):
        return (
            f"Extensions(constructor_generators={len(self._constructor_generators)}, "
            f"field_includes={len(self._field_includes)}, "
            f"processors={len(self._processors)})"
        )
