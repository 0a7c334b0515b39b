"""
Property discovery for Python objects.

The walker only needs two things from a type: the ordered list of its
properties and whether it can be built with no arguments. ``Introspector``
is that capability; ``BeanIntrospector`` implements it with Python's own
introspection and recognises, in order of precedence:

1. accessor methods: ``getX``/``isX`` + ``setX`` or ``get_x``/``is_x`` + ``set_x``
2. ``property`` descriptors (``fset`` is the setter)
3. dataclass fields, ``__slots__`` and annotated class attributes
4. public instance attributes

Properties are returned sorted by name; declaration order is not preserved.
"""

import dataclasses
import inspect
import operator
import re
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Set, Type

from ...logging_config import get_logger
from .errors import AccessError, IntrospectionError
from .naming import decapitalize

logger = get_logger(__name__)

_CAMEL_ACCESSOR = re.compile(r"^(get|is|set)([A-Z]\w*)$")
_SNAKE_ACCESSOR = re.compile(r"^(get|is|set)_([a-z]\w*)$")

_BEHAVIOUR_TYPES = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
)


@dataclass(frozen=True)
class PropertyDescriptor:
    """A readable and optionally writable property of a type."""

    name: str
    declared_type: Optional[Type] = None
    getter: Optional[Callable[[Any], Any]] = None
    setter: Optional[Callable[[Any, Any], None]] = None
    # Name of an explicit mutator method, None for attribute-style properties
    write_method: Optional[str] = None
    source: str = "attribute"
    has_field: bool = False

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None

    def read(self, instance: Any) -> Any:
        """
        Read the property from ``instance``.

        Raises:
            AccessError: If the getter raises
        """
        if self.getter is None:
            raise AccessError(f"Property {self.name} has no getter")
        try:
            return self.getter(instance)
        except Exception as e:
            raise AccessError(
                f"Could not read property {self.name} of "
                f"{type(instance).__qualname__}: {e}"
            ) from e


class Introspector(Protocol):
    """Describes types for the walker."""

    def properties_of(
        self, cls: Type, instance: Any = None
    ) -> List[PropertyDescriptor]: ...

    def has_no_arg_constructor(self, cls: Type) -> bool: ...


def _attribute_getter(name: str) -> Callable[[Any], Any]:
    # Unset slots and annotation-only attributes read as absent
    def getter(instance):
        return getattr(instance, name, None)

    return getter


def _attribute_setter(name: str) -> Callable[[Any, Any], None]:
    def setter(instance, value):
        setattr(instance, name, value)

    return setter


def normalize_annotation(annotation: Any) -> Optional[Type]:
    """
    Reduce a type annotation to a plain class.

    ``Optional[X]`` becomes ``X``, generic aliases become their origin and
    anything that cannot be reduced (unions, forward references) becomes None.
    """
    if annotation is None or isinstance(annotation, str):
        return None
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return normalize_annotation(args[0])
        return None
    if origin is typing.ClassVar:
        return None
    if origin is not None:
        return origin if isinstance(origin, type) else None
    return annotation if isinstance(annotation, type) else None


def _hints(obj: Any) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError, AttributeError):
        # Unresolvable forward references: keep whatever is already a class
        raw = getattr(obj, "__annotations__", None) or {}
        return {key: value for key, value in raw.items() if isinstance(value, type)}


def _takes_no_arguments(func: Callable) -> bool:
    try:
        parameters = list(inspect.signature(func).parameters.values())[1:]
    except (TypeError, ValueError):
        return False
    return all(
        p.default is not p.empty or p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        for p in parameters
    )


def _takes_one_argument(func: Callable) -> bool:
    try:
        parameters = list(inspect.signature(func).parameters.values())[1:]
    except (TypeError, ValueError):
        return False
    required = [
        p
        for p in parameters
        if p.default is p.empty and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    ]
    return len(required) == 1 or (not required and len(parameters) >= 1)


def _is_class_valued(declared_type: Optional[Type]) -> bool:
    return declared_type is not None and issubclass(declared_type, type)


class BeanIntrospector:
    """Default ``Introspector`` based on Python runtime introspection."""

    def __init__(self):
        self._cache: Dict[Type, Dict[str, PropertyDescriptor]] = {}

    def properties_of(self, cls: Type, instance: Any = None) -> List[PropertyDescriptor]:
        """
        List the properties of ``cls``, sorted by name.

        Args:
            cls: Type to describe
            instance: Optional instance; its public attributes are included
                and used to decide whether a property has a backing field

        Raises:
            IntrospectionError: If the type cannot be described
        """
        properties = dict(self._describe_class(cls))

        if instance is not None:
            for name, value in self._instance_state(instance).items():
                if name in properties or name.startswith("_"):
                    continue
                if isinstance(value, _BEHAVIOUR_TYPES):
                    continue
                properties[name] = PropertyDescriptor(
                    name=name,
                    getter=operator.attrgetter(name),
                    setter=_attribute_setter(name),
                    source="attribute",
                )

        backing = self._backing_fields(cls, instance)
        described = []
        for name in sorted(properties):
            prop = properties[name]
            has_field = prop.source in ("field", "attribute") or any(
                candidate in backing for candidate in (name, f"_{name}", f"__{name}")
            )
            described.append(dataclasses.replace(prop, has_field=has_field))
        return described

    def has_no_arg_constructor(self, cls: Type) -> bool:
        """True when ``cls()`` can be called without arguments."""
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            return cls.__init__ is object.__init__ and cls.__new__ is object.__new__
        for parameter in signature.parameters.values():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            if parameter.default is parameter.empty:
                return False
        return True

    def clear_cache(self):
        self._cache.clear()

    # Class level discovery

    def _describe_class(self, cls: Type) -> Dict[str, PropertyDescriptor]:
        if cls in self._cache:
            return self._cache[cls]
        try:
            properties = self._discover(cls)
        except (TypeError, AttributeError, ValueError) as e:
            logger.error("Could not introspect %s: %s", cls, e)
            raise IntrospectionError(f"Could not introspect {cls!r}: {e}") from e
        self._cache[cls] = properties
        return properties

    def _discover(self, cls: Type) -> Dict[str, PropertyDescriptor]:
        properties: Dict[str, PropertyDescriptor] = {}
        getters: Dict[str, tuple] = {}
        setters: Dict[str, tuple] = {}
        descriptors: Dict[str, property] = {}

        for attr in dir(cls):
            if attr.startswith("_"):
                continue
            static = inspect.getattr_static(cls, attr)
            if isinstance(static, property):
                descriptors[attr] = static
                continue
            if not isinstance(static, types.FunctionType):
                continue
            match = _CAMEL_ACCESSOR.match(attr) or _SNAKE_ACCESSOR.match(attr)
            if not match:
                continue
            prefix, rest = match.groups()
            name = decapitalize(rest) if match.re is _CAMEL_ACCESSOR else rest
            if prefix == "set":
                if _takes_one_argument(static):
                    setters[name] = (attr, static)
            elif _takes_no_arguments(static):
                # getX wins over isX when both exist
                if prefix == "get" or name not in getters:
                    getters[name] = (attr, static)

        for name in set(getters) | set(setters):
            getter = getters.get(name)
            setter = setters.get(name)
            declared = None
            if getter:
                declared = normalize_annotation(_hints(getter[1]).get("return"))
            if declared is None and setter:
                hints = _hints(setter[1])
                params = [p for p in hints if p != "return"]
                if params:
                    declared = normalize_annotation(hints[params[0]])
            if _is_class_valued(declared):
                continue
            properties[name] = PropertyDescriptor(
                name=name,
                declared_type=declared,
                getter=getter[1] if getter else None,
                setter=setter[1] if setter else None,
                write_method=setter[0] if setter else None,
                source="accessor",
            )

        for name, descriptor in descriptors.items():
            if name in properties:
                continue
            declared = None
            if descriptor.fget is not None:
                declared = normalize_annotation(_hints(descriptor.fget).get("return"))
            if _is_class_valued(declared):
                continue
            properties[name] = PropertyDescriptor(
                name=name,
                declared_type=declared,
                getter=descriptor.fget,
                setter=descriptor.fset,
                source="property",
            )

        hints = _hints(cls)
        for name in self._declared_fields(cls, hints):
            if name in properties or name.startswith("_"):
                continue
            declared = normalize_annotation(hints.get(name))
            if _is_class_valued(declared):
                continue
            properties[name] = PropertyDescriptor(
                name=name,
                declared_type=declared,
                getter=_attribute_getter(name),
                setter=_attribute_setter(name),
                source="field",
            )

        logger.debug(
            "Discovered %d properties on %s", len(properties), cls.__qualname__
        )
        return properties

    @staticmethod
    def _declared_fields(cls: Type, hints: Dict[str, Any]) -> List[str]:
        names: List[str] = []
        if dataclasses.is_dataclass(cls):
            names.extend(f.name for f in dataclasses.fields(cls))
        for klass in cls.__mro__:
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
        for name, annotation in hints.items():
            if typing.get_origin(annotation) is typing.ClassVar:
                continue
            static = inspect.getattr_static(cls, name, None)
            if callable(static) or isinstance(static, property):
                continue
            names.append(name)
        return list(dict.fromkeys(names))

    @staticmethod
    def _instance_state(instance: Any) -> Dict[str, Any]:
        try:
            return dict(vars(instance))
        except TypeError:
            return {}

    @staticmethod
    def _backing_fields(cls: Type, instance: Any) -> Set[str]:
        names: Set[str] = set()
        if instance is not None:
            names.update(BeanIntrospector._instance_state(instance))
        for klass in cls.__mro__:
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            names.update(slots)
            names.update(getattr(klass, "__annotations__", {}) or {})
        if dataclasses.is_dataclass(cls):
            names.update(f.name for f in dataclasses.fields(cls))
        return names
