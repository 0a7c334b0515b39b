"""
Output stream and top-level entry points.

``CodeOutputStream`` wraps a caller-supplied sink (text or binary) and
serializes objects into it. ``object2code`` captures one object into a
string, and ``serialize`` returns a ``SerializationResult`` instead of
raising.
"""

import io
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from .config import SerializerConfig
from .dialect import Dialect
from .errors import SerializationError, SinkWriteError
from .extensions import Extensions
from .introspection import Introspector
from .walker import GraphWalker

logger = get_logger(__name__)


def _resolve_dialect(
    dialect: Union[str, Dialect, None], config: Optional[SerializerConfig]
) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    # Imported late: the registry imports the language packages, which import core
    from ..registry import get_dialect

    name = dialect or (config.dialect if config else "java")
    return get_dialect(name, config)


def _is_binary(out: Any) -> bool:
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(out, io.TextIOBase):
        return False
    return "b" in getattr(out, "mode", "")


class CodeOutputStream:
    """Serializes objects as code into an output sink."""

    def __init__(
        self,
        out: Any,
        dialect: Union[str, Dialect, None] = None,
        config: Optional[SerializerConfig] = None,
        extensions: Optional[Extensions] = None,
        introspector: Optional[Introspector] = None,
    ):
        """
        Args:
            out: Writable text or binary sink; closed by ``close()``
            dialect: Dialect instance or registered name, from config by default
            config: Serializer configuration
            extensions: Constructor generators, field filters and processors
            introspector: Property enumerator, BeanIntrospector by default
        """
        self.dialect = _resolve_dialect(dialect, config)
        self.config = config or self.dialect.config
        self.extensions = extensions if extensions is not None else Extensions()
        self.introspector = introspector
        self._out = out
        self._binary = _is_binary(out)
        self._closed = False
        self.last_walker: Optional[GraphWalker] = None

    def write_object(
        self, obj: Any, only_properties_with_matching_field: Optional[bool] = None
    ) -> Optional[str]:
        """
        Write the statements that rebuild ``obj``.

        Args:
            obj: Object to serialize; None writes nothing
            only_properties_with_matching_field: Only use properties with a
                backing field, defaults to the configured value

        Returns:
            Root variable name or literal, None for a None root

        Raises:
            SerializationError: If the object cannot be serialized. Text
                already written to the sink stays there.
        """
        if only_properties_with_matching_field is None:
            only_properties_with_matching_field = (
                self.config.only_properties_with_matching_field
            )

        walker = GraphWalker(
            self.dialect,
            self._write,
            extensions=self.extensions,
            introspector=self.introspector,
            max_depth=self.config.max_depth,
            only_properties_with_matching_field=only_properties_with_matching_field,
            line_ending=self.config.line_ending,
        )
        self.last_walker = walker

        try:
            return walker.walk(obj)
        except SerializationError as e:
            logger.warning("Exception was thrown", exc_info=True)
            raise SerializationError(
                "Could not serialize the given object to code. "
                f"Please see the warnings in the log. ({e})"
            ) from e

    def _write(self, text: str):
        if self._closed:
            raise SinkWriteError("Output stream is closed")
        try:
            if self._binary:
                self._out.write(text.encode(self.config.encoding))
            else:
                self._out.write(text)
        except (OSError, ValueError, TypeError) as e:
            raise SinkWriteError(f"Could not write to output: {e}") from e

    def flush(self):
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()

    def close(self):
        """Flush and close the wrapped sink."""
        if self._closed:
            return
        try:
            self.flush()
            close = getattr(self._out, "close", None)
            if close is not None:
                close()
        except OSError:
            logger.warning("Exception was thrown", exc_info=True)
        finally:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class SerializationResult:
    """Container for serialization results and metadata."""

    def __init__(
        self,
        code: str,
        root_expression: Optional[str] = None,
        root_type: Optional[str] = None,
        statements: Optional[List[str]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize serialization result.

        Args:
            code: Generated code
            root_expression: Variable name or literal of the root object
            root_type: Target type name of the root object
            statements: Emitted statements without line endings
            warnings: Any warnings from serialization
            metadata: Additional metadata about the run
        """
        self.code = code
        self.root_expression = root_expression
        self.root_type = root_type
        self.statements = statements or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[BaseException] = None, code: str = ""
    ) -> "SerializationResult":
        """Create a failed serialization result."""
        result = cls(code=code)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __bool__(self):
        return self.success

    def __repr__(self):
        if not self.success:
            return f"SerializationResult(success=False, error={self.error_message!r})"
        return (
            f"SerializationResult(root={self.root_expression!r}, "
            f"statements={len(self.statements)})"
        )


def serialize(
    obj: Any,
    dialect: Union[str, Dialect, None] = None,
    config: Optional[SerializerConfig] = None,
    extensions: Optional[Extensions] = None,
    introspector: Optional[Introspector] = None,
    only_properties_with_matching_field: Optional[bool] = None,
) -> SerializationResult:
    """
    Serialize an object with error handling.

    Returns:
        SerializationResult with code, root expression and metadata, or a
        failed result carrying the error and whatever text was written
    """
    buffer = io.StringIO()
    stream = CodeOutputStream(
        buffer,
        dialect=dialect,
        config=config,
        extensions=extensions,
        introspector=introspector,
    )
    try:
        root = stream.write_object(obj, only_properties_with_matching_field)
    except SerializationError as e:
        return SerializationResult.error(str(e), exception=e, code=buffer.getvalue())

    walker = stream.last_walker
    classes = sorted(walker.classes_used, key=lambda c: (c.__module__, c.__qualname__))
    metadata = {
        "language": stream.dialect.language_name,
        "file_extension": stream.dialect.file_extension,
        "variable_count": len(walker.names.assigned),
        "statement_count": len(walker.statements),
        "classes": classes,
        "types": sorted({stream.dialect.type_name(c) for c in classes}),
        "max_depth": stream.config.max_depth,
    }
    return SerializationResult(
        buffer.getvalue(),
        root_expression=root,
        root_type=walker.root_type,
        statements=list(walker.statements),
        warnings=list(walker.warnings),
        metadata=metadata,
    )


def object2code(obj: Any, **kwargs) -> str:
    """
    Serialize an object directly to code.

    Accepts the keyword arguments of ``CodeOutputStream`` plus
    ``only_properties_with_matching_field``.

    Raises:
        SerializationError: If the object cannot be serialized
    """
    only_matching = kwargs.pop("only_properties_with_matching_field", None)
    buffer = io.StringIO()
    with CodeOutputStream(buffer, **kwargs) as stream:
        stream.write_object(obj, only_matching)
        return buffer.getvalue()
