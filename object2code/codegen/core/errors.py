"""
Exception hierarchy for object serialization.

Every fatal condition raised during a traversal derives from
``SerializationError``. A missing no-argument constructor is not an error:
the walker logs it and emits a placeholder instead.
"""


class SerializationError(Exception):
    """Base exception for object-to-code serialization errors."""

    pass


class UnsupportedTypeError(SerializationError):
    """Raised when a value has no literal form in the target dialect."""

    def __init__(self, type_, message=None):
        self.type = type_
        type_name = getattr(type_, "__qualname__", repr(type_))
        super().__init__(message or f"Type {type_name} is not a supported value type")


class IntrospectionError(SerializationError):
    """Raised when the properties of a class cannot be described."""

    pass


class AccessError(SerializationError):
    """Raised when reading a property of an instance fails."""

    pass


class SinkWriteError(SerializationError):
    """Raised when the output sink rejects a write."""

    pass
