"""
Base dialect interface for all serialization targets.

A dialect owns the surface syntax of one target language: how a type is
named, how an instance is constructed, and how declaration, setter, add and
put statements look. The walker never builds statement text itself.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type

from .config import SerializerConfig
from .formatter import ValueFormatter
from .introspection import PropertyDescriptor
from .templates import TemplateEngine, TemplateError, create_template_engine


class Dialect(ABC):
    """Abstract base class for all target dialects."""

    def __init__(self, config: Optional[SerializerConfig] = None):
        """Initialize dialect with optional configuration."""
        self.config = config or SerializerConfig(dialect=self.language_name)
        self._formatter: Optional[ValueFormatter] = None
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    def formatter(self) -> ValueFormatter:
        """Value formatter for this dialect, created on first use."""
        if self._formatter is None:
            self._formatter = self.create_formatter()
        return self._formatter

    @abstractmethod
    def create_formatter(self) -> ValueFormatter:
        pass

    # Type names and construction

    @abstractmethod
    def type_name(self, cls: Type) -> str:
        """Qualified name of ``cls`` as written in the target language."""
        pass

    @abstractmethod
    def new_instance(self, cls: Type, type_name: str) -> str:
        """No-argument construction expression for ``cls``."""
        pass

    @abstractmethod
    def missing_constructor(self, type_name: str) -> str:
        """Placeholder expression for a type without a no-argument constructor."""
        pass

    @abstractmethod
    def null_literal(self) -> str:
        pass

    # Statements, without line endings

    @abstractmethod
    def declaration(self, type_name: str, variable: str, expression: str) -> str:
        pass

    @abstractmethod
    def set_statement(
        self, variable: str, prop: PropertyDescriptor, expression: str
    ) -> str:
        pass

    @abstractmethod
    def add_statement(self, variable: str, container: Any, expression: str) -> str:
        pass

    @abstractmethod
    def put_statement(self, variable: str, key: str, value: str) -> str:
        pass

    # Fixture rendering

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this dialect.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    def imports_for(self, classes: Iterable[Type]) -> List[str]:
        """Import statements needed by code referencing ``classes``."""
        return []

    def fixture_context(self, result: Any, name: str) -> Dict[str, Any]:
        """Template variables for a fixture around ``result``."""
        return {
            "name": name,
            "statements": result.statements,
            "root_expression": result.root_expression,
            "root_type": result.root_type,
            "imports": self.imports_for(result.metadata.get("classes", [])),
            "language": self.language_name,
        }

    @property
    def fixture_template(self) -> str:
        return f"fixture{self.file_extension}.j2"

    def render_fixture(self, result: Any, name: Optional[str] = None) -> str:
        """
        Wrap the statements of a serialization result into a complete file.

        Args:
            result: Successful SerializationResult
            name: Fixture name (class or function), defaults to the configured one

        Returns:
            Rendered source file
        """
        if not getattr(result, "success", True):
            raise TemplateError("Cannot render a fixture for a failed serialization")
        context = self.fixture_context(result, name or self.config.fixture_name)
        return self.template_engine.render_template(self.fixture_template, context)
