"""
Dialect registry system for managing available target languages.

Provides dynamic registration and instantiation of dialects.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import SerializerConfig, load_config
from .core.dialect import Dialect

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class DialectRegistry:
    """Registry for managing available dialects."""

    def __init__(self):
        """Initialize empty registry."""
        self._dialects: Dict[str, Type[Dialect]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        dialect_class: Type[Dialect],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a dialect for a language.

        Args:
            language: Primary language name (e.g., 'java', 'python')
            dialect_class: Class implementing Dialect
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the dialect class is invalid or an alias conflicts
        """
        if not (isinstance(dialect_class, type) and issubclass(dialect_class, Dialect)):
            raise RegistryError("Dialect class must inherit from Dialect")

        language_key = language.lower()

        if language_key in self._dialects and not replace:
            logger.debug("Dialect %s already registered, skipping", language_key)
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != language_key]
        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._dialects:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{self._aliases[alias_key]}'"
                    )

        self._dialects[language_key] = dialect_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """Unregister a dialect and its aliases."""
        language_key = self.resolve_name(language)
        self._dialects.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve_name(self, language: str) -> str:
        """Primary name for a language name or alias."""
        language_key = language.lower()
        return self._aliases.get(language_key, language_key)

    def get_dialect_class(self, language: str) -> Type[Dialect]:
        """
        Get dialect class for language.

        Args:
            language: Language name or alias

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve_name(language)
        if language_key in self._dialects:
            return self._dialects[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No dialect registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def create_dialect(
        self,
        language: str,
        config: Optional[Union[SerializerConfig, Dict[str, Any], str, Path]] = None,
    ) -> Dialect:
        """
        Create dialect instance for language.

        Args:
            language: Language name or alias
            config: Configuration as SerializerConfig, dict, or file path

        Returns:
            Configured dialect instance

        Raises:
            RegistryError: If dialect creation fails
        """
        dialect_class = self.get_dialect_class(language)
        language_key = self.resolve_name(language)

        try:
            if isinstance(config, SerializerConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(language_key, custom_config=config)
            elif config is None:
                final_config = load_config(language_key)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return dialect_class(final_config)
        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language} dialect: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._dialects.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """
        Get all registered names including aliases.

        Returns:
            Dict mapping primary language to list of all names (including aliases)
        """
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self._dialects
        }

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        return self.resolve_name(language) in self._dialects

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Returns:
            Dict with name, class, file extension, aliases and module

        Raises:
            RegistryError: If language not found
        """
        dialect = self.create_dialect(language)
        language_key = self.resolve_name(language)

        return {
            "name": dialect.language_name,
            "class": type(dialect).__name__,
            "file_extension": dialect.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": type(dialect).__module__,
            "fixture_name": dialect.config.fixture_name,
        }


# Global registry instance - created once
_global_registry: Optional[DialectRegistry] = None


def get_registry() -> DialectRegistry:
    """Get the global dialect registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = DialectRegistry()
        _auto_register_dialects(_global_registry)
    return _global_registry


def _auto_register_dialects(registry: DialectRegistry):
    """Register the bundled dialects with their aliases."""
    from .languages.java import JavaDialect
    from .languages.python import PythonDialect

    registry.register("java", JavaDialect, aliases=["jvm"])
    registry.register("python", PythonDialect, aliases=["py"])


# Public API functions using the global registry


def register_dialect(
    language: str,
    dialect_class: Type[Dialect],
    aliases: Optional[List[str]] = None,
    replace: bool = False,
):
    """Register a dialect in the global registry."""
    get_registry().register(language, dialect_class, aliases, replace)


def get_dialect(
    language: str,
    config: Optional[Union[SerializerConfig, Dict[str, Any], str, Path]] = None,
) -> Dialect:
    """Get dialect instance from global registry."""
    return get_registry().create_dialect(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
