import pytest

from object2code import Dialect
from object2code.codegen.languages.java import JavaDialect
from object2code.codegen.languages.python import PythonDialect
from object2code.codegen.registry import (
    DialectRegistry,
    RegistryError,
    get_dialect,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


class EchoDialect(JavaDialect):
    @property
    def language_name(self):
        return "echo"


def test_bundled_dialects_are_registered():
    assert list_supported_languages() == ["java", "python"]
    assert is_language_supported("JVM")
    assert is_language_supported("py")
    assert not is_language_supported("cobol")


def test_get_dialect_by_alias():
    assert isinstance(get_dialect("jvm"), JavaDialect)
    dialect = get_dialect("py")
    assert isinstance(dialect, PythonDialect)
    assert dialect.config.fixture_name == "create_fixture"


def test_get_dialect_with_dict_config():
    dialect = get_dialect("java", {"max_depth": 4})

    assert dialect.config.max_depth == 4
    assert dialect.config.dialect == "java"


def test_unknown_language():
    with pytest.raises(RegistryError, match="Available: java, python"):
        get_dialect("cobol")


def test_invalid_config_type():
    with pytest.raises(RegistryError):
        get_dialect("java", 42)


def test_language_info():
    info = get_language_info("py")

    assert info["name"] == "python"
    assert info["file_extension"] == ".py"
    assert info["class"] == "PythonDialect"
    assert info["aliases"] == ["py"]


def test_register_and_unregister():
    registry = DialectRegistry()
    registry.register("echo", EchoDialect, aliases=["ech"])

    assert registry.is_supported("ech")
    assert registry.list_all_names() == {"echo": ["echo", "ech"]}
    assert isinstance(registry.create_dialect("ech"), EchoDialect)

    registry.unregister("ech")
    assert not registry.is_supported("echo")
    assert not registry.is_supported("ech")


def test_register_rejects_non_dialects():
    with pytest.raises(RegistryError):
        DialectRegistry().register("bad", dict)


def test_alias_conflicts():
    registry = DialectRegistry()
    registry.register("java", JavaDialect, aliases=["jvm"])
    registry.register("python", PythonDialect)

    with pytest.raises(RegistryError):
        registry.register("echo", EchoDialect, aliases=["python"])
    with pytest.raises(RegistryError):
        registry.register("echo", EchoDialect, aliases=["jvm"])


def test_existing_registration_kept_unless_replaced():
    registry = DialectRegistry()
    registry.register("java", JavaDialect)
    registry.register("java", EchoDialect)

    assert registry.get_dialect_class("java") is JavaDialect

    registry.register("java", EchoDialect, replace=True)
    assert registry.get_dialect_class("java") is EchoDialect


def test_dialects_are_dialects():
    assert issubclass(JavaDialect, Dialect)
    assert issubclass(PythonDialect, Dialect)
