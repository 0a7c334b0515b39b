import io

import pytest

from conftest import Bean, Node, Point
from object2code import (
    CodeOutputStream,
    Extensions,
    SerializationError,
    SerializerConfig,
    SinkWriteError,
    UnsupportedTypeError,
    object2code,
    serialize,
)
from object2code.codegen.languages.python import PythonDialect


class FailingSink:
    def write(self, text):
        raise OSError("disk full")


def test_binary_sink_receives_encoded_bytes():
    buffer = io.BytesIO()

    with CodeOutputStream(buffer) as stream:
        stream.write_object(["ä"])
        data = buffer.getvalue()

    assert data.decode("utf-8").endswith('arrayList0.add("ä");\n')


def test_binary_sink_uses_configured_encoding():
    buffer = io.BytesIO()
    config = SerializerConfig(encoding="latin-1")

    with CodeOutputStream(buffer, config=config) as stream:
        stream.write_object("é")
        assert buffer.getvalue() == '"é"'.encode("latin-1")


def test_sink_failure_aborts_with_cause():
    stream = CodeOutputStream(FailingSink())

    with pytest.raises(SerializationError) as excinfo:
        stream.write_object(Bean())

    assert isinstance(excinfo.value.__cause__, SinkWriteError)
    assert "Could not serialize the given object to code" in str(excinfo.value)


def test_writing_after_close_fails():
    stream = CodeOutputStream(io.StringIO())
    stream.close()

    assert stream.closed
    with pytest.raises(SerializationError):
        stream.write_object(1)


def test_close_closes_the_sink():
    buffer = io.StringIO()

    with CodeOutputStream(buffer):
        pass

    assert buffer.closed


def test_partial_output_is_kept_on_failure():
    buffer = io.StringIO()
    stream = CodeOutputStream(buffer)

    with pytest.raises(SerializationError):
        stream.write_object(Node("a", child=Node(child=1j)))

    assert buffer.getvalue().startswith("pkg.Node node0 = new pkg.Node();\n")


def test_extensions_persist_across_calls_on_one_stream():
    extensions = Extensions()
    extensions.include_field(Bean, "myInt")
    buffer = io.StringIO()
    stream = CodeOutputStream(buffer, extensions=extensions)

    stream.write_object(Bean(myInt=1))
    stream.write_object(Bean(myInt=2))

    assert buffer.getvalue() == (
        "pkg.Bean bean0 = new pkg.Bean();\n"
        "bean0.setMyInt(1);\n"
        "pkg.Bean bean0 = new pkg.Bean();\n"
        "bean0.setMyInt(2);\n"
    )


def test_separate_extensions_are_isolated():
    first = Extensions()
    first.set_constructor_generator(Bean, lambda b: "make()")

    assert object2code(Bean(), extensions=first) == "pkg.Bean bean0 = make();\n"
    assert "new pkg.Bean()" in object2code(Bean(), extensions=Extensions())


def test_dialect_by_name():
    assert object2code(True, dialect="python") == "True"
    assert object2code(True, dialect="py") == "True"


def test_dialect_instance():
    assert object2code([1], dialect=PythonDialect()) == "list0 = list()\nlist0.append(1)\n"


def test_line_ending_from_config():
    config = SerializerConfig(line_ending="\r\n")

    assert object2code([1], config=config) == (
        "java.util.ArrayList arrayList0 = new java.util.ArrayList();\r\n"
        "arrayList0.add(1);\r\n"
    )


def test_only_properties_with_matching_field_from_config():
    class Derived:
        def __init__(self):
            self.base = 1

        def getTotal(self) -> int:
            return self.base + 1

        def setTotal(self, value):
            self.base = value - 1

    config = SerializerConfig(only_properties_with_matching_field=True)

    code = object2code(Derived(), config=config)

    assert "setBase(1)" in code
    assert "setTotal" not in code


def test_serialize_success_result():
    result = serialize(Bean(myInt=9))

    assert result.success
    assert result
    assert result.root_expression == "bean0"
    assert result.root_type == "pkg.Bean"
    assert result.statements[0] == "pkg.Bean bean0 = new pkg.Bean();"
    assert result.code.endswith("bean0.setMyInt(9);\n")
    assert result.metadata["language"] == "java"
    assert result.metadata["variable_count"] == 1
    assert result.metadata["statement_count"] == 4
    assert result.metadata["types"] == ["pkg.Bean"]


def test_serialize_scalar_root():
    result = serialize(42)

    assert result.code == "42"
    assert result.root_expression == "42"
    assert result.root_type == "int"
    assert result.statements == []


def test_serialize_none_root():
    result = serialize(None)

    assert result.success
    assert result.code == ""
    assert result.root_expression is None


def test_serialize_failure_result():
    result = serialize(Node(child=b"bytes"))

    assert not result.success
    assert not result
    assert "Could not serialize" in result.error_message
    assert isinstance(result.exception.__cause__, UnsupportedTypeError)
    assert result.code.startswith("pkg.Node node0")


def test_serialize_reports_missing_constructor_warnings():
    result = serialize(Point(1, 2))

    assert result.success
    assert result.warnings == ["pkg.Point has no no-argument constructor"]
    assert result.code == (
        "pkg.Point point0 = null /* Could not generate code for pkg.Point "
        "there is no no-args constructor */;\n"
    )
