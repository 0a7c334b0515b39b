from decimal import Decimal

import pytest

from conftest import Bean, Color, Node
from object2code import SerializerConfig, get_dialect, render_fixture, serialize
from object2code.codegen.core.templates import TemplateError, create_template_engine
from object2code.codegen.languages.java import JavaDialect


def test_java_fixture_class():
    result = serialize(Bean(myInt=3))

    source = render_fixture(result)

    assert source == (
        "// Generated by object2code.\n"
        "public class Fixtures {\n"
        "\n"
        "    public static pkg.Bean createFixture() {\n"
        "        pkg.Bean bean0 = new pkg.Bean();\n"
        "        bean0.setMyBoolean(false);\n"
        "        bean0.setMyByte((byte) 0);\n"
        "        bean0.setMyInt(3);\n"
        "        return bean0;\n"
        "    }\n"
        "}\n"
    )


def test_java_fixture_imports_big_decimal():
    source = render_fixture(serialize([Decimal("2.50")]), "java", name="prices")

    assert source.startswith("import java.math.BigDecimal;\n\n")
    assert "public static java.util.ArrayList prices() {" in source
    assert 'arrayList0.add(new BigDecimal("2.50"));' in source


def test_java_fixture_class_name_from_config():
    config = SerializerConfig(custom={"fixture_class": "OrderFixtures"})
    dialect = JavaDialect(config)

    source = dialect.render_fixture(serialize(1, dialect=dialect))

    assert "public class OrderFixtures {" in source
    assert "public static int createFixture() {" in source
    assert "        return 1;\n" in source


def test_java_fixture_rejects_keywords():
    with pytest.raises(TemplateError):
        render_fixture(serialize(1), "java", name="class")


def test_python_fixture_module():
    node = Node("n", child=Color.RED)

    source = render_fixture(serialize(node, dialect="python"))

    assert source == (
        '"""Fixture generated by object2code."""\n'
        "\n"
        "import pkg\n"
        "\n"
        "\n"
        "def create_fixture():\n"
        "    node0 = pkg.Node()\n"
        "    node0.child = pkg.Color.RED\n"
        "    node0.name = 'n'\n"
        "    return node0\n"
    )


def test_python_fixture_is_valid_python():
    source = render_fixture(serialize({"a": [1, Decimal("1.5")]}, dialect="python"))
    namespace = {}

    exec(source, namespace)

    assert namespace["create_fixture"]() == {"a": [1, Decimal("1.5")]}


def test_python_fixture_for_none_root():
    source = render_fixture(serialize(None, dialect="python"))

    assert source.endswith("def create_fixture():\n    return None\n")


def test_failed_result_cannot_be_rendered():
    result = serialize(Node(child=1j))

    with pytest.raises(TemplateError):
        render_fixture(result)


def test_template_engine_filters_and_in_memory_templates():
    engine = create_template_engine()
    engine.add_template("greeting.j2", "{{ text | comment('#') }}\n{{ body | indent(2) }}")

    assert engine.template_exists("greeting.j2")
    assert not engine.template_exists("missing.j2")
    assert engine.render_template(
        "greeting.j2", {"text": "a\nb", "body": "x\ny"}
    ) == "# a\n# b\n  x\n  y"


def test_missing_template():
    with pytest.raises(TemplateError, match="Template not found"):
        create_template_engine().render_template("nope.j2", {})


def test_dialect_template_directories_exist():
    for language in ("java", "python"):
        dialect = get_dialect(language)
        assert dialect.template_engine.template_exists(dialect.fixture_template)
