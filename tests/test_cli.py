import json

import pytest

from object2code.cli import create_parser, main


@pytest.fixture
def order_json(tmp_path):
    path = tmp_path / "order.json"
    path.write_text(json.dumps({"id": 7, "items": ["a", "b"]}), encoding="utf-8")
    return path


def test_json_file_to_output_file(order_json, tmp_path):
    out = tmp_path / "Order.java"

    assert main(["--json", str(order_json), "-o", str(out)]) == 0

    assert out.read_text(encoding="utf-8") == (
        "java.util.LinkedHashMap linkedHashMap0 = new java.util.LinkedHashMap();\n"
        'linkedHashMap0.put("id", 7);\n'
        "java.util.ArrayList arrayList0 = new java.util.ArrayList();\n"
        'arrayList0.add("a");\n'
        'arrayList0.add("b");\n'
        'linkedHashMap0.put("items", arrayList0);\n'
    )


def test_json_to_stdout(order_json, capsys):
    assert main(["--json", str(order_json), "--language", "python"]) == 0

    out = capsys.readouterr().out
    assert "dict0 = dict()" in out
    assert "dict0['items'] = list0" in out


def test_max_depth_option(order_json, tmp_path):
    out = tmp_path / "shallow.java"

    assert main(["--json", str(order_json), "--max-depth", "1", "-o", str(out)]) == 0

    code = out.read_text(encoding="utf-8")
    assert "arrayList0.add" in code


def test_fixture_option(order_json, tmp_path):
    out = tmp_path / "Fixture.java"

    assert main(["--json", str(order_json), "--fixture", "order", "-o", str(out)]) == 0

    source = out.read_text(encoding="utf-8")
    assert "public class Fixtures {" in source
    assert "public static java.util.LinkedHashMap order() {" in source


def test_fixture_name_from_config_file(order_json, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"fixture_name": "build", "fixture_class": "Orders"}))
    out = tmp_path / "Orders.java"

    assert (
        main(["--json", str(order_json), "--config", str(config), "--fixture", "-o", str(out)])
        == 0
    )

    source = out.read_text(encoding="utf-8")
    assert "public class Orders {" in source
    assert "build() {" in source


def test_object_reference(tmp_path):
    out = tmp_path / "value.py"

    assert main(["--object", "decimal:Decimal", "--call", "-l", "py", "-o", str(out)]) == 0

    assert out.read_text(encoding="utf-8") == "decimal.Decimal('0')\n"


def test_missing_input(capsys):
    assert main([]) == 1
    assert "Input source required" in capsys.readouterr().out


def test_unsupported_language(order_json, capsys):
    assert main(["--json", str(order_json), "--language", "cobol"]) == 1
    assert "Unsupported language" in capsys.readouterr().out


def test_missing_json_file(tmp_path):
    assert main(["--json", str(tmp_path / "missing.json")]) == 1


def test_bad_object_reference():
    assert main(["--object", "no_such_module_xyz:thing"]) == 1


def test_serialization_failure(tmp_path):
    assert main(["--object", "builtins:len"]) == 1


def test_invalid_config(order_json, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_depth": -2}))

    assert main(["--json", str(order_json), "--config", str(config)]) == 1


def test_list_languages(capsys):
    assert main(["--list-languages"]) == 0

    out = capsys.readouterr().out
    assert "java" in out
    assert "python" in out


def test_language_info(capsys):
    assert main(["--language-info", "jvm"]) == 0
    assert "JavaDialect" in capsys.readouterr().out

    assert main(["--language-info", "cobol"]) == 1


def test_input_sources_are_exclusive(order_json):
    with pytest.raises(SystemExit):
        create_parser().parse_args(["--json", str(order_json), "--url", "http://x"])
