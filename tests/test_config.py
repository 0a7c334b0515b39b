import json

import pytest

from object2code.codegen.core.config import (
    EXAMPLE_CONFIG,
    ConfigError,
    ConfigManager,
    SerializerConfig,
    load_config,
)


def test_dialect_defaults():
    java = load_config("java")
    python = load_config("python")

    assert java.fixture_name == "createFixture"
    assert java.custom["fixture_class"] == "Fixtures"
    assert python.fixture_name == "create_fixture"
    assert python.max_depth == 0


def test_custom_overrides_and_unknown_keys():
    config = load_config("java", custom_config={"max_depth": 2, "fixture_class": "Orders"})

    assert config.max_depth == 2
    assert config.custom["fixture_class"] == "Orders"


def test_config_file_is_merged(tmp_path):
    path = tmp_path / "object2code.json"
    path.write_text(json.dumps(EXAMPLE_CONFIG), encoding="utf-8")

    config = load_config("java", custom_config={"max_depth": 5}, config_file=path)

    assert config.max_depth == 5
    assert config.only_properties_with_matching_field is True
    assert config.custom["fixture_class"] == "OrderFixtures"


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(config_file=tmp_path / "missing.json")


def test_config_file_must_be_json(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("max_depth: 1", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_file=path)


def test_invalid_json_in_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_file=path)


def test_negative_max_depth_is_rejected():
    with pytest.raises(ConfigError):
        load_config(custom_config={"max_depth": -1})


def test_validate_config_reports_problems():
    manager = ConfigManager()
    config = SerializerConfig(line_ending="|", encoding="no-such-codec", fixture_name="1x")

    problems = manager.validate_config(config)

    assert len(problems) == 3


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    path = tmp_path / "saved.json"
    original = SerializerConfig(max_depth=3, custom={"fixture_class": "Saved"})

    manager.save_config(original, path)
    reloaded = manager.get_config("java", config_file=path)

    assert reloaded.max_depth == 3
    assert reloaded.custom["fixture_class"] == "Saved"


def test_list_dialects():
    assert ConfigManager().list_dialects() == ["java", "python"]
