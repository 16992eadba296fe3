"""
Tests for configuration validation and loading.
"""
import json
import os

import pytest
import yaml
from pydantic import ValidationError

from anti_clean.config import (
    CleanConfiguration,
    ensure_clean_config,
    find_default_config,
    load_config,
    load_config_file,
    load_configuration_from_env,
    merge_configs,
)
from anti_clean.error.exceptions import ConfigurationError


def test_defaults():
    config = CleanConfiguration()
    assert config.interpreter == "/bin/bash"
    assert config.script_name == "anti-clean.sh"
    assert config.temp_dir is None
    assert config.force_flag == "--force"
    assert config.unique_temp_path is False
    assert config.log_level == "INFO"


def test_log_level_is_normalized():
    assert CleanConfiguration(log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize("field, value", [
    ("interpreter", "bash"),
    ("script_name", "../anti-clean.sh"),
    ("script_name", ""),
    ("force_flag", "force"),
    ("log_level", "LOUD"),
    ("interpreter", "/bin/ba\x00sh"),
    ("script_name", "anti\x00clean.sh"),
    ("temp_dir", "/tmp/a\x00b"),
    ("log_file", "/tmp/clean\x00.log"),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        CleanConfiguration(**{field: value})


def test_nul_byte_in_config_file_is_a_configuration_error(isolated_env, tmp_path):
    config_file = tmp_path / "anti_clean.json"
    config_file.write_text(json.dumps({"temp_dir": "/tmp/a\x00b"}))

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(str(config_file), use_dotenv=False)


def test_unknown_fields_are_rejected():
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        ensure_clean_config({"interpeter": "/bin/sh"})


def test_ensure_clean_config_passes_instances_through():
    config = CleanConfiguration()
    assert ensure_clean_config(config) is config


def test_temp_dir_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert CleanConfiguration(temp_dir="~/scratch").temp_dir == tmp_path / "scratch"


def test_load_yaml_file(tmp_path):
    path = tmp_path / "anti_clean.yaml"
    path.write_text(yaml.safe_dump({"interpreter": "/usr/local/bin/bash", "unique_temp_path": True}))

    assert load_config_file(str(path)) == {"interpreter": "/usr/local/bin/bash", "unique_temp_path": True}


def test_load_json_file(tmp_path):
    path = tmp_path / "anti_clean.json"
    path.write_text(json.dumps({"log_level": "warning"}))

    assert load_config_file(str(path)) == {"log_level": "warning"}


def test_empty_yaml_file_is_empty_config(tmp_path):
    path = tmp_path / "anti_clean.yml"
    path.write_text("")
    assert load_config_file(str(path)) == {}


@pytest.mark.parametrize("name, content, message", [
    ("missing.yaml", None, "not found"),
    ("config.toml", "a = 1", "Unsupported config file format"),
    ("broken.yaml", "interpreter: [unclosed", "Invalid YAML"),
    ("broken.json", "{", "Invalid JSON"),
    ("list.yaml", "- a\n- b\n", "must be a mapping"),
])
def test_bad_config_files(tmp_path, name, content, message):
    path = tmp_path / name
    if content is not None:
        path.write_text(content)

    with pytest.raises(ConfigurationError, match=message):
        load_config_file(str(path))


def test_env_values_are_collected(monkeypatch):
    monkeypatch.setenv("ANTI_CLEAN_INTERPRETER", "/bin/sh")
    monkeypatch.setenv("ANTI_CLEAN_UNIQUE_TEMP_PATH", "true")
    monkeypatch.setenv("ANTI_CLEAN_LOG_LEVEL", "")
    monkeypatch.setenv("ANTI_CLEAN_NOT_A_FIELD", "x")

    values = load_configuration_from_env()

    assert values["interpreter"] == "/bin/sh"
    assert values["unique_temp_path"] == "true"
    assert "log_level" not in values
    assert "not_a_field" not in values


def test_load_config_defaults(isolated_env):
    assert load_config() == CleanConfiguration()


def test_load_config_discovers_file(isolated_env):
    (isolated_env / "anti_clean.yaml").write_text("force_flag: --deep\n")

    assert load_config().force_flag == "--deep"


def test_environment_overrides_file(isolated_env, monkeypatch):
    path = isolated_env / "custom.yaml"
    path.write_text("interpreter: /usr/bin/bash\nlog_level: ERROR\n")
    monkeypatch.setenv("ANTI_CLEAN_LOG_LEVEL", "debug")

    config = load_config(path)

    assert config.interpreter == "/usr/bin/bash"
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_read(isolated_env):
    (isolated_env / ".env").write_text("ANTI_CLEAN_SCRIPT_NAME=from-dotenv.sh\n")

    try:
        assert load_config().script_name == "from-dotenv.sh"
    finally:
        os.environ.pop("ANTI_CLEAN_SCRIPT_NAME", None)


def test_missing_explicit_file_is_an_error(isolated_env):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(isolated_env / "nope.yaml")


def test_find_default_config_order(tmp_path):
    first = tmp_path / "a.yaml"
    second = tmp_path / "b.yaml"
    second.write_text("{}")

    assert find_default_config([first, second]) == second
    first.write_text("{}")
    assert find_default_config([first, second]) == first
    assert find_default_config([tmp_path / "none.yaml"]) is None


def test_merge_configs_is_recursive():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    merged = merge_configs(base, {"nested": {"y": 3}, "b": 2})

    assert merged == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
    assert base["nested"] == {"x": 1, "y": 2}
