import logging

import pytest

from fnkit.config import (
    AppConfig,
    LoggingConfig,
    load_config,
    load_yaml,
    merge_config,
    parse_config,
)
from fnkit.logger import configure_logging, get_logger, setup_logger
from fnkit.result import Failure, Success


def test_defaults():
    config = AppConfig()
    assert config.logging.level == "INFO"
    assert config.trace.enabled
    assert config.trace.template == "{label}: {value}"


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "fnkit.yaml"
    path.write_text("logging:\n  level: DEBUG\ntrace:\n  template: '{label} -> {value}'\n")
    result = load_config(path)
    assert isinstance(result, Success)
    assert result.value.logging.level == "DEBUG"
    assert result.value.trace.template == "{label} -> {value}"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == Success(AppConfig())


def test_missing_file(tmp_path):
    result = load_yaml(tmp_path / "nope.yaml")
    assert isinstance(result, Failure)
    assert result.error.field == "config_path"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("logging: [unclosed\n")
    result = load_config(path)
    assert isinstance(result, Failure)
    assert result.error.field == "config_yaml"


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    result = load_yaml(path)
    assert isinstance(result, Failure)
    assert result.error.field == "config_yaml"


def test_parse_config_rejects_bad_values():
    result = parse_config({"logging": {"level": "LOUD"}})
    assert isinstance(result, Failure)
    assert result.error.field == "config"


def test_load_config_without_files_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("fnkit.config.DEFAULT_PATHS", (tmp_path / "fnkit.yaml",))
    assert load_config() == Success(AppConfig())


def test_merge_config_is_deep():
    base = AppConfig()
    merged = merge_config(base, {"trace": {"enabled": False}})
    assert merged.trace.enabled is False
    assert merged.trace.template == base.trace.template
    assert base.trace.enabled is True


def test_config_is_frozen():
    with pytest.raises(Exception):
        AppConfig().logging.level = "DEBUG"


def test_setup_logger_reads_env(monkeypatch):
    monkeypatch.setenv("FNKIT_LOG_LEVEL", "WARNING")
    logger = setup_logger("fnkit-test-env")
    assert logger.level == logging.WARNING
    assert len(setup_logger("fnkit-test-env").handlers) == 1


def test_configure_logging_and_children():
    logger = configure_logging(LoggingConfig(level="DEBUG", format="%(message)s"))
    assert logger.level == logging.DEBUG
    assert get_logger("trace").name == "fnkit.trace"
    configure_logging(LoggingConfig())
