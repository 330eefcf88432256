import logging
import pytest
from everett import ConfigurationError

from tests import config_from_dict
from streamcoro.config import MainConfig, CoroutineConfig, LogLevel, \
    positive_int, nonnegative_int, get_program_config
from streamcoro.coroutines import Read


def test_positive_int():
    assert positive_int("3") == 3
    with pytest.raises(ValueError):
        positive_int("0")


def test_nonnegative_int():
    assert nonnegative_int("0") == 0
    with pytest.raises(ValueError):
        nonnegative_int("-1")


def test_log_level_from_config():
    assert LogLevel.from_config("DEBUG") == logging.DEBUG
    assert LogLevel.from_config("30") == logging.WARNING
    with pytest.raises(ValueError):
        LogLevel.from_config("LOUD")


def test_main_config_defaults():
    config = MainConfig(config_from_dict({}))
    assert config.log_level == logging.INFO
    assert config.coroutine.read_capacity == 1024


def test_main_config_values():
    config = MainConfig(config_from_dict({
        "log_level": "DEBUG",
        "coroutine": {
            "read_capacity": "16",
        },
    }))
    assert config.log_level == logging.DEBUG
    assert config.coroutine.read_capacity == 16
    assert Read.build(config.coroutine).capacity == 16


def test_coroutine_config_rejects_bad_capacity():
    with pytest.raises(ConfigurationError):
        CoroutineConfig(config_from_dict({"read_capacity": "0"}))


def test_program_config_from_env(monkeypatch):
    monkeypatch.delenv("SC_CONFIG_FILE", raising=False)
    monkeypatch.setenv("SC_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SC_COROUTINE_READ_CAPACITY", "64")
    config = get_program_config()
    assert config.log_level == logging.WARNING
    assert config.coroutine.read_capacity == 64


def test_program_config_from_yaml(monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text('sc_coroutine_read_capacity: "32"\n')
    monkeypatch.delenv("SC_COROUTINE_READ_CAPACITY", raising=False)
    monkeypatch.setenv("SC_CONFIG_FILE", str(config_file))
    config = get_program_config()
    assert config.coroutine.read_capacity == 32


def test_logging_configure():
    from streamcoro.logging import configure, logger
    config = MainConfig(config_from_dict({"log_level": "ERROR"}))
    old_level = logger.level
    try:
        configure(config)
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(old_level)
