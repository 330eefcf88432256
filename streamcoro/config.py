"""
Tools and wrappers for Everett config classes. Lets us define configuration
with less boilerplate, provides some common parsers with extra checks.
"""

import logging
import os
from enum import Enum
from everett.manager import ConfigManager, ConfigOSEnv, Option
from everett.ext.yamlfile import ConfigYamlEnv


__all__ = ["positive_int", "nonnegative_int", "Config", "CoroutineConfig",
           "MainConfig", "get_program_config"]


def positive_int(v):
    i = int(v)
    if i <= 0:
        raise ValueError("Expected a positive value")
    return i


def nonnegative_int(v):
    i = int(v)
    if i < 0:
        raise ValueError("Expected a nonnegative value")
    return i


class _ConfigMeta(type):
    def __init__(cls, name, bases, attrs, *args, **kwargs):
        super().__init__(name, bases, attrs, *args, **kwargs)

        options = {key: Option(**params)
                   for key, params in attrs.get("_options", {}).items()}
        cls.Config = type("Config", (), options)


class Config(metaclass=_ConfigMeta):
    """
    Reduces Everett boilerplate. Just define your options in an _options dict
    (keyword arguments for everett's Option), and all values will be turned
    into members, raising errors if any are missing or fail to parse.

    Subclasses should be PODs, so that they can be trivially mocked. Config
    members for nested components go into __init__, under their own
    namespace.
    """
    _options = {}

    def __init__(self, config):
        self.config = config.with_options(self)
        for key in self._options:
            setattr(self, key, self.config(key, raise_error=True))


class LogLevel(Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @classmethod
    def from_config(cls, value):
        try:
            return cls[value].value
        except KeyError:
            try:
                return cls(int(value)).value
            except (ValueError, TypeError):
                raise ValueError(
                    f"Expected log level name or numeric value, got {value}")


class CoroutineConfig(Config):
    _options = {
        "read_capacity": {
            "parser": positive_int,
            "default": "1024",
            "doc": ("Size in bytes of the buffer read coroutines hand to the "
                    "runtime for each chunk. Composite readers never ask for "
                    "more than they still need, so this is an upper bound.")
        },
    }


class MainConfig(Config):
    _options = {
        "log_level": {
            "parser": LogLevel.from_config,
            "default": "INFO",
            "doc": ("Library log level. Name or numeric value corresponding "
                    "to Python's logging module value.")
        }
    }

    def __init__(self, config):
        super().__init__(config)
        self.coroutine = CoroutineConfig(config.with_namespace("coroutine"))


def get_program_config():
    """
    Reads configuration from SC_-prefixed environment variables, and from a
    YAML file if SC_CONFIG_FILE names one.
    """
    sources = [ConfigOSEnv()]
    if "SC_CONFIG_FILE" in os.environ:
        sources.append(ConfigYamlEnv(os.environ["SC_CONFIG_FILE"]))
    config = ConfigManager(sources)
    return MainConfig(config.with_namespace("sc"))
