"""Defines a global set of configurations that define how the library behaves."""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any, Final


CONFIG_ENV_VARIABLE: str = "SUPERNOVAS_BEHAVIOR_CONFIG"
"""``str``: environment variable pointing at a custom behavior config file."""


class SubConfig:
    """One section of the behavior config, with its items exposed as attributes.

    Items read as `BehavioralConfig.getConfig().time.SubNanosecondPolicy`.
    """

    def __init__(self, section: str):
        """Create an empty section.

        Args:
            section (``str``): config file section name, e.g. ``"logging"``
        """
        self.section = section
        if not isinstance(self.section, str):
            raise TypeError("Config section must be a string")

    def setonce(self, name: str, value: Any):
        """Set an item exactly once.

        Args:
            name (``str``): item name, as spelled in the config file
            value (``any``): parsed item value

        Raises:
            AttributeError: if `name` is already set to a truthy value
        """
        if already_set := getattr(self, name, None):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{already_set!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """``ConfigParser`` with getters for logging levels & sub-nanosecond policies."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    SUB_NANOSECOND_POLICIES: Final[tuple[str, ...]] = ("error", "floor")

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return logging level for this config file."""
        got = self.get(section, option)

        return self.LOGGING_LEVELS.get(got, NOTSET)

    def getpolicy(self, section: str, option: str) -> str:
        """Return a sub-nanosecond rounding policy, rejecting unknown values."""
        got = self.get(section, option).strip().lower()
        if got not in self.SUB_NANOSECOND_POLICIES:
            raise ValueError(
                f"Config item '{section}::{option}' must be one of {self.SUB_NANOSECOND_POLICIES}, got {got!r}",
            )

        return got


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": WARNING,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "time": {
            "SubNanosecondPolicy": "error",
        },
    }

    LOGGING_LEVEL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("Level",)}

    STR_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("OutputLocation",)}

    INT_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": (
            "MaxFileSize",
            "MaxFileCount",
        ),
    }

    BOOL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("AllowMultipleHandlers",)}

    POLICY_ITEMS: Final[dict[str, tuple[str, ...]]] = {"time": ("SubNanosecondPolicy",)}

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Initialize the configuration object.

        Args:
            config_file_path (``str``, optional): behavior config file to read. The packaged
                defaults are read when this is ``None``, and a missing file leaves every item at
                its default value.
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("supernovas.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, defaults in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for key, default in defaults.items():
                getter = self._getterFor(section, key)
                try:
                    value = getter(section, key)
                except ConfigError:
                    value = default

                sub.setonce(key, value)

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _getterFor(self, section: str, key: str) -> Callable[[str, str], Any]:
        """Pick the parser method that reads `key` as its declared type."""
        typed_getters = (
            (self.STR_ITEMS, self._parser.get),
            (self.INT_ITEMS, self._parser.getint),
            (self.BOOL_ITEMS, self._parser.getboolean),
            (self.LOGGING_LEVEL_ITEMS, self._parser.getlogginglevel),
            (self.POLICY_ITEMS, self._parser.getpolicy),
        )
        for items, getter in typed_getters:
            if key in items.get(section, ()):
                return getter

        raise KeyError(f"Configuration item '{section}::{key}' lacks a type classification.")

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        If no path is given, the :data:`.CONFIG_ENV_VARIABLE` environment variable is checked
        before falling back to the packaged defaults.
        """
        if cls.__shared_inst is None:
            if not config_file_path:
                config_file_path = os.environ.get(CONFIG_ENV_VARIABLE)

            if not config_file_path:
                cls.__shared_inst = BehavioralConfig()

            else:
                cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst
