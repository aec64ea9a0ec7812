"""Configuration lookup from the environment, then a settings file."""

from __future__ import annotations

import configparser
import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

_SETTINGS_SECTION = "General"


def _default_settings_path():
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "moviekit" / "moviekit.conf"


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


class SettingLookup:
    """Looks up keys in the environment and then in an INI settings file.

    Non-empty results are cached; empty results are looked up again.
    """

    def __init__(self, settings_path=None):
        self._settings_path = Path(settings_path) if settings_path is not None else None
        self._cache = {}
        self._lock = threading.Lock()

    def _settings_file(self):
        return self._settings_path if self._settings_path is not None else _default_settings_path()

    def _read_settings(self, key):
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str
        path = self._settings_file()
        try:
            with open(path, encoding="utf-8") as handle:
                parser.read_file(handle)
        except FileNotFoundError:
            return None
        except (OSError, configparser.Error) as exc:
            logger.warning("could not read settings %s: %s", path, exc)
            return None
        if parser.has_option(_SETTINGS_SECTION, key):
            return _unquote(parser.get(_SETTINGS_SECTION, key))
        return None

    def _lookup(self, key):
        env_value = os.environ.get(key, "")
        if env_value:
            logger.debug("got %s=%s from environment variable", key, env_value)
            return env_value
        value = self._read_settings(key)
        if value is not None:
            logger.debug("got %s=%s from settings", key, value)
            return value
        logger.debug("could not find a value for %s in environment or settings", key)
        return ""

    def get(self, key):
        """Return the value for ``key``, or ``""`` when it is nowhere."""
        with self._lock:
            cached = self._cache.get(key, "")
        if cached:
            return cached
        value = self._lookup(key)
        with self._lock:
            self._cache[key] = value
        return value

    def clear(self):
        """Forget all cached values."""
        with self._lock:
            self._cache.clear()


_DEFAULT_LOOKUP = SettingLookup()


def get_mp_vo():
    """Video output driver for the player."""
    return _DEFAULT_LOOKUP.get("MP_VO")


def get_mp_opts_append():
    """Extra player options appended to the defaults."""
    return _DEFAULT_LOOKUP.get("MP_OPTS_APPEND")


def get_mp_opts_override():
    """Player options replacing the defaults."""
    return _DEFAULT_LOOKUP.get("MP_OPTS_OVERRIDE")


def get_vdb_run():
    """Command prefix used when running under a debugger."""
    return _DEFAULT_LOOKUP.get("VDB_RUN")