"""
Run configuration.

    -> Defaults are built in.
    -> A YAML mapping may override any of them, either from an explicit path
       or from the file named by the ORTHOCOUNT_CONFIG environment variable.

>> config = OrthoConfig.load("orthocount.yaml")
>> config["max_workers"]
256
"""
import os
import sys
from typing import Any, Dict, List, Optional

import yaml

from orthocount.exceptions import ConfigError

__all__ = ["OrthoConfig", "CONFIG_ENV_VAR", "BACKENDS"]

CONFIG_ENV_VAR = "ORTHOCOUNT_CONFIG"
BACKENDS = ("serial", "thread", "process", "spark")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_worker_command() -> List[str]:
    return [sys.executable, "-m", "orthocount.parallel.worker"]


class OrthoConfig(object):
    _DEFAULTS = {
        "max_workers": 256,
        "binary_suffix": ".dat",
        "backend": "thread",
        "worker_command": None,
        "log_level": "WARNING",
    }

    def __init__(self, data: Optional[Dict[str, Any]] = None, path: Optional[str] = None):
        """
        :param data: overrides of the built-in defaults.
        :param path: the file the overrides were read from, if any.
        """
        self._data = dict(self._DEFAULTS)
        self._data.update(self._validate(data or {}))
        self.path = path

    @classmethod
    def load(cls, path: Optional[str] = None) -> "OrthoConfig":
        path = path or os.environ.get(CONFIG_ENV_VAR) or None
        if path is None:
            return cls()
        try:
            with open(path, "r", encoding="utf-8") as file:
                data = yaml.safe_load(file)
        except OSError as e:
            raise ConfigError("Cannot read config file {0}: {1}".format(path, e.strerror)) from e
        except yaml.YAMLError as e:
            raise ConfigError("Invalid config file {0}: {1}".format(path, e)) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Config file {0} must contain a mapping".format(path))
        return cls(data, path=os.path.abspath(path))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return "OrthoConfig(path={0!r}, {1!r})".format(self.path, self._data)

    @property
    def max_workers(self) -> int:
        return self._data["max_workers"]

    @property
    def binary_suffix(self) -> str:
        return self._data["binary_suffix"]

    @property
    def backend(self) -> str:
        return self._data["backend"]

    @property
    def log_level(self) -> str:
        return self._data["log_level"]

    @property
    def worker_command(self) -> List[str]:
        command = self._data["worker_command"]
        return list(command) if command else _default_worker_command()

    @classmethod
    def _validate(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(data) - set(cls._DEFAULTS)
        if unknown:
            raise ConfigError("Unknown config keys: {0}".format(", ".join(sorted(unknown))))

        max_workers = data.get("max_workers", 1)
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
            raise ConfigError("max_workers must be a positive integer")
        if not isinstance(data.get("binary_suffix", ".dat"), str):
            raise ConfigError("binary_suffix must be a string")
        if data.get("backend", "thread") not in BACKENDS:
            raise ConfigError("backend must be one of {0}".format(", ".join(BACKENDS)))
        command = data.get("worker_command")
        if command is not None and (
                not isinstance(command, list) or not command
                or not all(isinstance(part, str) for part in command)):
            raise ConfigError("worker_command must be a non-empty list of strings")
        level = data.get("log_level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError("log_level must be one of {0}".format(", ".join(LOG_LEVELS)))
        if "log_level" in data:
            data = dict(data, log_level=level.upper())
        return data
