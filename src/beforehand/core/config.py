# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Hierarchical configuration from YAML/TOML files with env var overrides."""

from __future__ import annotations

import importlib.resources
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from beforehand.kernel.exceptions import ConfigurationException

_ENV_PREFIX = "BEFOREHAND_"


class Config:
    """Hierarchical configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (``beforehand.logging.format`` -> ``BEFOREHAND_LOGGING_FORMAT``)
    2. Values from the loaded file
    3. Packaged defaults (``beforehand-defaults.yaml``)
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config sources that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a YAML or TOML file merged over the packaged defaults.

        A missing file is not an error; the defaults alone are used.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls._load_defaults()
            sources.append("beforehand-defaults.yaml (defaults)")

        if path.exists():
            data = cls._deep_merge(data, cls._load_config_data(path))
            sources.append(str(path))

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def defaults(cls) -> Config:
        """Configuration holding only the packaged defaults."""
        instance = cls(cls._load_defaults())
        instance._loaded_sources = ["beforehand-defaults.yaml (defaults)"]
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        try:
            if path.suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f) or {}
            with open(path) as f:
                return yaml.safe_load(f) or {}
        except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationException(
                f"Cannot parse configuration file '{path}': {exc}",
                code="CONFIG_001",
                context={"path": str(path)},
            ) from exc

    @staticmethod
    def _load_defaults() -> dict[str, Any]:
        defaults_file = importlib.resources.files("beforehand.resources").joinpath("beforehand-defaults.yaml")
        with importlib.resources.as_file(defaults_file) as p, open(p) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first."""
        env_base = key.removeprefix("beforehand.")
        env_key = _ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
        env_val = os.environ.get(env_key)
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default
        return current

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}
