"""YAML settings source merging base files with per-environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from pydantic.fields import FieldInfo


# src/app/core/config/yaml_source.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parents[4]


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``override`` merged recursively into ``base``."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_directory(directory: Path) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    if not directory.is_dir():
        return merged
    for yaml_file in sorted(directory.glob("*.yaml")):
        with yaml_file.open(encoding="utf-8") as f:
            merged = deep_merge(merged, yaml.safe_load(f) or {})
    return merged


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load ``config/base/*.yaml`` then ``config/environments/{APP_ENV}/*.yaml``.

    The config directory defaults to ``<project root>/config`` and can be
    pointed elsewhere with the ``CONFIG_DIR`` environment variable.
    """

    def __init__(self, settings_cls: type[Any]) -> None:
        super().__init__(settings_cls)
        self._config_dir = Path(os.getenv("CONFIG_DIR", str(_PROJECT_ROOT / "config")))
        self._app_env = os.getenv("APP_ENV", "development")
        self._yaml_data = deep_merge(
            _load_directory(self._config_dir / "base"),
            _load_directory(self._config_dir / "environments" / self._app_env),
        )

    def get_field_value(
        self,
        _field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        """Get the value for a single field from the merged YAML data."""
        value = self._yaml_data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data
