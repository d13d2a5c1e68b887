"""
Runtime Configuration
======================
Process-wide settings for form decoration.

- ``code_base_path``  root prefix that style paths are resolved under
- ``log_level``       level the CLI configures logging with

Values come from defaults and ``FORM_BLOCK_*`` environment variables
(e.g. ``FORM_BLOCK_CODE_BASE_PATH``); keys set in a YAML file loaded with
``RuntimeConfig.from_yaml`` take precedence over both.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path("form-block.yaml")


class RuntimeConfig(BaseSettings):
    """Runtime configuration (environment overrides supported)."""

    model_config = SettingsConfigDict(env_prefix="FORM_BLOCK_")

    code_base_path: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """Load settings from a YAML file; a missing file yields defaults."""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data.get("runtime", data))


_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """Process-wide configuration, loaded on first use."""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """Replace the process-wide configuration."""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
