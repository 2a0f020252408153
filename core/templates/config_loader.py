"""Engine configuration loading from YAML."""

from __future__ import annotations

import os
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from core.templates.models import EngineConfig
from core.utils.errors import ConfigError

CONFIG_ENV_VAR = "SEARCHURL_CONFIG"
_DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")


def resolve_config_path(path: Path | None = None) -> Path:
    """Pick the explicit path, then $SEARCHURL_CONFIG, then the packaged default."""

    if path is not None:
        return path
    env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(env_path).expanduser() if env_path else _DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> EngineConfig:
    """Load and validate engine configuration from YAML.

    An empty file yields the built-in defaults. Keys left out keep their
    default values.
    """

    config_path = resolve_config_path(path)

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file: {config_path}") from exc

    if raw is None:
        return EngineConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    try:
        return EngineConfig.model_validate(raw)
    except ValidationError as exc:
        fields = ", ".join(_error_location(error["loc"]) for error in exc.errors())
        raise ConfigError(f"Invalid config schema: {config_path} ({fields})") from exc


def _error_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"
