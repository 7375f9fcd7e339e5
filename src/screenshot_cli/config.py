"""Configuration management for screenshot-cli.

Configuration priority (highest to lowest):
1. CLI overrides (passed to load_config)
2. Environment variables (SCREENSHOT_CLI_*)
3. Config file (~/.config/screenshot-cli/config.yaml)
4. Built-in defaults
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any

import yaml
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "screenshot-cli"
ENV_PREFIX = "SCREENSHOT_CLI"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"

log = logging.getLogger(__name__)

CAPTURE_TYPES = {"full", "window"}
PATH_KEYS = {"cache_dir"}


@dataclass
class Config:
    """screenshot-cli configuration."""

    # Recent custom save locations
    cache_dir: Path = field(default_factory=lambda: Path(user_cache_dir(APP_NAME)))
    recent_paths_limit: int = 3

    # Output naming
    filename_prefix: str = "screenshot"

    # Behavior
    default_type: Optional[str] = None
    emit_events: bool = False

    def __post_init__(self):
        if isinstance(self.cache_dir, str):
            self.cache_dir = Path(self.cache_dir)

    @property
    def recent_paths_file(self) -> Path:
        return self.cache_dir / "recent-paths.json"


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}_{name}")


def _config_path_from_env() -> Optional[Path]:
    value = _env("CONFIG")
    if value:
        return Path(value).expanduser()
    return None


def _load_config_file(path: Path, strict: bool = False) -> dict:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        if strict:
            raise ValueError(f"Failed to parse config file {path}: {exc}")
        return {}

    if not isinstance(data, dict):
        if strict:
            raise ValueError(f"Config file {path} must be a mapping")
        return {}

    return data


def _expand_path(value: Any) -> Any:
    if value is None:
        return value
    return str(Path(value).expanduser())


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on")


def config_defaults() -> dict:
    return {
        "cache_dir": str(Path(user_cache_dir(APP_NAME))),
        "recent_paths_limit": 3,
        "filename_prefix": "screenshot",
        "default_type": None,
        "emit_events": False,
    }


def _load_env_overrides() -> dict:
    config: dict[str, Any] = {}

    value = _env("CACHE_DIR")
    if value is not None:
        config["cache_dir"] = _expand_path(value)

    value = _env("RECENT_PATHS_LIMIT")
    if value is not None:
        try:
            config["recent_paths_limit"] = int(value)
        except ValueError:
            pass

    value = _env("FILENAME_PREFIX")
    if value is not None:
        config["filename_prefix"] = value

    value = _env("DEFAULT_TYPE")
    if value is not None:
        config["default_type"] = value or None

    value = _env("EMIT_EVENTS")
    if value is not None:
        config["emit_events"] = _parse_bool(value)

    return config


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    return config_path or _config_path_from_env() or DEFAULT_CONFIG_PATH


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[dict] = None,
    strict: bool = False,
) -> Config:
    """Load configuration from all sources.

    Unknown keys in the config file are ignored here; use
    validate_config_file() to report them.
    """
    resolved_path = resolve_config_path(config_path)

    config_dict = config_defaults()
    file_config = _load_config_file(resolved_path, strict=strict)
    for key, value in file_config.items():
        if key not in config_dict:
            continue
        errors = validate_config_dict({key: value})
        if errors:
            log.warning("Ignoring %s from %s: %s", key, resolved_path, "; ".join(errors))
            continue
        config_dict[key] = value
    config_dict.update(_load_env_overrides())

    if overrides:
        for key, value in overrides.items():
            if value is not None:
                config_dict[key] = value

    for key in PATH_KEYS:
        if key in config_dict and config_dict[key] is not None:
            config_dict[key] = _expand_path(config_dict[key])

    return Config(**config_dict)


def config_schema() -> dict:
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "properties": {
            "cache_dir": {"type": "string"},
            "recent_paths_limit": {"type": "integer", "minimum": 0},
            "filename_prefix": {"type": "string"},
            "default_type": {"type": ["string", "null"], "enum": sorted(CAPTURE_TYPES) + [None]},
            "emit_events": {"type": "boolean"},
        },
        "additionalProperties": False,
    }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config_dict(data: Any) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Config must be a mapping/object"]

    props = config_schema()["properties"]

    for key in data.keys():
        if key not in props:
            errors.append(f"Unknown config key: {key}")

    for key, value in data.items():
        if key not in props:
            continue
        expected = props[key]["type"]
        if isinstance(expected, list):
            if value is None and "null" in expected:
                continue
            if "string" in expected and isinstance(value, str):
                pass
            else:
                errors.append(f"{key} must be one of types: {', '.join(expected)}")
                continue
        elif expected == "string" and not isinstance(value, str):
            errors.append(f"{key} must be a string")
            continue
        elif expected == "integer" and not _is_int(value):
            errors.append(f"{key} must be an integer")
            continue
        elif expected == "boolean" and not isinstance(value, bool):
            errors.append(f"{key} must be a boolean")
            continue

        if key == "recent_paths_limit" and value < 0:
            errors.append("recent_paths_limit must be >= 0")
        if key == "default_type" and value not in CAPTURE_TYPES:
            errors.append(f"default_type must be one of: {', '.join(sorted(CAPTURE_TYPES))}")
        if key == "filename_prefix" and ("/" in value or "\\" in value):
            errors.append("filename_prefix must not contain path separators")

    return errors


def validate_config_file(config_path: Optional[Path] = None) -> list[str]:
    path = resolve_config_path(config_path)
    if not path.exists():
        return []
    try:
        data = _load_config_file(path, strict=True)
    except ValueError as exc:
        return [str(exc)]
    return validate_config_dict(data)


def config_to_dict(config: Config) -> dict:
    return {
        "cache_dir": str(config.cache_dir),
        "recent_paths_limit": config.recent_paths_limit,
        "filename_prefix": config.filename_prefix,
        "default_type": config.default_type,
        "emit_events": config.emit_events,
    }
