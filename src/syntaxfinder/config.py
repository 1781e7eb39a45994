"""Global configuration — rule thresholds, web settings, env vars, YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "syntaxfinder"
    return Path.home() / ".config" / "syntaxfinder"


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


_INT_FIELDS = frozenset(
    {"lookback_window", "default_array_capacity", "python_list_threshold", "web_port"}
)


def _to_int(key: str, value: object) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e


@dataclass
class SyntaxFinderConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    lookback_window: int = 10
    default_array_capacity: int = 3
    python_list_threshold: int = 10
    disabled_rules: tuple[str, ...] = ()
    web_host: str = "127.0.0.1"
    web_port: int = 3001
    cors_origins: tuple[str, ...] = ("*",)
    verbose: bool = False

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.lookback_window < 0:
            raise ValueError("lookback_window must not be negative")
        if self.default_array_capacity < 1:
            raise ValueError("default_array_capacity must be at least 1")

    @classmethod
    def load(cls, path: str | Path | None = None) -> SyntaxFinderConfig:
        """Load config from an optional YAML file, then environment overrides."""
        config = cls()

        if path is None:
            default_file = config.config_dir / "config.yaml"
            if default_file.is_file():
                path = default_file
        if path is not None:
            config = config.merge(load_config_file(path))

        env_window = os.environ.get("SYNTAXFINDER_LOOKBACK_WINDOW")
        if env_window:
            config.lookback_window = int(env_window)

        env_capacity = os.environ.get("SYNTAXFINDER_DEFAULT_ARRAY_CAPACITY")
        if env_capacity:
            config.default_array_capacity = int(env_capacity)

        env_threshold = os.environ.get("SYNTAXFINDER_PYTHON_LIST_THRESHOLD")
        if env_threshold:
            config.python_list_threshold = int(env_threshold)

        env_disabled = os.environ.get("SYNTAXFINDER_DISABLED_RULES")
        if env_disabled:
            config.disabled_rules = _split_csv(env_disabled)

        env_host = os.environ.get("SYNTAXFINDER_WEB_HOST")
        if env_host:
            config.web_host = env_host

        env_port = os.environ.get("SYNTAXFINDER_WEB_PORT")
        if env_port:
            config.web_port = int(env_port)

        env_origins = os.environ.get("SYNTAXFINDER_CORS_ORIGINS")
        if env_origins:
            config.cors_origins = _split_csv(env_origins)

        config._validate()
        return config

    def merge(self, overrides: dict) -> SyntaxFinderConfig:
        """Return a copy with the given field values replaced."""
        known = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"Unknown config key: {key}")
            if key in _INT_FIELDS:
                value = _to_int(key, value)
            values[key] = value
        return SyntaxFinderConfig(**values)


def load_config_file(path: str | Path) -> dict:
    """Read a YAML config file into a dict of SyntaxFinderConfig fields."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_config(text)


def parse_config(text: str) -> dict:
    """Parse a YAML config string, normalising list-valued fields."""
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Config YAML must be a mapping")

    parsed = dict(data)
    for key in ("disabled_rules", "cors_origins"):
        if key in parsed:
            value = parsed[key]
            if isinstance(value, str):
                value = _split_csv(value)
            elif value is not None and not isinstance(value, (list, tuple)):
                raise ValueError(f"{key} must be a list or comma-separated string")
            parsed[key] = tuple(str(v) for v in value or ())
    return parsed
