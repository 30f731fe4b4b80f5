"""Strike configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TARGET_RADIUS = 10.0
DEFAULT_ENV_FILES: tuple[str, ...] = (".env.strike", ".env.strike.local")


@dataclass(frozen=True, slots=True)
class StrikeConfig:
    """Immutable strike configuration."""

    target_radius: float = DEFAULT_TARGET_RADIUS
    log_level: str = "INFO"
    log_format: str = "text"  # text|json


_STRIKE_CONFIG: ContextVar[StrikeConfig | None] = ContextVar("strike_config", default=None)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files in order; later files overwrite earlier values."""
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def _log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def load_strike_config(*, env: Mapping[str, str] | None = None) -> StrikeConfig:
    """Load immutable strike configuration from env vars."""
    log_level = _text("STRIKE_LOG_LEVEL", _text("LOG_LEVEL", "INFO", env=env), env=env)
    return StrikeConfig(
        target_radius=_float("STRIKE_TARGET_RADIUS", DEFAULT_TARGET_RADIUS, env=env),
        log_level=log_level.upper(),
        log_format=_log_format(_text("STRIKE_LOG_FORMAT", "text", env=env)),
    )


def initialize_strike_config(*, env: Mapping[str, str] | None = None) -> StrikeConfig:
    config = load_strike_config(env=env)
    _STRIKE_CONFIG.set(config)
    return config


def set_strike_config(config: StrikeConfig) -> StrikeConfig:
    _STRIKE_CONFIG.set(config)
    return config


def get_strike_config() -> StrikeConfig:
    config = _STRIKE_CONFIG.get()
    if config is not None:
        return config
    return initialize_strike_config()


__all__ = [
    "DEFAULT_TARGET_RADIUS",
    "StrikeConfig",
    "get_strike_config",
    "initialize_strike_config",
    "load_default_env_files",
    "load_env_file",
    "load_strike_config",
    "set_strike_config",
]
