"""Centralized runtime configuration for legend rendering."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from pagedlegend.api.logging import LegendLoggingConfig
from pagedlegend.api.options import LegendOptions


@dataclass(frozen=True, slots=True)
class LegendRuntimeConfig:
    animation_enabled: bool
    animation_duration_ms: float | None
    max_frame_delta_seconds: float
    logging: LegendLoggingConfig


_RUNTIME_CONFIG: ContextVar[LegendRuntimeConfig | None] = ContextVar(
    "pagedlegend_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _optional_float(
    name: str,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float | None:
    raw = _raw(name, env=env)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if minimum is None else max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with legend-prefixed override."""
    value = _raw("LEGEND_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> LegendRuntimeConfig:
    log_file = _text("LEGEND_LOG_FILE", "", env=env)
    return LegendRuntimeConfig(
        animation_enabled=_flag("LEGEND_ANIMATION_ENABLED", True, env=env),
        animation_duration_ms=_optional_float("LEGEND_ANIMATION_DURATION_MS", minimum=0.0, env=env),
        max_frame_delta_seconds=_float(
            "LEGEND_MAX_FRAME_DELTA_MS", 250.0, minimum=1.0, env=env
        )
        / 1000.0,
        logging=LegendLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_log_format(_text("LEGEND_LOG_FORMAT", "text", env=env)),
            file_path=log_file or None,
            file_format=_log_format(_text("LEGEND_LOG_FILE_FORMAT", "json", env=env)),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> LegendRuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: LegendRuntimeConfig) -> LegendRuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> LegendRuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


def transition_seconds(options: LegendOptions, config: LegendRuntimeConfig) -> float:
    """Resolve content-transition duration; zero means apply immediately."""
    if not (options.animation and config.animation_enabled):
        return 0.0
    duration_ms = (
        config.animation_duration_ms
        if config.animation_duration_ms is not None
        else options.animation_duration_update
    )
    return max(0.0, float(duration_ms)) / 1000.0


__all__ = [
    "LegendRuntimeConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
    "transition_seconds",
]
