"""Backoff settings for the establishment poller, read from the environment."""

from __future__ import annotations

from crdready.domain.backoff import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_INITIAL_INTERVAL_SECONDS,
    DEFAULT_MAX_ATTEMPTS,
    BackoffConfig,
)

from .env import optional_env_var
from .errors import ConfigurationError, InvalidConfigurationValueError


def make_backoff_config(
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_interval: float = DEFAULT_INITIAL_INTERVAL_SECONDS,
    factor: float = DEFAULT_BACKOFF_FACTOR,
) -> BackoffConfig:
    """Build a ``BackoffConfig``, reporting rejected values as ``ConfigurationError``."""

    try:
        return BackoffConfig(
            max_attempts=max_attempts, initial_interval=initial_interval, factor=factor
        )
    except ValueError as exc:
        raise ConfigurationError(f"Invalid backoff configuration: {exc}") from exc


def _read_number[T: (int, float)](name: str, parse: type[T], default: T) -> T:
    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError as exc:
        raise InvalidConfigurationValueError(name, raw) from exc


def get_backoff_config() -> BackoffConfig:
    """Build backoff settings, honouring optional environment overrides."""

    return make_backoff_config(
        max_attempts=_read_number("CRDREADY_MAX_ATTEMPTS", int, DEFAULT_MAX_ATTEMPTS),
        initial_interval=_read_number(
            "CRDREADY_INITIAL_INTERVAL", float, DEFAULT_INITIAL_INTERVAL_SECONDS
        ),
        factor=_read_number("CRDREADY_BACKOFF_FACTOR", float, DEFAULT_BACKOFF_FACTOR),
    )
