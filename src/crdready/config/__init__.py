"""Application configuration helpers."""

from __future__ import annotations

from .backoff import BackoffConfig, get_backoff_config, make_backoff_config
from .env import env_flag, optional_env_var, require_env_vars
from .errors import (
    ConfigurationError,
    InvalidConfigurationValueError,
    MissingConfigurationError,
)
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .kubernetes import KubernetesConfig, get_kubernetes_config
from .logging import configure_logging

__all__ = [
    "BackoffConfig",
    "ConfigurationError",
    "InvalidConfigurationValueError",
    "KubernetesConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "env_flag",
    "get_backoff_config",
    "get_kubernetes_config",
    "make_backoff_config",
    "optional_env_var",
    "require_env_vars",
]
