"""Kubernetes API server connection settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

KUBERNETES_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class KubernetesConfig:
    """Holds the API server address and credentials."""

    api_server: str
    resilience: ResilienceConfig
    token: str | None = None


def get_kubernetes_config(*, resilience: ResilienceConfig | None = None) -> KubernetesConfig:
    values = require_env_vars(("CRDREADY_API_SERVER",))
    api_server = values["CRDREADY_API_SERVER"].strip().rstrip("/")
    token = optional_env_var("CRDREADY_TOKEN")
    return KubernetesConfig(
        api_server=api_server,
        token=token,
        resilience=resilience
        or ResilienceConfig(
            name="kubernetes",
            base_url=api_server,
            timeout_seconds=KUBERNETES_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={"Authorization": f"Bearer {token}"} if token else None,
            verify_tls=not env_flag("CRDREADY_INSECURE_SKIP_TLS_VERIFY"),
            ca_file=optional_env_var("CRDREADY_CA_FILE"),
        ),
    )
