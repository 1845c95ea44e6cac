"""HTTP store for CustomResourceDefinitions served by a Kubernetes API server."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from crdready.adapters.http_resilience import ResilienceConfig, ResilientClient
from crdready.config.kubernetes import KubernetesConfig, get_kubernetes_config
from crdready.domain.ports.store import ResourceDefinitionNotFoundError

from .schema import CustomResourceDefinitionPayload, StatusResponse
from .translator import parse_resource_definition

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
    from types import TracebackType

    import httpx

    from crdready.domain.model import ResourceDefinition
    from crdready.domain.ports.store import ResourceDefinitionStore

log = getLogger(__name__)

CRD_COLLECTION_PATH = "/apis/apiextensions.k8s.io/v1/customresourcedefinitions"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class KubernetesAPIError(RuntimeError):
    """Raised when the API server answers with an unexpected status or payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class KubernetesResourceDefinitionStore:
    """Synchronous store over one long-lived ``ResilientClient``.

    The client, its connection pool and its rate limiter are created on the
    first ``get`` and shared by every later call until ``close``. All requests
    run on the store's own event loop.
    """

    config: KubernetesConfig = field(default_factory=get_kubernetes_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    _runner: asyncio.Runner | None = field(default=None, init=False, repr=False)
    _client: ResilientClient | None = field(default=None, init=False, repr=False)

    def __enter__(self) -> KubernetesResourceDefinitionStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def get(self, name: str) -> ResourceDefinition:
        return self._run(self._get_async(name))

    def close(self) -> None:
        if self._runner is None:
            return
        try:
            if self._client is not None:
                self._runner.run(self._client.aclose())
        finally:
            self._client = None
            self._runner.close()
            self._runner = None

    def _run[T](self, coro: Coroutine[Any, Any, T]) -> T:
        if self._runner is None:
            self._runner = asyncio.Runner()
        return self._runner.run(coro)

    async def _get_async(self, name: str) -> ResourceDefinition:
        if self._client is None:
            self._client = self.client_factory(self.config.resilience)

        url = f"{self.config.api_server}{CRD_COLLECTION_PATH}/{quote(name, safe='')}"
        response = await self._client.get(url)

        if response.status_code == 404:
            raise ResourceDefinitionNotFoundError(name)
        if response.is_error:
            raise KubernetesAPIError(
                _error_message(name, response), status_code=response.status_code
            )

        try:
            payload = CustomResourceDefinitionPayload.model_validate(response.json())
        except ValueError as exc:
            raise KubernetesAPIError(
                f"Unexpected payload for CustomResourceDefinition {name}",
                status_code=response.status_code,
            ) from exc
        return parse_resource_definition(payload)


def _error_message(name: str, response: httpx.Response) -> str:
    detail = response.reason_phrase
    try:
        status = StatusResponse.model_validate(response.json())
    except ValueError:
        status = None
    if status is not None and status.message:
        detail = status.message
    log.error(f"Kubernetes API error {response.status_code} for {name}: {detail}")
    return f"API server returned {response.status_code} for {name}: {detail}"


if TYPE_CHECKING:
    _store_check: ResourceDefinitionStore = KubernetesResourceDefinitionStore()
