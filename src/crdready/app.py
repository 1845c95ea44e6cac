"""Application orchestration entry points."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING

from crdready.adapters.kubernetes import KubernetesResourceDefinitionStore
from crdready.config.backoff import get_backoff_config
from crdready.domain.establishment import EstablishmentPoller
from crdready.domain.model import ResourceDefinition

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from crdready.domain.backoff import BackoffConfig
    from crdready.domain.ports.store import ResourceDefinitionStore


log = getLogger(__name__)


def wait_for_resource_definitions(
    names: Sequence[str],
    *,
    store: ResourceDefinitionStore | None = None,
    backoff: BackoffConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Wait until every named CustomResourceDefinition is established.

    Raises ``AggregateEstablishmentError`` listing every definition that failed.
    """

    effective_backoff = backoff or get_backoff_config()
    if store is None:
        with KubernetesResourceDefinitionStore() as owned_store:
            _wait(names, owned_store, effective_backoff, sleep)
    else:
        _wait(names, store, effective_backoff, sleep)

    log.info(f"All CustomResourceDefinitions established: {', '.join(sorted(names))}")


def _wait(
    names: Sequence[str],
    store: ResourceDefinitionStore,
    backoff: BackoffConfig,
    sleep: Callable[[float], None],
) -> None:
    log.info(
        "Waiting for %s CustomResourceDefinition(s): max_attempts=%s, interval=%ss, factor=%s",
        len(names),
        backoff.max_attempts,
        backoff.initial_interval,
        backoff.factor,
    )

    poller = EstablishmentPoller(store, backoff, sleep)
    poller.ensure_established_all(ResourceDefinition(name=name) for name in names)
