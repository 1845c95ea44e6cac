"""Wait for resource definitions to become established.

A definition is polled until its ``Established`` condition is ``True``, its
``NamesAccepted`` condition is ``False`` (a naming conflict, which no amount
of waiting resolves), or the attempt budget runs out. Only the store is read;
the definitions handed in are used for their names and never modified.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from crdready.domain.backoff import BackoffConfig
from crdready.domain.conditions import find_condition, is_condition_true
from crdready.domain.errors import (
    AggregateEstablishmentError,
    EstablishmentError,
    EstablishmentTimeoutError,
    NamingConflictError,
    ResourceDefinitionFetchError,
)
from crdready.domain.model import (
    ConditionStatus,
    ConditionType,
    Established,
    PermanentlyRejected,
    TimedOut,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from crdready.domain.model import PollOutcome, ResourceDefinition
    from crdready.domain.ports.store import ResourceDefinitionStore

log = getLogger(__name__)


@dataclass(slots=True)
class EstablishmentPoller:
    store: ResourceDefinitionStore
    backoff: BackoffConfig = field(default_factory=BackoffConfig)
    sleep: Callable[[float], None] = time.sleep

    def poll(self, definition: ResourceDefinition) -> PollOutcome:
        """Poll ``definition`` until it reaches a terminal state.

        Raises ``ResourceDefinitionFetchError`` as soon as the store fails.
        """

        name = definition.name
        waits = self.backoff.intervals()
        for attempt in range(1, self.backoff.max_attempts + 1):
            current = self._fetch(name)

            if is_condition_true(current, ConditionType.ESTABLISHED):
                log.debug(
                    "CustomResourceDefinition %s established after %s attempt(s)", name, attempt
                )
                return Established(name=name, attempts=attempt)

            names_accepted = find_condition(current, ConditionType.NAMES_ACCEPTED)
            if names_accepted is not None and names_accepted.status == ConditionStatus.FALSE:
                return PermanentlyRejected(
                    name=name,
                    reason=names_accepted.reason,
                    message=names_accepted.message,
                    attempts=attempt,
                )

            if attempt < self.backoff.max_attempts:
                wait = waits[attempt - 1]
                log.debug(
                    "CustomResourceDefinition %s not established yet (attempt %s/%s), "
                    "retrying in %.3fs",
                    name,
                    attempt,
                    self.backoff.max_attempts,
                    wait,
                )
                self.sleep(wait)

        return TimedOut(name=name, attempts=self.backoff.max_attempts)

    def ensure_established(self, definition: ResourceDefinition) -> None:
        """Block until ``definition`` is established or raise why it is not."""

        outcome = self.poll(definition)
        match outcome:
            case Established():
                log.info("CustomResourceDefinition %s is established", outcome.name)
            case PermanentlyRejected():
                log.warning(
                    "CustomResourceDefinition %s rejected: %s (%s)",
                    outcome.name,
                    outcome.reason,
                    outcome.message,
                )
                raise NamingConflictError(outcome.name, reason=outcome.reason)
            case TimedOut():
                log.warning(
                    "CustomResourceDefinition %s not established after %s attempt(s)",
                    outcome.name,
                    outcome.attempts,
                )
                raise EstablishmentTimeoutError(outcome.name, attempts=outcome.attempts)

    def ensure_established_all(self, definitions: Iterable[ResourceDefinition]) -> None:
        """Wait for every definition, raising one aggregate error for all failures.

        Each definition is polled independently; a failing definition does not
        stop the others from being polled.
        """

        failures: list[EstablishmentError] = []
        for definition in definitions:
            try:
                self.ensure_established(definition)
            except EstablishmentError as exc:
                failures.append(exc)

        if failures:
            raise AggregateEstablishmentError(failures)

    def _fetch(self, name: str) -> ResourceDefinition:
        try:
            return self.store.get(name)
        except Exception as exc:
            log.warning("Failed to fetch CustomResourceDefinition %s: %s", name, exc)
            raise ResourceDefinitionFetchError(name, cause=exc) from exc


def ensure_established(
    store: ResourceDefinitionStore,
    definition: ResourceDefinition,
    *,
    backoff: BackoffConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    EstablishmentPoller(store, backoff or BackoffConfig(), sleep).ensure_established(definition)


def ensure_established_all(
    store: ResourceDefinitionStore,
    definitions: Iterable[ResourceDefinition],
    *,
    backoff: BackoffConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    EstablishmentPoller(store, backoff or BackoffConfig(), sleep).ensure_established_all(
        definitions
    )


__all__ = ["EstablishmentPoller", "ensure_established", "ensure_established_all"]
