"""Translate CustomResourceDefinition payloads into domain snapshots."""

from __future__ import annotations

from datetime import UTC
from logging import getLogger
from typing import TYPE_CHECKING

from crdready.domain.model import (
    Condition,
    ConditionStatus,
    ConditionType,
    ResourceDefinition,
    ResourceDefinitionStatus,
)

from .schema import CustomResourceDefinitionPayload

if TYPE_CHECKING:
    from .schema import ConditionPayload

log = getLogger(__name__)

_KNOWN_TYPES = frozenset(member.value for member in ConditionType)
_KNOWN_STATUSES = frozenset(member.value for member in ConditionStatus)


def parse_condition(payload: ConditionPayload) -> Condition | None:
    if payload.type not in _KNOWN_TYPES:
        log.debug("Skipping condition with unrecognised type %s", payload.type)
        return None
    status = (
        ConditionStatus(payload.status)
        if payload.status in _KNOWN_STATUSES
        else ConditionStatus.UNKNOWN
    )
    transition = payload.last_transition_time
    if transition is not None and transition.tzinfo is None:
        transition = transition.replace(tzinfo=UTC)
    return Condition(
        type=ConditionType(payload.type),
        status=status,
        reason=payload.reason,
        message=payload.message,
        last_transition_time=transition.astimezone(UTC) if transition else None,
    )


def parse_resource_definition(
    payload: CustomResourceDefinitionPayload | object,
) -> ResourceDefinition:
    """Build a ``ResourceDefinition`` from a raw or validated API payload."""

    model = (
        payload
        if isinstance(payload, CustomResourceDefinitionPayload)
        else CustomResourceDefinitionPayload.model_validate(payload)
    )
    conditions = [
        condition
        for condition in (parse_condition(item) for item in model.status.conditions)
        if condition is not None
    ]
    return ResourceDefinition(
        name=model.metadata.name,
        finalizers=list(dict.fromkeys(model.metadata.finalizers)),
        status=ResourceDefinitionStatus(conditions=conditions),
    )
