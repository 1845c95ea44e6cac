"""Public domain model surface."""

from __future__ import annotations

from crdready.domain.model.enums import ConditionStatus, ConditionType
from crdready.domain.model.outcomes import (
    Established,
    PermanentlyRejected,
    PollOutcome,
    TimedOut,
)
from crdready.domain.model.resource_definition import (
    Condition,
    ResourceDefinition,
    ResourceDefinitionStatus,
)

__all__ = [
    "Condition",
    "ConditionStatus",
    "ConditionType",
    "Established",
    "PermanentlyRejected",
    "PollOutcome",
    "ResourceDefinition",
    "ResourceDefinitionStatus",
    "TimedOut",
]
