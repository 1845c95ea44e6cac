"""Snapshot of a resource definition as reported by the cluster store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import ConditionStatus, ConditionType


@dataclass(slots=True)
class Condition:
    """A typed status fact attached to a resource definition."""

    type: ConditionType
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    last_transition_time: datetime | None = None


@dataclass(slots=True)
class ResourceDefinitionStatus:
    conditions: list[Condition] = field(default_factory=list)


@dataclass(slots=True)
class ResourceDefinition:
    """A resource definition identified by its globally unique name.

    Instances are transient snapshots; the store owns the authoritative copy.
    """

    name: str
    finalizers: list[str] = field(default_factory=list)
    status: ResourceDefinitionStatus = field(default_factory=ResourceDefinitionStatus)
