"""Condition ledger operations for resource definition status.

Every function operates on a definition owned by the caller for the duration
of the call. Conditions are kept unique per type; list order is preserved by
every edit.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from crdready.domain.model.enums import ConditionStatus

if TYPE_CHECKING:
    from crdready.domain.model import Condition, ConditionType, ResourceDefinition


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


def find_condition(
    definition: ResourceDefinition,
    condition_type: ConditionType,
) -> Condition | None:
    """Return the condition of the given type, or ``None``."""

    for condition in definition.status.conditions:
        if condition.type == condition_type:
            return condition
    return None


def set_condition(
    definition: ResourceDefinition,
    new_condition: Condition,
    *,
    clock: Clock = _utcnow,
) -> None:
    """Insert or update a condition, tracking status transitions.

    A condition seen for the first time is appended with its transition time
    stamped from ``clock``. An existing condition only takes the new status and
    transition time when the status actually changes; reason and message are
    always refreshed.
    """

    existing = find_condition(definition, new_condition.type)
    if existing is None:
        definition.status.conditions.append(
            replace(new_condition, last_transition_time=clock())
        )
        return

    if existing.status != new_condition.status:
        existing.status = new_condition.status
        existing.last_transition_time = new_condition.last_transition_time

    existing.reason = new_condition.reason
    existing.message = new_condition.message


def remove_condition(definition: ResourceDefinition, condition_type: ConditionType) -> None:
    definition.status.conditions = [
        condition for condition in definition.status.conditions if condition.type != condition_type
    ]


def is_condition_present_and_equal(
    definition: ResourceDefinition,
    condition_type: ConditionType,
    status: ConditionStatus,
) -> bool:
    condition = find_condition(definition, condition_type)
    return condition is not None and condition.status == status


def is_condition_true(definition: ResourceDefinition, condition_type: ConditionType) -> bool:
    """Whether the condition is present and strictly ``True``."""

    return is_condition_present_and_equal(definition, condition_type, ConditionStatus.TRUE)


def is_condition_false(definition: ResourceDefinition, condition_type: ConditionType) -> bool:
    """Whether the condition is present and strictly ``False``."""

    return is_condition_present_and_equal(definition, condition_type, ConditionStatus.FALSE)


def is_condition_equivalent(lhs: Condition | None, rhs: Condition | None) -> bool:
    """Compare two conditions ignoring their transition times."""

    if lhs is None and rhs is None:
        return True
    if lhs is None or rhs is None:
        return False
    return (
        lhs.type == rhs.type
        and lhs.status == rhs.status
        and lhs.reason == rhs.reason
        and lhs.message == rhs.message
    )


__all__ = [
    "Clock",
    "find_condition",
    "is_condition_equivalent",
    "is_condition_false",
    "is_condition_present_and_equal",
    "is_condition_true",
    "remove_condition",
    "set_condition",
]
