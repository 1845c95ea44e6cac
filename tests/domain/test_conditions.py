from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from crdready.domain.conditions import (
    Clock,
    find_condition,
    is_condition_equivalent,
    is_condition_false,
    is_condition_present_and_equal,
    is_condition_true,
    remove_condition,
    set_condition,
)
from crdready.domain.model import Condition, ConditionStatus, ConditionType
from tests.helpers.resource_definitions import (
    ESTABLISHED,
    NAMES_ACCEPTED,
    NAMES_NOT_ACCEPTED,
    NOT_ESTABLISHED,
    TRANSITION_TIME,
    make_definition,
)


def _fixed_clock(value: datetime) -> Clock:
    def _clock() -> datetime:
        return value

    return _clock


def test_find_condition_returns_matching_type() -> None:
    definition = make_definition("foos.bar.io", NAMES_ACCEPTED, ESTABLISHED)

    found = find_condition(definition, ConditionType.ESTABLISHED)

    assert found is definition.status.conditions[1]


def test_find_condition_on_empty_list_returns_none() -> None:
    definition = make_definition("foos.bar.io")

    assert find_condition(definition, ConditionType.ESTABLISHED) is None


def test_set_condition_appends_new_condition_with_clock_time() -> None:
    definition = make_definition("foos.bar.io", NAMES_ACCEPTED)

    set_condition(definition, ESTABLISHED, clock=_fixed_clock(TRANSITION_TIME))

    assert [c.type for c in definition.status.conditions] == [
        ConditionType.NAMES_ACCEPTED,
        ConditionType.ESTABLISHED,
    ]
    stored = definition.status.conditions[1]
    assert stored.last_transition_time == TRANSITION_TIME
    assert stored is not ESTABLISHED
    assert ESTABLISHED.last_transition_time is None


def test_set_condition_same_status_keeps_transition_time_and_refreshes_text() -> None:
    definition = make_definition("foos.bar.io")
    set_condition(definition, ESTABLISHED, clock=_fixed_clock(TRANSITION_TIME))

    later = TRANSITION_TIME + timedelta(hours=1)
    set_condition(
        definition,
        replace(
            ESTABLISHED,
            reason="StillFine",
            message="nothing changed",
            last_transition_time=later,
        ),
        clock=_fixed_clock(later),
    )

    assert len(definition.status.conditions) == 1
    stored = definition.status.conditions[0]
    assert stored.status is ConditionStatus.TRUE
    assert stored.last_transition_time == TRANSITION_TIME
    assert stored.reason == "StillFine"
    assert stored.message == "nothing changed"


def test_set_condition_status_change_takes_new_transition_time() -> None:
    definition = make_definition("foos.bar.io")
    set_condition(definition, NOT_ESTABLISHED, clock=_fixed_clock(TRANSITION_TIME))

    later = TRANSITION_TIME + timedelta(minutes=5)
    set_condition(definition, replace(ESTABLISHED, last_transition_time=later))

    stored = definition.status.conditions[0]
    assert stored.status is ConditionStatus.TRUE
    assert stored.last_transition_time == later
    assert stored.reason == ESTABLISHED.reason
    assert stored.message == ESTABLISHED.message


def test_set_condition_never_duplicates_a_type() -> None:
    definition = make_definition("foos.bar.io")

    for condition in (NAMES_ACCEPTED, NAMES_NOT_ACCEPTED, NAMES_ACCEPTED, ESTABLISHED):
        set_condition(definition, condition)

    types = [c.type for c in definition.status.conditions]
    assert sorted(types) == sorted(set(types))
    assert len(types) == 2


def test_remove_condition_preserves_order_of_remaining() -> None:
    terminating = Condition(type=ConditionType.TERMINATING, status=ConditionStatus.FALSE)
    definition = make_definition("foos.bar.io", NAMES_ACCEPTED, terminating, ESTABLISHED)

    remove_condition(definition, ConditionType.TERMINATING)

    assert [c.type for c in definition.status.conditions] == [
        ConditionType.NAMES_ACCEPTED,
        ConditionType.ESTABLISHED,
    ]


@pytest.mark.parametrize("conditions", [(), (NAMES_ACCEPTED,)])
def test_remove_condition_absent_type_is_noop(conditions: tuple[Condition, ...]) -> None:
    definition = make_definition("foos.bar.io", *conditions)
    before = list(definition.status.conditions)

    remove_condition(definition, ConditionType.ESTABLISHED)

    assert definition.status.conditions == before


def test_status_predicates() -> None:
    definition = make_definition("foos.bar.io", NAMES_NOT_ACCEPTED, ESTABLISHED)

    assert is_condition_true(definition, ConditionType.ESTABLISHED)
    assert not is_condition_false(definition, ConditionType.ESTABLISHED)
    assert is_condition_false(definition, ConditionType.NAMES_ACCEPTED)
    assert not is_condition_true(definition, ConditionType.NAMES_ACCEPTED)
    assert is_condition_present_and_equal(
        definition, ConditionType.NAMES_ACCEPTED, ConditionStatus.FALSE
    )


def test_status_predicates_on_missing_condition_are_false() -> None:
    definition = make_definition("foos.bar.io")

    assert not is_condition_true(definition, ConditionType.ESTABLISHED)
    assert not is_condition_false(definition, ConditionType.ESTABLISHED)
    assert not is_condition_present_and_equal(
        definition, ConditionType.ESTABLISHED, ConditionStatus.UNKNOWN
    )


def test_equivalent_ignores_transition_time() -> None:
    lhs = replace(ESTABLISHED, last_transition_time=TRANSITION_TIME)
    rhs = replace(ESTABLISHED, last_transition_time=datetime(2030, 1, 1, tzinfo=UTC))

    assert is_condition_equivalent(lhs, rhs)
    assert is_condition_equivalent(None, None)


@pytest.mark.parametrize(
    "changes",
    [
        {"type": ConditionType.NAMES_ACCEPTED},
        {"status": ConditionStatus.UNKNOWN},
        {"reason": "Other"},
        {"message": "other message"},
    ],
)
def test_equivalent_detects_material_differences(changes: dict[str, object]) -> None:
    assert not is_condition_equivalent(ESTABLISHED, replace(ESTABLISHED, **changes))


def test_equivalent_presence_versus_absence() -> None:
    assert not is_condition_equivalent(ESTABLISHED, None)
    assert not is_condition_equivalent(None, ESTABLISHED)
