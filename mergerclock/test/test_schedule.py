"""Milestone schedule lookups."""

import pytest

from mergerclock.conventions import PhaseOption
from mergerclock.schedule import (
    PHASE1_DETERMINATION,
    PHASE1_DETERMINATION_OFFSET,
    get_schedule,
    is_phase1_milestone,
    is_phase_decision,
)


def test_phase1_schedule():
    schedule = get_schedule("phase1")
    assert [m.business_day_offset for m in schedule] == [15, 20, 30]
    assert schedule[-1].name == PHASE1_DETERMINATION


def test_full_schedule_offsets_strictly_increase():
    offsets = [m.business_day_offset for m in get_schedule(PhaseOption.PHASE1_AND_2)]
    assert offsets == [15, 20, 30, 55, 80, 90, 105, 120]
    assert all(a < b for a, b in zip(offsets, offsets[1:]))


def test_phase1_is_subset_of_full_schedule():
    full = {m.name: m.business_day_offset for m in get_schedule("phase1and2")}
    for milestone in get_schedule("phase1"):
        assert full[milestone.name] == milestone.business_day_offset


def test_phase_boundary():
    assert PHASE1_DETERMINATION_OFFSET == 30
    assert is_phase1_milestone(30)
    assert not is_phase1_milestone(55)
    assert [m.is_phase1 for m in get_schedule("phase1and2")].count(True) == 3


def test_phase_decision_names():
    decisions = [m.name for m in get_schedule("phase1and2") if is_phase_decision(m.name)]
    assert decisions == ["Phase 1 determination", "Phase 2 determination"]


def test_unknown_phase_option():
    with pytest.raises(ValueError, match="Unknown phase option"):
        get_schedule("phase3")
