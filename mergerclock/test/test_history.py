"""Simplified timelines rebuilt from stored merger records."""

from datetime import date

from mergerclock.business_calendar import add_business_days
from mergerclock.schema import MergerOutcome, MergerRecord, convert_to_merger
from mergerclock.timeline import reconstruct_timeline


def make_record(**overrides):
    data = dict(
        id="m-1",
        acquirer="Acme Holdings",
        target="Widget Co",
        industry="Retail",
        filing_date="2026-01-05",
    )
    data.update(overrides)
    return MergerRecord(**data)


def test_phase1_review_in_progress():
    merger = convert_to_merger(make_record())
    events = reconstruct_timeline(merger, current_date=date(2026, 1, 20))

    assert [e.type for e in events] == ["filing", "phase1Start", "phase1End"]
    assert events[-1].date == date(2026, 2, 17)
    assert [e.completed for e in events] == [True, True, False]
    assert events[-1].current
    assert events[-1].upcoming


def test_phase2_decided_merger():
    record = make_record(
        current_status="Cleared (with commitments)", status_date="2026-08-03", has_phase_2=True
    )
    merger = convert_to_merger(record)
    assert merger.outcome == MergerOutcome.CLEARED_WITH_COMMITMENTS
    assert merger.end_date == date(2026, 8, 3)

    events = reconstruct_timeline(merger, current_date=date(2026, 3, 1))
    types = [e.type for e in events]
    assert types[:5] == ["filing", "phase1Start", "phase1End", "phase2Start", "phase2End"]
    assert "decision" in types

    by_type = {e.type: e for e in events}
    assert by_type["phase2End"].date == add_business_days(date(2026, 2, 17), 90)
    assert by_type["decision"].description == "Merger approved with conditions"
    assert by_type["phase2Start"].completed
    assert by_type["phase2End"].current

    dates = [e.date for e in events]
    assert dates == sorted(dates)


def test_phase1_clearance_description():
    merger = convert_to_merger(make_record(current_status="Cleared", status_date="2026-02-10"))
    events = reconstruct_timeline(merger, current_date=date(2026, 6, 1))
    decision = [e for e in events if e.type == "decision"][0]
    assert decision.description == "Merger approved unconditionally in Phase 1"
    assert all(e.completed for e in events)
    assert not any(e.current for e in events)
