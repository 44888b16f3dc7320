"""
Projections of a composed timeline into table rows, chart markers and an
export document.
"""

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

from mergerclock.utils.date import datetime_to_str, to_date, weekday_name

from .types import (
    FILING_DATE,
    PRE_ASSESSMENT_START,
    STOP_CLOCK_END,
    STOP_CLOCK_START,
    PreAssessmentPeriod,
    TimelineEvent,
    TimelineResult,
)

CHART_PADDING_DAYS = 10
TODAY_LABEL = "Today"

# Short chart labels, matched by substring in order
_ABBREVIATIONS: List[Tuple[str, str]] = [
    (FILING_DATE, "Filing Date"),
    (PRE_ASSESSMENT_START, "Pre-Assessment"),
    (STOP_CLOCK_START, "Stop Clock Start"),
    (STOP_CLOCK_END, "Stop Clock End"),
    ("Earliest date ACCC can clear", "Earliest Decision"),
    ("Final date for Phase 1 remedy", "P1 Remedy Deadline"),
    ("Phase 1 determination", "Phase One Deadline"),
    ("ACCC issues notice of competition", "NOCC"),
    ("Response to notice of competition", "Response to NOCC"),
    ("Final date for Phase 2 remedy", "P2 Remedy Deadline"),
    ("Final date to provide information", "Information Deadline"),
    ("Phase 2 determination", "Phase Two Deadline"),
]


@dataclass
class ResultRow:
    """One row of the results table."""

    event: str
    day: int
    date: date
    day_of_week: str
    is_in_past: bool = False
    is_stop_clock: bool = False
    is_stop_clock_end: bool = False
    is_phase_decision: bool = False
    is_pre_assessment: bool = False
    stop_clock_duration: Optional[int] = None
    extension_days: Optional[int] = None

    @property
    def label(self) -> str:
        """Event name with its stop-clock or extension annotation."""
        text = self.event
        if self.is_stop_clock and self.stop_clock_duration:
            text += f" ({self.stop_clock_duration} days)"
        if self.extension_days:
            text += f" (extended by {self.extension_days} days due to commitment proposal)"
        return text


@dataclass
class ChartMarker:
    label: str
    date: date
    position: float
    category: str
    day: Optional[int] = None
    event_name: Optional[str] = None

    @property
    def is_today(self) -> bool:
        return self.category == "today"


@dataclass
class ChartTimeline:
    """Markers positioned on [range_start, range_end] as fractions in [0, 1]."""

    markers: List[ChartMarker] = field(default_factory=list)
    range_start: Optional[date] = None
    range_end: Optional[date] = None
    month_labels: List[str] = field(default_factory=list)

    def position_of(self, d: date) -> float:
        return _positions([d], self.range_start, self.range_end)[0]


@dataclass
class ExportDocument:
    """Two-page export: page 1 chart and table, page 2 input parameters."""

    timeline: ChartTimeline
    table: pd.DataFrame
    parameters: Dict[str, object]
    total_business_days: int


def abbreviate_event_name(event_name: str) -> str:
    for needle, short in _ABBREVIATIONS:
        if needle in event_name:
            return short
    return " ".join(event_name.split(" ")[:2])


def _category(event: TimelineEvent) -> str:
    if event.flags.is_phase_decision:
        return "phase_decision"
    if event.flags.is_stop_clock_start or event.flags.is_stop_clock_end:
        return "stop_clock"
    if event.flags.is_pre_assessment:
        return "pre_assessment"
    return "milestone"


def _positions(dates: List[date], range_start: date, range_end: date) -> List[float]:
    total = (range_end - range_start).days
    offsets = np.array([(d - range_start).days for d in dates], dtype=float)
    return (offsets / total).tolist()


def _month_labels(range_start: date, range_end: date) -> List[str]:
    labels = []
    month = range_start.replace(day=1)
    while month <= range_end:
        labels.append(month.strftime("%b %Y"))
        month += relativedelta(months=1)
    return labels


def total_business_days(
    events: List[TimelineEvent], pre_assessment: Optional[PreAssessmentPeriod] = None
) -> int:
    """Pre-assessment lead plus the day offset of the last event by date."""
    if not events:
        return 0
    lead = pre_assessment.lead_business_days if pre_assessment is not None else 0
    return lead + events[-1].business_day_offset


def to_result_rows(
    events: List[TimelineEvent], current_date: Optional[date] = None
) -> List[ResultRow]:
    """Shape composed events into table rows, flagging rows dated before today."""
    current_date = date.today() if current_date is None else to_date(current_date)
    return [
        ResultRow(
            event=e.event_name,
            day=e.business_day_offset,
            date=e.date,
            day_of_week=weekday_name(e.date),
            is_in_past=e.date < current_date,
            is_stop_clock=e.flags.is_stop_clock_start,
            is_stop_clock_end=e.flags.is_stop_clock_end,
            is_phase_decision=e.flags.is_phase_decision,
            is_pre_assessment=e.flags.is_pre_assessment,
            stop_clock_duration=e.stop_clock_duration,
            extension_days=e.extension_days_applied,
        )
        for e in events
    ]


def to_chart_markers(
    events: List[TimelineEvent], current_date: Optional[date] = None
) -> ChartTimeline:
    """
    Shape composed events into chart markers.

    The plotted range runs from 10 calendar days before the first event to 10
    after the last. A "Today" marker is inserted between the two events that
    bracket today, when today lies strictly inside the timeline.
    """
    if not events:
        return ChartTimeline()
    current_date = date.today() if current_date is None else to_date(current_date)

    ordered = sorted(events, key=lambda e: e.date)
    first, last = ordered[0].date, ordered[-1].date
    range_start = first - relativedelta(days=CHART_PADDING_DAYS)
    range_end = last + relativedelta(days=CHART_PADDING_DAYS)
    positions = _positions([e.date for e in ordered], range_start, range_end)

    markers = [
        ChartMarker(
            label=abbreviate_event_name(e.event_name),
            date=e.date,
            position=pos,
            category=_category(e),
            day=e.business_day_offset,
            event_name=e.event_name,
        )
        for e, pos in zip(ordered, positions)
    ]

    if first < current_date < last and all(e.date != current_date for e in ordered):
        index = next(i for i, e in enumerate(ordered) if e.date > current_date)
        today = ChartMarker(
            label=TODAY_LABEL,
            date=current_date,
            position=_positions([current_date], range_start, range_end)[0],
            category="today",
        )
        markers.insert(index, today)

    return ChartTimeline(
        markers=markers,
        range_start=range_start,
        range_end=range_end,
        month_labels=_month_labels(range_start, range_end),
    )


def rows_to_frame(rows: List[ResultRow]) -> pd.DataFrame:
    """Results table as a DataFrame with display columns first."""
    columns = ["Event", "Day", "Date", "Day of Week"]
    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame([asdict(r) for r in rows])
    df.insert(0, "Event", [r.label for r in rows])
    df = df.drop(columns=["event"]).rename(
        columns={"day": "Day", "date": "Date", "day_of_week": "Day of Week"}
    )
    others = [c for c in df.columns if c not in columns]
    return df[columns + others]


def _parameters(result: TimelineResult) -> Dict[str, object]:
    inputs = result.inputs
    stop_clock = inputs.stop_clock
    commitments = inputs.commitments
    lead = inputs.pre_assessment.lead_business_days if inputs.pre_assessment else 0
    phase_option = getattr(inputs.phase_option, "value", inputs.phase_option)
    return {
        "Filing Date": datetime_to_str(inputs.filing_date) if inputs.filing_date else None,
        "Phase Option": phase_option,
        "Pre-Assessment Days": lead,
        "Stop Clock": "On" if stop_clock else "Off",
        "Stop Clock Start Date": datetime_to_str(stop_clock.start_date) if stop_clock else None,
        "Stop Clock Duration": stop_clock.duration_business_days if stop_clock else None,
        "Commitments Offered": "On" if commitments else "Off",
        "Commitments Phase": commitments.phase.value if commitments else None,
        "Extension Duration": commitments.duration_business_days if commitments else None,
        "Total Business Days": result.total_business_days,
    }


def build_export_document(
    result: TimelineResult, current_date: Optional[date] = None
) -> ExportDocument:
    """Collect the same data the calculator displays into the export layout."""
    current_date = date.today() if current_date is None else to_date(current_date)
    return ExportDocument(
        timeline=to_chart_markers(result.events, current_date),
        table=rows_to_frame(to_result_rows(result.events, current_date)),
        parameters=_parameters(result),
        total_business_days=result.total_business_days,
    )
