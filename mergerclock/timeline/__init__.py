"""Review timeline composition and projections."""

from .composer import calculate_timeline, compose_timeline, stop_clock_window
from .history import HistoryEvent, reconstruct_timeline
from .inputs import (
    build_inputs,
    clamp_commitment_duration,
    clamp_non_negative,
    validate_stop_clock,
)
from .projection import (
    ChartMarker,
    ChartTimeline,
    ExportDocument,
    ResultRow,
    abbreviate_event_name,
    build_export_document,
    rows_to_frame,
    to_chart_markers,
    to_result_rows,
    total_business_days,
)
from .types import (
    CommitmentsExtension,
    EventFlags,
    PreAssessmentPeriod,
    StopClockPeriod,
    StopClockWindow,
    TimelineEvent,
    TimelineInputs,
    TimelineResult,
)

__all__ = [
    # Inputs
    "PreAssessmentPeriod",
    "StopClockPeriod",
    "CommitmentsExtension",
    "TimelineInputs",
    "build_inputs",
    "clamp_commitment_duration",
    "clamp_non_negative",
    "validate_stop_clock",
    # Composer
    "compose_timeline",
    "calculate_timeline",
    "stop_clock_window",
    "EventFlags",
    "TimelineEvent",
    "StopClockWindow",
    "TimelineResult",
    # Projection
    "ResultRow",
    "ChartMarker",
    "ChartTimeline",
    "ExportDocument",
    "to_result_rows",
    "to_chart_markers",
    "total_business_days",
    "rows_to_frame",
    "abbreviate_event_name",
    "build_export_document",
    # History
    "HistoryEvent",
    "reconstruct_timeline",
]
