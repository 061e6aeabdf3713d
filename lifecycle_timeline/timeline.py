"""Timeline segmentation.

Splits a fixed support window into proportional bar segments for one
component: standard support, then extended support, then out of support.
Widths are percentages of the window measured in whole days.
"""

from datetime import date
from typing import Any, List, Tuple

from .dates import days_between, format_date
from .models import SegmentKind, SupportWindow, TimelineSegment, as_component

NOT_ANNOUNCED_TOOLTIP = "End of Standard Support is not yet announced"


def pct_of_window(start: date, end: date, window: SupportWindow, clamp: bool = False) -> float:
    """
    Width of the span start..end as a percentage of the window.

    With ``clamp`` both endpoints are first pulled into the window, so the
    result lies in [0, 100].
    """
    if clamp:
        start = min(max(start, window.start_date), window.end_date)
        end = min(max(end, window.start_date), window.end_date)
    return days_between(start, end) / window.total_days * 100


def _not_announced(width: float) -> TimelineSegment:
    return TimelineSegment(SegmentKind.STANDARD, width, NOT_ANNOUNCED_TOOLTIP)


def segment(component: Any, window: SupportWindow, clamp: bool = False) -> Tuple[TimelineSegment, ...]:
    """
    Build the ordered timeline segments for a component.

    Args:
        component: ComponentRecord or raw catalog mapping
        window: Calendar range the bar represents
        clamp: Keep widths inside the window when support ends outside it

    Returns:
        Segments in left-to-right order (standard, extended, expired)
    """
    record = as_component(component)

    # Placeholder, absent and unparseable values all mean "not announced"
    if not record.end_of_extended_support.is_announced:
        return (_not_announced(100),)

    standard_end = record.end_of_standard_support.value
    extended_end = record.end_of_extended_support.value

    segments: List[TimelineSegment] = []
    cursor = window.start_date

    if standard_end is not None and standard_end > window.start_date:
        segments.append(
            TimelineSegment(
                SegmentKind.STANDARD,
                pct_of_window(cursor, standard_end, window, clamp),
                f"Standard Support: until {format_date(standard_end)}",
            )
        )
        cursor = standard_end
    elif standard_end is None:
        # Zero-width marker keeps the tooltip without taking space
        segments.append(_not_announced(0))

    if extended_end > cursor:
        segments.append(
            TimelineSegment(
                SegmentKind.EXTENDED,
                pct_of_window(cursor, extended_end, window, clamp),
                f"Extended Support: {format_date(cursor)} - {format_date(extended_end)}",
            )
        )
        cursor = extended_end

    if cursor < window.end_date:
        segments.append(
            TimelineSegment(
                SegmentKind.EXPIRED,
                pct_of_window(cursor, window.end_date, window, clamp),
                f"Out of Support after {format_date(cursor)}",
            )
        )

    return tuple(segments)


def total_width(segments: Tuple[TimelineSegment, ...]) -> float:
    """Sum of segment widths, in percent."""
    return sum(s.width_percent for s in segments)
