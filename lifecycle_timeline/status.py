"""Support status classification.

A component is ``supported`` while standard support lasts, ``extended``
while only extended support remains, and ``unsupported`` afterwards. A
component whose extended-support end has not been announced counts as
supported whatever its standard-support end says, and so does one whose
extended-support value cannot be read as a date.
"""

from datetime import date, datetime
from typing import Any, Iterable, Union

from .models import StatusCounts, SupportStatus, as_component


def _as_day(now: Union[date, datetime]) -> date:
    return now.date() if isinstance(now, datetime) else now


def classify(component: Any, now: Union[date, datetime]) -> SupportStatus:
    """
    Classify a component's support status at a given moment.

    Args:
        component: ComponentRecord or raw catalog mapping
        now: Reference time, supplied by the caller and compared by calendar date

    Returns:
        SupportStatus for the component
    """
    record = as_component(component)
    today = _as_day(now)

    # Placeholder, absent and unparseable values all mean "not announced"
    if not record.end_of_extended_support.is_announced:
        return SupportStatus.SUPPORTED

    standard_end = record.end_of_standard_support.value
    extended_end = record.end_of_extended_support.value

    if standard_end is not None and standard_end > today:
        return SupportStatus.SUPPORTED

    # Standard support is over or was never dated, extended support decides
    return SupportStatus.EXTENDED if extended_end > today else SupportStatus.UNSUPPORTED


def count_statuses(components: Iterable[Any], now: Union[date, datetime]) -> StatusCounts:
    """Count components per support status for the legend counters."""
    tally = {status: 0 for status in SupportStatus}
    total = 0
    for component in components:
        tally[classify(component, now)] += 1
        total += 1

    return StatusCounts(
        all=total,
        supported=tally[SupportStatus.SUPPORTED],
        extended=tally[SupportStatus.EXTENDED],
        unsupported=tally[SupportStatus.UNSUPPORTED],
    )
