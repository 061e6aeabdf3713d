"""Support-date decoding for catalog documents.

Catalogs carry end-of-support values as free-form strings: an ISO date, a
month ("2029-06"), a US-style date, or a placeholder such as
"Not yet announced". Values are decoded once, at the data boundary, into a
``SupportDate``:

- ``Announced(value)``: a concrete calendar date
- ``NotYetAnnounced()``: absent, empty, or the "not yet" placeholder
- ``Unrecognized(raw)``: present but unparseable

Only ``Announced`` carries a date. The other two both resolve to ``None``;
they differ only in whether the vendor has said anything at all.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union

from lifecycle_timeline.logging_config import logger

# Substring that marks a placeholder value, matched case-insensitively
NOT_YET_ANNOUNCED_MARKER = "not yet"

# Accepted layouts after ISO-8601 parsing has failed
_FALLBACK_FORMATS = ("%Y-%m", "%m/%d/%Y", "%Y/%m/%d")

DISPLAY_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True)
class Announced:
    """A published end-of-support date."""

    value: date

    @property
    def is_announced(self) -> bool:
        return True


@dataclass(frozen=True)
class NotYetAnnounced:
    """No end-of-support date has been published."""

    @property
    def value(self) -> None:
        return None

    @property
    def is_announced(self) -> bool:
        return False


@dataclass(frozen=True)
class Unrecognized:
    """A value that is present but is neither a date nor the placeholder."""

    raw: str

    @property
    def value(self) -> None:
        return None

    @property
    def is_announced(self) -> bool:
        return False


SupportDate = Union[Announced, NotYetAnnounced, Unrecognized]


def _parse_date_string(text: str) -> Optional[date]:
    """Parse a date string in one of the accepted layouts, or return None."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        iso = text[:-1] + "+00:00" if text.endswith("Z") else text
        return datetime.fromisoformat(iso).date()
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def decode_support_date(raw: Any) -> SupportDate:
    """
    Decode a raw catalog value into a SupportDate.

    Never raises: values that cannot be understood become ``Unrecognized``.

    Args:
        raw: String, date, datetime, None, or an already decoded SupportDate

    Returns:
        The decoded SupportDate
    """
    if isinstance(raw, (Announced, NotYetAnnounced, Unrecognized)):
        return raw
    if raw is None:
        return NotYetAnnounced()
    # datetime is a subclass of date, check it first
    if isinstance(raw, datetime):
        return Announced(raw.date())
    if isinstance(raw, date):
        return Announced(raw)

    text = str(raw).strip()
    if not text or NOT_YET_ANNOUNCED_MARKER in text.lower():
        return NotYetAnnounced()

    parsed = _parse_date_string(text)
    if parsed is None:
        logger.debug(f"Unrecognized support date value: {text!r}")
        return Unrecognized(text)
    return Announced(parsed)


def parse_support_date(raw: Any) -> Optional[date]:
    """Return the calendar date of a raw catalog value, or None when there is none."""
    return decode_support_date(raw).value


def coerce_date(value: Union[date, datetime, str]) -> date:
    """
    Convert a caller-supplied date-like value into a date.

    Unlike catalog values, caller input must be valid.

    Raises:
        ValueError: If a string cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = _parse_date_string(str(value).strip())
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end precedes start)."""
    return (end - start).days


def format_date(value: date) -> str:
    """Format a date the way tooltips show it, e.g. 06/15/2027."""
    return value.strftime(DISPLAY_FORMAT)
