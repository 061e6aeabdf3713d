"""Data models for support-lifecycle timelines."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .dates import SupportDate, coerce_date, days_between, decode_support_date

# Default timeline span
DEFAULT_WINDOW_START = date(2025, 1, 1)
DEFAULT_WINDOW_END = date(2031, 12, 31)

# Catalog keys decoded into dedicated ComponentRecord fields
_KNOWN_KEYS = frozenset(
    {
        "id",
        "component",
        "type",
        "location",
        "model",
        "category",
        "subCategory",
        "section",
        "endOfStandardSupport",
        "endOfExtendedSupport",
    }
)


class SupportStatus(str, Enum):
    """Current support status of a component."""

    SUPPORTED = "supported"
    EXTENDED = "extended"
    UNSUPPORTED = "unsupported"


class SegmentKind(str, Enum):
    """Kind of a timeline segment."""

    STANDARD = "standard"
    EXTENDED = "extended"
    EXPIRED = "expired"

    @property
    def css_class(self) -> str:
        return _SEGMENT_CSS_CLASSES[self]


_SEGMENT_CSS_CLASSES = {
    SegmentKind.STANDARD: "standard-support",
    SegmentKind.EXTENDED: "extended-support",
    SegmentKind.EXPIRED: "end-of-support",
}

# Values accepted for ViewState.filter
VALID_FILTERS = ("all",) + tuple(status.value for status in SupportStatus)
ALL_SITES = "all"


@dataclass(frozen=True)
class SupportWindow:
    """Fixed calendar range a timeline is drawn over."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        # Accept strings and datetimes, store plain dates
        object.__setattr__(self, "start_date", coerce_date(self.start_date))
        object.__setattr__(self, "end_date", coerce_date(self.end_date))
        if self.start_date >= self.end_date:
            raise ValueError(
                f"Support window start ({self.start_date.isoformat()}) must be before end ({self.end_date.isoformat()})"
            )

    @property
    def total_days(self) -> int:
        return days_between(self.start_date, self.end_date)

    @classmethod
    def default(cls) -> "SupportWindow":
        return cls(DEFAULT_WINDOW_START, DEFAULT_WINDOW_END)


@dataclass(frozen=True)
class ComponentRecord:
    """
    A single infrastructure component from the catalog.

    Only the two support dates matter to status and timeline computation;
    the descriptive fields are carried for the rendering layer.
    """

    end_of_standard_support: SupportDate
    end_of_extended_support: SupportDate
    id: Optional[str] = None
    component: str = ""
    type: str = ""
    location: str = ""
    model: str = ""
    category: Optional[str] = None
    sub_category: Optional[str] = None
    section: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "end_of_standard_support", decode_support_date(self.end_of_standard_support))
        object.__setattr__(self, "end_of_extended_support", decode_support_date(self.end_of_extended_support))

    @property
    def group_label(self) -> str:
        """Label of the table group this component is listed under."""
        return self.category or self.sub_category or "Unknown"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], section: Optional[str] = None) -> "ComponentRecord":
        """
        Build a record from a catalog entry.

        Args:
            data: Component object as found in the catalog JSON
            section: Section key to tag the record with (overrides data["section"])

        Returns:
            Decoded ComponentRecord
        """
        raw_id = data.get("id")
        return cls(
            end_of_standard_support=decode_support_date(data.get("endOfStandardSupport")),
            end_of_extended_support=decode_support_date(data.get("endOfExtendedSupport")),
            id=str(raw_id) if raw_id is not None else None,
            component=str(data.get("component") or ""),
            type=str(data.get("type") or ""),
            location=str(data.get("location") or ""),
            model=str(data.get("model") or ""),
            category=data.get("category") or None,
            sub_category=data.get("subCategory") or None,
            section=section if section is not None else data.get("section"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def with_section(self, section: str) -> "ComponentRecord":
        """Return a copy of this record tagged with the given section."""
        return replace(self, section=section)


def as_component(component: Any) -> ComponentRecord:
    """Accept either a ComponentRecord or a raw catalog mapping."""
    if isinstance(component, ComponentRecord):
        return component
    if isinstance(component, Mapping):
        return ComponentRecord.from_dict(component)
    raise TypeError(f"Expected ComponentRecord or mapping, got {type(component).__name__}")


@dataclass(frozen=True)
class TimelineSegment:
    """One proportional region of a component's timeline bar."""

    kind: SegmentKind
    width_percent: float
    tooltip: str


@dataclass(frozen=True)
class ViewState:
    """Current section, status filter, and site selection."""

    section: str
    filter: str = "all"
    site: str = ALL_SITES

    def __post_init__(self) -> None:
        if self.filter not in VALID_FILTERS:
            raise ValueError(f"Invalid filter '{self.filter}'. Expected one of: {', '.join(VALID_FILTERS)}")


@dataclass(frozen=True)
class StatusCounts:
    """Per-status counters shown on the legend buttons."""

    all: int = 0
    supported: int = 0
    extended: int = 0
    unsupported: int = 0

    def get(self, key: str) -> int:
        return getattr(self, key, 0)

    def as_dict(self) -> Dict[str, int]:
        return {
            "all": self.all,
            "supported": self.supported,
            "extended": self.extended,
            "unsupported": self.unsupported,
        }


# Section key -> ordered component records
Catalog = Dict[str, List[ComponentRecord]]

# Site name -> section key -> component ids
SiteMapping = Dict[str, Dict[str, List[str]]]


@dataclass(frozen=True)
class TimelineRow:
    """A rendered table row: the component with its status and bar segments."""

    component: ComponentRecord
    status: SupportStatus
    segments: Tuple[TimelineSegment, ...]


@dataclass(frozen=True)
class TimelineGroup:
    """Rows sharing a category label."""

    label: str
    rows: Tuple[TimelineRow, ...]


@dataclass(frozen=True)
class TimelineView:
    """Everything a render sink needs to draw one screen."""

    state: ViewState
    window: SupportWindow
    now: date
    counts: StatusCounts
    groups: Tuple[TimelineGroup, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.counts.all == 0

    @property
    def row_count(self) -> int:
        return sum(len(group.rows) for group in self.groups)
