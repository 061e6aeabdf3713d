"""Component selection and view building.

Turns the catalog, the site mapping and an explicit ViewState into a
TimelineView. Everything here is pure; ``now`` is captured once by the
caller so every component of a render pass is classified against the
same moment.
"""

from datetime import date, datetime
from typing import Dict, List, Optional, Union

from .models import (
    ALL_SITES,
    Catalog,
    ComponentRecord,
    SiteMapping,
    SupportWindow,
    TimelineGroup,
    TimelineRow,
    TimelineView,
    ViewState,
)
from .status import classify, count_statuses
from .timeline import segment

EMPTY_MESSAGE = "No components found for the selected filters"


def flatten_all_components(catalog: Catalog) -> List[ComponentRecord]:
    """Every component of every section, tagged with its section key."""
    return [component.with_section(section) for section, components in catalog.items() for component in components]


def components_for_site(site: str, catalog: Catalog, site_mapping: SiteMapping) -> List[ComponentRecord]:
    """
    Components deployed at a site, in catalog order.

    ``"all"`` selects the whole catalog; an unknown site selects nothing.
    """
    if site == ALL_SITES:
        return flatten_all_components(catalog)

    mapping = site_mapping.get(site)
    if not mapping:
        return []

    selected: List[ComponentRecord] = []
    for section, ids in mapping.items():
        wanted = set(ids or [])
        for component in catalog.get(section, []):
            if component.id in wanted:
                selected.append(component.with_section(section))
    return selected


def select_components(catalog: Catalog, site_mapping: SiteMapping, state: ViewState) -> List[ComponentRecord]:
    """Components of the selected section, restricted to the selected site."""
    if state.site == ALL_SITES:
        return [c.with_section(state.section) for c in catalog.get(state.section, [])]
    return [c for c in components_for_site(state.site, catalog, site_mapping) if c.section == state.section]


def group_rows(rows: List[TimelineRow]) -> List[TimelineGroup]:
    """Group rows by category label, keeping first-seen order."""
    buckets: Dict[str, List[TimelineRow]] = {}
    for row in rows:
        buckets.setdefault(row.component.group_label, []).append(row)
    return [TimelineGroup(label=label, rows=tuple(items)) for label, items in buckets.items() if items]


def build_view(
    catalog: Catalog,
    site_mapping: SiteMapping,
    state: ViewState,
    window: Optional[SupportWindow] = None,
    now: Union[date, datetime, None] = None,
    clamp: bool = False,
) -> TimelineView:
    """
    Build the view for one render pass.

    Counters cover every selected component; rows only those matching the
    status filter.

    Args:
        catalog: Parsed catalog
        site_mapping: Parsed site mapping (may be empty)
        state: Section, filter and site selection
        window: Timeline span (defaults to SupportWindow.default())
        now: Reference moment (defaults to today)
        clamp: Keep segment widths inside the window

    Returns:
        TimelineView ready for a render sink
    """
    window = window or SupportWindow.default()
    if now is None:
        now = date.today()
    today = now.date() if isinstance(now, datetime) else now

    components = select_components(catalog, site_mapping, state)
    counts = count_statuses(components, today)
    if not components:
        return TimelineView(state=state, window=window, now=today, counts=counts)

    rows: List[TimelineRow] = []
    for component in components:
        status = classify(component, today)
        if state.filter != "all" and status.value != state.filter:
            continue
        rows.append(TimelineRow(component=component, status=status, segments=segment(component, window, clamp)))

    return TimelineView(state=state, window=window, now=today, counts=counts, groups=tuple(group_rows(rows)))


def default_section(catalog: Catalog, preferred: str = "sharedInfrastructure") -> Optional[str]:
    """Section shown when none is chosen: the preferred key, else the first one."""
    if preferred in catalog:
        return preferred
    return next(iter(catalog), None)


def site_summary(catalog: Catalog, site_mapping: SiteMapping) -> Dict[str, Dict[str, int]]:
    """Per site, the number of catalog components it lists in each section."""
    summary: Dict[str, Dict[str, int]] = {}
    for site in site_mapping:
        per_section: Dict[str, int] = {}
        for component in components_for_site(site, catalog, site_mapping):
            per_section[component.section or ""] = per_section.get(component.section or "", 0) + 1
        summary[site] = per_section
    return summary
