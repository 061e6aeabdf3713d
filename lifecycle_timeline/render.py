"""
Public API for rendering support-lifecycle timelines.

Usage:
    from lifecycle_timeline.render import render_timeline

    page = render_timeline(
        catalog,
        site_mapping,
        ViewState(section="sharedInfrastructure", filter="extended"),
        output_format="html",
    )
"""

from datetime import date, datetime
from typing import Optional, Union

from ._render import SinkRegistry, create_default_registry
from .models import Catalog, SiteMapping, SupportWindow, TimelineView, ViewState
from .view import build_view


def render_view(view: TimelineView, output_format: str = "html", registry: Optional[SinkRegistry] = None) -> str:
    """
    Render an already built view.

    Args:
        view: View for one render pass
        output_format: Sink name ("html", "terminal", "json")
        registry: Sink registry (defaults to the built-in sinks)

    Returns:
        Rendered document

    Raises:
        ConfigurationError: If the output format is unknown
        RenderError: If the sink fails
    """
    registry = registry or create_default_registry()
    return registry.render(view, output_format)


def render_timeline(
    catalog: Catalog,
    site_mapping: SiteMapping,
    state: ViewState,
    window: Optional[SupportWindow] = None,
    now: Union[date, datetime, None] = None,
    output_format: str = "html",
    clamp: bool = True,
    registry: Optional[SinkRegistry] = None,
) -> str:
    """
    Build the view for a selection and render it in one call.

    ``now`` is captured once here so every component is classified
    against the same moment.
    """
    view = build_view(catalog, site_mapping, state, window=window, now=now or date.today(), clamp=clamp)
    return render_view(view, output_format, registry)
