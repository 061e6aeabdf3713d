"""Render sink protocol for timeline output plugins.

The core never touches presentation: it produces a TimelineView and a sink
turns it into a document (HTML page, terminal table, JSON).
"""

from typing import Literal, Protocol

from ..models import TimelineView

# Names of the sinks shipped with the package
OutputFormat = Literal["html", "terminal", "json"]


class RenderSink(Protocol):
    """
    Protocol defining the interface for render sink plugins.

    Example:
        class CsvSink:
            name = "csv"

            def render(self, view: TimelineView) -> str:
                ...
    """

    @property
    def name(self) -> str:
        """
        Name used to select this sink (e.g. "html", "terminal").
        """
        ...

    def render(self, view: TimelineView) -> str:
        """
        Render a view to a document.

        Implementations must handle empty views (``view.is_empty``) and
        must not mutate the view.

        Args:
            view: View built for one render pass

        Returns:
            The rendered document as text
        """
        ...
