"""Sink registry for managing timeline render plugins."""

from typing import Dict, FrozenSet, List, Optional, get_args

from lifecycle_timeline.exceptions import ConfigurationError, RenderError
from lifecycle_timeline.logging_config import logger

from ..models import TimelineView
from .protocol import OutputFormat, RenderSink

# Valid sink names - single source of truth for output format validation
VALID_SINKS: FrozenSet[str] = frozenset(get_args(OutputFormat))


class SinkRegistry:
    """
    Registry for timeline render sinks.

    Example:
        registry = SinkRegistry()
        registry.register(HtmlSink())
        document = registry.render(view, "html")
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._sinks: Dict[str, RenderSink] = {}

    def register(self, sink: RenderSink) -> None:
        """
        Register a sink, replacing any sink with the same name.

        Args:
            sink: RenderSink implementation to register
        """
        self._sinks[sink.name] = sink
        logger.debug(f"Registered render sink: {sink.name}")

    def get(self, name: str) -> Optional[RenderSink]:
        """Get a sink by name, or None."""
        return self._sinks.get(name)

    def render(self, view: TimelineView, sink_name: str) -> str:
        """
        Render a view with a specific sink.

        Raises:
            ConfigurationError: If no sink with that name is registered
            RenderError: If the sink fails
        """
        sink = self._sinks.get(sink_name)
        if not sink:
            available = ", ".join(self.list_sinks())
            raise ConfigurationError(f"Output format '{sink_name}' not found. Available formats: {available}")

        logger.debug(f"Rendering {view.row_count} rows with sink: {sink.name}")
        try:
            return sink.render(view)
        except Exception as e:
            logger.error(f"Render sink {sink.name} raised exception: {e}")
            raise RenderError(f"Failed to render with '{sink.name}': {e}") from e

    def list_sinks(self) -> List[str]:
        """Names of all registered sinks, sorted."""
        return sorted(self._sinks)

    def clear(self) -> None:
        """Remove all registered sinks."""
        self._sinks.clear()


def create_default_registry() -> SinkRegistry:
    """Create a SinkRegistry with every built-in sink."""
    from .sinks import HtmlSink, JsonSink, TerminalSink

    registry = SinkRegistry()
    registry.register(HtmlSink())
    registry.register(TerminalSink())
    registry.register(JsonSink())
    return registry
