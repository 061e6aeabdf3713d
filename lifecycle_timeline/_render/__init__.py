"""Timeline render plugin architecture.

Usage:
    from lifecycle_timeline._render import create_default_registry

    registry = create_default_registry()
    page = registry.render(view, "html")
"""

from .protocol import OutputFormat, RenderSink
from .registry import VALID_SINKS, SinkRegistry, create_default_registry
from .sinks import HtmlSink, JsonSink, TerminalSink

__all__ = [
    # Core types
    "OutputFormat",
    "RenderSink",
    # Registry
    "SinkRegistry",
    "VALID_SINKS",
    "create_default_registry",
    # Sink implementations
    "HtmlSink",
    "JsonSink",
    "TerminalSink",
]
