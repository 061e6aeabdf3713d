"""Render sink implementations."""

from .html import HtmlSink
from .json_sink import JsonSink
from .terminal import TerminalSink

__all__ = [
    "HtmlSink",
    "JsonSink",
    "TerminalSink",
]
