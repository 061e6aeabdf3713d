"""Rich console utilities for lifecycle-timeline.

This module provides a shared Rich Console instance and helper functions
for CLI status output. The console writes to stderr so that rendered
documents can be piped from stdout.
"""

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .models import StatusCounts

# Detect CI environments
IS_GITHUB_ACTIONS = os.getenv("GITHUB_ACTIONS") == "true"
IS_CI = os.getenv("CI") == "true" or IS_GITHUB_ACTIONS

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "status.supported": "green",
        "status.extended": "yellow",
        "status.unsupported": "bold red",
    }
)

# Shared console instance
console = Console(
    theme=custom_theme,
    stderr=True,
    force_terminal=IS_GITHUB_ACTIONS or None,
    color_system="auto",
)


def print_banner(version: str = "unknown") -> None:
    """Print the tool name and version."""
    version_display = f"v{version}" if version and version[0:1].isdigit() else version
    banner = Text()
    banner.append("lifecycle-timeline", style="bold blue")
    banner.append(f" {version_display}", style="magenta")
    banner.append(" - support lifecycle at a glance\n", style="cyan")
    console.print(banner)


def print_status_summary(counts: StatusCounts, title: str = "Support Status") -> None:
    """
    Print the per-status counters as a table.

    Args:
        counts: Counters for the current selection
        title: Table title
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Status", style="cyan")
    table.add_column("Components", justify="right")

    table.add_row("All", str(counts.all))
    table.add_row(Text("Standard Support", style="status.supported"), str(counts.supported))
    table.add_row(Text("Extended Support", style="status.extended"), str(counts.extended))
    table.add_row(Text("Out of Support", style="status.unsupported"), str(counts.unsupported))

    console.print(table)


def _annotate(kind: str, message: str, title: Optional[str]) -> None:
    """
    Emit a GitHub Actions annotation, or a themed console line when run locally.

    Annotations are written to stderr, which the runner also scans, so a
    document rendered to stdout is never interleaved with them.
    """
    if IS_GITHUB_ACTIONS:
        prefix = f"::{kind} title={title}::" if title else f"::{kind}::"
        print(f"{prefix}{message}", file=sys.stderr)
        return

    label = kind.capitalize() + (f" ({title})" if title else "")
    console.print(f"[{kind}]{label}:[/{kind}] {escape(message)}")


def gha_warning(message: str, title: Optional[str] = None) -> None:
    """Warn about input that was accepted but will not show anything, e.g. an unknown site."""
    _annotate("warning", message, title)


def gha_error(message: str, title: Optional[str] = None) -> None:
    """Report a failed command."""
    _annotate("error", message, title)
