"""Rich terminal table sink."""

import io

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...models import SegmentKind, SupportStatus, TimelineRow, TimelineView
from ...view import EMPTY_MESSAGE

BAR_WIDTH = 40
BAR_CHAR = "█"

SEGMENT_STYLES = {
    SegmentKind.STANDARD: "green",
    SegmentKind.EXTENDED: "yellow",
    SegmentKind.EXPIRED: "red",
}

STATUS_STYLES = {
    SupportStatus.SUPPORTED: "green",
    SupportStatus.EXTENDED: "yellow",
    SupportStatus.UNSUPPORTED: "bold red",
}


def timeline_bar(row: TimelineRow, width: int = BAR_WIDTH) -> Text:
    """Draw a row's segments as a fixed-width block bar."""
    bar = Text()
    used = 0
    for s in row.segments:
        cells = min(round(max(s.width_percent, 0) / 100 * width), width - used)
        if cells > 0:
            bar.append(BAR_CHAR * cells, style=SEGMENT_STYLES[s.kind])
            used += cells
    if used < width:
        bar.append(" " * (width - used))
    return bar


class TerminalSink:
    """Renders a view as a Rich table, returned as text."""

    def __init__(self, color: bool = False, width: int = 140) -> None:
        self._color = color
        self._width = width

    @property
    def name(self) -> str:
        return "terminal"

    def render(self, view: TimelineView) -> str:
        capture = Console(
            file=io.StringIO(),
            record=True,
            width=self._width,
            force_terminal=self._color,
            color_system="standard" if self._color else None,
        )

        title = f"{view.state.section} ({view.window.start_date.isoformat()} to {view.window.end_date.isoformat()})"
        if view.is_empty:
            capture.print(f"[bold]{title}[/bold]")
            capture.print(EMPTY_MESSAGE)
            return capture.export_text(styles=self._color)

        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Component")
        table.add_column("Type")
        table.add_column("Location")
        table.add_column("Model")
        table.add_column("Status")
        table.add_column("Timeline", no_wrap=True)

        for group in view.groups:
            table.add_section()
            table.add_row(Text(group.label, style="bold cyan"), "", "", "", "", "")
            for row in group.rows:
                c = row.component
                table.add_row(
                    c.component,
                    c.type,
                    c.location,
                    c.model,
                    Text(row.status.value, style=STATUS_STYLES[row.status]),
                    timeline_bar(row),
                )

        capture.print(table)
        counts = view.counts
        capture.print(
            f"Total: {counts.all}  Supported: {counts.supported}  "
            f"Extended: {counts.extended}  Unsupported: {counts.unsupported}"
        )
        return capture.export_text(styles=self._color)
