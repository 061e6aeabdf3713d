"""Standalone HTML page sink."""

import html
from typing import List

from ...models import SupportStatus, TimelineRow, TimelineSegment, TimelineView
from ...view import EMPTY_MESSAGE

PAGE_TITLE = "Infrastructure Support Lifecycle"
TABLE_COLUMNS = ("Component", "Type", "Location", "Model", "Support Timeline")

LEGEND = (
    ("all", "All"),
    (SupportStatus.SUPPORTED.value, "Standard Support"),
    (SupportStatus.EXTENDED.value, "Extended Support"),
    (SupportStatus.UNSUPPORTED.value, "Out of Support"),
)

STYLE = """
body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; margin: 24px; color: #222; }
h1 { font-size: 1.4em; margin-bottom: 4px; }
.subtitle { color: #666; margin-bottom: 16px; }
.legend { display: flex; gap: 8px; margin-bottom: 16px; }
.legend-btn { border: 1px solid #ccc; border-radius: 4px; padding: 4px 10px; background: #fafafa; }
.legend-btn.active { border-color: #333; font-weight: bold; }
.legend-counter { margin-left: 6px; color: #555; }
table { border-collapse: collapse; width: 100%; }
th, td { padding: 6px 8px; text-align: left; border-bottom: 1px solid #eee; }
.category-title-row td { font-weight: bold; background: #e8ecf3; }
.category-even { background: #fff; }
.category-odd { background: #f7f7f7; }
.timeline-cell { width: 45%; }
.timeline-bar-container { display: flex; height: 14px; overflow: hidden; border-radius: 3px; background: #eee; }
.timeline-bar { height: 100%; }
.timeline-bar.standard-support { background: #3fa34d; }
.timeline-bar.extended-support { background: #f0a202; }
.timeline-bar.end-of-support { background: #d1495b; }
.empty-row td { text-align: center; padding: 20px; color: #666; }
#tooltip { position: fixed; display: none; background: #333; color: #fff; padding: 4px 8px;
           border-radius: 3px; font-size: 0.85em; pointer-events: none; }
"""

# Follows the pointer and flips to the left near the right edge
SCRIPT = """
(function () {
  var tooltip = document.getElementById('tooltip');
  function place(e) {
    var pad = 15, w = tooltip.offsetWidth, h = tooltip.offsetHeight;
    var left = e.clientX + pad, top = e.clientY - h / 2;
    if (left + w > window.innerWidth) left = e.clientX - w - pad;
    if (top < 0) top = pad;
    if (top + h > window.innerHeight) top = window.innerHeight - h - pad;
    tooltip.style.left = left + 'px';
    tooltip.style.top = top + 'px';
  }
  document.querySelectorAll('.timeline-bar').forEach(function (bar) {
    bar.addEventListener('mouseenter', function (e) {
      var text = bar.getAttribute('data-tooltip');
      if (text) { tooltip.textContent = text; tooltip.style.display = 'block'; place(e); }
    });
    bar.addEventListener('mousemove', place);
    bar.addEventListener('mouseleave', function () { tooltip.style.display = 'none'; });
  });
})();
"""


def format_width(width: float) -> str:
    """Compact CSS percentage value, e.g. 35.7143 or 100."""
    text = f"{width:.4f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


class HtmlSink:
    """Renders a view as a self-contained HTML page."""

    @property
    def name(self) -> str:
        return "html"

    def render(self, view: TimelineView) -> str:
        body = "\n".join(self._table_rows(view))
        return "\n".join(
            [
                "<!DOCTYPE html>",
                '<html lang="en">',
                "<head>",
                '<meta charset="utf-8">',
                f"<title>{_esc(PAGE_TITLE)}</title>",
                f"<style>{STYLE}</style>",
                "</head>",
                "<body>",
                f"<h1>{_esc(PAGE_TITLE)}</h1>",
                f'<div class="subtitle">{self._subtitle(view)}</div>',
                self._legend(view),
                "<table>",
                "<thead><tr>" + "".join(f"<th>{_esc(c)}</th>" for c in TABLE_COLUMNS) + "</tr></thead>",
                f"<tbody>\n{body}\n</tbody>",
                "</table>",
                '<div id="tooltip"></div>',
                f"<script>{SCRIPT}</script>",
                "</body>",
                "</html>",
            ]
        )

    def _subtitle(self, view: TimelineView) -> str:
        state = view.state
        site = "All Sites" if state.site == "all" else state.site
        return _esc(
            f"Section: {state.section} | Site: {site} | "
            f"Window: {view.window.start_date.isoformat()} to {view.window.end_date.isoformat()} | "
            f"As of {view.now.isoformat()}"
        )

    def _legend(self, view: TimelineView) -> str:
        buttons = []
        for key, label in LEGEND:
            active = " active" if key == view.state.filter else ""
            buttons.append(
                f'<span class="legend-btn{active}" data-filter="{key}">{_esc(label)}'
                f'<span class="legend-counter">{view.counts.get(key)}</span></span>'
            )
        return '<div class="legend">' + "".join(buttons) + "</div>"

    def _table_rows(self, view: TimelineView) -> List[str]:
        if view.is_empty:
            return [f'<tr class="empty-row"><td colspan="{len(TABLE_COLUMNS)}">{_esc(EMPTY_MESSAGE)}</td></tr>']

        lines: List[str] = []
        for idx, group in enumerate(view.groups):
            bg_class = "category-even" if idx % 2 == 0 else "category-odd"
            lines.append(
                f'<tr class="category-title-row"><td colspan="{len(TABLE_COLUMNS)}">{_esc(group.label)}</td></tr>'
            )
            lines.extend(self._row(row, bg_class) for row in group.rows)
        return lines

    def _row(self, row: TimelineRow, bg_class: str) -> str:
        c = row.component
        cells = "".join(f"<td>{_esc(value)}</td>" for value in (c.component, c.type, c.location, c.model))
        bars = "".join(self._bar(s) for s in row.segments)
        return (
            f'<tr class="{bg_class}" data-status="{row.status.value}">{cells}'
            f'<td class="timeline-cell"><div class="timeline-bar-wrapper">'
            f'<div class="timeline-bar-container">{bars}</div></div></td></tr>'
        )

    @staticmethod
    def _bar(s: TimelineSegment) -> str:
        return (
            f'<div class="timeline-bar {s.kind.css_class}" style="width: {format_width(s.width_percent)}%" '
            f'data-tooltip="{_esc(s.tooltip)}"></div>'
        )
