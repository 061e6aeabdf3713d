"""JSON document sink."""

import json
from typing import Any, Dict

from ...models import TimelineView


def view_to_dict(view: TimelineView) -> Dict[str, Any]:
    """Serialise a view into plain JSON types."""
    return {
        "section": view.state.section,
        "filter": view.state.filter,
        "site": view.state.site,
        "window": {
            "start_date": view.window.start_date.isoformat(),
            "end_date": view.window.end_date.isoformat(),
        },
        "now": view.now.isoformat(),
        "counts": view.counts.as_dict(),
        "groups": [
            {
                "label": group.label,
                "rows": [
                    {
                        "id": row.component.id,
                        "component": row.component.component,
                        "type": row.component.type,
                        "location": row.component.location,
                        "model": row.component.model,
                        "section": row.component.section,
                        "status": row.status.value,
                        "segments": [
                            {
                                "kind": s.kind.value,
                                "width_percent": s.width_percent,
                                "tooltip": s.tooltip,
                            }
                            for s in row.segments
                        ],
                    }
                    for row in group.rows
                ],
            }
            for group in view.groups
        ],
    }


class JsonSink:
    """Renders a view as an indented JSON document."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def name(self) -> str:
        return "json"

    def render(self, view: TimelineView) -> str:
        return json.dumps(view_to_dict(view), indent=self._indent)
