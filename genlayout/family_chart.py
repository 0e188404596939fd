"""Family chart document for front-end renderers.

The renderer needs more than bare rows: display labels, a grid position per
person, and households (a couple plus the children both partners share) so
it can hang child connectors from the midpoint between spouses. Everything
is plain Python data so it can be serialized directly to JSON.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Sequence, Set, Tuple

from .schemas import LayoutResult, Member


def _grid(result: LayoutResult) -> Dict[str, Dict[str, int]]:
    layout: Dict[str, Dict[str, int]] = {}
    for y, row in enumerate(result.rows):
        for x, member_id in enumerate(row):
            layout[member_id] = {"x": x, "y": y}
    return layout


def _unions(result: LayoutResult, layout: Dict[str, Dict[str, int]]) -> List[Dict[str, object]]:
    """Spouse pairs with the children linked to both partners."""

    parents: Dict[str, Set[str]] = {}
    for edge in result.parent_child_edges:
        if not edge.inferred:
            parents.setdefault(edge.target, set()).add(edge.source)

    unions: List[Dict[str, object]] = []
    for idx, edge in enumerate(result.spouse_edges):
        pair: Tuple[str, str] = (edge.source, edge.target)
        children = [child for child, found in parents.items() if set(pair) <= found]
        children.sort(key=lambda child: (layout[child]["y"], layout[child]["x"]))
        unions.append({"id": f"union_{idx + 1}", "partners": list(pair), "children": children})
    return unions


def build_family_chart(members: Sequence[Member], result: LayoutResult) -> Dict[str, object]:
    """Project a layout result into a renderer-friendly structure."""

    layout = _grid(result)
    people: List[Dict[str, object]] = []
    for member in members:
        position = layout[member.id]
        people.append(
            {
                "id": member.id,
                "label": member.name,
                "relationship": member.relationship,
                "gender": member.gender,
                "birth_year": member.birth_year,
                "death_year": member.death_year,
                "row": position["y"],
                "column": position["x"],
            }
        )

    unions = _unions(result, layout)
    relationships = [edge.dict() for edge in result.edges]
    for union in unions:
        for child in union["children"]:
            relationships.append({"from": union["id"], "to": child, "type": "union_child", "inferred": False})

    return {
        "people": people,
        "unions": unions,
        "relationships": relationships,
        "layout": layout,
        "summary": {
            "people": len(people),
            "rows": len(result.rows),
            "families": len(unions),
            "parent_edges": len(result.parent_child_edges),
            "spouse_edges": len(result.spouse_edges),
            "inferred_edges": sum(1 for edge in result.edges if edge.inferred),
        },
    }


def export_family_chart(members: Sequence[Member], result: LayoutResult, out_dir: str) -> str:
    """Write a family-chart JSON document to ``out_dir``."""

    chart = build_family_chart(members, result)
    chart_path = os.path.join(out_dir, "family_chart.json")
    with open(chart_path, "w", encoding="utf-8") as fh:
        json.dump(chart, fh, indent=2)
    return chart_path


__all__ = ["build_family_chart", "export_family_chart"]
