"""Layout export utilities."""

from __future__ import annotations

import json
import os
from typing import Dict, Sequence

import networkx as nx

from .family_chart import export_family_chart
from .schemas import PARENT_CHILD, SPOUSE, LayoutResult, Member
from .utils import console

EDGE_STYLES = {
    PARENT_CHILD: {"color": "#1f77b4", "style": "solid", "shape": "curve"},
    SPOUSE: {"color": "#2ca02c", "style": "dashed", "shape": "straight"},
}

LEGEND = {"edges": EDGE_STYLES}


def _is_scalar(value: object) -> bool:
    return isinstance(value, (str, int, float, bool))


def sanitize_graph_for_graphml(graph: nx.MultiDiGraph) -> nx.MultiDiGraph:
    """Return a copy of ``graph`` that the GraphML writer accepts.

    GraphML only takes scalar attributes: lists and dicts are serialized to
    JSON strings and ``None`` values (unknown birth years) are left out.
    """

    def _sanitize(data: Dict[str, object]) -> Dict[str, object]:
        clean: Dict[str, object] = {}
        for key, value in data.items():
            if value is None:
                continue
            clean[key] = value if _is_scalar(value) else json.dumps(value, ensure_ascii=False)
        return clean

    safe = graph.__class__()
    for node, data in graph.nodes(data=True):
        safe.add_node(node, **_sanitize(data))
    for u, v, data in graph.edges(data=True):
        safe.add_edge(u, v, **_sanitize(data))
    return safe


def layout_graph(members: Sequence[Member], result: LayoutResult) -> nx.MultiDiGraph:
    """Graph of the drawn layout: row/column on nodes, edge kind on edges."""

    graph = nx.MultiDiGraph()
    for member in members:
        row = result.row_of(member.id)
        graph.add_node(
            member.id,
            label=member.name,
            relationship=member.relationship,
            birth_year=member.birth_year,
            row=row,
            column=result.rows[row].index(member.id),
        )
    for edge in result.edges:
        graph.add_edge(edge.source, edge.target, kind=edge.kind, inferred=edge.inferred)
    return graph


def export_layout(members: Sequence[Member], result: LayoutResult, out_dir: str) -> Dict[str, str]:
    os.makedirs(out_dir, exist_ok=True)
    layout_path = os.path.join(out_dir, "layout.json")
    graphml_path = os.path.join(out_dir, "graph.graphml")
    legend_path = os.path.join(out_dir, "legend.json")

    with open(layout_path, "w", encoding="utf-8") as fh:
        json.dump(result.to_dict(), fh, indent=2)
    nx.write_graphml(sanitize_graph_for_graphml(layout_graph(members, result)), graphml_path)
    with open(legend_path, "w", encoding="utf-8") as fh:
        json.dump(LEGEND, fh, indent=2)
    family_chart_path = export_family_chart(members, result, out_dir)
    console.log("Layout export ready", out_dir)

    return {
        "layout": layout_path,
        "graphml": graphml_path,
        "legend": legend_path,
        "family_chart": family_chart_path,
    }


__all__ = [
    "EDGE_STYLES",
    "LEGEND",
    "export_layout",
    "layout_graph",
    "sanitize_graph_for_graphml",
]
