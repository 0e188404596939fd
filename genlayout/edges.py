"""Final edge list handed to the renderer."""

from __future__ import annotations

from typing import List, Sequence

from .graph import FamilyEdges
from .schemas import PARENT_CHILD, SPOUSE, LayoutEdge


def infer_vertical_edges(rows: Sequence[Sequence[str]]) -> List[LayoutEdge]:
    """Connect each member to the member at the same column one row up.

    Columns past the end of the upper row attach to its last member. Used
    only when the input carries no parent links at all, so the drawing is
    never edge-less.
    """

    inferred: List[LayoutEdge] = []
    for upper, lower in zip(rows, rows[1:]):
        if not upper:
            continue
        for column, child in enumerate(lower):
            parent = upper[min(column, len(upper) - 1)]
            inferred.append(LayoutEdge(parent, child, PARENT_CHILD, inferred=True))
    return inferred


def synthesize_edges(edges: FamilyEdges, rows: Sequence[Sequence[str]]) -> List[LayoutEdge]:
    if edges.parent_edges:
        result = [LayoutEdge(parent, child, PARENT_CHILD) for parent, child in edges.parent_edges]
    else:
        result = infer_vertical_edges(rows)
    result.extend(LayoutEdge(a, b, SPOUSE) for a, b in edges.spouse_edges)
    return result


__all__ = ["infer_vertical_edges", "synthesize_edges"]
