"""Layout entry points: member records in, rows and edges out."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from .edges import synthesize_edges
from .generations import DESCENDANTS_BELOW, assign_generations, generation_step, normalize_generations
from .graph import build_edges, index_members, select_roots
from .ordering import order_rows
from .schemas import LayoutResult, Member
from .utils import logger

MemberLike = Union[Member, Mapping[str, Any]]


def coerce_members(members: Iterable[MemberLike]) -> List[Member]:
    return [member if isinstance(member, Member) else Member.from_record(member) for member in members]


def compute_layout(members: Iterable[MemberLike], *, orientation: str = DESCENDANTS_BELOW) -> LayoutResult:
    """Lay out a family tree as generation rows plus tagged edges.

    Accepts :class:`Member` objects or raw storage records. Partial or
    contradictory links never fail the layout; duplicate identifiers raise
    :class:`~genlayout.graph.DuplicateMemberError`. Each call recomputes
    everything from ``members`` and never mutates them.
    """

    generation_step(orientation)  # raises on unknown orientation
    members = coerce_members(members)
    if not members:
        return LayoutResult()

    index = index_members(members)
    edges = build_edges(members, index)
    roots = select_roots(members, edges)
    generations, row_count = normalize_generations(assign_generations(members, edges, roots, orientation))
    rows = order_rows(members, generations, edges, row_count)
    result = LayoutResult(
        rows=rows,
        edges=synthesize_edges(edges, rows),
        roots=roots,
        generations=generations,
    )
    logger.debug(
        "Layout: %d members, %d rows, %d roots, %d edges (%d dropped references)",
        len(members),
        len(rows),
        len(roots),
        len(result.edges),
        len(edges.dropped),
    )
    return result


class LayoutEngine:
    """Reusable layout settings for callers laying out many trees."""

    def __init__(self, *, orientation: str = DESCENDANTS_BELOW) -> None:
        generation_step(orientation)  # raises on unknown orientation
        self.orientation = orientation

    def layout(self, members: Iterable[MemberLike]) -> LayoutResult:
        return compute_layout(members, orientation=self.orientation)


__all__ = ["LayoutEngine", "MemberLike", "coerce_members", "compute_layout"]
