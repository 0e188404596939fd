"""Edge construction and root selection over member records."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

import networkx as nx

from .schemas import GenlayoutError, Member
from .utils import logger


class DuplicateMemberError(GenlayoutError, ValueError):
    pass


@dataclass
class FamilyEdges:
    """Parent->child and spouse pairs derived from member references.

    ``parent_edges`` keeps emission order (it decides which parent names a
    row cluster). ``spouse_edges`` holds canonical pairs, smaller id first.
    ``dropped`` records references that did not resolve, as
    ``(member_id, field, reference)``.
    """

    parent_edges: List[Tuple[str, str]] = field(default_factory=list)
    spouse_edges: List[Tuple[str, str]] = field(default_factory=list)
    dropped: List[Tuple[str, str, str]] = field(default_factory=list)

    def children_of(self) -> Dict[str, List[str]]:
        children: Dict[str, List[str]] = {}
        for parent, child in self.parent_edges:
            children.setdefault(parent, []).append(child)
        return children

    def parents_of(self) -> Dict[str, List[str]]:
        parents: Dict[str, List[str]] = {}
        for parent, child in self.parent_edges:
            parents.setdefault(child, []).append(parent)
        return parents

    def spouses_of(self) -> Dict[str, List[str]]:
        spouses: Dict[str, List[str]] = {}
        for a, b in self.spouse_edges:
            spouses.setdefault(a, []).append(b)
            spouses.setdefault(b, []).append(a)
        return spouses

    def linked_ids(self) -> Set[str]:
        linked: Set[str] = set()
        for a, b in self.parent_edges + self.spouse_edges:
            linked.update((a, b))
        return linked


def index_members(members: Sequence[Member]) -> Dict[str, Member]:
    """Return an id -> member lookup, refusing duplicate identifiers."""

    counts = Counter(member.id for member in members)
    duplicates = sorted(member_id for member_id, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateMemberError(f"Duplicate member identifiers: {', '.join(duplicates)}")
    return {member.id: member for member in members}


def build_edges(members: Sequence[Member], index: Dict[str, Member]) -> FamilyEdges:
    edges = FamilyEdges()
    seen_parent: Set[Tuple[str, str]] = set()
    seen_spouse: Set[Tuple[str, str]] = set()

    def resolves(member: Member, field_name: str, ref: str) -> bool:
        if ref in index and ref != member.id:
            return True
        edges.dropped.append((member.id, field_name, ref))
        logger.debug("Dropping %s reference %s on member %s", field_name, ref, member.id)
        return False

    def add_parent(parent: str, child: str) -> None:
        if (parent, child) not in seen_parent:
            seen_parent.add((parent, child))
            edges.parent_edges.append((parent, child))

    for member in members:
        for child_id in member.children_ids:
            if resolves(member, "children", child_id):
                add_parent(member.id, child_id)
        for field_name, parent_id in (("father", member.father_id), ("mother", member.mother_id)):
            if parent_id and resolves(member, field_name, parent_id):
                add_parent(parent_id, member.id)
        for spouse_id in member.spouse_ids:
            if not resolves(member, "spouse", spouse_id):
                continue
            pair = tuple(sorted((member.id, spouse_id)))
            if pair not in seen_spouse:
                seen_spouse.add(pair)
                edges.spouse_edges.append(pair)
    return edges


def pick_oldest(members: Sequence[Member]) -> Optional[Member]:
    """Earliest birth year; missing years sort last and ties keep input order."""

    if not members:
        return None
    return min(
        enumerate(members),
        key=lambda item: (item[1].birth_year if item[1].birth_year is not None else 9999, item[0]),
    )[1]


def select_roots(members: Sequence[Member], edges: FamilyEdges) -> List[str]:
    """Members with no parent edge above them, or the oldest member as fallback.

    Members without any edge are left out so the generation heuristics can
    place them; if that leaves nothing (no links at all, or every linked
    member is somebody's child) the oldest member becomes the single root.
    """

    children = {child for _, child in edges.parent_edges}
    linked = edges.linked_ids()
    roots = [member.id for member in members if member.id in linked and member.id not in children]
    if roots:
        return roots
    oldest = pick_oldest(members)
    if oldest is None:
        return []
    logger.debug("No parentless member found, falling back to oldest member %s", oldest.id)
    return [oldest.id]


def to_networkx(members: Sequence[Member], edges: FamilyEdges) -> nx.MultiDiGraph:
    graph = nx.MultiDiGraph()
    for member in members:
        graph.add_node(
            member.id,
            label=member.name,
            relationship=member.relationship,
            birth_year=member.birth_year,
        )
    for parent, child in edges.parent_edges:
        graph.add_edge(parent, child, relation="child")
    for a, b in edges.spouse_edges:
        graph.add_edge(a, b, relation="spouse")
    return graph


def find_parent_cycle(graph: nx.MultiDiGraph) -> List[Tuple[str, str]]:
    """Return one cycle of parent->child edges, or an empty list."""

    lineage = nx.DiGraph()
    lineage.add_nodes_from(graph.nodes)
    lineage.add_edges_from((u, v) for u, v, data in graph.edges(data=True) if data.get("relation") == "child")
    try:
        return [(u, v) for u, v in nx.find_cycle(lineage)]
    except nx.NetworkXNoCycle:
        return []


__all__ = [
    "DuplicateMemberError",
    "FamilyEdges",
    "build_edges",
    "find_parent_cycle",
    "index_members",
    "pick_oldest",
    "select_roots",
    "to_networkx",
]
