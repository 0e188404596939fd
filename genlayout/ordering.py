"""Row ordering: group probable family units within each generation."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .graph import FamilyEdges
from .schemas import Member
from .utils import last_token

MISSING_YEAR = 9999


def clustering_token(member: Member, first_parent: Dict[str, str], index: Dict[str, Member]) -> str:
    """Family-name guess for ``member``: its first parent's surname, else its own."""

    parent_id = first_parent.get(member.id)
    if parent_id is not None:
        token = last_token(index[parent_id].name)
        if token:
            return token
    return last_token(member.name)


def _member_sort_key(member: Member):
    year = member.birth_year
    return (year if year is not None else MISSING_YEAR, member.name)


def order_rows(
    members: Sequence[Member],
    generations: Dict[str, int],
    edges: FamilyEdges,
    row_count: int,
) -> List[List[str]]:
    """Bucket members into rows by normalised generation and order each row.

    Within a row members are clustered by :func:`clustering_token`; clusters
    are laid out alphabetically by token and each cluster runs oldest first,
    then by name. A clustering heuristic only: unrelated families sharing a
    surname end up in the same cluster.
    """

    index = {member.id: member for member in members}
    first_parent: Dict[str, str] = {}
    for parent, child in edges.parent_edges:
        first_parent.setdefault(child, parent)

    buckets: List[List[Member]] = [[] for _ in range(row_count)]
    for member in members:
        buckets[generations[member.id]].append(member)

    rows: List[List[str]] = []
    for bucket in buckets:
        clusters: Dict[str, List[Member]] = {}
        for member in bucket:
            clusters.setdefault(clustering_token(member, first_parent, index), []).append(member)
        row: List[str] = []
        for token in sorted(clusters):
            row.extend(member.id for member in sorted(clusters[token], key=_member_sort_key))
        rows.append(row)
    return rows


__all__ = ["MISSING_YEAR", "clustering_token", "order_rows"]
