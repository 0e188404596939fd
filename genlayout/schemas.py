"""Dataclasses for member records and layout results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .utils import parse_year

PARENT_CHILD = "pc"
SPOUSE = "sp"

# Storage records use camelCase (``fatherId``); snake_case is accepted too.
FIELD_ALIASES = {
    "id": ("_id", "id"),
    "name": ("name",),
    "relationship": ("relationship",),
    "date_of_birth": ("dateOfBirth", "date_of_birth"),
    "date_of_death": ("dateOfDeath", "date_of_death"),
    "gender": ("gender",),
    "father_id": ("fatherId", "father_id"),
    "mother_id": ("motherId", "mother_id"),
    "spouse_ids": ("spouseIds", "spouse_ids"),
    "children_ids": ("childrenIds", "children_ids"),
}


class GenlayoutError(Exception):
    """Base class for errors surfaced to callers."""


class MemberRecordError(GenlayoutError, ValueError):
    pass


def _pick(record: Mapping[str, Any], key: str) -> Any:
    for alias in FIELD_ALIASES[key]:
        if record.get(alias) is not None:
            return record[alias]
    return None


def _ref(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _refs(values: Optional[Iterable[Any]]) -> List[str]:
    if not values:
        return []
    if isinstance(values, (str, int)):
        values = [values]
    return [ref for ref in (_ref(value) for value in values) if ref is not None]


@dataclass
class Member:
    id: str
    name: str
    relationship: str
    date_of_birth: Any = None
    date_of_death: Any = None
    gender: Optional[str] = None
    father_id: Optional[str] = None
    mother_id: Optional[str] = None
    spouse_ids: List[str] = field(default_factory=list)
    children_ids: List[str] = field(default_factory=list)

    @property
    def birth_year(self) -> Optional[int]:
        return parse_year(self.date_of_birth)

    @property
    def death_year(self) -> Optional[int]:
        return parse_year(self.date_of_death)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Member":
        """Build a member from a storage record, normalising ids to strings."""

        member_id = _ref(_pick(record, "id"))
        if member_id is None:
            raise MemberRecordError(f"Member record has no identifier: {dict(record)!r}")
        name = str(_pick(record, "name") or "").strip()
        if not name:
            raise MemberRecordError(f"Member {member_id} has no name")
        relationship = _pick(record, "relationship")
        if relationship is None:
            raise MemberRecordError(f"Member {member_id} has no relationship label")
        return cls(
            id=member_id,
            name=name,
            relationship=str(relationship),
            date_of_birth=_pick(record, "date_of_birth"),
            date_of_death=_pick(record, "date_of_death"),
            gender=_pick(record, "gender"),
            father_id=_ref(_pick(record, "father_id")),
            mother_id=_ref(_pick(record, "mother_id")),
            spouse_ids=_refs(_pick(record, "spouse_ids")),
            children_ids=_refs(_pick(record, "children_ids")),
        )


@dataclass
class LayoutEdge:
    source: str
    target: str
    kind: str
    inferred: bool = False

    def dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "type": self.kind, "inferred": self.inferred}


@dataclass
class LayoutResult:
    """Ordered generation rows plus the tagged edges a renderer should draw."""

    rows: List[List[str]] = field(default_factory=list)
    edges: List[LayoutEdge] = field(default_factory=list)
    roots: List[str] = field(default_factory=list)
    generations: Dict[str, int] = field(default_factory=dict)

    def row_of(self, member_id: str) -> int:
        return self.generations[member_id]

    @property
    def parent_child_edges(self) -> List[LayoutEdge]:
        return [edge for edge in self.edges if edge.kind == PARENT_CHILD]

    @property
    def spouse_edges(self) -> List[LayoutEdge]:
        return [edge for edge in self.edges if edge.kind == SPOUSE]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": [list(row) for row in self.rows],
            "edges": [edge.dict() for edge in self.edges],
            "roots": list(self.roots),
            "generations": dict(self.generations),
        }


__all__ = [
    "GenlayoutError",
    "LayoutEdge",
    "LayoutResult",
    "Member",
    "MemberRecordError",
    "PARENT_CHILD",
    "SPOUSE",
]
