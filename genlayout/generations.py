"""Generation assignment by traversal over parent and spouse edges."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Sequence, Tuple

from .graph import FamilyEdges, pick_oldest
from .lexicon import relationship_offset
from .schemas import Member
from .utils import logger

DESCENDANTS_BELOW = "descendants_below"
YOUNGER_ABOVE = "younger_above"
ORIENTATIONS = (DESCENDANTS_BELOW, YOUNGER_ABOVE)


def generation_step(orientation: str) -> int:
    """Generation delta from a parent to its child for ``orientation``."""

    if orientation == DESCENDANTS_BELOW:
        return 1
    if orientation == YOUNGER_ABOVE:
        return -1
    raise ValueError(f"Unknown orientation {orientation!r}; expected one of {', '.join(ORIENTATIONS)}")


def assign_generations(
    members: Sequence[Member],
    edges: FamilyEdges,
    roots: Sequence[str],
    orientation: str = DESCENDANTS_BELOW,
) -> Dict[str, int]:
    """Give every member a relative generation number.

    Roots start at 0. A FIFO worklist of ``(id, generation)`` pairs walks the
    links: children sit one step after their parent, parents one step before
    their child, spouses level with each other. The first generation
    recorded for a member wins. Members the walk cannot reach are placed
    against the oldest root, by relationship label, then by birth year, then
    level with it.
    """

    step = generation_step(orientation)
    children = edges.children_of()
    parents = edges.parents_of()
    spouses = edges.spouses_of()

    generations: Dict[str, int] = {}
    queue: Deque[Tuple[str, int]] = deque((root, 0) for root in roots)
    while queue and len(generations) < len(members):
        member_id, generation = queue.popleft()
        if member_id in generations:
            continue
        generations[member_id] = generation
        for child in children.get(member_id, []):
            if child not in generations:
                queue.append((child, generation + step))
        for parent in parents.get(member_id, []):
            if parent not in generations:
                queue.append((parent, generation - step))
        for spouse in spouses.get(member_id, []):
            if spouse not in generations:
                queue.append((spouse, generation))

    unplaced = [member for member in members if member.id not in generations]
    if not unplaced:
        return _in_input_order(members, generations)

    root_ids = set(roots)
    anchor = pick_oldest([member for member in members if member.id in root_ids]) or pick_oldest(members)
    anchor_generation = generations.get(anchor.id, 0)
    anchor_year = anchor.birth_year
    for member in unplaced:
        offset = relationship_offset(member.relationship)
        if offset is not None:
            generations[member.id] = anchor_generation - step * offset
            reason = f"label {member.relationship!r}"
        elif member.birth_year is not None and anchor_year is not None:
            older = member.birth_year <= anchor_year
            generations[member.id] = anchor_generation - step if older else anchor_generation + step
            reason = f"birth year {member.birth_year} vs {anchor_year}"
        else:
            generations[member.id] = anchor_generation
            reason = "no usable label or birth year"
        logger.debug("Placed unlinked member %s at generation %d (%s)", member.id, generations[member.id], reason)
    return _in_input_order(members, generations)


def _in_input_order(members: Sequence[Member], generations: Dict[str, int]) -> Dict[str, int]:
    return {member.id: generations[member.id] for member in members}


def normalize_generations(generations: Dict[str, int]) -> Tuple[Dict[str, int], int]:
    """Shift generations so the smallest becomes 0; also return the row count."""

    if not generations:
        return {}, 0
    lowest = min(generations.values())
    highest = max(generations.values())
    return {member_id: value - lowest for member_id, value in generations.items()}, highest - lowest + 1


__all__ = [
    "DESCENDANTS_BELOW",
    "ORIENTATIONS",
    "YOUNGER_ABOVE",
    "assign_generations",
    "generation_step",
    "normalize_generations",
]
