"""Relationship lexicon: free-text relationship labels to generation offsets.

Offsets are relative to the member the labels were written against (usually
the tree owner). Older generations are positive, younger ones negative. The
table is a placement heuristic for members that explicit links cannot reach;
it makes no claim about genealogical correctness.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

_SEP = r"[-\s]?"
_ELDER = r"(parent|father|mother)s?"
_YOUNGER = r"(son|daughter|child|kid)s?|children"


def _grand(prefix_count: int, tail: str) -> re.Pattern[str]:
    prefix = f"great{_SEP}" * prefix_count
    return re.compile(rf"\b{prefix}grand{_SEP}({tail})\b", re.IGNORECASE)


# First match wins: every pattern must come before any plainer pattern that
# could also match its labels ("great-grandfather" contains "grandfather").
RELATIONSHIP_PATTERNS: Sequence[Tuple[re.Pattern[str], int]] = (
    (_grand(2, _ELDER), 3),
    (_grand(1, _ELDER), 2),
    (_grand(0, _ELDER), 1),
    (_grand(2, _YOUNGER), -4),
    (_grand(1, _YOUNGER), -3),
    (_grand(0, _YOUNGER), -2),
    (re.compile(r"\b(father|mother|parent|dad|mom)s?\b", re.IGNORECASE), 1),
    (re.compile(r"\b(uncle|aunt)s?\b", re.IGNORECASE), 1),
    (re.compile(r"\b(sister|brother|sibling)s?\b", re.IGNORECASE), 0),
    (re.compile(r"\b(nephew|niece)s?\b", re.IGNORECASE), -1),
    (re.compile(r"\b((son|daughter|child|kid)s?|children)\b", re.IGNORECASE), -1),
)


def relationship_offset(label: Optional[str]) -> Optional[int]:
    """Return the generation offset implied by ``label`` or ``None`` if unknown."""

    if not label:
        return None
    for pattern, offset in RELATIONSHIP_PATTERNS:
        if pattern.search(label):
            return offset
    return None


__all__ = ["RELATIONSHIP_PATTERNS", "relationship_offset"]
