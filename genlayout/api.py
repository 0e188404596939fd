"""High-level API helpers for genlayout."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from .engine import coerce_members, compute_layout
from .export import export_layout
from .generations import DESCENDANTS_BELOW
from .schemas import LayoutResult, Member, MemberRecordError


def load_members(path: Union[str, Path]) -> List[Member]:
    """Read member records from a JSON array or a tree document with ``members``."""

    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict):
        data = data.get("members")
    if not isinstance(data, list):
        raise MemberRecordError(f"{path} holds no member list")
    return coerce_members(data)


def run_layout(
    members_path: Union[str, Path],
    out_dir: str,
    *,
    orientation: str = DESCENDANTS_BELOW,
) -> LayoutResult:
    """End-to-end helper that mirrors ``genlayout layout``."""

    members = load_members(members_path)
    result = compute_layout(members, orientation=orientation)
    export_layout(members, result, out_dir)
    return result


__all__ = ["load_members", "run_layout"]
