"""Command line interface for genlayout."""

from __future__ import annotations

import argparse
import os
from typing import Sequence

from rich.table import Table

from . import api as genlayout_api
from .engine import compute_layout
from .generations import DESCENDANTS_BELOW, ORIENTATIONS
from .graph import build_edges, find_parent_cycle, index_members, to_networkx
from .schemas import GenlayoutError
from .utils import LOG_LEVEL_ENV, console, set_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="genlayout", description="Generational family tree layout")
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "INFO"),
        help="Python logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Compute a layout and export it")
    layout.add_argument("members", help="JSON file with member records")
    layout.add_argument("--out", required=True, help="Output directory")
    layout.add_argument("--orientation", choices=ORIENTATIONS, default=DESCENDANTS_BELOW)

    rows = sub.add_parser("rows", help="Print the generation rows")
    rows.add_argument("members", help="JSON file with member records")
    rows.add_argument("--orientation", choices=ORIENTATIONS, default=DESCENDANTS_BELOW)

    validate = sub.add_parser("validate", help="Check member records before layout")
    validate.add_argument("members", help="JSON file with member records")

    return parser


def run_layout(args: argparse.Namespace) -> None:
    result = genlayout_api.run_layout(args.members, args.out, orientation=args.orientation)
    console.log(
        f"Layout completed with {len(result.rows)} rows and {len(result.edges)} edges "
        f"({sum(1 for edge in result.edges if edge.inferred)} inferred)"
    )


def run_rows(args: argparse.Namespace) -> None:
    members = genlayout_api.load_members(args.members)
    names = {member.id: member.name for member in members}
    result = compute_layout(members, orientation=args.orientation)
    table = Table(title="Generations")
    table.add_column("Row", justify="right")
    table.add_column("Members")
    for idx, row in enumerate(result.rows):
        table.add_row(str(idx), ", ".join(f"{names[member_id]} ({member_id})" for member_id in row))
    console.print(table)


def run_validate(path: str) -> None:
    members = genlayout_api.load_members(path)
    index = index_members(members)
    edges = build_edges(members, index)
    console.log(
        f"Members: {len(members)} Parent links: {len(edges.parent_edges)} Spouse links: {len(edges.spouse_edges)}"
    )
    for member_id, field_name, ref in edges.dropped:
        console.log(f"[yellow]Member {member_id}: {field_name} reference {ref} does not resolve[/yellow]")
    cycle = find_parent_cycle(to_networkx(members, edges))
    if cycle:
        console.log(f"[yellow]Parent links form a cycle: {cycle}[/yellow]")
    console.log("Validation OK")


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)
    try:
        if args.command == "layout":
            run_layout(args)
        elif args.command == "rows":
            run_rows(args)
        elif args.command == "validate":
            run_validate(args.members)
        else:  # pragma: no cover - defensive
            parser.print_help()
    except (GenlayoutError, OSError) as exc:
        raise SystemExit(f"genlayout: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    main()
