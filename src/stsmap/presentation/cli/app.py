"""Command-line report of path counts, coverage and rankings for a map."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from stsmap.core.types import Coordinate
from stsmap.data import DataError
from stsmap.data.repositories import MapsRepository, load_map_file
from stsmap.domain.defs import MapDef
from stsmap.presentation.cli.config import load_room_values
from stsmap.presentation.cli.render import (
    debug_enabled,
    render_issues,
    render_ranking,
    render_summary,
)
from stsmap.services import MapQueryError, MapQueryService
from stsmap.services.map_query_service import DEFAULT_RANKING_LIMIT
from stsmap.services.map_validator import validate_map

logger = logging.getLogger(__name__)

_DEFAULT_MAP_ID = "act1_sample"
_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stsmap",
        description="Count, compare and rank the paths through a layered dungeon map.",
    )
    parser.add_argument("map_file", nargs="?", type=Path, help="map JSON in the generator format")
    parser.add_argument("--map-id", default=None, help=f"bundled map id (default: {_DEFAULT_MAP_ID})")
    parser.add_argument(
        "--start",
        nargs=2,
        type=int,
        metavar=("FLOOR", "ROOM"),
        help="only consider paths starting at this room",
    )
    parser.add_argument("--custom", default=None, help="comma separated room types for a custom counter")
    parser.add_argument("--limit", type=int, default=DEFAULT_RANKING_LIMIT, help="score groups to show")
    parser.add_argument("--values", type=Path, default=None, help="room values JSON file")
    parser.add_argument("--validate", action="store_true", help="also report map validation issues")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report and return a process exit code."""
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        map_def = _load_map(args.map_file, args.map_id)
        values = load_room_values(args.values)
        start: Coordinate | None = tuple(args.start) if args.start else None
        custom = _parse_types(args.custom)
        service = MapQueryService(map_def)
        if args.validate:
            render_issues(validate_map(map_def))
        render_summary(
            service.count_paths(start=start),
            service.coverage_summary(custom, start=start),
        )
        render_ranking(service.rank_by_room_values(values, args.limit, start=start))
    except (DataError, MapQueryError, OSError, ValueError) as exc:
        logger.debug("Report failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return _USAGE_ERROR
    return 0


def _load_map(map_file: Path | None, map_id: str | None) -> MapDef:
    if map_file is not None:
        return load_map_file(map_file)
    return _get_bundled_map(map_id or _DEFAULT_MAP_ID)


def _get_bundled_map(map_id: str) -> MapDef:
    repo = MapsRepository()
    try:
        return repo.get(map_id)
    except KeyError:
        known = ", ".join(repo.ids())
        raise DataError(f"Unknown map id '{map_id}' (known: {known}).") from None


def _parse_types(raw: str | None) -> List[str] | None:
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]
