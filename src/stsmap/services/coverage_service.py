"""Find the paths visiting the most rooms of selected types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Tuple

from stsmap.core.types import Coordinate, RoomType
from stsmap.domain.defs import MapDef, Path
from stsmap.services.path_enumerator import iter_paths


@dataclass(frozen=True, slots=True)
class CoverageResult:
    """Best coverage count and every path reaching it."""

    count: int
    paths: Tuple[Path, ...]


def coverage_count(map_def: MapDef, path: Path, room_types: AbstractSet[RoomType]) -> int:
    """Number of floors on ``path`` whose room type is in ``room_types``."""
    return sum(1 for floor, room_index in path.items() if map_def.room_type(floor, room_index) in room_types)


def find_most_of_types(
    map_def: MapDef,
    start_coordinates: Iterable[Coordinate],
    room_types: Iterable[RoomType],
) -> CoverageResult:
    """Return the maximum coverage of ``room_types`` and all paths achieving it.

    With no room types every path covers zero rooms, so every path is kept.
    """
    wanted = frozenset(room_types)
    best = 0
    best_paths: List[Path] = []
    for path in iter_paths(map_def, start_coordinates):
        count = coverage_count(map_def, path, wanted)
        if count > best:
            best = count
            best_paths = [path]
        elif count == best:
            best_paths.append(path)
    return CoverageResult(count=best, paths=tuple(best_paths))
