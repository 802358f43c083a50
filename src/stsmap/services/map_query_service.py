"""Entry points for path queries over a single map snapshot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from stsmap.core.types import Coordinate, RoomType
from stsmap.domain.defs import MapDef, Path
from stsmap.domain.path_state import PathState, StateRules, ValueFn
from stsmap.domain.room_values import RoomValues, initial_state, make_room_valuer
from stsmap.services import coverage_service, path_enumerator, ranking_service
from stsmap.services.coverage_service import CoverageResult
from stsmap.services.ranking_service import RankedGroup

logger = logging.getLogger(__name__)

DEFAULT_RANKING_LIMIT = 15

# Label and room types of the fixed coverage counters.
COVERAGE_PRESETS: Tuple[Tuple[str, Tuple[RoomType, ...]], ...] = (
    ("Max elites + rests", ("elite", "rest")),
    ("Max elites + supers", ("elite", "super")),
    ("Max fights", ("enemy",)),
    ("Max events", ("event",)),
)


@dataclass(frozen=True, slots=True)
class CoverageCounter:
    label: str
    room_types: Tuple[RoomType, ...]
    count: int
    path_count: int


def default_start_coordinates(map_def: MapDef, start: Coordinate | None = None) -> List[Coordinate]:
    """Return ``[start]`` when given, otherwise every room on floor 1."""
    if start is not None:
        return [start]
    if not map_def.has_floor(1):
        return []
    return [(1, index) for index in range(len(map_def.rooms(1)))]


class MapQueryService:
    """Runs enumeration, coverage and ranking queries against one map.

    Every query accepts an optional ``start`` coordinate narrowing it to the
    paths beginning at that room. Nothing is cached between calls.
    """

    def __init__(self, map_def: MapDef, *, rules: StateRules | None = None) -> None:
        self._map = map_def
        self._rules = rules

    @property
    def map_def(self) -> MapDef:
        return self._map

    def start_coordinates(self, start: Coordinate | None = None) -> List[Coordinate]:
        return default_start_coordinates(self._map, start)

    def enumerate_paths(self, *, start: Coordinate | None = None) -> Iterator[Path]:
        return path_enumerator.iter_paths(self._map, self.start_coordinates(start))

    def count_paths(self, *, start: Coordinate | None = None) -> int:
        return path_enumerator.count_paths(self._map, self.start_coordinates(start))

    def max_coverage(
        self, room_types: Iterable[RoomType], *, start: Coordinate | None = None
    ) -> CoverageResult:
        return coverage_service.find_most_of_types(self._map, self.start_coordinates(start), room_types)

    def coverage_summary(
        self,
        custom_types: Sequence[RoomType] | None = None,
        *,
        start: Coordinate | None = None,
    ) -> List[CoverageCounter]:
        """Coverage counters for the preset type groups plus an optional custom group."""
        presets = list(COVERAGE_PRESETS)
        if custom_types is not None:
            presets.append(("Max custom", tuple(custom_types)))
        counters: List[CoverageCounter] = []
        for label, room_types in presets:
            result = self.max_coverage(room_types, start=start)
            counters.append(
                CoverageCounter(
                    label=label,
                    room_types=room_types,
                    count=result.count,
                    path_count=len(result.paths),
                )
            )
        return counters

    def rank_paths(
        self,
        value_fn: ValueFn,
        initial: PathState,
        limit: int,
        *,
        start: Coordinate | None = None,
    ) -> List[RankedGroup]:
        return ranking_service.rank_paths(
            self._map,
            self.start_coordinates(start),
            value_fn,
            initial,
            limit,
            rules=self._rules,
        )

    def rank_by_room_values(
        self,
        values: RoomValues,
        limit: int = DEFAULT_RANKING_LIMIT,
        *,
        start: Coordinate | None = None,
    ) -> List[RankedGroup]:
        """Rank paths with the default room valuation built from ``values``."""
        value_fn = make_room_valuer(values, explicit_start=start is not None)
        logger.debug("Ranking paths from %s with %s", start or "floor 1", values)
        return self.rank_paths(value_fn, initial_state(values), limit, start=start)

    def most_valuable_paths(
        self, values: RoomValues, *, start: Coordinate | None = None
    ) -> Tuple[Path, ...]:
        """Paths of the best-scoring group, or an empty tuple when there are none."""
        ranking = self.rank_by_room_values(values, limit=1, start=start)
        if not ranking:
            return ()
        return ranking[0].paths
