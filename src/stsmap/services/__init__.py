"""Service layer exports."""

from .errors import MalformedMapError, MapQueryError
from .coverage_service import CoverageResult, coverage_count, find_most_of_types
from .map_query_service import (
    CoverageCounter,
    MapQueryService,
    default_start_coordinates,
)
from .path_enumerator import count_paths, iter_paths
from .ranking_service import RankedGroup, format_score, rank_paths, score_path

__all__ = [
    "MalformedMapError",
    "MapQueryError",
    "CoverageResult",
    "coverage_count",
    "find_most_of_types",
    "CoverageCounter",
    "MapQueryService",
    "default_start_coordinates",
    "count_paths",
    "iter_paths",
    "RankedGroup",
    "format_score",
    "rank_paths",
    "score_path",
]
