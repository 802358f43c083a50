"""Score paths with a stateful value function and rank them by score."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Tuple

from stsmap.core.types import Coordinate
from stsmap.domain.defs import MapDef, Path
from stsmap.domain.path_state import DEFAULT_RULES, PathState, StateRules, ValueFn
from stsmap.services.path_enumerator import iter_paths

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class RankedGroup:
    """Paths sharing one rounded score."""

    label: str
    paths: Tuple[Path, ...]

    @property
    def score(self) -> float:
        return float(self.label)


def format_score(value: float) -> str:
    """Format a score with two decimals, rounding exact halves away from zero.

    The decimal expansion of the float itself is rounded, so ``1.005``
    (stored as 1.00499...) becomes ``"1.00"`` while ``0.125`` becomes
    ``"0.13"``. Negative zero is reported as ``"0.00"``.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot rank a non-finite path score: {value!r}")
    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:.2f}"


def score_path(
    map_def: MapDef,
    path: Path,
    value_fn: ValueFn,
    initial_state: PathState,
    rules: StateRules = DEFAULT_RULES,
) -> float:
    """Sum room values along ``path``, floor by floor.

    Each room is valued with the state reached before entering it; the state
    then advances past that room.
    """
    total = 0.0
    state = initial_state
    for floor, room_index in path.items():
        room_type = map_def.room_type(floor, room_index)
        total += value_fn(room_type, floor, state)
        state = state.advance(room_type, rules)
    return total


def rank_paths(
    map_def: MapDef,
    start_coordinates: Iterable[Coordinate],
    value_fn: ValueFn,
    initial_state: PathState,
    limit: int,
    *,
    rules: StateRules | None = None,
) -> List[RankedGroup]:
    """Group paths by two-decimal score and return the best ``limit`` groups.

    Groups come highest score first; paths inside a group keep enumeration
    order. Errors raised by ``value_fn`` propagate unchanged.
    """
    if limit <= 0:
        return []
    active_rules = rules or DEFAULT_RULES
    groups: Dict[str, List[Path]] = {}
    for path in iter_paths(map_def, start_coordinates):
        label = format_score(score_path(map_def, path, value_fn, initial_state, active_rules))
        groups.setdefault(label, []).append(path)
    ordered = sorted(groups.items(), key=lambda item: -float(item[0]))
    logger.debug("Ranked %s score groups, keeping %s", len(ordered), limit)
    return [RankedGroup(label=label, paths=tuple(paths)) for label, paths in ordered[:limit]]
