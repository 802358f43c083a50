"""Running state folded along a path while it is valued."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from stsmap.core.types import RoomType


@dataclass(frozen=True, slots=True)
class StateRules:
    """How each room type changes the running path state.

    ``gold_rewards`` is copied into a read-only mapping on construction.
    """

    combat_types: Tuple[RoomType, ...] = ("enemy",)
    event_types: Tuple[RoomType, ...] = ("event",)
    gold_rewards: Mapping[RoomType, float] = field(
        default_factory=lambda: {"enemy": 15.0, "elite": 30.0},
        hash=False,
    )
    gold_reset_types: Tuple[RoomType, ...] = ("shop",)
    gold_after_shop: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "gold_rewards", MappingProxyType(dict(self.gold_rewards)))


DEFAULT_RULES = StateRules()


@dataclass(frozen=True, slots=True)
class PathState:
    """State of a run before entering the next room of a path."""

    gold: float = 0.0
    fights_before: int = 0
    events_before: int = 0

    def advance(self, room_type: RoomType, rules: StateRules = DEFAULT_RULES) -> "PathState":
        """Return the state after visiting a room of ``room_type``."""
        gold = self.gold + rules.gold_rewards.get(room_type, 0.0)
        if room_type in rules.gold_reset_types:
            gold = rules.gold_after_shop
        return replace(
            self,
            gold=gold,
            fights_before=self.fights_before + (1 if room_type in rules.combat_types else 0),
            events_before=self.events_before + (1 if room_type in rules.event_types else 0),
        )


ValueFn = Callable[[RoomType, int, PathState], float]
