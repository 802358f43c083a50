"""Tunable per-room weights and the default room valuation."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Dict, Mapping

from stsmap.core.types import RoomType
from stsmap.domain.path_state import PathState, ValueFn


@dataclass(frozen=True, slots=True)
class RoomValues:
    """Weights a player assigns to each kind of room.

    ``fight_events`` is how many ``?`` rooms are expected to turn into fights,
    and ``fights_before_path`` counts fights already taken before an explicit
    start room. Both feed the easy/hard fight split.
    """

    easy_fight: float = 1.0
    hard_fight: float = 0.9
    elite: float = 1.2
    super: float = 1.3
    rest: float = 1.2
    event: float = 0.8
    shop: float = 0.3
    shop_gold: float = 0.4
    treasure: float = 0.8
    gold: float = 99.0
    fight_events: float = 0.0
    fights_before_path: float = 0.0
    easy_fight_limit: float = 2.0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "RoomValues":
        """Overlay numeric entries of ``raw`` on the defaults; other keys are ignored."""
        overrides: Dict[str, float] = {}
        for item in fields(cls):
            if item.name not in raw:
                continue
            value = raw[item.name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Room value '{item.name}' must be a number.")
            overrides[item.name] = float(value)
        return replace(cls(), **overrides)

    def to_mapping(self) -> Dict[str, float]:
        return asdict(self)


def initial_state(values: RoomValues) -> PathState:
    """State at the start of a path: current gold, no fights or events yet."""
    return PathState(gold=values.gold)


def make_room_valuer(values: RoomValues, *, explicit_start: bool) -> ValueFn:
    """Return a value function scoring rooms with ``values``.

    Fights taken before the path only count when the path starts at an
    explicitly chosen room; from the bottom of the map there are none.
    """
    fights_before_path = values.fights_before_path if explicit_start else 0.0
    constants: Dict[RoomType, float] = {
        "elite": values.elite,
        "event": values.event,
        "rest": values.rest,
        "super": values.super,
        "treasure": values.treasure,
    }

    def valuate_room(room_type: RoomType, floor: int, state: PathState) -> float:
        if room_type in constants:
            return constants[room_type]
        if room_type == "enemy":
            fights = fights_before_path + min(values.fight_events, state.events_before) + state.fights_before
            return values.easy_fight if fights <= values.easy_fight_limit else values.hard_fight
        if room_type == "shop":
            return values.shop + values.shop_gold * state.gold / 100
        return 0.0

    return valuate_room
