"""Layered map definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from stsmap.core.types import RoomType


@dataclass(frozen=True, slots=True)
class RoomDef:
    """A room on a floor with its ordered connections to the next floor."""

    typ: RoomType
    connections: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "RoomDef":
        return cls(typ=str(raw["typ"]), connections=tuple(raw.get("connections") or ()))


@dataclass(frozen=True, slots=True)
class MapDef:
    """Immutable layered graph; floor ``f`` is stored at ``floors[f - 1]``."""

    floors: Tuple[Tuple[RoomDef, ...], ...]

    @classmethod
    def from_mapping(cls, raw: Mapping[object, Sequence[RoomDef | Mapping[str, object]]]) -> "MapDef":
        """Build a map from a ``{floor: [room, ...]}`` mapping.

        Floor keys may be ints or numeric strings (the generator's JSON uses
        strings). Floors missing between 1 and the highest key are empty.
        """
        by_floor: Dict[int, Tuple[RoomDef, ...]] = {}
        for key, rooms in raw.items():
            floor = int(key)
            if floor < 1:
                raise ValueError(f"Floor numbers start at 1, got {key!r}.")
            by_floor[floor] = tuple(
                room if isinstance(room, RoomDef) else RoomDef.from_mapping(room) for room in rooms
            )
        top = max(by_floor, default=0)
        return cls(floors=tuple(by_floor.get(floor, ()) for floor in range(1, top + 1)))

    @property
    def top_floor(self) -> int:
        """The terminal floor number."""
        return len(self.floors)

    def floor_nums(self) -> range:
        return range(1, self.top_floor + 1)

    def has_floor(self, floor: int) -> bool:
        return 1 <= floor <= self.top_floor

    def rooms(self, floor: int) -> Tuple[RoomDef, ...]:
        """Return the ordered rooms on ``floor``."""
        if not self.has_floor(floor):
            raise IndexError(f"Floor {floor} is outside 1..{self.top_floor}.")
        return self.floors[floor - 1]

    def room(self, floor: int, index: int) -> RoomDef:
        rooms = self.rooms(floor)
        if not 0 <= index < len(rooms):
            raise IndexError(f"Room {index} does not exist on floor {floor} ({len(rooms)} rooms).")
        return rooms[index]

    def room_type(self, floor: int, index: int) -> RoomType:
        return self.room(floor, index).typ

    def connections(self, floor: int, index: int) -> Tuple[int, ...]:
        return self.room(floor, index).connections

    def to_mapping(self) -> Dict[str, list[dict[str, object]]]:
        """Return the generator's JSON shape for this map."""
        return {
            str(floor): [
                {"typ": room.typ, "connections": list(room.connections)}
                for room in self.rooms(floor)
            ]
            for floor in self.floor_nums()
        }


@dataclass(frozen=True, slots=True)
class Path:
    """Room index per floor, from ``start_floor`` up to the terminal floor."""

    start_floor: int
    rooms: Tuple[int, ...]

    @property
    def end_floor(self) -> int:
        return self.start_floor + len(self.rooms) - 1

    def floors(self) -> range:
        return range(self.start_floor, self.end_floor + 1)

    def get(self, floor: int, default: int | None = None) -> int | None:
        if self.start_floor <= floor <= self.end_floor:
            return self.rooms[floor - self.start_floor]
        return default

    def items(self) -> Iterator[Tuple[int, int]]:
        return zip(self.floors(), self.rooms)

    def as_dict(self) -> Dict[int, int]:
        return dict(self.items())

    def __getitem__(self, floor: int) -> int:
        room_index = self.get(floor)
        if room_index is None:
            raise KeyError(floor)
        return room_index

    def __contains__(self, floor: object) -> bool:
        return isinstance(floor, int) and self.start_floor <= floor <= self.end_floor

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self.items()

    def __len__(self) -> int:
        return len(self.rooms)
