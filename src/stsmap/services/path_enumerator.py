"""Depth-first enumeration of every path from start rooms to the top floor."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence

from stsmap.core.types import Coordinate
from stsmap.domain.defs import MapDef, Path, RoomDef
from stsmap.services.errors import MalformedMapError

logger = logging.getLogger(__name__)


def iter_paths(map_def: MapDef, start_coordinates: Iterable[Coordinate]) -> Iterator[Path]:
    """Yield every path starting at each coordinate, in deterministic order.

    Start coordinates are visited in the order given. From each start the
    traversal descends through the first listed connection first and then
    through its siblings in list order. Paths from different starts are
    simply concatenated.
    """
    for start_floor, start_room in start_coordinates:
        yield from _iter_paths_from(map_def, start_floor, start_room)


def count_paths(map_def: MapDef, start_coordinates: Iterable[Coordinate]) -> int:
    """Count paths without keeping them around."""
    return sum(1 for _ in iter_paths(map_def, start_coordinates))


def _iter_paths_from(map_def: MapDef, start_floor: int, start_room: int) -> Iterator[Path]:
    rooms = _floor_rooms(map_def, start_floor)
    if not rooms:
        return
    if not 0 <= start_room < len(rooms):
        raise MalformedMapError(
            f"Start room {start_room} does not exist on floor {start_floor} ({len(rooms)} rooms)."
        )
    path_length = map_def.top_floor - start_floor + 1
    logger.debug("Enumerating paths from floor %s room %s", start_floor, start_room)

    # stack[i] is the room on floor start_floor + i; cursors[i] is its position
    # in the parent's connection list (unused for the start room).
    stack: List[int] = [start_room]
    cursors: List[int] = [0]
    while stack:
        if len(stack) == path_length:
            yield Path(start_floor=start_floor, rooms=tuple(stack))
        else:
            floor = start_floor + len(stack) - 1
            connections = _room(map_def, floor, stack[-1]).connections
            if connections:
                stack.append(_checked_target(map_def, floor, stack[-1], connections[0]))
                cursors.append(0)
                continue

        # Backtrack to the nearest ancestor with an unvisited sibling.
        while len(stack) > 1:
            parent_floor = start_floor + len(stack) - 2
            siblings = _room(map_def, parent_floor, stack[-2]).connections
            position = cursors[-1] + 1
            if position < len(siblings):
                stack[-1] = _checked_target(map_def, parent_floor, stack[-2], siblings[position])
                cursors[-1] = position
                break
            stack.pop()
            cursors.pop()

        if len(stack) == 1:
            return


def _floor_rooms(map_def: MapDef, floor: int) -> Sequence[RoomDef]:
    if not map_def.has_floor(floor):
        raise MalformedMapError(f"Floor {floor} is outside the map (floors 1..{map_def.top_floor}).")
    return map_def.rooms(floor)


def _room(map_def: MapDef, floor: int, index: int) -> RoomDef:
    rooms = _floor_rooms(map_def, floor)
    if not 0 <= index < len(rooms):
        raise MalformedMapError(f"Room {index} does not exist on floor {floor}.")
    return rooms[index]


def _checked_target(map_def: MapDef, floor: int, room_index: int, target: int) -> int:
    # Only rooms below the top floor are expanded, so next_floor always exists.
    next_floor = floor + 1
    room_count = len(map_def.rooms(next_floor))
    if not 0 <= target < room_count:
        raise MalformedMapError(
            f"Room {room_index} on floor {floor} connects to room {target}, "
            f"but floor {next_floor} has {room_count} rooms."
        )
    return target
