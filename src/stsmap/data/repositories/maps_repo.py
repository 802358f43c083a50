"""Repository and parsers for layered map definitions."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from stsmap.core.types import TOP_FLOOR
from stsmap.data.errors import DataReferenceError, DataValidationError
from stsmap.data.json_loader import load_json
from stsmap.data.repositories.base import RepositoryBase
from stsmap.domain.defs import MapDef, RoomDef


class MapsRepository(RepositoryBase[MapDef]):
    """Loads and validates the bundled maps keyed by map id."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        super().__init__("maps.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MapDef]:
        definitions: Dict[str, MapDef] = {}
        for map_id, payload in raw.items():
            if not isinstance(map_id, str) or not map_id.strip():
                raise DataValidationError("map id must be a non-empty string.")
            definitions[map_id] = parse_map_payload(payload, f"map '{map_id}'")
        return definitions


def load_map_file(path: Path | str) -> MapDef:
    """Load a single map saved in the generator's JSON format."""
    file_path = Path(path)
    return parse_map_payload(load_json(file_path), str(file_path))


def parse_map_payload(raw: object, context: str, *, max_floor: int = TOP_FLOOR) -> MapDef:
    """Validate a ``{"1": [{"typ": ..., "connections": [...]}, ...], ...}`` payload."""
    floors_raw = RepositoryBase._require_mapping(raw, context)
    floors: Dict[int, list[RoomDef]] = {}
    for key, rooms_raw in floors_raw.items():
        floor = _parse_floor_key(key, context, max_floor)
        if not isinstance(rooms_raw, list):
            raise DataValidationError(f"{context} floor {floor} must be a list of rooms.")
        floors[floor] = [
            _parse_room(room_raw, f"{context} floor {floor} room {index}")
            for index, room_raw in enumerate(rooms_raw)
        ]
    map_def = MapDef.from_mapping(floors)
    _check_references(map_def, context)
    return map_def


def _parse_floor_key(key: object, context: str, max_floor: int) -> int:
    if not isinstance(key, str) or not key.isdigit():
        raise DataValidationError(f"{context} floor key {key!r} must be a floor number.")
    floor = int(key)
    if not 1 <= floor <= max_floor:
        raise DataValidationError(f"{context} floor {floor} must be within 1..{max_floor}.")
    return floor


def _parse_room(raw: object, context: str) -> RoomDef:
    mapping = RepositoryBase._require_mapping(raw, context)
    typ = mapping.get("typ")
    if not isinstance(typ, str) or not typ.strip():
        raise DataValidationError(f"{context} typ must be a non-empty string.")
    connections = mapping.get("connections", [])
    if not isinstance(connections, list):
        raise DataValidationError(f"{context} connections must be a list.")
    for target in connections:
        if isinstance(target, bool) or not isinstance(target, int):
            raise DataValidationError(f"{context} connections must contain integers.")
    if len(set(connections)) != len(connections):
        raise DataValidationError(f"{context} connections must not repeat a room.")
    return RoomDef(typ=typ, connections=tuple(connections))


def _check_references(map_def: MapDef, context: str) -> None:
    for floor in map_def.floor_nums():
        if floor == map_def.top_floor:
            continue
        room_count = len(map_def.rooms(floor + 1))
        for index, room in enumerate(map_def.rooms(floor)):
            for target in room.connections:
                if not 0 <= target < room_count:
                    raise DataReferenceError(
                        f"{context} floor {floor} room {index} connects to room {target}, "
                        f"but floor {floor + 1} has {room_count} rooms."
                    )
