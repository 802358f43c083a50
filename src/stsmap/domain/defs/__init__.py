"""Domain definition exports."""

from .map_def import MapDef, Path, RoomDef

__all__ = [
    "MapDef",
    "Path",
    "RoomDef",
]
