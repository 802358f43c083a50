"""Shared type aliases and constants for the core and domain layers."""
from typing import Tuple

RoomType = str
Coordinate = Tuple[int, int]

TOP_FLOOR = 15

# Vocabulary emitted by the map generator. The path algorithms accept any tag.
ROOM_TYPES: Tuple[str, ...] = (
    "enemy",
    "elite",
    "super",
    "rest",
    "event",
    "shop",
    "treasure",
)

__all__ = ["Coordinate", "ROOM_TYPES", "RoomType", "TOP_FLOOR"]
