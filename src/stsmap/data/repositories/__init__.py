"""Repository exports."""

from .maps_repo import MapsRepository, load_map_file, parse_map_payload

__all__ = [
    "MapsRepository",
    "load_map_file",
    "parse_map_payload",
]
