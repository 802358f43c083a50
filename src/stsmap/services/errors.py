"""Service-layer exceptions."""


class MapQueryError(Exception):
    """Base exception for path queries over a map."""


class MalformedMapError(MapQueryError):
    """Raised when a map references a floor or room that does not exist."""
