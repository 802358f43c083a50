"""Errors raised while reading bundled or user-supplied map files."""


class DataError(Exception):
    """Any failure turning a map file into a MapDef."""


class DataLoadError(DataError):
    """The file is missing, unreadable or not JSON."""


class DataValidationError(DataError):
    """The JSON does not have the floor -> rooms shape."""


class DataReferenceError(DataError):
    """A room connects to a room index the next floor does not have."""
