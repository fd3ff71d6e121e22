"""Exceptions raised by the airport database and distance map.

Callers can catch AirportDatabaseError for any failure of the core, or one
of the specific subclasses to tell a missing airport apart from a broken
database invariant.
"""


class AirportDatabaseError(Exception):
    """Base class for airport database errors."""


class AirportNotFoundError(AirportDatabaseError, LookupError):
    """Raised when an airport id, airport or airport pair is not indexed."""


class DataCorruptionError(AirportDatabaseError, RuntimeError):
    """Raised when one id maps to two different airport records."""


class EmptyDistanceMapError(AirportDatabaseError, ValueError):
    """Raised when statistics are requested on a map with fewer than two airports."""


class MalformedRecordError(AirportDatabaseError, ValueError):
    """Raised when a raw airport record cannot be parsed.

    Attributes:
        index: Position of the offending record in the loaded sequence,
            or None when parsing a single record.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        if index is not None:
            message = f"Record {index}: {message}"
        super().__init__(message)
        self.index = index
