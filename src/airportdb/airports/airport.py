"""Airport record.

Typical usage:
    from airportdb.airports.airport import Airport

    airport = Airport.from_record(["1", "Goroka", "Goroka", "Papua New Guinea",
                                   "GKA", "AYGA", "-6.081689", "145.391881"])
    print(airport.coordinates)
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from airportdb.airports.errors import MalformedRecordError

# Positions of the used fields in a raw record (fields 4 and 5 are ignored)
ID_FIELD = 0
NAME_FIELD = 1
CITY_FIELD = 2
COUNTRY_FIELD = 3
LATITUDE_FIELD = 6
LONGITUDE_FIELD = 7
MIN_RECORD_LENGTH = 8


@dataclass(frozen=True)
class Airport:
    """One airport, immutable once built.

    Two airports compare equal when all six fields are equal, which is what
    the database uses to detect conflicting records for a single id.

    Attributes:
        airport_id: Unique numeric identifier
        airport_name: Airport name
        city_name: City served by the airport
        country_name: Country name (e.g., "France")
        latitude: Latitude in degrees
        longitude: Longitude in degrees
    """

    airport_id: int
    airport_name: str
    city_name: str
    country_name: str
    latitude: float
    longitude: float

    @classmethod
    def from_record(cls, record: Sequence[str]) -> "Airport":
        """Build an airport from one raw positional record.

        Args:
            record: At least 8 fields; 0, 1, 2, 3, 6 and 7 are id, name,
                city, country, latitude and longitude.

        Returns:
            Parsed airport.

        Raises:
            MalformedRecordError: If the record is too short, a numeric
                field does not parse or a coordinate is nan or infinite.
        """
        if len(record) < MIN_RECORD_LENGTH:
            raise MalformedRecordError(
                f"expected at least {MIN_RECORD_LENGTH} fields, got {len(record)}"
            )

        try:
            airport_id = int(record[ID_FIELD])
            latitude = float(record[LATITUDE_FIELD])
            longitude = float(record[LONGITUDE_FIELD])
        except (TypeError, ValueError) as e:
            raise MalformedRecordError(f"invalid numeric field: {e}") from e

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise MalformedRecordError(f"non-finite coordinates: {latitude}, {longitude}")

        return cls(
            airport_id=airport_id,
            airport_name=record[NAME_FIELD],
            city_name=record[CITY_FIELD],
            country_name=record[COUNTRY_FIELD],
            latitude=latitude,
            longitude=longitude,
        )

    @property
    def coordinates(self) -> tuple[float, float]:
        """Get (latitude, longitude) in degrees."""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return (
            f"#{self.airport_id} {self.airport_name} ({self.city_name}, {self.country_name}) "
            f"at {self.latitude:.4f}, {self.longitude:.4f}"
        )
