"""Airport database: an immutable index of airports keyed by id.

This module provides loading of airport records from positional records or
a delimited file, id and value lookups, filtering into sub-databases, and
derivation of the pairwise distance map.

Typical usage:
    db = AirportDatabase.load_from_csv("data/airports.csv")

    airport = db.get_by_id(1382)
    french = db.get_subset(CountryFilter("France"))
    distances = french.get_distance_map()
    print(distances.median_distance())
"""

import csv
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

import numpy as np

from airportdb.airports.airport import Airport
from airportdb.airports.distance_map import AirportDistanceMap
from airportdb.airports.errors import (
    AirportNotFoundError,
    DataCorruptionError,
    MalformedRecordError,
)
from airportdb.airports.filters import ALL, AirportFilter
from airportdb.country import Country

logger = logging.getLogger(__name__)


class AirportDatabase:
    """Indexed, read-only collection of airports.

    Instances are never mutated after construction: filtering returns a new
    database, and the distance map copies what it needs.

    Examples:
        >>> db = AirportDatabase.from_list([paris, lyon])
        >>> db.contains(paris.airport_id)
        True
        >>> db.get_subset(CountryFilter("Spain")).to_list()
        []
    """

    def __init__(self, airports_by_id: dict[int, Airport] | None = None) -> None:
        """Initialize from an id to airport mapping.

        Args:
            airports_by_id: Mapping whose keys equal each value's airport_id.
                The mapping is copied.

        Raises:
            DataCorruptionError: If a key differs from its airport's id.
        """
        self._airports: dict[int, Airport] = dict(airports_by_id or {})

        for airport_id, airport in self._airports.items():
            if airport_id != airport.airport_id:
                raise DataCorruptionError(
                    f"Airport {airport.airport_id} is indexed under id {airport_id}"
                )

    @classmethod
    def from_list(cls, airports: Iterable[Airport]) -> "AirportDatabase":
        """Build a database from airports, the last one winning on repeated ids.

        Args:
            airports: Airports to index.

        Returns:
            New database.
        """
        return cls({airport.airport_id: airport for airport in airports})

    @classmethod
    def load_from_records(cls, records: Iterable[Sequence[str]]) -> "AirportDatabase":
        """Build a database from raw positional records.

        The whole load fails on the first malformed record; no partial
        database is returned.

        Args:
            records: Raw records (see Airport.from_record for the layout).

        Returns:
            New database.

        Raises:
            MalformedRecordError: If any record cannot be parsed.
        """
        airports = []
        for index, record in enumerate(records):
            try:
                airports.append(Airport.from_record(record))
            except MalformedRecordError as e:
                logger.error("Aborting airport load at record %d: %s", index, e)
                raise MalformedRecordError(str(e), index=index) from e

        db = cls.from_list(airports)
        logger.info("Loaded %d airports from %d records", len(db), len(airports))
        return db

    @classmethod
    def load_from_csv(
        cls,
        csv_path: str | Path,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ) -> "AirportDatabase":
        """Load airports from a headerless delimited file.

        Args:
            csv_path: File in the OpenFlights positional layout.
            delimiter: Field delimiter.
            encoding: File encoding.

        Returns:
            New database.

        Raises:
            FileNotFoundError: If the file does not exist.
            MalformedRecordError: If any line cannot be parsed.
        """
        csv_path = Path(csv_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"Airports file not found: {csv_path}")

        logger.info("Loading airports from %s", csv_path)
        with open(csv_path, encoding=encoding, newline="") as f:
            records = [row for row in csv.reader(f, delimiter=delimiter) if row]

        return cls.load_from_records(records)

    def get_by_id(self, airport_id: int) -> Airport:
        """Get an airport by id.

        Args:
            airport_id: Airport id.

        Returns:
            The indexed airport.

        Raises:
            AirportNotFoundError: If no airport has this id.
        """
        try:
            return self._airports[airport_id]
        except KeyError:
            raise AirportNotFoundError(
                f"The database doesn't contain an airport with ID {airport_id}"
            ) from None

    def contains(self, airport_id: int) -> bool:
        """Check if an airport with this id is indexed."""
        return airport_id in self._airports

    def contains_airport(self, airport: Airport) -> bool:
        """Check if this exact airport is indexed.

        Args:
            airport: Airport to look for.

        Returns:
            True if an equal airport is indexed under the same id.

        Raises:
            DataCorruptionError: If the id is indexed with different data.
        """
        stored = self._airports.get(airport.airport_id)
        if stored is None:
            return False

        if stored != airport:
            raise DataCorruptionError(
                f'Internal data corrupted: airport "{airport.airport_id}" '
                "is present in the database but with different data"
            )
        return True

    def get_subset(self, airport_filter: AirportFilter = ALL) -> "AirportDatabase":
        """Get a new database holding the airports accepted by a filter.

        Args:
            airport_filter: Filter to apply, all airports by default.

        Returns:
            New database, empty if nothing matches.
        """
        subset = AirportDatabase(
            {
                airport_id: airport
                for airport_id, airport in self._airports.items()
                if airport_filter.accepts(airport)
            }
        )
        logger.debug("Filter %r kept %d of %d airports", airport_filter, len(subset), len(self))
        return subset

    def get_distance_map(self) -> AirportDistanceMap:
        """Compute the pairwise distance map of this database's airports."""
        return AirportDistanceMap(self._airports)

    def to_list(self) -> list[Airport]:
        """Get all airports, in no guaranteed order."""
        return list(self._airports.values())

    def get_density_in(self, country: Country, against: Callable[[Country], float]) -> float:
        """Get the airport density of a country relative to one of its measures.

        Division follows floating-point rules: a zero measure yields inf
        (or nan when the country has no airports either).

        Args:
            country: Country to measure; only country_name is matched.
            against: Extracts the measure from the country (e.g., area).

        Returns:
            Airports in the country divided by the measure.

        Examples:
            >>> db.get_density_in(france, lambda c: c.area_km2)
        """
        count = sum(
            1 for airport in self._airports.values() if airport.country_name == country.country_name
        )
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(np.float64(count), np.float64(against(country))))

    def get_countries(self) -> list[str]:
        """Get the sorted list of countries having at least one airport."""
        return sorted({airport.country_name for airport in self._airports.values()})

    def summary(self) -> str:
        """Get a short overview of the database."""
        return f"AirportDatabase [\n    airports        {len(self)}\n]"

    def describe(self) -> str:
        """Get an overview listing every airport, sorted by id."""
        lines = [f"    {airport}" for airport in sorted(self, key=lambda a: a.airport_id)]
        return f"AirportDatabase [\n    airports        {len(self)}\n\n" + ",\n".join(lines) + "\n]"

    def __getitem__(self, airport_id: int) -> Airport:
        return self.get_by_id(airport_id)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Airport):
            return self.contains_airport(item)
        if isinstance(item, int):
            return self.contains(item)
        return False

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._airports.values())

    def __len__(self) -> int:
        return len(self._airports)

    def __str__(self) -> str:
        return self.summary()
