"""Airport database and distance statistics.

This module provides an immutable airport index built from positional
records, filters to select subsets of it, and the pairwise distance map
with its descriptive statistics.

Typical usage:
    from airportdb.airports import AirportDatabase, CountryFilter

    db = AirportDatabase.load_from_csv("data/airports.csv")
    distances = db.get_subset(CountryFilter("France")).get_distance_map()
    print(distances.avg_distance())
"""

from airportdb.airports.airport import Airport
from airportdb.airports.database import AirportDatabase
from airportdb.airports.distance_map import AirportDistanceMap, DistanceStatistics
from airportdb.airports.errors import (
    AirportDatabaseError,
    AirportNotFoundError,
    DataCorruptionError,
    EmptyDistanceMapError,
    MalformedRecordError,
)
from airportdb.airports.filters import (
    ALL,
    AirportFilter,
    AllAirports,
    AndFilter,
    CountryFilter,
    NotFilter,
    OrFilter,
    PredicateFilter,
    RegionFilter,
)

__all__ = [
    "ALL",
    "Airport",
    "AirportDatabase",
    "AirportDatabaseError",
    "AirportDistanceMap",
    "AirportFilter",
    "AirportNotFoundError",
    "AllAirports",
    "AndFilter",
    "CountryFilter",
    "DataCorruptionError",
    "DistanceStatistics",
    "EmptyDistanceMapError",
    "MalformedRecordError",
    "NotFilter",
    "OrFilter",
    "PredicateFilter",
    "RegionFilter",
]
