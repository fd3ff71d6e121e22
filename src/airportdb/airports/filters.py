"""Airport filters used to select a subset of a database.

Each filter evaluates one criterion. Filters compose with ``&``, ``|`` and
``~`` into new filters, so the database only ever calls ``accepts``.

Typical usage:
    from airportdb.airports.filters import CountryFilter, RegionFilter

    europe_fr = CountryFilter("France") & RegionFilter(41.0, 51.5, -5.5, 9.8)
    subset = db.get_subset(europe_fr)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from airportdb.airports.airport import Airport


class AirportFilter(ABC):
    """Base class for all airport filters."""

    @abstractmethod
    def accepts(self, airport: Airport) -> bool:
        """Check if the airport passes this filter.

        Args:
            airport: Airport to check.

        Returns:
            True if the airport is kept.
        """

    def __call__(self, airport: Airport) -> bool:
        return self.accepts(airport)

    def __and__(self, other: "AirportFilter") -> "AirportFilter":
        return AndFilter(self, other)

    def __or__(self, other: "AirportFilter") -> "AirportFilter":
        return OrFilter(self, other)

    def __invert__(self) -> "AirportFilter":
        return NotFilter(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class AllAirports(AirportFilter):
    """Accepts every airport."""

    def accepts(self, airport: Airport) -> bool:
        return True


ALL = AllAirports()


class CountryFilter(AirportFilter):
    """Accepts airports located in one country (exact name match)."""

    def __init__(self, country_name: str) -> None:
        self.country_name = country_name

    def accepts(self, airport: Airport) -> bool:
        return airport.country_name == self.country_name

    def __repr__(self) -> str:
        return f"<CountryFilter: {self.country_name}>"


class RegionFilter(AirportFilter):
    """Accepts airports inside a latitude/longitude box, bounds included.

    Boxes crossing the antimeridian are not supported; combine two
    RegionFilter with ``|`` instead.
    """

    def __init__(
        self,
        min_latitude: float,
        max_latitude: float,
        min_longitude: float,
        max_longitude: float,
    ) -> None:
        if min_latitude > max_latitude or min_longitude > max_longitude:
            raise ValueError("Region bounds must satisfy min <= max")

        self.min_latitude = min_latitude
        self.max_latitude = max_latitude
        self.min_longitude = min_longitude
        self.max_longitude = max_longitude

    def accepts(self, airport: Airport) -> bool:
        return (
            self.min_latitude <= airport.latitude <= self.max_latitude
            and self.min_longitude <= airport.longitude <= self.max_longitude
        )

    def __repr__(self) -> str:
        return (
            f"<RegionFilter: lat [{self.min_latitude}, {self.max_latitude}], "
            f"lon [{self.min_longitude}, {self.max_longitude}]>"
        )


class PredicateFilter(AirportFilter):
    """Wraps a plain callable as a filter."""

    def __init__(self, predicate: Callable[[Airport], bool]) -> None:
        self.predicate = predicate

    def accepts(self, airport: Airport) -> bool:
        return bool(self.predicate(airport))


class AndFilter(AirportFilter):
    """Accepts airports accepted by both filters."""

    def __init__(self, left: AirportFilter, right: AirportFilter) -> None:
        self.left = left
        self.right = right

    def accepts(self, airport: Airport) -> bool:
        return self.left.accepts(airport) and self.right.accepts(airport)

    def __repr__(self) -> str:
        return f"({self.left!r} & {self.right!r})"


class OrFilter(AirportFilter):
    """Accepts airports accepted by at least one filter."""

    def __init__(self, left: AirportFilter, right: AirportFilter) -> None:
        self.left = left
        self.right = right

    def accepts(self, airport: Airport) -> bool:
        return self.left.accepts(airport) or self.right.accepts(airport)

    def __repr__(self) -> str:
        return f"({self.left!r} | {self.right!r})"


class NotFilter(AirportFilter):
    """Accepts airports rejected by the wrapped filter."""

    def __init__(self, inner: AirportFilter) -> None:
        self.inner = inner

    def accepts(self, airport: Airport) -> bool:
        return not self.inner.accepts(airport)

    def __repr__(self) -> str:
        return f"~{self.inner!r}"
