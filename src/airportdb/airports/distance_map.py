"""Pairwise distance map between the airports of a database.

Distances are planar: the Euclidean norm of the latitude and longitude
differences, in degrees. Every unordered pair of distinct airports is stored
exactly once in a condensed upper-triangle array, and lookups in either
order resolve to the same cell.

Typical usage:
    distances = db.get_distance_map()
    if not distances.is_empty:
        print(distances.min_distance(), distances.max_distance())
    print(distances.distance_between(1382, 1386))
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from airportdb.airports.airport import Airport
from airportdb.airports.errors import AirportNotFoundError, EmptyDistanceMapError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceStatistics:
    """Descriptive statistics over the distinct-pair distances.

    Attributes:
        pair_count: Number of distinct airport pairs
        min_distance: Smallest distance
        max_distance: Largest distance
        avg_distance: Arithmetic mean
        median_distance: Median (mean of the two central values on even counts)
        std_dev: Population standard deviation
    """

    pair_count: int
    min_distance: float
    max_distance: float
    avg_distance: float
    median_distance: float
    std_dev: float


class AirportDistanceMap:
    """Distances between every two distinct airports of a database.

    The map is immutable. Building it is quadratic in the number of
    airports; every statistic is computed over each unordered pair once.

    Examples:
        >>> distances = AirportDistanceMap({a.airport_id: a, b.airport_id: b})
        >>> distances.distance_between(a.airport_id, b.airport_id)
        5.0
    """

    def __init__(self, airports_by_id: Mapping[int, Airport]) -> None:
        """Build the distance table.

        Args:
            airports_by_id: Airports to measure, keyed by id.
        """
        self._ids: list[int] = sorted(airports_by_id)
        self._index_of: dict[int, int] = {airport_id: i for i, airport_id in enumerate(self._ids)}
        self._airport_to_id: dict[Airport, int] = {
            airport: airport_id for airport_id, airport in airports_by_id.items()
        }
        self._distances = self._compute_condensed(
            np.array([airports_by_id[i].latitude for i in self._ids], dtype=np.float64),
            np.array([airports_by_id[i].longitude for i in self._ids], dtype=np.float64),
        )
        self._distances.flags.writeable = False

        logger.debug(
            "Built distance map: %d airports, %d pairs", len(self._ids), self._distances.size
        )

    @staticmethod
    def _compute_condensed(
        latitudes: npt.NDArray[np.float64], longitudes: npt.NDArray[np.float64]
    ) -> npt.NDArray[np.float64]:
        """Compute the upper-triangle distances row by row.

        Row i holds the distances from airport i to airports i+1..n-1, so
        the memory peak stays at the size of the result.
        """
        n = latitudes.size
        condensed = np.empty(n * (n - 1) // 2, dtype=np.float64)

        offset = 0
        for i in range(n - 1):
            d_lat = latitudes[i + 1 :] - latitudes[i]
            d_lon = longitudes[i + 1 :] - longitudes[i]
            condensed[offset : offset + d_lat.size] = np.sqrt(d_lat**2 + d_lon**2)
            offset += d_lat.size

        return condensed

    def _condensed_index(self, i: int, j: int) -> int:
        """Get the condensed position of rows i < j."""
        n = len(self._ids)
        return n * i - i * (i + 1) // 2 + (j - i - 1)

    def _pair_of(self, k: int) -> tuple[int, int]:
        """Get the (id_a, id_b) pair stored at condensed position k."""
        n = len(self._ids)
        i = 0
        # Rows shrink by one each step; walk until k falls inside row i
        while k >= n - 1 - i:
            k -= n - 1 - i
            i += 1
        return self._ids[i], self._ids[i + 1 + k]

    @property
    def is_empty(self) -> bool:
        """True if the map holds no pair (fewer than two airports)."""
        return self._distances.size == 0

    @property
    def pair_count(self) -> int:
        """Number of distinct airport pairs."""
        return int(self._distances.size)

    @property
    def airport_count(self) -> int:
        """Number of airports in the map."""
        return len(self._ids)

    def _require_pairs(self) -> None:
        if self.is_empty:
            raise EmptyDistanceMapError(
                f"Distance map over {self.airport_count} airport(s) has no pair"
            )

    def min_distance(self) -> float:
        """Get the distance between the two closest airports.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        return float(self._distances.min())

    def max_distance(self) -> float:
        """Get the distance between the two farthest airports.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        return float(self._distances.max())

    def avg_distance(self) -> float:
        """Get the mean distance between airports.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        return float(self._distances.mean())

    def median_distance(self) -> float:
        """Get the median distance between airports.

        With an even number of pairs, the mean of the two central distances.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        return float(np.median(self._distances))

    def std_dev(self) -> float:
        """Get the population standard deviation of the distances.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        avg = self.avg_distance()
        return float(np.sqrt(np.mean((self._distances - avg) ** 2)))

    def statistics(self) -> DistanceStatistics:
        """Get all descriptive statistics at once.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        return DistanceStatistics(
            pair_count=self.pair_count,
            min_distance=self.min_distance(),
            max_distance=self.max_distance(),
            avg_distance=self.avg_distance(),
            median_distance=self.median_distance(),
            std_dev=self.std_dev(),
        )

    def distance_between(self, airport_id_a: int, airport_id_b: int) -> float:
        """Get the distance between two airports given by id.

        Args:
            airport_id_a: First airport id.
            airport_id_b: Second airport id.

        Returns:
            Distance in degrees; identical for both argument orders.

        Raises:
            AirportNotFoundError: If an id is unknown or both ids are equal.
        """
        i = self._index_of.get(airport_id_a)
        j = self._index_of.get(airport_id_b)
        if i is None or j is None or i == j:
            raise AirportNotFoundError(
                f"Distance between airports with IDs {airport_id_a} and {airport_id_b} "
                "is not present in the map"
            )

        if i > j:
            i, j = j, i
        return float(self._distances[self._condensed_index(i, j)])

    def distance_between_airports(self, airport_a: Airport, airport_b: Airport) -> float:
        """Get the distance between two airports.

        Args:
            airport_a: First airport.
            airport_b: Second airport.

        Returns:
            Distance in degrees.

        Raises:
            AirportNotFoundError: If an airport is not in the map.
        """
        if airport_a not in self._airport_to_id:
            raise AirportNotFoundError("The first airport specified is not present in the map")
        if airport_b not in self._airport_to_id:
            raise AirportNotFoundError("The second airport specified is not present in the map")

        return self.distance_between(self._airport_to_id[airport_a], self._airport_to_id[airport_b])

    def pairs(self) -> Iterator[tuple[int, int, float]]:
        """Iterate over (id_a, id_b, distance) with id_a < id_b."""
        k = 0
        for i, airport_id_a in enumerate(self._ids):
            for airport_id_b in self._ids[i + 1 :]:
                yield airport_id_a, airport_id_b, float(self._distances[k])
                k += 1

    def closest_pair(self) -> tuple[int, int, float]:
        """Get the (id_a, id_b, distance) of the two closest airports.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        k = int(np.argmin(self._distances))
        return (*self._pair_of(k), float(self._distances[k]))

    def farthest_pair(self) -> tuple[int, int, float]:
        """Get the (id_a, id_b, distance) of the two farthest airports.

        Raises:
            EmptyDistanceMapError: If the map holds no pair.
        """
        self._require_pairs()
        k = int(np.argmax(self._distances))
        return (*self._pair_of(k), float(self._distances[k]))

    def __len__(self) -> int:
        return self.pair_count
