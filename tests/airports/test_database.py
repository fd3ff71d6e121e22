"""Tests for Airport Database."""

import math
import tempfile
from pathlib import Path

import pytest

from airportdb.airports.airport import Airport
from airportdb.airports.database import AirportDatabase
from airportdb.airports.errors import (
    AirportNotFoundError,
    DataCorruptionError,
    MalformedRecordError,
)
from airportdb.airports.filters import ALL, CountryFilter, PredicateFilter
from airportdb.country import Country, by_area


class TestAirportDatabaseLoading:
    """Test building a database from records and files."""

    def test_load_from_records(self) -> None:
        """Test records are parsed with the positional layout."""
        records = [
            ["1", "Goroka", "Goroka", "Papua New Guinea", "GKA", "AYGA", "-6.08", "145.39"],
            ["2", "Madang", "Madang", "Papua New Guinea", "MAG", "AYMD", "-5.21", "145.79"],
        ]
        db = AirportDatabase.load_from_records(records)

        assert len(db) == 2
        goroka = db.get_by_id(1)
        assert goroka.airport_name == "Goroka"
        assert goroka.country_name == "Papua New Guinea"
        assert goroka.latitude == pytest.approx(-6.08)
        assert goroka.longitude == pytest.approx(145.39)

    def test_malformed_record_fails_whole_load(self) -> None:
        """Test one bad coordinate aborts the load and names the record."""
        records = [
            ["1", "A", "A", "X", "", "", "1.0", "2.0"],
            ["2", "B", "B", "X", "", "", "north", "2.0"],
        ]
        with pytest.raises(MalformedRecordError) as excinfo:
            AirportDatabase.load_from_records(records)

        assert excinfo.value.index == 1

    def test_short_record_is_malformed(self) -> None:
        """Test records with fewer than 8 fields are rejected."""
        with pytest.raises(MalformedRecordError):
            AirportDatabase.load_from_records([["1", "A", "A", "X", "", "", "1.0"]])

    def test_non_numeric_id_is_malformed(self) -> None:
        """Test a textual id is rejected."""
        with pytest.raises(MalformedRecordError):
            AirportDatabase.load_from_records([["one", "A", "A", "X", "", "", "1.0", "2.0"]])

    def test_load_from_csv(self, airports_csv: Path) -> None:
        """Test loading a quoted, comma-separated file."""
        db = AirportDatabase.load_from_csv(airports_csv)

        assert len(db) == 5
        assert db.get_by_id(1382).city_name == "Paris"
        assert db.get_by_id(1382).airport_name == "Charles de Gaulle"

    def test_load_from_csv_other_delimiter(self) -> None:
        """Test a custom delimiter."""
        csv_path = Path(tempfile.mkdtemp()) / "airports.txt"
        csv_path.write_text("7;Seven;Town;Land;;;1.5;-2.5\n\n", encoding="utf-8")

        db = AirportDatabase.load_from_csv(csv_path, delimiter=";")

        assert db.get_by_id(7).coordinates == (1.5, -2.5)

    def test_load_missing_file_raises_error(self) -> None:
        """Test loading from nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            AirportDatabase.load_from_csv("nonexistent_directory/airports.dat")

    def test_from_list_last_wins(self, airport_factory) -> None:
        """Test repeated ids keep the last airport."""
        first = airport_factory(1, 0.0, 0.0, airport_name="Old")
        second = airport_factory(1, 5.0, 5.0, airport_name="New")
        other = airport_factory(2, 1.0, 1.0)

        db = AirportDatabase.from_list([first, other, second])

        assert len(db) == 2
        assert db.get_by_id(1) == second
        assert sorted(db.to_list(), key=lambda a: a.airport_id) == [second, other]

    def test_key_must_match_airport_id(self, airport_factory) -> None:
        """Test the constructor rejects a mismatched index."""
        with pytest.raises(DataCorruptionError):
            AirportDatabase({5: airport_factory(6, 0.0, 0.0)})


class TestAirportDatabaseQueries:
    """Test airport database query operations."""

    def test_get_by_id(self, triangle_db: AirportDatabase, triangle_airports: list[Airport]) -> None:
        """Test lookup of an indexed id."""
        assert triangle_db.get_by_id(2) == triangle_airports[1]
        assert triangle_db[2] == triangle_airports[1]

    def test_get_by_unknown_id_raises(self, triangle_db: AirportDatabase) -> None:
        """Test lookup of a missing id raises NotFound."""
        with pytest.raises(AirportNotFoundError, match="ID 99"):
            triangle_db.get_by_id(99)

    def test_not_found_is_a_lookup_error(self, triangle_db: AirportDatabase) -> None:
        """Test callers can catch the standard LookupError."""
        with pytest.raises(LookupError):
            triangle_db.get_by_id(99)

    @pytest.mark.parametrize("airport_id", [1, 2, 3, 4, -1, 0])
    def test_contains_agrees_with_get_by_id(self, triangle_db: AirportDatabase, airport_id: int) -> None:
        """Test contains is true exactly when get_by_id succeeds."""
        try:
            triangle_db.get_by_id(airport_id)
            found = True
        except AirportNotFoundError:
            found = False

        assert triangle_db.contains(airport_id) == found
        assert (airport_id in triangle_db) == found

    def test_contains_airport(self, triangle_db: AirportDatabase, triangle_airports: list[Airport], airport_factory) -> None:
        """Test value membership."""
        assert triangle_db.contains_airport(triangle_airports[0])
        assert triangle_airports[0] in triangle_db
        assert not triangle_db.contains_airport(airport_factory(42, 0.0, 0.0))

    def test_contains_airport_with_different_data_raises(self, triangle_db: AirportDatabase, airport_factory) -> None:
        """Test a conflicting record for a known id is reported as corruption."""
        impostor = airport_factory(1, 10.0, 10.0)

        with pytest.raises(DataCorruptionError, match='airport "1"'):
            triangle_db.contains_airport(impostor)

    def test_get_countries(self, triangle_db: AirportDatabase) -> None:
        """Test distinct sorted country names."""
        assert triangle_db.get_countries() == ["Numeria", "Otherland"]

    def test_iteration_and_len(self, triangle_db: AirportDatabase) -> None:
        """Test the container protocol."""
        assert len(triangle_db) == 3
        assert {airport.airport_id for airport in triangle_db} == {1, 2, 3}

    def test_summary_and_describe(self, triangle_db: AirportDatabase) -> None:
        """Test the text overviews."""
        assert "airports        3" in str(triangle_db)

        description = triangle_db.describe()
        assert description.index("#1 ") < description.index("#2 ") < description.index("#3 ")


class TestAirportDatabaseSubsets:
    """Test filtering into new databases."""

    def test_subset_all_keeps_everything(self, triangle_db: AirportDatabase) -> None:
        """Test the default filter keeps every airport."""
        assert set(triangle_db.get_subset().to_list()) == set(triangle_db.to_list())
        assert set(triangle_db.get_subset(ALL).to_list()) == set(triangle_db.to_list())

    def test_subset_matches_filter(self, triangle_db: AirportDatabase) -> None:
        """Test the subset holds exactly the accepted airports."""
        airport_filter = CountryFilter("Numeria")
        subset = triangle_db.get_subset(airport_filter)

        expected = {a for a in triangle_db.to_list() if airport_filter.accepts(a)}
        assert set(subset.to_list()) == expected
        assert {a.airport_id for a in subset} == {1, 2}

    def test_empty_subset_is_empty_database(self, triangle_db: AirportDatabase) -> None:
        """Test no match gives an empty database, not None."""
        subset = triangle_db.get_subset(CountryFilter("Nowhere"))

        assert isinstance(subset, AirportDatabase)
        assert len(subset) == 0
        assert subset.to_list() == []

    def test_subset_is_independent(self, triangle_db: AirportDatabase) -> None:
        """Test the parent is unchanged by filtering."""
        triangle_db.get_subset(PredicateFilter(lambda a: a.airport_id == 1))

        assert len(triangle_db) == 3


class TestAirportDensity:
    """Test airport density measures."""

    def test_density(self, airport_factory, numeria: Country) -> None:
        """Test 2 airports over a measure of 1000 give 0.002."""
        db = AirportDatabase.from_list(
            [
                airport_factory(1, 0.0, 0.0),
                airport_factory(2, 1.0, 1.0),
                airport_factory(3, 2.0, 2.0, country_name="Elsewhere"),
            ]
        )

        assert db.get_density_in(numeria, lambda c: 1000.0) == pytest.approx(0.002)
        assert db.get_density_in(numeria, by_area) == pytest.approx(0.002)

    def test_density_zero_measure_is_infinite(self, triangle_db: AirportDatabase, numeria: Country) -> None:
        """Test a zero measure follows float division."""
        assert math.isinf(triangle_db.get_density_in(numeria, lambda c: 0.0))

    def test_density_zero_over_zero_is_nan(self, triangle_db: AirportDatabase) -> None:
        """Test a country with no airport and a zero measure gives nan."""
        empty = Country(country_name="Nowhere", inhabitants=0, area_km2=0.0)

        assert math.isnan(triangle_db.get_density_in(empty, by_area))
