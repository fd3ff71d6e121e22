"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest

from airportdb.airports.airport import Airport
from airportdb.airports.database import AirportDatabase
from airportdb.country import Country


def make_airport(
    airport_id: int,
    latitude: float,
    longitude: float,
    country_name: str = "Numeria",
    airport_name: str | None = None,
    city_name: str = "Capital",
) -> Airport:
    """Build an airport with default text fields."""
    return Airport(
        airport_id=airport_id,
        airport_name=airport_name or f"Airport {airport_id}",
        city_name=city_name,
        country_name=country_name,
        latitude=latitude,
        longitude=longitude,
    )


@pytest.fixture
def triangle_airports() -> list[Airport]:
    """Three airports with pairwise distances 3, 4 and 5."""
    return [
        make_airport(1, 0.0, 0.0),
        make_airport(2, 3.0, 0.0),
        make_airport(3, 0.0, 4.0, country_name="Otherland"),
    ]


@pytest.fixture
def triangle_db(triangle_airports: list[Airport]) -> AirportDatabase:
    """Database over the 3-4-5 triangle."""
    return AirportDatabase.from_list(triangle_airports)


@pytest.fixture
def line_airports() -> list[Airport]:
    """Four airports on a line at 0, 1, 4 and 6 (distances 1 to 6)."""
    return [
        make_airport(10, 0.0, 0.0),
        make_airport(11, 1.0, 0.0),
        make_airport(12, 4.0, 0.0),
        make_airport(13, 6.0, 0.0),
    ]


@pytest.fixture
def numeria() -> Country:
    """Country matching the default country of make_airport."""
    return Country(country_name="Numeria", inhabitants=1000, area_km2=1000.0)


@pytest.fixture
def airports_csv() -> Path:
    """Temporary airports file in the OpenFlights positional layout."""
    temp_dir = Path(tempfile.mkdtemp())
    csv_path = temp_dir / "airports.dat"
    csv_path.write_text(
        '1,"Goroka Airport","Goroka","Papua New Guinea","GKA","AYGA",-6.0817,145.392,5282\n'
        '2,"Madang Airport","Madang","Papua New Guinea","MAG","AYMD",-5.2071,145.789,20\n'
        '1382,"Charles de Gaulle","Paris","France","CDG","LFPG",49.0128,2.55,392\n'
        '1386,"Paris-Orly","Paris","France","ORY","LFPO",48.7233,2.3794,291\n'
        '1335,"Lyon Saint-Exupery","Lyon","France","LYS","LFLL",45.7256,5.0811,821\n',
        encoding="utf-8",
    )
    return csv_path


@pytest.fixture
def countries_csv() -> Path:
    """Temporary countries file."""
    temp_dir = Path(tempfile.mkdtemp())
    csv_path = temp_dir / "countries.csv"
    csv_path.write_text(
        "name,inhabitants,area_km2\n"
        "France,65018000,672051\n"
        "Papua New Guinea,9949437,462840\n",
        encoding="utf-8",
    )
    return csv_path


@pytest.fixture
def airport_factory():
    """Give tests the make_airport builder."""
    return make_airport
