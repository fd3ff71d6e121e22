"""Country records used for airport density measures.

Typical usage:
    countries = load_countries_from_csv("data/countries.csv")
    france = countries["France"]
    density = db.get_density_in(france, by_area)
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Country:
    """Country information.

    Attributes:
        country_name: Name as spelled in the airport records
        inhabitants: Population
        area_km2: Surface in square kilometers
    """

    country_name: str
    inhabitants: int
    area_km2: float


def by_area(country: Country) -> float:
    """Measure a country by its surface."""
    return country.area_km2


def by_inhabitants(country: Country) -> float:
    """Measure a country by its population."""
    return float(country.inhabitants)


def load_countries_from_csv(csv_path: str | Path, encoding: str = "utf-8") -> dict[str, Country]:
    """Load countries from a CSV file with a name,inhabitants,area_km2 header.

    Args:
        csv_path: CSV file path.
        encoding: File encoding.

    Returns:
        Countries keyed by name.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a line has a missing column or a non-numeric measure.
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Countries file not found: {csv_path}")

    countries: dict[str, Country] = {}
    with open(csv_path, encoding=encoding, newline="") as f:
        reader = csv.DictReader(f)

        # Line 1 is the header
        for line, row in enumerate(reader, start=2):
            try:
                country = Country(
                    country_name=row["name"].strip(),
                    inhabitants=int(row["inhabitants"]),
                    area_km2=float(row["area_km2"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"{csv_path}:{line}: invalid country row: {e}") from e

            countries[country.country_name] = country

    logger.info("Loaded %d countries from %s", len(countries), csv_path)
    return countries
