"""AirportDB - airport distance statistics.

Main entry point for the application. Loads settings and logging, reads the
airport and country files, then runs the interactive menu or prints the
distance statistics once.

Typical usage:
    python -m airportdb.main
    python -m airportdb.main --airports data/airports.dat
    python -m airportdb.main --stats --country France
"""

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from airportdb.airports.database import AirportDatabase
from airportdb.airports.filters import ALL, AirportFilter, CountryFilter
from airportdb.core.config import ConfigLoader, load_settings
from airportdb.core.logging_system import (
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from airportdb.core.resource_path import get_config_path, get_resource_path
from airportdb.country import Country, load_countries_from_csv
from airportdb.ui.airport_menu import AirportMenu

logger = get_logger(__name__)


class AirportDB:
    """Main application class.

    Owns the settings, the loaded database and the countries, and runs the
    requested mode.
    """

    def __init__(
        self,
        args: argparse.Namespace | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the application and load the data files.

        Args:
            args: Command line arguments (optional).
            input_func: Function reading user input (for the menu).
            output: Function writing one line of text.

        Raises:
            ConfigError: If the settings file cannot be loaded.
            FileNotFoundError: If the airports file does not exist.
            MalformedRecordError: If the airports file has a bad record.
        """
        self.args = args or argparse.Namespace(
            airports=None, countries=None, config=None, delimiter=None, stats=False, country=None
        )
        self._input = input_func
        self._output = output

        self.config = self._load_config()

        airports_file = self._resolve(self.args.airports, "data.airports_file")
        if not self.args.airports and not airports_file.exists():
            raise FileNotFoundError(
                f"Default airports file not found: {airports_file} "
                "(the bundled data only ships with a source checkout, pass --airports)"
            )
        delimiter = self.args.delimiter or self.config.get("data.delimiter", ",")
        encoding = self.config.get("data.encoding", "utf-8")
        self.database = AirportDatabase.load_from_csv(airports_file, delimiter=delimiter, encoding=encoding)

        self.countries = self._load_countries(encoding)
        logger.info(
            "AirportDB ready: %d airports, %d countries", len(self.database), len(self.countries)
        )

    def _load_config(self) -> ConfigLoader:
        if self.args.config:
            return load_settings(self.args.config)

        default_settings = get_config_path("settings.yaml")
        if default_settings.exists():
            return load_settings(default_settings)
        return load_settings()

    def _resolve(self, cli_value: str | None, config_key: str) -> Path:
        """Command line paths are relative to the working directory, config paths to the project."""
        if cli_value:
            return Path(cli_value)
        return get_resource_path(self.config.get(config_key))

    def _load_countries(self, encoding: str) -> dict[str, Country]:
        countries_file = self._resolve(self.args.countries, "data.countries_file")
        if not countries_file.exists():
            if self.args.countries:
                raise FileNotFoundError(f"Countries file not found: {countries_file}")
            logger.warning("No countries file at %s, density queries disabled", countries_file)
            return {}
        return load_countries_from_csv(countries_file, encoding=encoding)

    def run(self) -> None:
        """Run the mode selected on the command line."""
        if self.args.stats:
            self.print_statistics()
            return

        menu = AirportMenu(
            self.database,
            self.countries,
            input_func=self._input,
            output=self._output,
            precision=self.config.get("display.precision", 4),
            yes_key=self.config.get("display.yes_key", "o"),
            no_key=self.config.get("display.no_key", "N"),
        )
        menu.run()
        logger.info("Menu closed")

    def print_statistics(self) -> None:
        """Print the distance statistics, optionally for one country only.

        Raises:
            EmptyDistanceMapError: If fewer than two airports are selected.
        """
        airport_filter: AirportFilter = ALL
        if self.args.country:
            airport_filter = CountryFilter(self.args.country)

        subset = self.database.get_subset(airport_filter)
        distances = subset.get_distance_map()
        stats = distances.statistics()
        precision = self.config.get("display.precision", 4)

        self._output(f"airports: {len(subset)}")
        self._output(f"pairs:    {stats.pair_count}")
        self._output(f"min:      {stats.min_distance:.{precision}f}")
        self._output(f"max:      {stats.max_distance:.{precision}f}")
        self._output(f"avg:      {stats.avg_distance:.{precision}f}")
        self._output(f"median:   {stats.median_distance:.{precision}f}")
        self._output(f"std_dev:  {stats.std_dev:.{precision}f}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse, sys.argv[1:] when None.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="AirportDB - airport distance statistics")

    parser.add_argument(
        "--airports",
        type=str,
        help=(
            "Airports file in the OpenFlights layout (default from settings, "
            "resolved in the source checkout; required for an installed package)"
        ),
    )

    parser.add_argument(
        "--countries",
        type=str,
        help="Countries CSV with name,inhabitants,area_km2 columns",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Settings YAML file (default: config/settings.yaml)",
    )

    parser.add_argument(
        "--delimiter",
        type=str,
        help="Field delimiter of the airports file",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print distance statistics and exit instead of opening the menu",
    )

    parser.add_argument(
        "--country",
        type=str,
        help="With --stats, restrict statistics to this country",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    logging_config = get_config_path("logging.yaml")
    if logging_config.exists():
        initialize_logging(str(logging_config), use_platform_dir=True)
    else:
        initialize_logging(use_platform_dir=True)

    try:
        args = parse_args(argv)
        app = AirportDB(args)
        app.run()
        return 0
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
