"""Main console menu of the airport statistics application.

Each option runs one query against the loaded airport database and writes
the result. Errors raised by the database are reported and the menu keeps
running.

Typical usage:
    menu = AirportMenu(db, countries)
    menu.run()
"""

from collections.abc import Callable
from typing import Any

from airportdb.airports.database import AirportDatabase
from airportdb.airports.distance_map import AirportDistanceMap, DistanceStatistics
from airportdb.airports.errors import AirportDatabaseError
from airportdb.airports.filters import CountryFilter, PredicateFilter
from airportdb.core.logging_system import get_logger
from airportdb.country import Country, by_area, by_inhabitants
from airportdb.ui.menu import Menu, MenuOption
from airportdb.ui.question import Question

logger = get_logger(__name__)

QUIT = "0"
HELP = "8"

SEPARATOR = "    +-----------"


class AirportMenu(Menu):
    """Interactive menu over an airport database.

    Examples:
        >>> menu = AirportMenu(db, countries, input_func=input, output=print)
        >>> menu.run()
    """

    def __init__(
        self,
        database: AirportDatabase,
        countries: dict[str, Country] | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        precision: int = 4,
        yes_key: str = "o",
        no_key: str = "N",
    ):
        """Initialize the menu.

        Args:
            database: Airports to query.
            countries: Countries available for density queries, keyed by name.
            input_func: Function showing a prompt and returning the typed line.
            output: Function writing one line of text.
            precision: Decimals used when printing distances.
            yes_key: Key confirming a yes/no question.
            no_key: Key refusing a yes/no question.
        """
        super().__init__(output=output, sender_name="airport_menu")
        self._database = database
        self._countries = countries or {}
        self._input = input_func
        self._precision = precision
        self._question = Question(input_func=input_func, output=output, yes_key=yes_key, no_key=no_key)
        self._distance_map: AirportDistanceMap | None = None

    def run(self) -> None:
        """Loop on the menu until the user quits or input ends."""
        if not self.open():
            return

        while self.is_open():
            self.render()
            try:
                key = self._input("    Choice: ")
            except EOFError:
                self.close()
                break
            self.select_option(key)

    def _build_options(self, context: Any) -> list[MenuOption]:
        return [
            MenuOption(key="1", label="List the loaded airports", data={"action": "list"}),
            MenuOption(key="2", label="Distance between two airports", data={"action": "distance"}),
            MenuOption(key="3", label="Distance statistics of all airports", data={"action": "stats"}),
            MenuOption(
                key="4", label="Distance statistics of a country", data={"action": "country_stats"}
            ),
            MenuOption(key="5", label="Airport density of a country", data={"action": "density"}),
            MenuOption(key=HELP, label="Help", data={"action": "help"}),
            MenuOption(key=QUIT, label="Quit", data={"action": "quit"}),
        ]

    def _get_title(self) -> str:
        return f"\n    Airport database ({len(self._database)} airports)"

    def _handle_selection(self, option: MenuOption) -> None:
        action = (option.data or {}).get("action")
        handlers = {
            "list": self._list_airports,
            "distance": self._distance_between,
            "stats": self._all_statistics,
            "country_stats": self._country_statistics,
            "density": self._density,
            "help": self._help,
            "quit": self.close,
        }

        try:
            handlers[action]()
        except (AirportDatabaseError, ValueError) as e:
            logger.warning("Action %s failed: %s", action, e)
            self._output(f"    Error: {e}")

    def _header(self, title: str) -> None:
        self._output(SEPARATOR)
        self._output(f"    | {title}\n")

    def _fmt(self, value: float) -> str:
        return f"{value:.{self._precision}f}"

    def _list_airports(self) -> None:
        self._header("Loaded airports")

        if self._question.confirm(
            f"    Your database holds {len(self._database)} airport(s), display them?"
        ):
            for airport in sorted(self._database.to_list(), key=lambda a: a.airport_id):
                self._output(f"    - {airport}")

    def _distance_between(self) -> None:
        self._header("Distance between two airports")

        airport_a = self._database.get_by_id(self._question.ask_int("    First airport ID: "))
        airport_b = self._database.get_by_id(self._question.ask_int("    Second airport ID: "))

        # Only the requested pair is measured
        wanted = {airport_a.airport_id, airport_b.airport_id}
        pair_map = self._database.get_subset(
            PredicateFilter(lambda airport: airport.airport_id in wanted)
        ).get_distance_map()
        distance = pair_map.distance_between_airports(airport_a, airport_b)

        self._output(f"    {airport_a}")
        self._output(f"    {airport_b}")
        self._output(f"    Distance: {self._fmt(distance)}")

    def _all_statistics(self) -> None:
        self._header("Descriptive statistics of all airports")

        if self._distance_map is None:
            self._distance_map = self._database.get_distance_map()
        self._write_statistics(self._distance_map.statistics())

    def _country_statistics(self) -> None:
        self._header("Descriptive statistics of a country's airports")

        country_name = self._question.ask_text("    Country name: ")
        subset = self._database.get_subset(CountryFilter(country_name))
        self._output(f"    {len(subset)} airport(s) in {country_name}")
        self._write_statistics(subset.get_distance_map().statistics())

    def _density(self) -> None:
        self._header("Airport density of a country")

        country_name = self._question.ask_text("    Country name: ")
        country = self._countries.get(country_name)
        if country is None:
            self._output(f"    No country data for {country_name!r}")
            return

        per_km2 = self._database.get_density_in(country, by_area)
        per_inhabitant = self._database.get_density_in(country, by_inhabitants)
        self._output(f"    Airports per km2:        {per_km2:.6g}")
        self._output(f"    Airports per inhabitant: {per_inhabitant:.6g}")

    def _help(self) -> None:
        self._output("    Type the number of an option and press Enter.")
        self._output("    Distances are planar, in degrees of latitude/longitude.")

    def _write_statistics(self, stats: DistanceStatistics) -> None:
        self._output(f"    Pairs:              {stats.pair_count}")
        self._output(f"    Minimum distance:   {self._fmt(stats.min_distance)}")
        self._output(f"    Maximum distance:   {self._fmt(stats.max_distance)}")
        self._output(f"    Average distance:   {self._fmt(stats.avg_distance)}")
        self._output(f"    Median distance:    {self._fmt(stats.median_distance)}")
        self._output(f"    Standard deviation: {self._fmt(stats.std_dev)}")
