"""Console UI components for the airport statistics application.

This module provides the generic menu and question widgets and the main
airport menu built on them.
"""

from airportdb.ui.airport_menu import AirportMenu
from airportdb.ui.menu import Menu, MenuOption
from airportdb.ui.question import Question, QuestionOption

__all__ = ["AirportMenu", "Menu", "MenuOption", "Question", "QuestionOption"]
