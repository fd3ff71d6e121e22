"""Generic console menu system.

This module provides a reusable base class for building text menus with
options selected by key, written to an injectable output function.

Typical usage:
    class MyMenu(Menu):
        def _build_options(self, context):
            return [
                MenuOption(key="1", label="Option 1", data={"action": "do_something"}),
                MenuOption(key="0", label="Quit", data={"action": "quit"}),
            ]

        def _handle_selection(self, option):
            action = option.data.get("action")
            self._execute_action(action)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from airportdb.core.logging_system import get_logger

logger = get_logger(__name__)


@dataclass
class MenuOption:
    """Represents a single menu option.

    Attributes:
        key: Key to select this option (e.g., "1", "2").
        label: Human-readable label shown in menu.
        data: Additional data associated with this option (menu-specific).
        enabled: Whether this option is currently selectable.
    """

    key: str
    label: str
    data: dict[str, Any] | None = None
    enabled: bool = True


class Menu(ABC):
    """Generic base class for console menus.

    Provides standard menu functionality:
    - Open/close menu
    - Render the option list
    - Select an option by key
    - State management

    Subclasses must implement:
    - _build_options(context): Build menu options
    - _handle_selection(option): Handle option selection
    - _get_title(): Get the title printed above the options

    Subclasses can optionally override:
    - _on_open(): Called after menu opens
    - _on_close(): Called before menu closes
    - _is_available(): Check if menu can be opened
    """

    def __init__(
        self,
        output: Callable[[str], None] = print,
        sender_name: str = "menu",
    ):
        """Initialize menu.

        Args:
            output: Function writing one line of text.
            sender_name: Name used in log messages.
        """
        self._output = output
        self._sender_name = sender_name
        self._state = "CLOSED"  # CLOSED, OPEN
        self._current_options: list[MenuOption] = []

        logger.debug("%s initialized", sender_name)

    def open(self, context: Any = None) -> bool:
        """Open the menu.

        Args:
            context: Optional context for building menu options (menu-specific).

        Returns:
            True if menu opened successfully, False otherwise.
        """
        if not self._is_available(context):
            logger.warning("%s not available", self._sender_name)
            return False

        self._current_options = self._build_options(context)

        if not self._current_options:
            logger.warning("%s has no options", self._sender_name)
            return False

        self._state = "OPEN"
        logger.info("%s opened with %d options", self._sender_name, len(self._current_options))

        self._on_open(context)

        return True

    def close(self) -> None:
        """Close the menu."""
        if self._state == "CLOSED":
            return

        self._on_close()

        self._state = "CLOSED"
        self._current_options = []
        logger.debug("%s closed", self._sender_name)

    def render(self) -> None:
        """Write the title and the enabled options."""
        if self._state != "OPEN":
            return

        self._output(self._get_title())
        for option in self._current_options:
            if option.enabled:
                self._output(f"    {option.key}. {option.label}")

    def select_option(self, key: str) -> bool:
        """Select a menu option by key.

        Args:
            key: Option key (e.g., "1", "2", "3").

        Returns:
            True if option was found and selected, False otherwise.
        """
        if self._state != "OPEN":
            logger.warning("%s cannot select option in state: %s", self._sender_name, self._state)
            return False

        key = key.strip()
        selected_option = None
        for option in self._current_options:
            if option.key == key and option.enabled:
                selected_option = option
                break

        if not selected_option:
            logger.debug("%s invalid or disabled option: %s", self._sender_name, key)
            self._output(self._get_invalid_option_message(key))
            return False

        logger.info("%s selected: %s", self._sender_name, selected_option.label)

        self._handle_selection(selected_option)

        return True

    def is_open(self) -> bool:
        """Check if menu is currently open."""
        return self._state == "OPEN"

    def get_state(self) -> str:
        """Get current menu state."""
        return self._state

    def get_current_options(self) -> list[MenuOption]:
        """Get a copy of the current menu options."""
        return self._current_options.copy()

    # Abstract methods (must be implemented by subclasses)

    @abstractmethod
    def _build_options(self, context: Any) -> list[MenuOption]:
        """Build menu options based on context.

        Args:
            context: Context for building options (menu-specific).

        Returns:
            List of MenuOption objects.
        """

    @abstractmethod
    def _handle_selection(self, option: MenuOption) -> None:
        """Handle selection of a menu option.

        Args:
            option: The selected MenuOption.
        """

    @abstractmethod
    def _get_title(self) -> str:
        """Get the title line written above the options."""

    # Optional customization hooks

    def _get_invalid_option_message(self, key: str) -> str:
        """Get the line written when an unknown key is selected."""
        return f"    Invalid option: {key!r}"

    def _is_available(self, context: Any) -> bool:
        """Check if menu is available to be opened. Defaults to True."""
        return True

    def _on_open(self, context: Any) -> None:
        """Called after menu opens successfully."""

    def _on_close(self) -> None:
        """Called before menu closes."""
