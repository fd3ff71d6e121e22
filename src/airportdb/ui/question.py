"""Question widget for interactive console prompts.

This module provides a reusable widget for asking a question and reading
the answer: yes/no confirmations and free-text values such as airport ids.

Typical usage:
    question = Question(input_func=input, output=print)
    if question.confirm("Display all airports?"):
        ...
    airport_id = question.ask_int("First airport ID: ")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from airportdb.core.logging_system import get_logger

logger = get_logger(__name__)


@dataclass
class QuestionOption:
    """Represents a response option for a question.

    Attributes:
        key: Key to select this option (e.g., "o", "N").
        label: Human-readable label.
        data: Additional data associated with this option.
    """

    key: str
    label: str
    data: Any = None


class Question:
    """Widget for asking questions on the console.

    Matching of option keys is case-insensitive. When no option matches,
    the widget repeats the prompt up to max_attempts times.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        yes_key: str = "o",
        no_key: str = "N",
        max_attempts: int = 3,
        sender_name: str = "question",
    ):
        """Initialize question widget.

        Args:
            input_func: Function showing a prompt and returning the typed line.
            output: Function writing one line of text.
            yes_key: Key answering yes to a confirmation.
            no_key: Key answering no to a confirmation.
            max_attempts: Prompts before giving up on an invalid answer.
            sender_name: Name used in log messages.
        """
        self._input = input_func
        self._output = output
        self._yes_key = yes_key
        self._no_key = no_key
        self._max_attempts = max_attempts
        self._sender_name = sender_name

    def ask(self, prompt: str, options: list[QuestionOption]) -> QuestionOption | None:
        """Ask a question with a fixed set of answers.

        Args:
            prompt: Question text.
            options: Possible answers.

        Returns:
            The chosen option, or None if no valid answer was given.
        """
        if not options:
            logger.warning("%s asked with no options", self._sender_name)
            return None

        keys = "/".join(option.key for option in options)
        for _ in range(self._max_attempts):
            answer = self._input(f"{prompt} ({keys}): ").strip()

            for option in options:
                if option.key.lower() == answer.lower():
                    logger.info("%s response: %s", self._sender_name, option.label)
                    return option

            logger.debug("%s invalid response: %s", self._sender_name, answer)
            self._output(f"    Invalid answer: {answer!r}")

        return None

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; anything but a yes answer means no."""
        option = self.ask(
            prompt,
            [
                QuestionOption(key=self._yes_key, label="Yes", data=True),
                QuestionOption(key=self._no_key, label="No", data=False),
            ],
        )
        return bool(option and option.data)

    def ask_text(self, prompt: str) -> str:
        """Ask for a free-text answer, stripped of surrounding blanks."""
        return self._input(prompt).strip()

    def ask_int(self, prompt: str) -> int:
        """Ask for an integer.

        Raises:
            ValueError: If the answer is not an integer.
        """
        answer = self.ask_text(prompt)
        try:
            return int(answer)
        except ValueError:
            raise ValueError(f"Not an integer: {answer!r}") from None
