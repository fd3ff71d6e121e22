"""Unit tests for Question widget."""

import pytest

from airportdb.ui.question import Question, QuestionOption


class ScriptedInput:
    """Input function returning prepared answers and recording prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


@pytest.fixture
def lines():
    """Collected output lines."""
    return []


def make_question(lines, *answers, **kwargs):
    scripted = ScriptedInput(*answers)
    return Question(input_func=scripted, output=lines.append, **kwargs), scripted


def test_ask_returns_matching_option(lines):
    """Test the option with the typed key is returned."""
    question, scripted = make_question(lines, "b")
    options = [QuestionOption(key="a", label="A"), QuestionOption(key="b", label="B")]

    result = question.ask("Pick one", options)

    assert result is options[1]
    assert scripted.prompts == ["Pick one (a/b): "]


def test_ask_is_case_insensitive(lines):
    """Test keys match regardless of case."""
    question, _ = make_question(lines, "  A ")

    result = question.ask("Pick", [QuestionOption(key="a", label="A")])

    assert result.label == "A"


def test_ask_retries_then_gives_up(lines):
    """Test invalid answers are repeated up to max_attempts."""
    question, scripted = make_question(lines, "x", "y", max_attempts=2)

    result = question.ask("Pick", [QuestionOption(key="a", label="A")])

    assert result is None
    assert len(scripted.prompts) == 2
    assert lines == ["    Invalid answer: 'x'", "    Invalid answer: 'y'"]


def test_ask_without_options(lines):
    """Test asking with no options returns None without prompting."""
    question, scripted = make_question(lines)

    assert question.ask("Pick", []) is None
    assert scripted.prompts == []


@pytest.mark.parametrize("answer,expected", [("o", True), ("O", True), ("N", False), ("n", False)])
def test_confirm(lines, answer, expected):
    """Test the default yes/no keys."""
    question, scripted = make_question(lines, answer)

    assert question.confirm("Display?") is expected
    assert scripted.prompts == ["Display? (o/N): "]


def test_confirm_custom_keys(lines):
    """Test configurable yes/no keys."""
    question, _ = make_question(lines, "y", yes_key="y", no_key="n")

    assert question.confirm("Display?") is True


def test_confirm_invalid_answers_mean_no(lines):
    """Test giving up on a confirmation answers no."""
    question, _ = make_question(lines, "maybe", "perhaps", "later")

    assert question.confirm("Display?") is False


def test_ask_int(lines):
    """Test integer answers."""
    question, _ = make_question(lines, " 1382 ")

    assert question.ask_int("ID: ") == 1382


def test_ask_int_rejects_text(lines):
    """Test a non-integer answer raises ValueError."""
    question, _ = make_question(lines, "abc")

    with pytest.raises(ValueError, match="Not an integer"):
        question.ask_int("ID: ")
