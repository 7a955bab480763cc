"""Tests for input providers (module_maker.prompts).

Covers:
- parse_selection
- PresetInputProvider answers, recording and MissingInputError
- ConsoleInputProvider with patched Rich prompts
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from rich.console import Console

from module_maker.errors import MissingInputError
from module_maker.prompts import ConsoleInputProvider, PresetInputProvider, parse_selection

pytestmark = pytest.mark.unit


class TestParseSelection:
    @pytest.mark.parametrize(
        "answer, expected",
        [
            ("all", [0, 1, 2, 3]),
            ("*", [0, 1, 2, 3]),
            ("1", [0]),
            ("1,3", [0, 2]),
            ("2-4", [1, 2, 3]),
            (" 4 , 1-2 ", [3, 0, 1]),
            ("1,1", [0]),
        ],
    )
    def test_valid(self, answer, expected):
        assert parse_selection(answer, 4) == expected

    @pytest.mark.parametrize("answer", ["0", "5", "3-1", "", ",", "x"])
    def test_invalid(self, answer):
        with pytest.raises(ValueError):
            parse_selection(answer, 4)


class TestPresetInputProvider:
    def test_answers(self):
        inputs = PresetInputProvider(
            module_name="Post",
            template="core_crud",
            stubs=["a.stub"],
            templates=["crud"],
            confirmation=False,
        )
        assert inputs.ask_module_name() == "Post"
        assert inputs.select_template({}) == "core_crud"
        assert inputs.select_stubs({}) == ["a.stub"]
        assert inputs.select_templates({}) == ["crud"]
        assert inputs.confirm("Proceed?") is False
        assert inputs.asked == ["module_name", "template", "stubs", "templates", "confirm"]

    def test_missing_answer(self):
        inputs = PresetInputProvider()
        with pytest.raises(MissingInputError, match="module_name"):
            inputs.ask_module_name()


@pytest.fixture
def quiet_console() -> Console:
    return Console(quiet=True)


class TestConsoleInputProvider:
    def test_ask_module_name_retries_until_non_empty(self, quiet_console: Console):
        inputs = ConsoleInputProvider(quiet_console)
        with patch("module_maker.prompts.Prompt.ask", side_effect=["  ", "BlogPost"]) as ask:
            assert inputs.ask_module_name() == "BlogPost"
        assert ask.call_count == 2

    def test_select_template_by_number(self, quiet_console: Console):
        inputs = ConsoleInputProvider(quiet_console)
        options = {"core_crud": "Crud (Core)", "user_crud": "Crud (User)"}
        with patch("module_maker.prompts.Prompt.ask", return_value="2") as ask:
            assert inputs.select_template(options) == "user_crud"
        assert ask.call_args.kwargs["choices"] == ["1", "2"]

    def test_select_template_without_options(self, quiet_console: Console):
        with pytest.raises(MissingInputError):
            ConsoleInputProvider(quiet_console).select_template({})

    def test_select_stubs_defaults_to_all(self, quiet_console: Console):
        inputs = ConsoleInputProvider(quiet_console)
        options = {"a.stub": "-> a", "b.stub": "-> b"}
        with patch("module_maker.prompts.Prompt.ask", return_value="all"):
            assert inputs.select_stubs(options) == ["a.stub", "b.stub"]

    def test_select_stubs_retries_invalid_answer(self, quiet_console: Console):
        inputs = ConsoleInputProvider(quiet_console)
        options = {"a.stub": "-> a", "b.stub": "-> b"}
        with patch("module_maker.prompts.Prompt.ask", side_effect=["9", "2"]):
            assert inputs.select_stubs(options) == ["b.stub"]

    def test_select_templates_empty(self, quiet_console: Console):
        assert ConsoleInputProvider(quiet_console).select_templates({}) == []

    def test_confirm(self, quiet_console: Console):
        inputs = ConsoleInputProvider(quiet_console)
        with patch("module_maker.prompts.Confirm.ask", return_value=True) as ask:
            assert inputs.confirm("Do you want to proceed?") is True
        assert ask.call_args.kwargs["default"] is False
