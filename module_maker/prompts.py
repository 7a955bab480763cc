"""User input providers.

Commands never talk to the terminal directly.  Whenever a value was not
supplied on the command line they ask an :class:`InputProvider`, which is
either interactive (:class:`ConsoleInputProvider`, backed by Rich prompts) or
pre-supplied (:class:`PresetInputProvider`, used for scripted runs and
tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from module_maker.errors import MissingInputError
from module_maker.utils import console as default_console


class InputProvider(Protocol):
    """Answers the questions a command may need to ask."""

    def ask_module_name(self) -> str: ...

    def select_template(self, options: dict[str, str]) -> str: ...

    def select_stubs(self, options: dict[str, str]) -> list[str]: ...

    def select_templates(self, options: dict[str, str]) -> list[str]: ...

    def confirm(self, message: str) -> bool: ...


# ---------------------------------------------------------------------------
# Interactive provider
# ---------------------------------------------------------------------------


def parse_selection(answer: str, count: int) -> list[int]:
    """Parse a multi-select answer into zero-based indexes.

    Accepts ``all``, comma separated numbers and ranges (``1,3-5``).
    Numbers are one-based.

    Raises:
        ValueError: If the answer selects nothing or is out of range.
    """
    answer = answer.strip().lower()
    if answer in {"all", "*"}:
        return list(range(count))

    selected: list[int] = []
    for part in answer.replace(" ", "").split(","):
        if not part:
            continue
        if "-" in part:
            start_str, end_str = part.split("-", 1)
            start, end = int(start_str), int(end_str)
        else:
            start = end = int(part)
        if start < 1 or end > count or start > end:
            raise ValueError(f"selection '{part}' is out of range 1-{count}")
        for number in range(start, end + 1):
            if number - 1 not in selected:
                selected.append(number - 1)

    if not selected:
        raise ValueError("select at least one option")
    return selected


class ConsoleInputProvider:
    """Asks questions on the terminal using Rich prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def _print_options(self, title: str, options: dict[str, str]) -> list[str]:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("Key")
        table.add_column("Description")
        keys = list(options)
        for number, key in enumerate(keys, start=1):
            table.add_row(str(number), escape(key), escape(options[key]))
        self.console.print(table)
        return keys

    def _multiselect(self, title: str, options: dict[str, str]) -> list[str]:
        keys = self._print_options(title, options)
        if not keys:
            return []
        while True:
            answer = Prompt.ask(
                "Enter numbers (e.g. 1,3-4) or 'all'", default="all", console=self.console
            )
            try:
                return [keys[index] for index in parse_selection(answer, len(keys))]
            except ValueError as exc:
                self.console.print(f"[bold red]{escape(str(exc))}[/bold red]")

    def ask_module_name(self) -> str:
        self.console.print("[dim]The module name should be in StudlyCase (eg: BlogCategory)[/dim]")
        while True:
            name = Prompt.ask("What is the module name?", console=self.console).strip()
            if name:
                return name
            self.console.print("[bold red]The module name is required.[/bold red]")

    def select_template(self, options: dict[str, str]) -> str:
        if not options:
            raise MissingInputError("Which template do you want to use? (no templates available)")
        keys = self._print_options("Which template do you want to use?", options)
        answer = Prompt.ask(
            "Template number",
            choices=[str(number) for number in range(1, len(keys) + 1)],
            console=self.console,
        )
        return keys[int(answer) - 1]

    def select_stubs(self, options: dict[str, str]) -> list[str]:
        return self._multiselect("Select the stubs you want to generate:", options)

    def select_templates(self, options: dict[str, str]) -> list[str]:
        return self._multiselect("Select the stub templates you want to publish:", options)

    def confirm(self, message: str) -> bool:
        return Confirm.ask(message, default=False, console=self.console)


# ---------------------------------------------------------------------------
# Pre-supplied provider
# ---------------------------------------------------------------------------


@dataclass
class PresetInputProvider:
    """Answers questions from values supplied up front.

    A ``None`` answer means the question cannot be answered and raises
    :class:`MissingInputError` when asked.  Every question asked is recorded
    in :attr:`asked`.
    """

    module_name: str | None = None
    template: str | None = None
    stubs: list[str] | None = None
    templates: list[str] | None = None
    confirmation: bool | None = None
    asked: list[str] = field(default_factory=list)

    def _answer(self, question: str, value):
        self.asked.append(question)
        if value is None:
            raise MissingInputError(question)
        return value

    def ask_module_name(self) -> str:
        return self._answer("module_name", self.module_name)

    def select_template(self, options: dict[str, str]) -> str:
        return self._answer("template", self.template)

    def select_stubs(self, options: dict[str, str]) -> list[str]:
        return list(self._answer("stubs", self.stubs))

    def select_templates(self, options: dict[str, str]) -> list[str]:
        return list(self._answer("templates", self.templates))

    def confirm(self, message: str) -> bool:
        return self._answer("confirm", self.confirmation)
