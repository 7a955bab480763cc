"""Exception hierarchy shared by the module-maker commands."""

from __future__ import annotations

from pathlib import Path


class ModuleMakerError(Exception):
    """Base class for every error raised by module-maker."""


class TemplateNotFoundError(ModuleMakerError):
    """Raised when a template key matches neither the core nor the user origin."""

    def __init__(self, template_key: str) -> None:
        self.template_key = template_key
        super().__init__(f"The template '{template_key}' does not exist.")


class GenerationError(ModuleMakerError):
    """Raised when reading a stub or writing a generated file fails.

    Files written before the failure are kept on disk and listed in
    ``written_paths``.
    """

    def __init__(self, message: str, written_paths: list[Path] | None = None) -> None:
        self.written_paths = list(written_paths or [])
        super().__init__(message)


class BlueprintError(ModuleMakerError):
    """Raised when the blueprint file is missing or malformed."""


class UserCancelledError(ModuleMakerError):
    """Raised when the user declines a confirmation prompt."""

    def __init__(self, message: str = "The command has been cancelled.") -> None:
        super().__init__(message)


class MissingInputError(ModuleMakerError):
    """Raised by a non-interactive input provider that has no answer for a question."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"No value supplied for: {question}")
