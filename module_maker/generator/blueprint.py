"""Blueprint batch generation.

A blueprint is a YAML document mapping module names to the template they
should be generated from, optionally listing stubs to leave out::

    BlogPost:
      template: crud
    BlogCategory:
      template: user_crud
      excludeStubs:
        - routes/modules-.php.stub

Entries run in declaration order.  Each entry is independent: a failing
entry is recorded and the remaining entries still run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator

from module_maker.errors import BlueprintError, ModuleMakerError
from module_maker.generator.runner import (
    EXCLUDE_NONE,
    GenerationResult,
    GenerationRunner,
    GenerationStatus,
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class BlueprintEntry(BaseModel):
    """How a single module of the blueprint is generated."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    template: str = Field(..., min_length=1, description="Template key, optionally origin-prefixed")
    exclude_stubs: list[str] = Field(
        default_factory=lambda: [EXCLUDE_NONE],
        alias="excludeStubs",
        description="Stub relative paths to skip",
    )

    @field_validator("exclude_stubs", mode="before")
    @classmethod
    def _default_exclusions(cls, value: Any) -> Any:
        if value is None or value == []:
            return [EXCLUDE_NONE]
        if isinstance(value, str):
            return [value]
        return value


class Blueprint(BaseModel):
    """Ordered mapping of module name -> :class:`BlueprintEntry`."""

    modules: dict[str, BlueprintEntry] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.modules)


class BlueprintReport(BaseModel):
    """Outcome of running every entry of a blueprint."""

    results: list[GenerationResult] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def total(self) -> int:
        """Number of declared entries that were run."""
        return len(self.results)

    @computed_field  # type: ignore[misc]
    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @computed_field  # type: ignore[misc]
    @property
    def failed(self) -> int:
        return self.total - self.succeeded


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def parse_blueprint(document: Any) -> Blueprint:
    """Validate an already-parsed YAML document as a :class:`Blueprint`.

    Raises:
        BlueprintError: If the document is not a mapping of valid entries.
    """
    if document is None:
        return Blueprint()
    if not isinstance(document, dict):
        raise BlueprintError("Blueprint must be a mapping of module names to options.")

    try:
        return Blueprint(modules={str(name): options for name, options in document.items()})
    except ValidationError as exc:
        raise BlueprintError(f"Invalid blueprint: {exc}") from exc


def load_blueprint(path: Path) -> Blueprint:
    """Read and validate the blueprint at *path*.

    Raises:
        BlueprintError: If the file is missing, is not valid YAML, or does
            not describe a blueprint.
    """
    path = Path(path)
    if not path.is_file():
        raise BlueprintError(f"Blueprint file not found: {path}")

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise BlueprintError(f"Blueprint {path} is not valid YAML: {exc}") from exc

    return parse_blueprint(document)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class BlueprintRunner:
    """Runs module generation once per blueprint entry.

    Args:
        runner: Generation runner shared by every entry.
        on_result: Optional callback invoked after each entry finishes.
    """

    def __init__(
        self,
        runner: GenerationRunner,
        on_result: Callable[[GenerationResult], None] | None = None,
    ) -> None:
        self.runner = runner
        self.on_result = on_result

    def _run_entry(self, module_name: str, entry: BlueprintEntry) -> GenerationResult:
        try:
            descriptor = self.runner.resolver.resolve(entry.template)
            return self.runner.run(module_name, descriptor, entry.exclude_stubs)
        except (ModuleMakerError, ValueError) as exc:
            return GenerationResult(
                module_name=module_name,
                template=entry.template,
                written_paths=getattr(exc, "written_paths", []),
                status=GenerationStatus.FAILED,
                error=str(exc),
            )

    def run(self, blueprint: Blueprint) -> BlueprintReport:
        """Generate every module of *blueprint* in declaration order."""
        report = BlueprintReport()
        for module_name, entry in blueprint.modules.items():
            result = self._run_entry(module_name, entry)
            report.results.append(result)
            if self.on_result is not None:
                self.on_result(result)
        return report
