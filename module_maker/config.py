"""module-maker configuration.

Typed configuration for the generate, publish and blueprint commands.  The
settings use a Pydantic v2 model so they can be validated at construction
time and serialised to/from JSON or environment variables.  A ``Config`` is
built once by the CLI and then passed explicitly into every component; no
component looks configuration up on its own.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_BUNDLED_STUBS = Path(__file__).parent / "stubs"


class Config(BaseModel):
    """Settings shared by every module-maker command.

    Relative directories are resolved against :attr:`project_root`, which is
    also the root under which generated files are written.
    """

    project_root: Path = Field(default=Path("."), description="Root of the target project tree")
    user_template_dir: Path = Field(
        default=Path("stubs/module-maker"),
        description="Directory holding user-editable (published) templates",
    )
    core_template_dir: Path = Field(
        default=_BUNDLED_STUBS,
        description="Directory holding the bundled templates",
    )
    blueprint_file: Path = Field(
        default=Path("module-blueprint.yml"),
        description="Blueprint document read by the run-blueprint command",
    )
    namespace_separator: str = Field(default="\\", min_length=1)
    stub_extension: str = Field(default=".stub", min_length=1)

    @field_validator("stub_extension")
    @classmethod
    def _leading_dot(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.project_root / path

    @property
    def user_template_path(self) -> Path:
        """Absolute-or-project-relative location of the user templates."""
        return self._resolve(self.user_template_dir)

    @property
    def core_template_path(self) -> Path:
        """Location of the bundled templates."""
        return self._resolve(self.core_template_dir)

    @property
    def blueprint_path(self) -> Path:
        """Location of the blueprint document."""
        return self._resolve(self.blueprint_file)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to
                ``<project_root>/module-maker.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.project_root / "module-maker.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MODULE_MAKER_PROJECT_ROOT, MODULE_MAKER_STUB_DIR,
            MODULE_MAKER_BLUEPRINT, MODULE_MAKER_NAMESPACE_SEPARATOR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MODULE_MAKER_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["MODULE_MAKER_PROJECT_ROOT"])
        if os.environ.get("MODULE_MAKER_STUB_DIR"):
            kwargs["user_template_dir"] = Path(os.environ["MODULE_MAKER_STUB_DIR"])
        if os.environ.get("MODULE_MAKER_BLUEPRINT"):
            kwargs["blueprint_file"] = Path(os.environ["MODULE_MAKER_BLUEPRINT"])
        if os.environ.get("MODULE_MAKER_NAMESPACE_SEPARATOR"):
            kwargs["namespace_separator"] = os.environ["MODULE_MAKER_NAMESPACE_SEPARATOR"]
        return cls(**kwargs)
