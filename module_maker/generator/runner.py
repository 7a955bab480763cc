"""Module generation: stubs in, project files out.

``GenerationRunner`` drives one generation run for a module base name:
enumerate the template's stubs, drop the excluded ones, and for each
remaining stub substitute placeholders in its path and content and write the
result below the project root.

Writes are sequential and unconditionally overwrite existing files.  A read
or write failure aborts the run with :class:`GenerationError`; files written
before the failure stay on disk.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from pydantic import BaseModel, Field, computed_field

from module_maker.config import Config
from module_maker.errors import GenerationError
from module_maker.generator.placeholders import PlaceholderEngine
from module_maker.generator.templates import TemplateDescriptor, TemplateResolver
from module_maker.utils import ensure_dir

# Exclusion entry that matches no stub; "exclude nothing".
EXCLUDE_NONE = "*"


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class GenerationResult(BaseModel):
    """Outcome of generating one module."""

    module_name: str = Field(..., description="Base name the module was generated for")
    template: str = Field(default="", description="Origin-prefixed template key")
    written_paths: list[Path] = Field(default_factory=list, description="Files written, in order")
    status: GenerationStatus = Field(default=GenerationStatus.SUCCESS)
    error: str = Field(default="", description="Error message when the run failed")

    @computed_field  # type: ignore[misc]
    @property
    def file_count(self) -> int:
        """Number of files written."""
        return len(self.written_paths)

    @computed_field  # type: ignore[misc]
    @property
    def succeeded(self) -> bool:
        return self.status is GenerationStatus.SUCCESS


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class GenerationRunner:
    """Generates modules from resolved templates.

    Args:
        resolver: Template resolver used to enumerate stubs.
        target_root: Directory generated paths are relative to.
        namespace_separator: Passed through to the placeholder engine.
        stub_extension: Marker extension stripped from generated paths.
        clock: Returns the moment used for the ``migration`` placeholder.
    """

    def __init__(
        self,
        resolver: TemplateResolver,
        *,
        target_root: Path,
        namespace_separator: str = "\\",
        stub_extension: str = ".stub",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.resolver = resolver
        self.target_root = Path(target_root)
        self.namespace_separator = namespace_separator
        self.stub_extension = stub_extension
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: Config,
        resolver: TemplateResolver | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "GenerationRunner":
        """Build a runner (and, if needed, its resolver) from *config*."""
        resolver = resolver or TemplateResolver(config.core_template_path, config.user_template_path)
        return cls(
            resolver,
            target_root=config.project_root,
            namespace_separator=config.namespace_separator,
            stub_extension=config.stub_extension,
            clock=clock,
        )

    def engine(self, base_name: str) -> PlaceholderEngine:
        """Create a placeholder engine for *base_name* with a fresh timestamp."""
        return PlaceholderEngine(
            base_name,
            namespace_separator=self.namespace_separator,
            stub_extension=self.stub_extension,
            timestamp=self.clock(),
        )

    # -- Public API --------------------------------------------------------

    def preview(self, base_name: str, descriptor: TemplateDescriptor) -> dict[str, str]:
        """Return ``stub relative path -> generated relative path`` for every stub.

        Nothing is written; this feeds stub selection prompts.
        """
        engine = self.engine(base_name)
        return {
            stub.relative_path: engine.apply_to_path(stub.relative_path)
            for stub in self.resolver.list_stub_files(descriptor)
        }

    def run(
        self,
        base_name: str,
        descriptor: TemplateDescriptor,
        excluded: Iterable[str] = (),
    ) -> GenerationResult:
        """Generate *base_name* from *descriptor*.

        Args:
            base_name: Module base name, e.g. ``BlogCategory``.
            descriptor: Resolved template.
            excluded: Stub relative paths to skip.  ``"*"`` matches no stub.

        Returns:
            A successful ``GenerationResult`` listing the written files.

        Raises:
            GenerationError: If a stub cannot be read or a file cannot be
                written.  Earlier writes are not rolled back.
        """
        engine = self.engine(base_name)
        excluded_paths = set(excluded)
        written: list[Path] = []

        for stub in self.resolver.list_stub_files(descriptor):
            if stub.relative_path in excluded_paths:
                continue

            try:
                raw = stub.read_bytes()
            except OSError as exc:
                raise GenerationError(
                    f"Failed to read stub {stub.source}: {exc}", written_paths=written
                ) from exc

            real_path = engine.apply_to_path(stub.relative_path)
            content = engine.apply_to_content(raw, real_path)
            target = self.target_root / real_path

            try:
                ensure_dir(target.parent)
                target.write_bytes(content)
            except OSError as exc:
                raise GenerationError(
                    f"Failed to write {target}: {exc}", written_paths=written
                ) from exc

            written.append(target)

        return GenerationResult(
            module_name=base_name,
            template=descriptor.prefixed_key,
            written_paths=written,
        )
