"""Template discovery for module generation.

A template is a directory of stub files.  Templates come from two origins:
the *core* templates bundled with module-maker and the *user* templates a
project keeps in its configured template directory (usually populated with
``module-maker publish-templates``).  Listing keys are prefixed with the
origin (``core_crud``, ``user_crud``) so both can be offered side by side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from module_maker.errors import TemplateNotFoundError
from module_maker.naming import headline


class TemplateOrigin(str, Enum):
    """Where a template directory lives."""

    CORE = "core"
    USER = "user"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class TemplateDescriptor:
    """A resolved template directory."""

    origin: TemplateOrigin
    key: str
    path: Path

    @property
    def prefixed_key(self) -> str:
        """The origin-prefixed key used in listings (``core_crud``)."""
        return f"{self.origin.value}_{self.key}"


@dataclass(frozen=True)
class StubFile:
    """A single stub inside a template, addressed by its relative path."""

    relative_path: str
    source: Path

    def read_bytes(self) -> bytes:
        return self.source.read_bytes()


def _strip_origin_prefix(template_key: str) -> tuple[TemplateOrigin | None, str]:
    for origin in TemplateOrigin:
        prefix = f"{origin.value}_"
        if template_key.startswith(prefix):
            return origin, template_key[len(prefix):]
    return None, template_key


def _template_dirs(root: Path) -> list[Path]:
    if not root.is_dir():
        return []
    return sorted(
        (entry for entry in root.iterdir() if entry.is_dir() and not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


class TemplateResolver:
    """Locates templates in the core and user template roots.

    Args:
        core_root: Directory whose subdirectories are the bundled templates.
        user_root: Directory whose subdirectories are the user templates.  It
            may not exist, in which case no user templates are offered.
    """

    def __init__(self, core_root: Path, user_root: Path) -> None:
        self.core_root = Path(core_root)
        self.user_root = Path(user_root)

    def _root(self, origin: TemplateOrigin) -> Path:
        return self.core_root if origin is TemplateOrigin.CORE else self.user_root

    # -- Listing -----------------------------------------------------------

    def list_templates(self) -> dict[str, str]:
        """Return ``prefixed key -> label`` for every available template.

        Core templates come first, then user templates, each sorted by key.
        """
        templates: dict[str, str] = {}
        for origin in TemplateOrigin:
            for directory in _template_dirs(self._root(origin)):
                templates[f"{origin.value}_{directory.name}"] = (
                    f"{headline(directory.name)} ({origin.label})"
                )
        return templates

    def core_templates(self) -> dict[str, str]:
        """Return ``key -> label`` for the bundled templates, unprefixed."""
        return {
            directory.name: f"{headline(directory.name)} ({directory.name})"
            for directory in _template_dirs(self.core_root)
        }

    # -- Resolution --------------------------------------------------------

    def resolve(self, template_key: str) -> TemplateDescriptor:
        """Resolve *template_key* to a template directory.

        The key may carry an origin prefix (``core_crud``/``user_crud``).  A
        bare key (``crud``) prefers the user template when both origins
        provide one.

        Raises:
            TemplateNotFoundError: If no origin provides the template.
        """
        origin, key = _strip_origin_prefix(template_key)
        candidates = [origin] if origin else [TemplateOrigin.USER, TemplateOrigin.CORE]

        if key:
            for candidate in candidates:
                path = self._root(candidate) / key
                if path.is_dir():
                    return TemplateDescriptor(origin=candidate, key=key, path=path)

        raise TemplateNotFoundError(template_key)

    def list_stub_files(self, descriptor: TemplateDescriptor) -> list[StubFile]:
        """Return every stub file of *descriptor*, sorted by relative path.

        Hidden files and anything inside hidden directories are skipped.
        """
        stubs: list[StubFile] = []
        for source in descriptor.path.rglob("*"):
            relative = source.relative_to(descriptor.path)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if not source.is_file():
                continue
            stubs.append(StubFile(relative_path=relative.as_posix(), source=source))
        return sorted(stubs, key=lambda stub: stub.relative_path)
