"""Placeholder substitution for stub paths and stub contents.

A stub refers to the module being generated through placeholders:

* the sixteen case variants from :class:`~module_maker.naming.CaseVariant`,
* ``Namespace`` -- the directories of the generated file, each with an
  upper-cased first letter, joined by the namespace separator,
* ``migration`` -- a ``YYYY_MM_DD_HHMMSS`` timestamp.

Contents only recognise the wrapped form ``__<identifier>__``.  Paths
recognise the wrapped form of every placeholder and, for the case variants
only, the bare identifier too (``Models/Module.php.stub``).

Substitution is a single left-to-right regex pass, so replaced text is never
scanned again.  Where several tokens match at the same position the longest
literal wins; tokens of equal length keep declaration order.  The resulting
priority is exposed by :func:`placeholder_order`.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import TypeVar

from module_maker.naming import CaseVariant, variants

__all__ = [
    "ContextToken",
    "MIGRATION_FORMAT",
    "PlaceholderEngine",
    "path_to_namespace",
    "placeholder_order",
    "wrap",
]

MIGRATION_FORMAT = "%Y_%m_%d_%H%M%S"

_Text = TypeVar("_Text", str, bytes)


class ContextToken(str, Enum):
    """Placeholders whose value depends on context rather than the name."""

    NAMESPACE = "Namespace"
    MIGRATION = "migration"


def wrap(identifier: str) -> str:
    """Return the wrapped placeholder form of *identifier* (``__Module__``)."""
    return f"__{identifier}__"


def _by_priority(tokens: list[str]) -> list[str]:
    # sorted() is stable, so equal-length tokens keep their input order
    return sorted(tokens, key=len, reverse=True)


def _identifiers() -> list[str]:
    return [member.value for member in CaseVariant] + [member.value for member in ContextToken]


def placeholder_order() -> list[str]:
    """Return every wrapped placeholder in substitution priority order."""
    return _by_priority([wrap(identifier) for identifier in _identifiers()])


def path_to_namespace(path: str, separator: str = "\\") -> str:
    """Derive a namespace from the directories of *path*.

    Examples::

        path_to_namespace("Models/Module.php.stub") -> "Models"
        path_to_namespace("app/Models/Post.php") -> "App\\\\Models"
        path_to_namespace("Module.php.stub") -> ""
    """
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        return ""
    return separator.join(segment[:1].upper() + segment[1:] for segment in segments[:-1])


class PlaceholderEngine:
    """Fills placeholders for one module base name.

    The migration timestamp is fixed when the engine is created, so every
    file generated through one engine shares the same timestamp.

    Args:
        base_name: Module base name, e.g. ``BlogCategory``.
        namespace_separator: Joins namespace segments (``\\`` by default).
        stub_extension: Marker extension stripped from generated paths.
        timestamp: Moment used for the ``migration`` placeholder; defaults
            to now.
    """

    def __init__(
        self,
        base_name: str,
        *,
        namespace_separator: str = "\\",
        stub_extension: str = ".stub",
        timestamp: datetime | None = None,
    ) -> None:
        self.base_name = base_name
        self.namespace_separator = namespace_separator
        self.stub_extension = stub_extension
        self.timestamp = timestamp or datetime.now()
        self.variants = variants(base_name)
        self.migration = self.timestamp.strftime(MIGRATION_FORMAT)

        wrapped = {wrap(identifier): identifier for identifier in _identifiers()}
        bare = {member.value: member.value for member in CaseVariant}

        self._content_tokens = wrapped
        self._path_tokens = {**wrapped, **bare}
        self._content_pattern = _compile(list(wrapped))
        self._content_pattern_bytes = re.compile(self._content_pattern.pattern.encode("utf-8"))
        self._path_pattern = _compile(list(wrapped) + list(bare))

    # -- Parameters --------------------------------------------------------

    def build_parameters(self, relative_path: str = "") -> dict[str, str]:
        """Return the identifier -> value mapping for a file at *relative_path*.

        ``Namespace`` depends on *relative_path*; every other value is the
        same for all files of this engine.
        """
        parameters = {member.value: value for member, value in self.variants.items()}
        parameters[ContextToken.NAMESPACE.value] = path_to_namespace(
            relative_path, self.namespace_separator
        )
        parameters[ContextToken.MIGRATION.value] = self.migration
        return parameters

    # -- Substitution ------------------------------------------------------

    def apply_to_path(self, raw_path: str) -> str:
        """Substitute placeholders in a stub's relative path.

        ``Namespace`` resolves to an empty string in paths.  Exactly one
        trailing stub extension is removed afterwards.
        """
        parameters = self.build_parameters()
        real_path = self._path_pattern.sub(
            lambda m: parameters[self._path_tokens[m.group(0)]], raw_path
        )
        if real_path.endswith(self.stub_extension):
            real_path = real_path[: -len(self.stub_extension)]
        return real_path

    def apply_to_content(self, raw: _Text, real_path: str) -> _Text:
        """Substitute wrapped placeholders in stub content.

        Args:
            raw: Stub content, as text or raw bytes.  Bytes are matched and
                returned as bytes so non-UTF-8 stubs pass through.
            real_path: The generated file's relative path, used to derive
                ``Namespace``.
        """
        parameters = self.build_parameters(real_path)
        if isinstance(raw, bytes):
            return self._content_pattern_bytes.sub(
                lambda m: parameters[self._content_tokens[m.group(0).decode("utf-8")]].encode("utf-8"),
                raw,
            )
        return self._content_pattern.sub(
            lambda m: parameters[self._content_tokens[m.group(0)]], raw
        )


def _compile(tokens: list[str]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(token) for token in _by_priority(tokens)))
