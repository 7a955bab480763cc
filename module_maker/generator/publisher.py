"""Copy bundled templates into the user template directory.

Published templates become *user* templates: they show up as ``user_<key>``
in template listings and take precedence over the bundled copy when a bare
key is requested.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable

from module_maker.errors import TemplateNotFoundError
from module_maker.generator.templates import TemplateResolver
from module_maker.utils import ensure_dir


class StubPublisher:
    """Publishes core templates into the user template root."""

    def __init__(self, resolver: TemplateResolver) -> None:
        self.resolver = resolver

    @property
    def destination(self) -> Path:
        return self.resolver.user_root

    def publish(self, templates: Iterable[str]) -> list[Path]:
        """Copy each core template in *templates* to the user template root.

        Existing directories are merged into and existing files overwritten.

        Args:
            templates: Unprefixed core template keys (``crud``).

        Returns:
            The published template directories, in the order given.

        Raises:
            TemplateNotFoundError: If a key is not a bundled template.
        """
        keys = list(templates)
        available = self.resolver.core_templates()
        for key in keys:
            if key not in available:
                raise TemplateNotFoundError(key)

        ensure_dir(self.destination)

        published: list[Path] = []
        for key in keys:
            target = self.destination / key
            shutil.copytree(self.resolver.core_root / key, target, dirs_exist_ok=True)
            published.append(target)
        return published
