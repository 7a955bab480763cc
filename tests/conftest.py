"""Shared pytest fixtures for the module-maker test suite.

Provides reusable fixtures for:
- Temporary core/user template roots populated with small stub trees
- A temporary target project directory
- A resolver and a generation runner with a frozen clock
- Pre-supplied input providers
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from module_maker.config import Config
from module_maker.generator import GenerationRunner, TemplateResolver
from module_maker.prompts import PresetInputProvider

FIXED_TIME = datetime(2026, 1, 15, 10, 30, 5)
FIXED_MIGRATION = "2026_01_15_103005"


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------


def write_template(root: Path, name: str, files: dict[str, str | bytes]) -> Path:
    """Create template *name* under *root* with ``relative path -> content`` files."""
    template_dir = root / name
    for relative_path, content in files.items():
        path = template_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    template_dir.mkdir(parents=True, exist_ok=True)
    return template_dir


SAMPLE_FILES: dict[str, str] = {
    "Models/Module.php.stub": "class __Module__ {}",
    "modules-/route.php.stub": "Route::get('/__modules-__');",
    "Module.php.stub": "namespace '__Namespace__';",
}


@pytest.fixture
def template_factory() -> Callable[..., Path]:
    """Expose :func:`write_template` to tests."""
    return write_template


@pytest.fixture
def core_root(tmp_path: Path) -> Path:
    """Core template root with a ``sample`` and an ``api-resource`` template."""
    root = tmp_path / "core"
    write_template(root, "sample", SAMPLE_FILES)
    write_template(root, "api-resource", {"Http/ModuleResource.php.stub": "class __Module__Resource {}"})
    return root


@pytest.fixture
def user_root(tmp_path: Path) -> Path:
    """User template root path.  Not created; tests create it when needed."""
    return tmp_path / "project" / "stubs" / "module-maker"


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Target project directory generated files are written to."""
    directory = tmp_path / "project"
    directory.mkdir(exist_ok=True)
    return directory


@pytest.fixture
def config(project_dir: Path, core_root: Path) -> Config:
    """Configuration pointing at the temporary project and core root."""
    return Config(project_root=project_dir, core_template_dir=core_root)


@pytest.fixture
def resolver(core_root: Path, user_root: Path) -> TemplateResolver:
    return TemplateResolver(core_root, user_root)


@pytest.fixture
def runner(resolver: TemplateResolver, project_dir: Path) -> GenerationRunner:
    """Generation runner writing into ``project_dir`` with a frozen clock."""
    return GenerationRunner(resolver, target_root=project_dir, clock=lambda: FIXED_TIME)


@pytest.fixture
def accepting_inputs() -> PresetInputProvider:
    """Input provider that confirms and otherwise answers nothing."""
    return PresetInputProvider(confirmation=True)


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def fixed_migration() -> str:
    """``migration`` placeholder value produced by :data:`FIXED_TIME`."""
    return FIXED_MIGRATION
