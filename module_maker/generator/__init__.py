"""module-maker generator -- turns stub templates into project files.

Quick usage::

    from pathlib import Path
    from module_maker.generator import GenerationRunner, TemplateResolver

    resolver = TemplateResolver(core_root, Path("stubs/module-maker"))
    runner = GenerationRunner(resolver, target_root=Path("."))
    result = runner.run("BlogCategory", resolver.resolve("crud"))
"""

from module_maker.generator.blueprint import (
    Blueprint,
    BlueprintEntry,
    BlueprintReport,
    BlueprintRunner,
    load_blueprint,
)
from module_maker.generator.placeholders import ContextToken, PlaceholderEngine
from module_maker.generator.publisher import StubPublisher
from module_maker.generator.runner import (
    EXCLUDE_NONE,
    GenerationResult,
    GenerationRunner,
    GenerationStatus,
)
from module_maker.generator.templates import (
    StubFile,
    TemplateDescriptor,
    TemplateOrigin,
    TemplateResolver,
)

__all__ = [
    "Blueprint",
    "BlueprintEntry",
    "BlueprintReport",
    "BlueprintRunner",
    "ContextToken",
    "EXCLUDE_NONE",
    "GenerationResult",
    "GenerationRunner",
    "GenerationStatus",
    "PlaceholderEngine",
    "StubFile",
    "StubPublisher",
    "TemplateDescriptor",
    "TemplateOrigin",
    "TemplateResolver",
    "load_blueprint",
]
