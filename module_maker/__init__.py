"""module-maker -- scaffold framework modules from stub templates.

Stub templates are directory trees whose file names and contents contain
placeholders for a module base name (``__Module__``, ``modules-``,
``__Namespace__``, ...).  Generating a module copies a template into the
project with every placeholder replaced by the matching case variant of the
name.

Quick usage::

    from module_maker import Config, GenerationRunner

    config = Config(project_root=Path("my-app"))
    runner = GenerationRunner.from_config(config)
    runner.run("BlogCategory", runner.resolver.resolve("crud"))
"""

__version__ = "0.1.0"

from module_maker.config import Config
from module_maker.generator import GenerationResult, GenerationRunner, TemplateResolver
from module_maker.naming import CaseVariant, variant, variants

__all__ = [
    "CaseVariant",
    "Config",
    "GenerationResult",
    "GenerationRunner",
    "TemplateResolver",
    "__version__",
    "variant",
    "variants",
]
