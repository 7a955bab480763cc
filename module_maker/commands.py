"""The module-maker commands.

Each command wires configuration, an input provider and the generator
components together and reports progress on the console.  ``handle`` returns
the process exit status: ``0`` on success, ``1`` on failure or cancellation.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.markup import escape

from module_maker.config import Config
from module_maker.errors import ModuleMakerError, UserCancelledError
from module_maker.generator.blueprint import BlueprintReport, BlueprintRunner, load_blueprint
from module_maker.generator.publisher import StubPublisher
from module_maker.generator.runner import GenerationResult, GenerationRunner
from module_maker.generator.templates import TemplateDescriptor, TemplateResolver
from module_maker.prompts import InputProvider
from module_maker.utils import (
    console,
    print_alert,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

SUCCESS = 0
FAILURE = 1

_RISK_WARNINGS = (
    "This command will overwrite if there are files in the project that use the same path as the template stubs.",
    "Please make sure to backup your files before proceeding.",
    "If you don't want to see this message again, please run the command with the --accept-risk option.",
)


def confirm_risk(inputs: InputProvider, accept_risk: bool) -> None:
    """Warn about overwriting files and ask to proceed unless *accept_risk*.

    Raises:
        UserCancelledError: If the user declines.
    """
    if accept_risk:
        return
    for warning in _RISK_WARNINGS:
        print_warning(warning)
    if not inputs.confirm("Do you want to proceed?"):
        raise UserCancelledError()


def _written_table(result: GenerationResult) -> dict[str, str]:
    return {str(index): str(path) for index, path in enumerate(result.written_paths, start=1)}


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class GenerateCommand:
    """Generate a single module from a template."""

    def __init__(
        self,
        config: Config,
        inputs: InputProvider,
        runner: GenerationRunner | None = None,
    ) -> None:
        self.config = config
        self.inputs = inputs
        self.runner = runner or GenerationRunner.from_config(config)

    @property
    def resolver(self) -> TemplateResolver:
        return self.runner.resolver

    def _prepare_template(self, template: str | None) -> TemplateDescriptor:
        if not template:
            template = self.inputs.select_template(self.resolver.list_templates())
        return self.resolver.resolve(template)

    def _prepare_exclusions(
        self, module_name: str, descriptor: TemplateDescriptor, exclude_stubs: Sequence[str]
    ) -> list[str]:
        if exclude_stubs:
            return list(exclude_stubs)

        candidates = self.runner.preview(module_name, descriptor)
        options = {stub: f"-> {real}" for stub, real in candidates.items()}
        selected = set(self.inputs.select_stubs(options))
        return [stub for stub in candidates if stub not in selected]

    def handle(
        self,
        module_name: str | None = None,
        template: str | None = None,
        exclude_stubs: Sequence[str] = (),
        accept_risk: bool = False,
    ) -> int:
        """Run the command.

        Args:
            module_name: Module base name; asked for when missing.
            template: Template key; a selection prompt is shown when missing.
            exclude_stubs: Stub relative paths to skip.  When empty the user
                selects the stubs to generate (all by default).
            accept_risk: Skip the overwrite confirmation.
        """
        try:
            name = module_name or self.inputs.ask_module_name()
            confirm_risk(self.inputs, accept_risk)
            descriptor = self._prepare_template(template)
            excluded = self._prepare_exclusions(name, descriptor, exclude_stubs)
            result = self.runner.run(name, descriptor, excluded)
        except UserCancelledError as exc:
            print_info(str(exc))
            return FAILURE
        except (ModuleMakerError, ValueError) as exc:
            print_error(f"Error: {exc}")
            return FAILURE

        if result.written_paths:
            print_summary_table(_written_table(result), title=f"Files written ({result.file_count})")
        print_success(f"Module '{name}' created successfully!")
        return SUCCESS


# ---------------------------------------------------------------------------
# run-blueprint
# ---------------------------------------------------------------------------


class BlueprintCommand:
    """Generate every module declared in the project's blueprint file."""

    def __init__(
        self,
        config: Config,
        inputs: InputProvider,
        runner: GenerationRunner | None = None,
    ) -> None:
        self.config = config
        self.inputs = inputs
        self.runner = runner or GenerationRunner.from_config(config)
        self.report: BlueprintReport | None = None

    @staticmethod
    def _report_result(result: GenerationResult) -> None:
        if result.succeeded:
            print_success(
                f"Module '{result.module_name}' created successfully! ({result.file_count} files)"
            )
        else:
            print_error(f"Module '{result.module_name}' failed: {result.error}")

    def handle(self, accept_risk: bool = False) -> int:
        try:
            confirm_risk(self.inputs, accept_risk)
            blueprint = load_blueprint(self.config.blueprint_path)
        except UserCancelledError as exc:
            print_info(str(exc))
            return FAILURE
        except ModuleMakerError as exc:
            print_error(f"Error: {exc}")
            return FAILURE

        self.report = BlueprintRunner(self.runner, on_result=self._report_result).run(blueprint)

        print_alert(f"Blueprint has been executed successfully for {self.report.total} modules.")
        if self.report.failed:
            print_warning(f"{self.report.failed} of {self.report.total} modules failed.")
        return SUCCESS


# ---------------------------------------------------------------------------
# publish-templates
# ---------------------------------------------------------------------------


class PublishCommand:
    """Copy bundled templates into the user template directory."""

    def __init__(
        self,
        config: Config,
        inputs: InputProvider,
        resolver: TemplateResolver | None = None,
    ) -> None:
        self.config = config
        self.inputs = inputs
        self.resolver = resolver or TemplateResolver(
            config.core_template_path, config.user_template_path
        )
        self.publisher = StubPublisher(self.resolver)

    def handle(self, templates: Iterable[str] = ()) -> int:
        keys = [key.removeprefix("core_") for key in templates]
        try:
            if not keys:
                keys = self.inputs.select_templates(self.resolver.core_templates())
            self.publisher.publish(keys)
        except UserCancelledError as exc:
            print_info(str(exc))
            return FAILURE
        except ModuleMakerError as exc:
            print_error(f"Error: {exc}")
            return FAILURE

        print_success(f"Stub templates published to {self.publisher.destination} folder successfully")
        print_info("You can now customize the stub templates as you wish.")
        return SUCCESS


# ---------------------------------------------------------------------------
# list-templates
# ---------------------------------------------------------------------------


class ListTemplatesCommand:
    """Print every template available to ``generate``."""

    def __init__(self, config: Config, resolver: TemplateResolver | None = None) -> None:
        self.config = config
        self.resolver = resolver or TemplateResolver(
            config.core_template_path, config.user_template_path
        )

    def handle(self) -> int:
        templates = self.resolver.list_templates()
        if not templates:
            print_warning("No templates found.")
            return SUCCESS
        print_summary_table(templates, title="Available templates")
        if not self.resolver.user_root.is_dir():
            console.print(f"[dim]No user templates at {escape(str(self.resolver.user_root))}[/dim]")
        return SUCCESS
