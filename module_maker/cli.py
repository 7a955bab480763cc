"""Command line interface for module-maker.

Usage::

    module-maker generate BlogCategory --template crud --accept-risk
    module-maker generate                       # asks for everything
    module-maker publish-templates
    module-maker run-blueprint --accept-risk
    module-maker list-templates
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from module_maker import __version__
from module_maker.commands import (
    FAILURE,
    BlueprintCommand,
    GenerateCommand,
    ListTemplatesCommand,
    PublishCommand,
)
from module_maker.config import Config
from module_maker.prompts import ConsoleInputProvider, InputProvider
from module_maker.utils import console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="module-maker",
        description="Generate framework modules from stub templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  module-maker generate BlogCategory --template crud\n"
            "  module-maker generate Post --template user_crud --exclude-stub routes/modules-.php.stub\n"
            "  module-maker run-blueprint --accept-risk\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Project directory generated files are written to (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file (default: built from MODULE_MAKER_* environment variables)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate",
        help="create a new module; overwrites existing files at the generated paths",
    )
    generate.add_argument("module_name", nargs="?", help="Module name in StudlyCase, e.g. BlogCategory")
    generate.add_argument("--template", default=None, help="Template key (core_x, user_x or x)")
    generate.add_argument(
        "--exclude-stub",
        dest="exclude_stubs",
        action="append",
        default=[],
        metavar="RELPATH",
        help="Stub path to skip; repeatable. '*' skips nothing. Omit to choose interactively",
    )
    generate.add_argument("--accept-risk", action="store_true", help="Do not ask before overwriting")

    publish = subparsers.add_parser(
        "publish-templates", help="copy bundled templates into the user template directory"
    )
    publish.add_argument(
        "--template",
        dest="templates",
        action="append",
        default=[],
        metavar="KEY",
        help="Template to publish; repeatable. Omit to choose interactively",
    )

    blueprint = subparsers.add_parser(
        "run-blueprint", help="generate every module declared in module-blueprint.yml"
    )
    blueprint.add_argument("--accept-risk", action="store_true", help="Do not ask before overwriting")

    subparsers.add_parser("list-templates", help="list the available templates")

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from ``--config`` or the environment."""
    config = Config.load(args.config) if args.config else Config.from_env()
    if args.project_root is not None:
        config = config.model_copy(update={"project_root": args.project_root})
    return config


def main(argv: Sequence[str] | None = None, inputs: InputProvider | None = None) -> int:
    """CLI entry point for ``module-maker`` and ``python -m module_maker``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(exc))}")
        return FAILURE

    inputs = inputs or ConsoleInputProvider()

    if args.command == "generate":
        return GenerateCommand(config, inputs).handle(
            module_name=args.module_name,
            template=args.template,
            exclude_stubs=args.exclude_stubs,
            accept_risk=args.accept_risk,
        )
    if args.command == "publish-templates":
        return PublishCommand(config, inputs).handle(args.templates)
    if args.command == "run-blueprint":
        return BlueprintCommand(config, inputs).handle(accept_risk=args.accept_risk)
    if args.command == "list-templates":
        return ListTemplatesCommand(config).handle()

    parser.error(f"unknown command {args.command}")
    return FAILURE


def run() -> None:
    """Console-script wrapper that exits with :func:`main`'s status."""
    raise SystemExit(main())
