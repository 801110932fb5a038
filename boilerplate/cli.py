"""Command-line entry point.

Usage::

    boilerplate                     # scaffold into the current directory
    boilerplate ~/code --layout basic
    boilerplate ~/code --answers answers.yml --no-install
    python -m boilerplate --list-layouts
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from boilerplate.config import Config
from boilerplate.prompts import collect_answers, load_answers
from boilerplate.scaffolder import (
    LAYOUTS,
    DependencyInstaller,
    ProjectScaffolder,
    ScaffoldError,
    ScaffoldRequest,
    ScaffoldResult,
    TemplateCatalog,
    get_layout,
)
from boilerplate.utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
)


async def scaffold(
    request: ScaffoldRequest,
    config: Config,
    catalog: TemplateCatalog | None = None,
) -> ScaffoldResult | None:
    """Generate the project, then install its dependencies.

    Installation is dispatched only after every file has been written and
    its outcome never affects the generated tree.

    Returns:
        The scaffold result, or ``None`` if generation failed.
    """
    scaffolder = ProjectScaffolder(catalog=catalog)
    try:
        result = await scaffolder.generate(request)
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return None

    print_summary_table(
        {
            "Project": str(result.project_path),
            "Layout": request.layout,
            "Files written": str(len(result.written_files)),
            "Routes": str(len(result.routes)),
            "Packages": ", ".join(result.packages) or "-",
        },
        title="Scaffold summary",
    )
    print_success(f"Project created at {escape(str(result.project_path))}")

    installer = DependencyInstaller(config.install)
    install_task = installer.dispatch(result.project_path, result.packages, result.dev_packages)
    await install_task
    return result


def _build_config(args: argparse.Namespace) -> Config:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.layout:
        config.layout = args.layout
    if args.catalog:
        config.catalog_path = Path(args.catalog)
    if args.no_install:
        config.install.skip = True
    return config


def _print_layouts() -> None:
    for name, layout in sorted(LAYOUTS.items()):
        console.print(f"[bold]{name}[/bold]  {layout.description}")
        console.print(f"  [dim]{', '.join(layout.directories)}[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boilerplate",
        description="Scaffold an Express web-app skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  boilerplate\n"
            "  boilerplate ~/code --layout basic\n"
            "  boilerplate ~/code --answers answers.yml --no-install\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--layout", "-l",
        choices=sorted(LAYOUTS),
        default=None,
        help="Project layout (default: fullstack, or $BP_LAYOUT)",
    )
    parser.add_argument(
        "--answers", "-a",
        default=None,
        help="YAML/JSON answers file; skips the interactive questions",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="YAML/JSON starter-content catalog (default: bundled catalog)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: built from BP_* environment variables)",
    )
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Do not run the package manager after scaffolding",
    )
    parser.add_argument(
        "--list-layouts",
        action="store_true",
        help="List the available layouts and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``boilerplate`` / ``python -m boilerplate``."""
    args = build_parser().parse_args(argv)

    if args.list_layouts:
        _print_layouts()
        return

    try:
        config = _build_config(args)
        layout = get_layout(config.layout)
        catalog = (
            TemplateCatalog.from_file(config.catalog_path)
            if config.catalog_path
            else TemplateCatalog.default()
        )
    except (OSError, ValueError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return

    print_header(f"New {layout.name} project")

    answers: dict[str, Any]
    try:
        answers = load_answers(args.answers) if args.answers else collect_answers(layout)
    except (OSError, ValueError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return

    target_dir = Path(args.target_dir) if args.target_dir else Path.cwd()
    try:
        request = ScaffoldRequest.from_answers(answers, layout, target_dir)
    except ValidationError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return

    asyncio.run(scaffold(request, config, catalog))


if __name__ == "__main__":
    main()
