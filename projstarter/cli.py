"""Command-line entry point for ``proj``.

Usage::

    proj start go myapp
    proj start go github.com/user/myapp -o ~/code
    proj start vite-elm my-elm-app --dry-run
    python -m projstarter start go myapp
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from projstarter import __version__
from projstarter.config import Config
from projstarter.scaffolder import GoGenerator, ProjectGenerator, ScaffoldError, ViteElmGenerator
from projstarter.utils import (
    print_error,
    print_file_table,
    print_info,
    print_next_steps,
    print_success,
    print_warning,
)

Registry = dict[str, type[ProjectGenerator]]


def build_registry() -> Registry:
    """Map ``proj start`` subcommands to their generator classes."""
    return {
        "go": GoGenerator,
        "vite-elm": ViteElmGenerator,
    }


def build_parser(registry: Registry) -> argparse.ArgumentParser:
    """Build the argument parser with one ``start`` subcommand per registry entry."""
    parser = argparse.ArgumentParser(
        prog="proj",
        description="proj helps you quickly create new projects with proper structure and boilerplate code.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"proj version {__version__}",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    start = commands.add_parser(
        "start",
        help="Start a new project",
        description="Create a new project with proper structure and boilerplate code.",
    )
    project_types = start.add_subparsers(dest="project_type", metavar="TYPE", required=True)

    for key, generator_cls in registry.items():
        sub = project_types.add_parser(
            key,
            help=f"Create a new {generator_cls.label} project",
            description=(generator_cls.__doc__ or "").strip() or None,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=f"Example:\n  proj start {key} myapp\n",
        )
        sub.add_argument("name", help="Project name (Go also accepts a full module path)")
        sub.add_argument(
            "--output", "-o",
            default=None,
            help="Directory to create the project in (default: current directory)",
        )
        sub.add_argument(
            "--dry-run",
            action="store_true",
            help="List the files that would be created without writing anything",
        )
        sub.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only report errors",
        )
        sub.set_defaults(generator_cls=generator_cls)

    return parser


def run_start(
    generator_cls: type[ProjectGenerator],
    name: str,
    config: Config,
    *,
    dry_run: bool = False,
) -> int:
    """Generate (or preview) one project.  Returns the process exit status."""
    generator = generator_cls(output_dir=config.output_dir)

    try:
        parsed = generator.parse(name)
        if dry_run:
            plan = generator.plan(name)
            if generator.target_exists(parsed):
                print_warning(f"'{parsed.directory_name}' already exists; generate would fail.")
            rows = [
                (f"{parsed.directory_name}/{spec.relative_path}", len(spec.content.encode("utf-8")))
                for spec in plan.files
            ]
            print_file_table(rows, title=f"{generator.label} project (dry run)")
            return 0

        if not config.quiet:
            print_info(f"Creating {generator.label} project {name}")
        root = generator.generate(name)
    except ScaffoldError as exc:
        print_error(f"failed to generate project: {exc}")
        return 1

    if not config.quiet:
        print_success(f"{generator.label} project created successfully at {root}")
        print_next_steps(generator.next_steps(parsed))
    return 0


def main(argv: Sequence[str] | None = None, registry: Registry | None = None) -> int:
    """CLI entry point for ``proj``."""
    if registry is None:
        registry = build_registry()
    args = build_parser(registry).parse_args(argv)

    config = Config.from_env()
    if args.output is not None:
        config.output_dir = Path(args.output)
    if args.quiet:
        config.quiet = True

    return run_start(args.generator_cls, args.name, config, dry_run=args.dry_run)


if __name__ == "__main__":
    raise SystemExit(main())
