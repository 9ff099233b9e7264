"""Command line interface for create-rainbow-app."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ScaffoldConfig, parse_package_managers
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder
from .schema import MaterializationStrategy, RouterStyle

LOGGER = logging.getLogger("create_rainbow_app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-rainbow-app",
        description="Scaffold a Next.js dApp wired up with RainbowKit, wagmi and viem",
    )
    parser.add_argument("name", nargs="?", help="Name of the project directory to create")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project is created (default: current directory)",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in MaterializationStrategy],
        help="How the project is produced: generate with create-next-app, copy a bundled template or clone a repository",
    )
    parser.add_argument(
        "--router",
        choices=[style.value for style in RouterStyle],
        help="Router style to use instead of asking",
    )
    parser.add_argument("--template", help="Bundled template to copy (copy strategy only)")
    parser.add_argument("--repository", help="Template repository to clone (clone strategy only)")
    parser.add_argument(
        "--package-manager",
        dest="package_managers",
        metavar="NAME",
        action="append",
        help="Package manager to probe, in order of preference (repeatable)",
    )
    parser.add_argument("--skip-install", action="store_true", help="Do not install dependencies")
    parser.add_argument("--skip-ui", action="store_true", help="Do not initialise shadcn/ui")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def _build_config(args: argparse.Namespace) -> ScaffoldConfig:
    overrides: dict[str, object] = {
        "strategy": args.strategy,
        "repository_url": args.repository,
    }
    if args.package_managers:
        overrides["package_managers"] = parse_package_managers(args.package_managers)
    if args.skip_ui:
        overrides["init_ui_library"] = False
    return ScaffoldConfig.from_environ(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = _build_config(args)
        scaffolder = ProjectScaffolder(config=config)
        scaffolder.create(
            args.name,
            args.directory,
            router_style=RouterStyle(args.router) if args.router else None,
            template_name=args.template,
            install=not args.skip_install,
        )
    except (ScaffoldError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        LOGGER.error("Aborted.")
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
