"""Install the Web3 libraries and optional UI tooling into the project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .process import CommandRunner
from .schema import PackageManagerChoice

LOGGER = logging.getLogger(__name__)


def install_dependencies(
    runner: CommandRunner,
    manager: PackageManagerChoice,
    project_dir: Path,
    packages: Sequence[str],
) -> None:
    """Add ``packages`` with a single invocation of the package manager."""

    LOGGER.info("Installing packages...")
    runner.run(
        [*manager.add_command, *packages],
        cwd=project_dir,
        step="Failed to install dependencies",
    )


def setup_shadcn_ui(runner: CommandRunner, manager: PackageManagerChoice, project_dir: Path) -> None:
    """Initialise shadcn/ui and add its button component."""

    LOGGER.info("Initializing shadcn/ui...")
    step = "Failed to setup shadcn/ui"
    runner.run([*manager.exec_command, "shadcn@latest", "init"], cwd=project_dir, step=step)
    runner.run([*manager.exec_command, "shadcn@latest", "add", "button"], cwd=project_dir, step=step)


__all__ = ["install_dependencies", "setup_shadcn_ui"]
