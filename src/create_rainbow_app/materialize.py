"""Produce the project directory before templates are written into it."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import CommandError, PreconditionError
from .process import CommandRunner
from .schema import PackageManagerChoice, ProjectRequest, RouterStyle

LOGGER = logging.getLogger(__name__)

VCS_METADATA_DIR = ".git"


def list_templates(templates_root: Path) -> list[str]:
    """Return the names of bundled templates, sorted."""

    if not templates_root.is_dir():
        return []
    return sorted(p.name for p in templates_root.iterdir() if p.is_dir())


def copy_template(request: ProjectRequest, templates_root: Path, template_name: str) -> Path:
    """Recursively copy a bundled template into ``request.target_path``.

    A partially copied directory is left in place when copying fails.
    """

    template_path = templates_root / template_name
    if not template_path.is_dir():
        raise PreconditionError(f'Template "{template_name}" does not exist.')

    try:
        shutil.copytree(template_path, request.target_path, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise CommandError("copy template", str(exc)) from exc

    LOGGER.info('Template "%s" copied to %s', template_name, request.target_path)
    return request.target_path


def remove_vcs_metadata(target_path: Path) -> bool:
    """Delete ``.git`` under ``target_path``; failures are only logged."""

    metadata = target_path / VCS_METADATA_DIR
    if not metadata.exists():
        return True
    try:
        shutil.rmtree(metadata)
    except OSError as exc:
        LOGGER.warning("Could not remove %s: %s", metadata, exc)
        return False
    return True


def clone_template(request: ProjectRequest, runner: CommandRunner, repository_url: str) -> Path:
    """Clone ``repository_url`` into the target and strip its git metadata."""

    LOGGER.info("Cloning %s...", repository_url)
    runner.run(
        ["git", "clone", "--depth", "1", repository_url, request.name],
        cwd=request.target_path.parent,
        step="Failed to clone template repository",
    )
    remove_vcs_metadata(request.target_path)
    return request.target_path


def generate_next_app(
    request: ProjectRequest, runner: CommandRunner, manager: PackageManagerChoice
) -> Path:
    """Run ``create-next-app`` with TypeScript, Tailwind and a ``src`` dir."""

    LOGGER.info("Creating Next.js app with TypeScript and Tailwind CSS...")
    args = [
        *manager.exec_command,
        "create-next-app@latest",
        request.name,
        "--typescript",
        "--react-compiler",
        "--tailwind",
        "--eslint",
        "--src-dir",
    ]
    if request.router_style is RouterStyle.APP:
        args.append("--app")
    args.append("--import-alias=@/*")

    runner.run(args, cwd=request.target_path.parent, step="Failed to create Next.js app")
    return request.target_path


__all__ = [
    "VCS_METADATA_DIR",
    "clone_template",
    "copy_template",
    "generate_next_app",
    "list_templates",
    "remove_vcs_metadata",
]
