"""Scaffold Web3 dApps built on Next.js, RainbowKit, wagmi and viem.

The package probes for a JavaScript package manager, produces a project
directory (``create-next-app``, a bundled template or a cloned repository),
installs the wallet libraries and writes the Web3 starter files for either
the Pages or the App router.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ScaffoldConfig
from .errors import CommandError, PreconditionError, ScaffoldError, TemplateWriteError
from .naming import slugify, validate_project_name
from .scaffold import ProjectScaffolder
from .schema import (
    MaterializationStrategy,
    PackageManagerChoice,
    PackageManagerId,
    ProjectRequest,
    RouterStyle,
)
from .template import TemplateFileSet, TemplateRenderer, TemplateRenderingError

__all__ = [
    "CommandError",
    "MaterializationStrategy",
    "PackageManagerChoice",
    "PackageManagerId",
    "PreconditionError",
    "ProjectRequest",
    "ProjectScaffolder",
    "RouterStyle",
    "ScaffoldConfig",
    "ScaffoldError",
    "TemplateFileSet",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateWriteError",
    "slugify",
    "validate_project_name",
]
