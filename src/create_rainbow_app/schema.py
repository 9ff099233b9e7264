"""Data records exchanged between the scaffolding stages."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import validate_project_name


class RouterStyle(str, Enum):
    """Next.js routing convention used by the generated project."""

    PAGES = "pages"
    APP = "app"

    @property
    def label(self) -> str:
        return "App Router" if self is RouterStyle.APP else "Pages Router"


class MaterializationStrategy(str, Enum):
    """How the target directory gets its initial contents."""

    COPY = "copy"
    CLONE = "clone"
    GENERATE = "generate"


class PackageManagerId(str, Enum):
    BUN = "bun"
    YARN = "yarn"
    NPM = "npm"


class PackageManagerChoice(BaseModel):
    """Commands used to drive one JavaScript package manager."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: PackageManagerId = Field(..., description="Identifier of the package manager.")
    version_command: Tuple[str, ...] = Field(..., description="Lightweight command used to probe availability.")
    install_command: Tuple[str, ...] = Field(..., description="Installs declared dependencies; the installer uses add_command, which installs them too.")
    add_command: Tuple[str, ...] = Field(..., description="Adds new libraries to the project.")
    exec_command: Tuple[str, ...] = Field(..., description="Runs a package binary without installing it.")
    dev_command: Tuple[str, ...] = Field(..., description="Starts the development server.")
    install_url: str = Field(..., description="Where users can install the package manager.")

    @property
    def dev_hint(self) -> str:
        return " ".join(self.dev_command)


class ProjectRequest(BaseModel):
    """The user's resolved request for a new project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Project name, used verbatim as a directory name.")
    target_path: Path = Field(..., description="Absolute path of the project directory.")
    router_style: RouterStyle = Field(default=RouterStyle.PAGES, description="Router convention of the project.")
    template_choice: Optional[str] = Field(None, description="Bundled template selected by the user, if any.")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("target_path")
    @classmethod
    def _check_target_path(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError("target_path must be absolute")
        return value


PACKAGE_MANAGERS: Dict[PackageManagerId, PackageManagerChoice] = {
    PackageManagerId.BUN: PackageManagerChoice(
        id=PackageManagerId.BUN,
        version_command=("bun", "--version"),
        install_command=("bun", "install"),
        add_command=("bun", "add"),
        exec_command=("bunx",),
        dev_command=("bun", "dev"),
        install_url="https://bun.sh/",
    ),
    PackageManagerId.YARN: PackageManagerChoice(
        id=PackageManagerId.YARN,
        version_command=("yarn", "--version"),
        install_command=("yarn", "install"),
        add_command=("yarn", "add"),
        exec_command=("npx",),
        dev_command=("yarn", "dev"),
        install_url="https://yarnpkg.com/getting-started/install",
    ),
    PackageManagerId.NPM: PackageManagerChoice(
        id=PackageManagerId.NPM,
        version_command=("npm", "--version"),
        install_command=("npm", "install"),
        add_command=("npm", "install"),
        exec_command=("npx",),
        dev_command=("npm", "run", "dev"),
        install_url="https://nodejs.org/en/download",
    ),
}


__all__ = [
    "MaterializationStrategy",
    "PACKAGE_MANAGERS",
    "PackageManagerChoice",
    "PackageManagerId",
    "ProjectRequest",
    "RouterStyle",
]
