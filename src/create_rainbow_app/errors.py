"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffolding run."""


class PreconditionError(ScaffoldError):
    """Raised when the run cannot start: bad arguments or missing tools."""


class CommandError(ScaffoldError):
    """Raised when an external command or copy step fails."""

    def __init__(
        self,
        step: str,
        reason: str,
        *,
        command: Sequence[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(f"{step}: {reason}")
        self.step = step
        self.command = tuple(command or ())
        self.returncode = returncode


class TemplateWriteError(ScaffoldError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path


__all__ = ["CommandError", "PreconditionError", "ScaffoldError", "TemplateWriteError"]
