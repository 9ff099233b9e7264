"""Thin wrapper around :mod:`subprocess` for the external tools we drive."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import CommandError

LOGGER = logging.getLogger(__name__)


class CommandRunner:
    """Run external commands to completion, one at a time.

    Every invocation receives its working directory explicitly; the runner
    never changes the working directory of the current process.
    """

    def run(self, args: Sequence[str], *, cwd: Path | None = None, step: str) -> None:
        """Run ``args`` with inherited stdio and raise on failure."""

        command = list(args)
        if cwd is not None and not Path(cwd).is_dir():
            raise CommandError(step, f"working directory does not exist: {cwd}", command=command)
        LOGGER.debug("running %s (cwd=%s)", " ".join(command), cwd)
        try:
            subprocess.run(command, cwd=cwd, check=True)
        except FileNotFoundError as exc:
            raise CommandError(step, f"command not found: {command[0]}", command=command) from exc
        except subprocess.CalledProcessError as exc:
            raise CommandError(
                step,
                f"command '{' '.join(command)}' exited with status {exc.returncode}",
                command=command,
                returncode=exc.returncode,
            ) from exc

    def probe(self, args: Sequence[str]) -> bool:
        """Return ``True`` when ``args`` runs and exits with status zero."""

        try:
            result = subprocess.run(
                list(args),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError:
            return False
        return result.returncode == 0


__all__ = ["CommandRunner"]
