"""Detect which JavaScript package manager is installed."""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import PreconditionError
from .process import CommandRunner
from .schema import PACKAGE_MANAGERS, PackageManagerChoice, PackageManagerId

LOGGER = logging.getLogger(__name__)

DEFAULT_PREFERENCE: tuple[PackageManagerId, ...] = (
    PackageManagerId.BUN,
    PackageManagerId.YARN,
    PackageManagerId.NPM,
)


def _missing_message(candidates: Iterable[PackageManagerChoice]) -> str:
    lines = ["None of the supported package managers is installed. One of these is required:"]
    for choice in candidates:
        lines.append(f"  Install {choice.id.value} from: {choice.install_url}")
    return "\n".join(lines)


def detect_package_manager(
    runner: CommandRunner,
    preference: Iterable[PackageManagerId | str] = DEFAULT_PREFERENCE,
) -> PackageManagerChoice:
    """Return the first package manager in ``preference`` that responds.

    Each candidate is probed with its version command, output suppressed.
    Raises :class:`PreconditionError` listing install sources when none of the
    candidates is available.
    """

    candidates = [PACKAGE_MANAGERS[PackageManagerId(item)] for item in preference]
    if not candidates:
        raise PreconditionError("no package manager candidates configured")

    for choice in candidates:
        if runner.probe(choice.version_command):
            LOGGER.debug("using package manager %s", choice.id.value)
            return choice
        LOGGER.debug("package manager %s not available", choice.id.value)

    raise PreconditionError(_missing_message(candidates))


__all__ = ["DEFAULT_PREFERENCE", "detect_package_manager"]
