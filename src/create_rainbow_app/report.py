"""Final instructions printed once the project is ready."""

from __future__ import annotations

from typing import TextIO

from .schema import PackageManagerChoice, ProjectRequest


def report_success(request: ProjectRequest, manager: PackageManagerChoice, *, stream: TextIO | None = None) -> None:
    print(f"\nProject {request.name} is ready!", file=stream)
    print(f"Package manager: {manager.id.value}", file=stream)
    print(f"Router type: {request.router_style.label}", file=stream)
    print("To start working on your project, run:", file=stream)
    print(f"\t cd {request.name}", file=stream)
    print(f"\t {manager.dev_hint}", file=stream)


__all__ = ["report_success"]
