"""Write the router-specific file set into the project directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .content import file_set_for
from .errors import TemplateWriteError
from .schema import ProjectRequest
from .template import TemplateFileSet, TemplateRenderer

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TemplateWriter:
    """Overwrite generated files with the Web3 starter contents."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def write(
        self,
        file_set: TemplateFileSet,
        target_dir: str | Path,
        context: Mapping[str, Any],
    ) -> list[Path]:
        """Write every file of ``file_set`` below ``target_dir``.

        Existing files are replaced. The first failing write aborts the run;
        files written before it stay on disk.
        """

        target_path = Path(target_dir)
        written: list[Path] = []
        for relative_path, content in file_set.rendered(self.renderer, context):
            destination = target_path / relative_path
            LOGGER.info("Writing %s...", relative_path)
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                if isinstance(content, bytes):
                    destination.write_bytes(content)
                else:
                    destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise TemplateWriteError(destination, exc.strerror or str(exc)) from exc
            written.append(destination)
        return written

    def write_project(self, request: ProjectRequest) -> list[Path]:
        """Write the file set matching ``request.router_style``."""

        file_set = file_set_for(request.router_style)
        context = {"name": request.name, "router": request.router_style.value}
        return self.write(file_set, request.target_path, context)


__all__ = ["TemplateWriter"]
