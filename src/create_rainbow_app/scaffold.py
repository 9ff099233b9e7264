"""End-to-end scaffolding pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .config import ScaffoldConfig
from .errors import PreconditionError
from .install import install_dependencies, setup_shadcn_ui
from .materialize import clone_template, copy_template, generate_next_app, list_templates
from .probe import detect_package_manager
from .process import CommandRunner
from .prompt import InputFunc, ask_router_style, ask_template_choice, build_request, resolve_project_name
from .report import report_success
from .schema import MaterializationStrategy, PackageManagerChoice, ProjectRequest, RouterStyle
from .writer import TemplateWriter

__all__ = ["ProjectScaffolder"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ProjectScaffolder:
    """Run the probe, prompt, materialise, install, write and report stages.

    Stages run strictly in that order and each one only consumes values
    produced by earlier stages.
    """

    config: ScaffoldConfig = field(default_factory=ScaffoldConfig)
    runner: CommandRunner = field(default_factory=CommandRunner)
    writer: TemplateWriter = field(default_factory=TemplateWriter)
    input_func: InputFunc = input
    stream: TextIO | None = None

    def create(
        self,
        name: str | None,
        base_dir: str | Path | None = None,
        *,
        router_style: RouterStyle | None = None,
        template_name: str | None = None,
        install: bool = True,
    ) -> ProjectRequest:
        """Scaffold project ``name`` below ``base_dir`` (default: cwd).

        ``router_style`` and ``template_name`` skip the matching prompts.
        """

        manager = detect_package_manager(self.runner, self.config.package_managers)
        request = self._resolve(name, Path.cwd() if base_dir is None else Path(base_dir), router_style, template_name)

        self._materialize(request, manager)
        if install:
            install_dependencies(self.runner, manager, request.target_path, self.config.dependencies)
            if self.config.init_ui_library:
                setup_shadcn_ui(self.runner, manager, request.target_path)
        else:
            LOGGER.info("Skipping dependency installation")

        self.writer.write_project(request)
        report_success(request, manager, stream=self.stream)
        return request

    def _resolve(
        self,
        name: str | None,
        base_dir: Path,
        router_style: RouterStyle | None,
        template_name: str | None,
    ) -> ProjectRequest:
        project_name = resolve_project_name(name)

        if router_style is None:
            if self.config.supports_router_choice:
                router_style = ask_router_style(
                    self.input_func, stream=self.stream, default=self.config.default_router
                )
            else:
                router_style = self.config.default_router
        elif not self.config.supports_router_choice and router_style is not self.config.default_router:
            raise PreconditionError(
                f"The {self.config.strategy.value} strategy only supports the "
                f"{self.config.default_router.label}; {router_style.label} is not available."
            )

        if self.config.strategy is MaterializationStrategy.COPY and template_name is None:
            template_name = ask_template_choice(
                list_templates(self.config.templates_root),
                self.input_func,
                stream=self.stream,
                default=self.config.template_name,
            )

        return build_request(project_name, base_dir, router_style, template_name)

    def _materialize(self, request: ProjectRequest, manager: PackageManagerChoice) -> Path:
        strategy = self.config.strategy
        if strategy is MaterializationStrategy.COPY:
            template_name = request.template_choice or self.config.template_name
            return copy_template(request, self.config.templates_root, template_name)
        if strategy is MaterializationStrategy.CLONE:
            return clone_template(request, self.runner, self.config.repository_url)
        return generate_next_app(request, self.runner, manager)
