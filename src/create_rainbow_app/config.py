"""Configuration describing one scaffolding variant."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from .probe import DEFAULT_PREFERENCE
from .schema import MaterializationStrategy, PackageManagerId, RouterStyle

TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = "template-1"
DEFAULT_REPOSITORY = "https://github.com/rainbow-me/rainbowkit-next-template.git"

WEB3_DEPENDENCIES: tuple[str, ...] = (
    "@rainbow-me/rainbowkit",
    "wagmi",
    "viem@2.x",
    "@tanstack/react-query",
)

WALLET_CONNECTORS: tuple[str, ...] = (
    "@base-org/account",
    "@coinbase/wallet-sdk",
    "@metamask/sdk",
    "@safe-global/safe-apps-provider",
    "@safe-global/safe-apps-sdk",
    "@walletconnect/ethereum-provider",
)

ENV_PREFIX = "CREATE_RAINBOW_APP_"


@dataclass(slots=True, frozen=True)
class ScaffoldConfig:
    """Explicit switches that used to be spread over separate entry scripts.

    Attributes
    ----------
    strategy:
        How the project directory is produced.
    supports_router_choice:
        Whether the user is asked to pick between the Pages and App routers.
        When ``False`` :attr:`default_router` is used.
    package_managers:
        Ordered preference list probed by the environment prober.
    template_name:
        Bundled template copied by the ``copy`` strategy.
    templates_root:
        Directory holding the bundled templates.
    repository_url:
        Repository cloned by the ``clone`` strategy.
    dependencies:
        Libraries added to the project in a single install call.
    init_ui_library:
        Whether shadcn/ui is initialised after installing dependencies.
    """

    strategy: MaterializationStrategy = MaterializationStrategy.GENERATE
    supports_router_choice: bool = True
    package_managers: tuple[PackageManagerId, ...] = DEFAULT_PREFERENCE
    template_name: str = DEFAULT_TEMPLATE
    templates_root: Path = TEMPLATES_ROOT
    repository_url: str = DEFAULT_REPOSITORY
    dependencies: tuple[str, ...] = field(default=WEB3_DEPENDENCIES + WALLET_CONNECTORS)
    init_ui_library: bool = True
    default_router: RouterStyle = RouterStyle.PAGES

    @classmethod
    def for_strategy(
        cls, strategy: MaterializationStrategy | str, **overrides: Any
    ) -> "ScaffoldConfig":
        """Return the preset used by the given materialisation strategy."""

        strategy = MaterializationStrategy(strategy)
        if strategy is MaterializationStrategy.GENERATE:
            config = cls(strategy=strategy)
        else:
            config = cls(strategy=strategy, supports_router_choice=False, init_ui_library=False)
        return replace(config, **overrides) if overrides else config

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> "ScaffoldConfig":
        """Build a configuration honouring ``CREATE_RAINBOW_APP_*`` variables.

        ``overrides`` take precedence over the environment. Invalid values
        raise :class:`ValueError`.
        """

        environ = os.environ if environ is None else environ
        settings: dict[str, Any] = {}

        managers = environ.get(f"{ENV_PREFIX}PACKAGE_MANAGERS", "").strip()
        if managers:
            settings["package_managers"] = parse_package_managers(managers.split(","))

        repository = environ.get(f"{ENV_PREFIX}REPOSITORY", "").strip()
        if repository:
            settings["repository_url"] = repository

        settings.update({key: value for key, value in overrides.items() if value is not None})

        strategy = settings.pop("strategy", None) or environ.get(f"{ENV_PREFIX}STRATEGY", "").strip()
        return cls.for_strategy(strategy or MaterializationStrategy.GENERATE, **settings)


def parse_package_managers(values: Any) -> tuple[PackageManagerId, ...]:
    """Convert names such as ``["yarn", "npm"]`` into an ordered preference."""

    result: list[PackageManagerId] = []
    for value in values:
        name = str(value).strip().lower()
        if not name:
            continue
        try:
            manager = PackageManagerId(name)
        except ValueError as exc:
            raise ValueError(f"unknown package manager '{name}'") from exc
        if manager not in result:
            result.append(manager)
    if not result:
        raise ValueError("at least one package manager is required")
    return tuple(result)


__all__ = [
    "DEFAULT_REPOSITORY",
    "DEFAULT_TEMPLATE",
    "ScaffoldConfig",
    "TEMPLATES_ROOT",
    "WALLET_CONNECTORS",
    "WEB3_DEPENDENCIES",
    "parse_package_managers",
]
