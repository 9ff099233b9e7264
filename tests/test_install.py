from __future__ import annotations

from pathlib import Path

import pytest

from create_rainbow_app.config import WALLET_CONNECTORS, WEB3_DEPENDENCIES
from create_rainbow_app.errors import CommandError
from create_rainbow_app.install import install_dependencies, setup_shadcn_ui
from create_rainbow_app.schema import PACKAGE_MANAGERS, PackageManagerId
from tests.fixtures.fake_runner import FakeRunner


@pytest.mark.parametrize(
    "manager, add_command",
    [
        (PackageManagerId.BUN, ("bun", "add")),
        (PackageManagerId.YARN, ("yarn", "add")),
        (PackageManagerId.NPM, ("npm", "install")),
    ],
)
def test_install_dependencies_single_call(tmp_path: Path, manager, add_command):
    runner = FakeRunner()
    packages = WEB3_DEPENDENCIES + WALLET_CONNECTORS
    install_dependencies(runner, PACKAGE_MANAGERS[manager], tmp_path, packages)

    assert runner.commands() == [(*add_command, *packages)]
    assert runner.calls[0].cwd == tmp_path


def test_install_failure_is_fatal(tmp_path: Path):
    runner = FakeRunner(fail_on={"bun add"})
    with pytest.raises(CommandError, match="Failed to install dependencies"):
        install_dependencies(runner, PACKAGE_MANAGERS[PackageManagerId.BUN], tmp_path, ["wagmi"])


def test_setup_shadcn_ui(tmp_path: Path):
    runner = FakeRunner()
    setup_shadcn_ui(runner, PACKAGE_MANAGERS[PackageManagerId.YARN], tmp_path)
    assert runner.commands() == [
        ("npx", "shadcn@latest", "init"),
        ("npx", "shadcn@latest", "add", "button"),
    ]


def test_setup_shadcn_ui_stops_on_failure(tmp_path: Path):
    runner = FakeRunner(fail_on={"bunx shadcn@latest"})
    with pytest.raises(CommandError, match="Failed to setup shadcn/ui"):
        setup_shadcn_ui(runner, PACKAGE_MANAGERS[PackageManagerId.BUN], tmp_path)
    assert len(runner.calls) == 1
