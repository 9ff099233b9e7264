from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from create_rainbow_app.errors import CommandError
from create_rainbow_app.process import CommandRunner


def test_run_passes_working_directory(monkeypatch, tmp_path: Path):
    seen = {}

    def fake_run(args, **kwargs):
        seen["args"] = args
        seen.update(kwargs)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    CommandRunner().run(("bun", "add", "wagmi"), cwd=tmp_path, step="install")

    assert seen["args"] == ["bun", "add", "wagmi"]
    assert seen["cwd"] == tmp_path
    assert seen["check"] is True


def test_run_wraps_non_zero_exit(monkeypatch):
    def fake_run(args, **kwargs):
        raise subprocess.CalledProcessError(3, args)

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(CommandError) as excinfo:
        CommandRunner().run(["yarn", "add", "wagmi"], step="Failed to install dependencies")

    error = excinfo.value
    assert error.step == "Failed to install dependencies"
    assert error.returncode == 3
    assert error.command == ("yarn", "add", "wagmi")
    assert str(error).startswith("Failed to install dependencies: ")


def test_run_wraps_missing_executable(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(CommandError, match="command not found: git"):
        CommandRunner().run(["git", "clone", "x"], step="clone")


def test_run_rejects_missing_working_directory(monkeypatch, tmp_path: Path):
    def fake_run(args, **kwargs):
        raise AssertionError("subprocess must not be started")

    monkeypatch.setattr(subprocess, "run", fake_run)
    missing = tmp_path / "missing"
    with pytest.raises(CommandError, match="working directory does not exist") as excinfo:
        CommandRunner().run(["bunx", "create-next-app@latest", "myapp"], cwd=missing, step="create")

    assert "command not found" not in str(excinfo.value)
