from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.fake_runner import (  # noqa: E402
    FakeRunner,
    create_next_app_effect,
    git_clone_effect,
)


@pytest.fixture()
def bun_runner() -> FakeRunner:
    """Runner where only bun is installed and external tools succeed."""

    return FakeRunner(
        available={"bun"},
        side_effects={
            "bunx create-next-app@latest": create_next_app_effect,
            "git clone": git_clone_effect,
        },
    )


@pytest.fixture()
def answers():
    """Build an ``input`` replacement returning the given answers in order."""

    def factory(*values: str):
        queue = list(values)
        prompts: list[str] = []

        def fake_input(prompt: str) -> str:
            prompts.append(prompt)
            return queue.pop(0)

        fake_input.prompts = prompts  # type: ignore[attr-defined]
        return fake_input

    return factory
