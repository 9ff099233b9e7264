"""Resolve the project request from arguments and interactive answers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence, TextIO

from pydantic import ValidationError

from .errors import PreconditionError
from .naming import validate_project_name
from .schema import ProjectRequest, RouterStyle

LOGGER = logging.getLogger(__name__)

InputFunc = Callable[[str], str]

_ROUTER_ANSWERS = {
    "1": RouterStyle.PAGES,
    "pages": RouterStyle.PAGES,
    "2": RouterStyle.APP,
    "app": RouterStyle.APP,
}


def _read_answer(input_func: InputFunc, prompt: str) -> str:
    """Read one line; a closed stdin counts as an empty answer."""

    try:
        return input_func(prompt).strip()
    except EOFError:
        LOGGER.debug("no input available for %r", prompt)
        return ""


def resolve_project_name(name: str | None) -> str:
    """Validate the project name argument or raise :class:`PreconditionError`."""

    try:
        return validate_project_name(name)
    except ValueError as exc:
        raise PreconditionError(str(exc)) from exc


def ask_router_style(
    input_func: InputFunc = input,
    *,
    stream: TextIO | None = None,
    default: RouterStyle = RouterStyle.PAGES,
) -> RouterStyle:
    """Ask which router to use, blocking until one line is read.

    ``1``/``pages`` and ``2``/``app`` are recognised; any other answer falls
    back to ``default``.
    """

    print("Which router would you like to use?", file=stream)
    print("1. Pages Router (Traditional)", file=stream)
    print("2. App Router (New, Recommended)", file=stream)
    answer = _read_answer(input_func, "Enter your choice (1 or 2): ").lower()

    style = _ROUTER_ANSWERS.get(answer)
    if style is None:
        LOGGER.warning("Unrecognised choice %r, using %s", answer, default.label)
        style = default
    print(f"Selected: {style.label}", file=stream)
    return style


def ask_template_choice(
    available: Sequence[str],
    input_func: InputFunc = input,
    *,
    stream: TextIO | None = None,
    default: str | None = None,
) -> str:
    """Let the user pick one of ``available`` templates by number or name.

    A single template is returned without asking. Unrecognised answers fall
    back to ``default`` (or the first template).
    """

    if not available:
        raise PreconditionError("no bundled templates available")
    fallback = default if default in available else available[0]
    if len(available) == 1:
        return available[0]

    print("Which template would you like to use?", file=stream)
    for index, name in enumerate(available, start=1):
        print(f"{index}. {name}", file=stream)
    answer = _read_answer(input_func, f"Enter your choice (1-{len(available)}): ")

    if answer in available:
        return answer
    if answer.isdigit() and 1 <= int(answer) <= len(available):
        return available[int(answer) - 1]
    LOGGER.warning("Unrecognised choice %r, using %s", answer, fallback)
    return fallback


def build_request(
    name: str,
    base_dir: Path,
    router_style: RouterStyle,
    template_choice: str | None = None,
) -> ProjectRequest:
    """Create the immutable :class:`ProjectRequest` for this run."""

    try:
        return ProjectRequest(
            name=name,
            target_path=Path(base_dir).resolve() / name,
            router_style=router_style,
            template_choice=template_choice,
        )
    except ValidationError as exc:
        raise PreconditionError(f"invalid project request: {exc}") from exc


__all__ = [
    "ask_router_style",
    "ask_template_choice",
    "build_request",
    "resolve_project_name",
]
