"""Placeholder rendering and file sets for generated project files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, MutableMapping, Union

from .errors import ScaffoldError
from .naming import slugify

__all__ = [
    "FileContent",
    "TemplateFileSet",
    "TemplateRenderer",
    "TemplateRenderingError",
]


FileContent = Union[str, bytes]

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[\w.]+(?:\s*\|\s*\w+)*)\s*}}")


class TemplateRenderingError(ScaffoldError):
    """Raised when a placeholder refers to an unknown value or filter."""


@dataclass(slots=True)
class TemplateRenderer:
    """Substitute ``{{ key|filter }}`` placeholders in text templates.

    Only placeholders made of a dotted identifier and optional filters are
    recognised, so JSX object literals such as ``style={{ margin: 0 }}`` pass
    through untouched.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "title": lambda value: str(value).replace("-", " ").replace("_", " ").title(),
                    "slug": lambda value: slugify(str(value)),
                    "strip": lambda value: str(value).strip(),
                }
            )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template``; unknown keys or filters raise an error."""

        def substitute(match: re.Match[str]) -> str:
            key, *filters = [part.strip() for part in match.group("expression").split("|")]
            value: Any = context
            for segment in key.split("."):
                if not isinstance(value, Mapping) or segment not in value:
                    raise TemplateRenderingError(f"missing value for '{key}'")
                value = value[segment]

            for name in filters:
                try:
                    value = self.filters[name](value)
                except KeyError as exc:
                    raise TemplateRenderingError(f"unknown filter '{name}'") from exc
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


@dataclass(slots=True)
class TemplateFileSet:
    """Mapping of project-relative output paths to file contents.

    Text contents are treated as templates; bytes are written verbatim.
    """

    name: str
    files: dict[str, FileContent] = field(default_factory=dict)

    def __iter__(self) -> Iterator[tuple[str, FileContent]]:
        return iter(self.files.items())

    def __len__(self) -> int:
        return len(self.files)

    def paths(self) -> frozenset[str]:
        return frozenset(self.files)

    def merged(self, other: "TemplateFileSet") -> "TemplateFileSet":
        """Combine two sets; overlapping paths are rejected."""

        overlap = self.paths() & other.paths()
        if overlap:
            raise ValueError(f"file sets overlap on {sorted(overlap)}")
        return TemplateFileSet(f"{self.name}+{other.name}", {**self.files, **other.files})

    def rendered(self, renderer: TemplateRenderer, context: Mapping[str, Any]) -> Iterator[tuple[str, FileContent]]:
        """Yield ``(path, content)`` with text contents rendered."""

        for relative_path, content in self.files.items():
            if isinstance(content, str):
                content = renderer.render_string(content, context)
            yield relative_path, content
