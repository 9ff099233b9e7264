"""Project name checks used before anything touches the filesystem."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["slugify", "validate_project_name"]


_SEPARATORS = re.compile(r"[\s_\-]+")
_SAFE_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def slugify(value: str, *, separator: str = "-") -> str:
    """Create a lowercase, ASCII-only directory name from ``value``.

    Returns an empty string when nothing usable remains.
    """

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s\-]", "", text).strip().lower()
    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def validate_project_name(name: str | None) -> str:
    """Return ``name`` if it can be used verbatim as a directory name.

    Surrounding whitespace is ignored. Names must start with a letter or digit
    and may only contain letters, digits, ``.``, ``_`` and ``-``; anything
    else raises :class:`ValueError` with a suggested alternative when one can
    be derived.
    """

    candidate = (name or "").strip()
    if not candidate:
        raise ValueError("Please provide a project name.")

    if _SAFE_NAME.match(candidate):
        return candidate

    message = f"invalid project name '{candidate}'"
    suggestion = slugify(candidate)
    if suggestion and _SAFE_NAME.match(suggestion):
        message += f" (try '{suggestion}')"
    raise ValueError(message)
