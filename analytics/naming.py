"""Display-name normalisation for project paths and skill types."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

__all__ = [
    "UNKNOWN_PROJECT",
    "UNNAMED_PROJECT",
    "UNKNOWN_SKILL",
    "normalize_project_name",
    "normalize_skill_name",
]

UNKNOWN_PROJECT = "Unknown Project"
UNNAMED_PROJECT = "Unnamed Project"
UNKNOWN_SKILL = "Unknown Skill"

_NUMERIC_SEGMENT = re.compile(r"^\d+$")
_PROJECT_PREFIXES = ("piscine-", "quest-")
_SKILL_PREFIX = re.compile(r"^skill_")
_SKILL_SEPARATORS = re.compile(r"[_-]")


def _capitalize_words(text: str, separator: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(separator))


@lru_cache(maxsize=1024)
def normalize_project_name(path: Optional[str]) -> str:
    """Return a readable project label for a transaction ``path``.

    The last path segment names the project unless it is empty or a numeric
    id, in which case its parent segment is used. Platform prefixes such as
    ``piscine-`` are dropped and dash-separated words are capitalised, so
    ``/school/piscine-go/ex00`` becomes ``Ex00``.
    """

    if not path:
        return UNKNOWN_PROJECT

    segments = path.split("/")
    name = segments[-1]
    if (not name or _NUMERIC_SEGMENT.match(name)) and len(segments) > 1:
        name = segments[-2]
    if not name:
        return UNNAMED_PROJECT

    for prefix in _PROJECT_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]

    return _capitalize_words(name, "-")


@lru_cache(maxsize=512)
def normalize_skill_name(skill_type: Optional[str]) -> str:
    """Return a readable skill label, e.g. ``skill_go_routines`` -> ``Go Routines``."""

    if not skill_type:
        return UNKNOWN_SKILL

    name = _SKILL_PREFIX.sub("", skill_type)
    name = _SKILL_SEPARATORS.sub(" ", name)
    if not name.strip():
        return UNKNOWN_SKILL
    return _capitalize_words(name, " ")
