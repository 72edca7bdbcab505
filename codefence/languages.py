"""Canonical language names and class-attribute language detection."""

from __future__ import annotations

import re
from typing import Iterable, Optional

LANGUAGE_ALIASES: dict[str, str] = {
    "cs": "csharp",
    "c#": "csharp",
    "js": "javascript",
    "ts": "typescript",
    "sh": "bash",
    "shell": "bash",
    "py": "python",
    "kt": "kotlin",
    "c++": "cpp",
    "golang": "go",
    "rs": "rust",
    "rb": "ruby",
    "yml": "yaml",
}

RE_LANGUAGE_CLASS = re.compile(
    r"\b(?:language|lang)-([a-z0-9_+#-]+)", re.IGNORECASE
)
RE_EXT_CLASS = re.compile(r"\bext-([a-z0-9_+#-]+)", re.IGNORECASE)


def normalize_language(raw: Optional[str]) -> Optional[str]:
    """Return the canonical spelling for ``raw`` or None when it is empty."""

    token = (raw or "").strip().lower()
    if not token:
        return None
    return LANGUAGE_ALIASES.get(token, token)


def detect_from_classes(class_strings: Iterable[Optional[str]]) -> Optional[str]:
    """Find an explicit language hint across class attribute values.

    ``class_strings`` are searched in the order given (container, code
    element, parent). ``language-``/``lang-`` tokens take priority over
    ``ext-`` tokens anywhere in the joined value.
    """

    joined = " ".join(value for value in class_strings if value)
    if not joined:
        return None
    for pattern in (RE_LANGUAGE_CLASS, RE_EXT_CLASS):
        match = pattern.search(joined)
        if match:
            return normalize_language(match.group(1))
    return None


__all__ = ["LANGUAGE_ALIASES", "detect_from_classes", "normalize_language"]
