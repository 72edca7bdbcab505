"""Rescue explicit code languages across the article-extraction step.

Extraction libraries often drop wrapper ``<div>`` elements and rewrite class
attributes, which is where many documentation sites keep the code language.
Hints are captured from the original document and reattached to the
extracted one by matching the first characters of each block's text.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator, Optional

from bs4 import Tag

from .languages import detect_from_classes
from .models import CodeBlockHint, HintPack

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 120
RE_LANGUAGE_TOKEN = re.compile(r"\blanguage-")


def class_string(element: Optional[Any]) -> str:
    """Return the class attribute of ``element`` as a single string."""

    if not isinstance(element, Tag):
        return ""
    value = element.get("class")
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


def code_element(pre: Tag) -> Tag:
    """Return the element holding the code text of a ``<pre>`` block."""

    code = pre.find("code")
    return code if isinstance(code, Tag) else pre


def code_prefix(text: Optional[str]) -> str:
    return (text or "").replace("\r", "").strip()[:PREFIX_LENGTH]


def iter_code_blocks(document: Tag) -> Iterator[tuple[Tag, Tag]]:
    """Yield ``(container, code element)`` pairs for every ``<pre>``."""

    for pre in document.find_all("pre"):
        if isinstance(pre, Tag):
            yield pre, code_element(pre)


def explicit_language(pre: Tag, code: Tag) -> Optional[str]:
    """Language named by classes on the container, code element or parent."""

    sources = [class_string(pre)]
    if code is not pre:
        sources.append(class_string(code))
    sources.append(class_string(pre.parent))
    return detect_from_classes(sources)


def capture_hints(document: Tag) -> HintPack:
    """Collect class-based language hints from the original document."""

    hints: list[CodeBlockHint] = []
    for pre, code in iter_code_blocks(document):
        prefix = code_prefix(code.get_text())
        if not prefix:
            continue
        language = explicit_language(pre, code)
        if not language:
            continue
        hints.append(CodeBlockHint(prefix=prefix, language=language))

    languages = {hint.language for hint in hints}
    default_language = next(iter(languages)) if len(languages) == 1 else None
    logger.debug(
        "Captured %d code language hints (default: %s)",
        len(hints),
        default_language,
    )
    return HintPack(hints=tuple(hints), default_language=default_language)


def match_hint(prefix: str, pack: HintPack) -> Optional[str]:
    """Return the language of the first hint sharing a prefix with ``prefix``."""

    if prefix:
        for hint in pack.hints:
            if prefix.startswith(hint.prefix) or hint.prefix.startswith(prefix):
                return hint.language
    return pack.default_language


def _add_language_class(element: Tag, language: str) -> None:
    current = class_string(element)
    if RE_LANGUAGE_TOKEN.search(current):
        return
    element["class"] = current.split() + [f"language-{language}"]


def apply_hints(document: Tag, pack: HintPack) -> int:
    """Reattach captured hints to the extracted document in place.

    Returns the number of code blocks that received a language.
    """

    applied = 0
    for pre, code in iter_code_blocks(document):
        language = match_hint(code_prefix(code.get_text()), pack)
        if not language:
            continue
        _add_language_class(pre, language)
        if code is not pre:
            _add_language_class(code, language)
        applied += 1
    logger.debug("Reattached languages to %d code blocks", applied)
    return applied


__all__ = [
    "PREFIX_LENGTH",
    "apply_hints",
    "capture_hints",
    "class_string",
    "code_element",
    "code_prefix",
    "explicit_language",
    "match_hint",
]
