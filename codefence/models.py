"""Shared dataclasses for the conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class CodeBlockHint:
    """Explicit language captured for a code block, keyed by its text prefix."""

    prefix: str
    language: Optional[str]


@dataclass(frozen=True, slots=True)
class HintPack:
    """Hints captured from one original document."""

    hints: tuple[CodeBlockHint, ...] = ()
    default_language: Optional[str] = None


@dataclass(slots=True)
class ExtractedArticle:
    """Main article content returned by the extraction step."""

    title: str
    content_html: str


@dataclass(slots=True)
class ConversionResult:
    """Title and Markdown produced for one HTML document."""

    title: str
    markdown: str
