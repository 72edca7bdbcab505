"""Shared dataclasses for stored articles."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(slots=True)
class ArticleMeta:
    """Contents of an article's ``meta.json``."""

    slug: str
    title: str
    date: str
    source_url: str
    target_lang: str

    def to_json(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "sourceUrl": self.source_url,
            "targetLang": self.target_lang,
        }


@dataclass(slots=True)
class AddUrlResult:
    """Locations written when a URL is added."""

    slug: str
    dir: Path
    lang: str
    prompt_path: Path
    date: str

    def to_json(self) -> dict[str, Any]:
        return {
            "ok": True,
            "slug": self.slug,
            "dir": str(self.dir),
            "lang": self.lang,
            "promptPath": str(self.prompt_path),
            "date": self.date,
        }


@dataclass(slots=True)
class ArticleSummary:
    """Listing entry for a translated article."""

    slug: str
    title: str
    date: Optional[str]
    date_display: str
    yyyy: str
    mm: str
    source_url: Optional[str]

    def to_json(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "dateDisplay": self.date_display,
            "yyyy": self.yyyy,
            "mm": self.mm,
            "sourceUrl": self.source_url,
        }


@dataclass(slots=True)
class ArticleDetail:
    """A translated article with its body rendered to HTML."""

    slug: str
    title: str
    date: Optional[str]
    date_display: str
    source_url: Optional[str]
    html: str

    def to_json(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "dateDisplay": self.date_display,
            "sourceUrl": self.source_url,
            "html": self.html,
        }
