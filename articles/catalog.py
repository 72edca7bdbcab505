"""List translated articles stored under the content root."""

from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import Optional

import yaml

from .frontmatter import parse_document
from .models import ArticleDetail, ArticleSummary
from .render import render_markdown


def _timestamp(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = dt.datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed.timestamp()


def _year_month(value: Optional[str]) -> tuple[str, str]:
    stamp = _timestamp(value)
    if stamp is None:
        return "0000", "00"
    moment = dt.datetime.fromtimestamp(stamp, tz=dt.timezone.utc)
    return f"{moment.year:04d}", f"{moment.month:02d}"


def date_display(value: Optional[str]) -> str:
    """Show only ``YYYY-MM-DD`` even when a full ISO datetime is stored."""

    if not value:
        return ""
    text = str(value)
    return text[:10] if len(text) >= 10 else text


def read_summary(article_dir: Path, lang: str) -> Optional[ArticleSummary]:
    path = article_dir / f"{lang}.md"
    if not path.is_file():
        return None
    metadata, _ = parse_document(path.read_text(encoding="utf-8"))
    date = metadata.get("date")
    date = str(date) if date is not None else None
    yyyy, mm = _year_month(date)
    return ArticleSummary(
        slug=article_dir.name,
        title=str(metadata.get("title") or article_dir.name),
        date=date,
        date_display=date_display(date),
        yyyy=yyyy,
        mm=mm,
        source_url=metadata.get("sourceUrl"),
    )


def _sort_key(summary: ArticleSummary) -> tuple[float, str]:
    stamp = _timestamp(summary.date)
    return (-stamp if stamp is not None else float("inf"), summary.slug)


def list_articles(content_root: Path, lang: str = "zh") -> list[ArticleSummary]:
    """Return translated articles, newest first; undated ones go last."""

    root = Path(content_root)
    if not root.is_dir():
        return []

    summaries: list[ArticleSummary] = []
    for article_dir in sorted(path for path in root.iterdir() if path.is_dir()):
        try:
            summary = read_summary(article_dir, lang)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            print(f"⚠️ Skipping {article_dir.name}: {exc}", file=sys.stderr)
            continue
        if summary is not None:
            summaries.append(summary)

    summaries.sort(key=_sort_key)
    return summaries


def get_article(
    content_root: Path, slug: str, lang: str = "zh"
) -> Optional[ArticleDetail]:
    """Load ``<slug>/<lang>.md`` and render it; None when it is missing."""

    path = Path(content_root) / slug / f"{lang}.md"
    if not path.is_file():
        return None
    metadata, body = parse_document(path.read_text(encoding="utf-8"))
    date = metadata.get("date")
    date = str(date) if date is not None else None
    return ArticleDetail(
        slug=slug,
        title=str(metadata.get("title") or slug),
        date=date,
        date_display=date_display(date),
        source_url=metadata.get("sourceUrl"),
        html=render_markdown(body),
    )
