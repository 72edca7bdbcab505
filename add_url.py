"""Fetch an article URL and store it as Markdown ready for translation."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from articles.frontmatter import dump_document
from articles.models import AddUrlResult, ArticleMeta
from articles.prompt import build_translate_prompt
from articles.slugs import article_slug, make_unique_slug_dir
from codefence import convert
from config_loader import ConfigError, resolve_runtime_settings
from fetch_page import FetchError, fetch_html

SOURCE_NAME = "source.md"
META_NAME = "meta.json"

Fetcher = Callable[[str], str]


def _now_iso(now: Optional[datetime] = None) -> str:
    """Return a UTC timestamp string suitable for metadata files."""

    moment = now or datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z")
    )


def prompt_filename(lang: str) -> str:
    return f"translate.{lang}.prompt.txt"


def add_article(
    url: str,
    *,
    content_root: Path,
    target_lang: str,
    fetcher: Fetcher,
    now: Optional[datetime] = None,
) -> AddUrlResult:
    """Fetch ``url``, convert it and write the article directory."""

    print(f"Fetching {url}", file=sys.stderr)
    html = fetcher(url)
    conversion = convert(html, url)

    base_slug = article_slug(conversion.title, url)
    slug, article_dir = make_unique_slug_dir(Path(content_root), base_slug)
    date = _now_iso(now)
    title = conversion.title or slug

    source_path = article_dir / SOURCE_NAME
    source_path.write_text(
        dump_document(
            conversion.markdown,
            {"title": title, "date": date, "sourceUrl": url, "lang": "source"},
        ),
        encoding="utf-8",
    )
    print(f"✅ Source Markdown written: {source_path}", file=sys.stderr)

    meta = ArticleMeta(
        slug=slug, title=title, date=date, source_url=url, target_lang=target_lang
    )
    meta_path = article_dir / META_NAME
    meta_path.write_text(
        json.dumps(meta.to_json(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    prompt_path = article_dir / prompt_filename(target_lang)
    prompt_path.write_text(
        build_translate_prompt(conversion.markdown, target_lang) + "\n",
        encoding="utf-8",
    )
    print(f"✅ Translation prompt written: {prompt_path}", file=sys.stderr)

    return AddUrlResult(
        slug=slug,
        dir=article_dir,
        lang=target_lang,
        prompt_path=prompt_path,
        date=date,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for adding a URL."""

    parser = argparse.ArgumentParser(
        description=(
            "Fetch a URL, extract the main article, convert it to Markdown"
            " and write source.md, meta.json and a translation prompt."
            " Translation itself is done by an external agent."
        ),
    )
    parser.add_argument("url", help="Article URL to fetch.")
    parser.add_argument(
        "--lang",
        help="Target translation language (defaults to config or zh).",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--content-root",
        help="Override the directory that holds article folders.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log conversion diagnostics.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``add_url`` CLI."""

    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        settings = resolve_runtime_settings(
            config_path=args.config,
            content_root=args.content_root,
            target_lang=args.lang,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    user_agent = settings["user_agent"]
    try:
        result = add_article(
            args.url,
            content_root=Path(settings["content_root"]),
            target_lang=settings["target_lang"],
            fetcher=lambda url: fetch_html(url, user_agent=user_agent),
        )
    except FetchError as exc:
        raise SystemExit(f"Fetch error: {exc}") from exc

    print(json.dumps(result.to_json(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
