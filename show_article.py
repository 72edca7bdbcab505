"""Print one translated article, rendered to HTML, as JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional

from articles.catalog import get_article
from config_loader import ConfigError, resolve_runtime_settings


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for showing an article."""

    parser = argparse.ArgumentParser(
        description="Render a translated article's Markdown to HTML.",
    )
    parser.add_argument("slug", help="Article directory name.")
    parser.add_argument(
        "--lang",
        help="Translation language to show (defaults to config or zh).",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--content-root",
        help="Override the directory that holds article folders.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``show_article`` CLI."""

    args = parse_args(argv)
    try:
        settings = resolve_runtime_settings(
            config_path=args.config,
            content_root=args.content_root,
            target_lang=args.lang,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    article = get_article(
        Path(settings["content_root"]), args.slug, settings["target_lang"]
    )
    if article is None:
        raise SystemExit(
            f"Article not found: {args.slug} ({settings['target_lang']})"
        )
    print(json.dumps(article.to_json(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
