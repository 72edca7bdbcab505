"""Print the translated articles under the content root as JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional

from articles.catalog import list_articles
from config_loader import ConfigError, resolve_runtime_settings


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for the article listing."""

    parser = argparse.ArgumentParser(
        description="List translated articles, newest first.",
    )
    parser.add_argument(
        "--lang",
        help="Translation language to list (defaults to config or zh).",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--content-root",
        help="Override the directory that holds article folders.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``list_articles`` CLI."""

    args = parse_args(argv)
    try:
        settings = resolve_runtime_settings(
            config_path=args.config,
            content_root=args.content_root,
            target_lang=args.lang,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    summaries = list_articles(
        Path(settings["content_root"]), settings["target_lang"]
    )
    print(
        json.dumps(
            [summary.to_json() for summary in summaries],
            indent=2,
            ensure_ascii=False,
        )
    )


if __name__ == "__main__":
    main()
