"""Write a translated Markdown file next to an article's source.md."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from articles.translation import TranslationError, apply_translation
from config_loader import ConfigError, resolve_runtime_settings


def read_translated(in_file: Optional[str]) -> str:
    """Read the translation from ``in_file`` or, when omitted, stdin."""

    if in_file:
        return Path(in_file).expanduser().resolve().read_text(encoding="utf-8")
    return sys.stdin.read()


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for applying a translation."""

    parser = argparse.ArgumentParser(
        description=(
            "Apply translated Markdown to content/articles/<slug>/<lang>.md."
            " Expected input: a translated '# Title' line, a blank line,"
            " then the translated body."
        ),
    )
    parser.add_argument("slug", help="Article directory name.")
    parser.add_argument(
        "--lang",
        help="Language code of the translation (defaults to config or zh).",
    )
    parser.add_argument(
        "--in",
        dest="in_file",
        help="Translated Markdown file (reads stdin when omitted).",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--content-root",
        help="Override the directory that holds article folders.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``apply_translation`` CLI."""

    args = parse_args(argv)
    try:
        settings = resolve_runtime_settings(
            config_path=args.config,
            content_root=args.content_root,
            target_lang=args.lang,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    try:
        translated = read_translated(args.in_file)
    except OSError as exc:
        raise SystemExit(f"Translation error: {exc}") from exc

    lang = settings["target_lang"]
    try:
        out_path = apply_translation(
            args.slug,
            translated,
            content_root=Path(settings["content_root"]),
            lang=lang,
        )
    except TranslationError as exc:
        raise SystemExit(f"Translation error: {exc}") from exc

    print(
        json.dumps(
            {"ok": True, "slug": args.slug, "lang": lang, "outPath": str(out_path)},
            indent=2,
            ensure_ascii=False,
        )
    )


if __name__ == "__main__":
    main()
