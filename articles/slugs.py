"""Slug derivation and unique article directories."""

from __future__ import annotations

import re
import time
import unicodedata
from pathlib import Path
from urllib.parse import urlparse

FALLBACK_SLUG = "untitled"
MAX_SLUG_LENGTH = 80
MAX_SUFFIX = 1000
RE_NON_SLUG = re.compile(r"[^a-z0-9]+")


def make_slug(text: str | None, fallback: str = FALLBACK_SLUG) -> str:
    """Lower-case ASCII slug of ``text``; ``fallback`` when nothing remains."""

    normalized = unicodedata.normalize("NFKD", str(text or "").strip())
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii").lower()
    slug = RE_NON_SLUG.sub("-", ascii_text).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    return slug or fallback


def slug_from_url(url: str) -> str:
    """Slug built from the last path segment of ``url``."""

    path = urlparse(url).path.strip("/")
    segment = path.split("/")[-1] if path else ""
    segment = re.sub(r"\.(?:html?|php|aspx?)$", "", segment, flags=re.IGNORECASE)
    return make_slug(segment)


def article_slug(title: str, url: str) -> str:
    """Prefer the title, then the URL path, then the fallback slug."""

    slug = make_slug(title, fallback="")
    return slug or slug_from_url(url)


def make_unique_slug_dir(content_root: Path, base_slug: str) -> tuple[str, Path]:
    """Create and return a directory for ``base_slug`` that did not exist.

    Existing articles are never reused: ``slug-2`` .. ``slug-999`` are tried
    before falling back to a timestamp suffix.
    """

    content_root = Path(content_root)
    content_root.mkdir(parents=True, exist_ok=True)

    candidates = [base_slug] + [
        f"{base_slug}-{index}" for index in range(2, MAX_SUFFIX)
    ]
    for slug in candidates:
        directory = content_root / slug
        try:
            directory.mkdir()
        except FileExistsError:
            continue
        return slug, directory

    slug = f"{base_slug}-{int(time.time() * 1000)}"
    directory = content_root / slug
    directory.mkdir(parents=True, exist_ok=True)
    return slug, directory
