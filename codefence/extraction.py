"""Pull the main article out of a rendered page with readability-lxml."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup
from lxml.etree import ParserError

try:
    from readability import Document  # type: ignore[import-not-found]
    from readability.readability import Unparseable  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'readability-lxml'. Install with pip install"
        " readability-lxml"
    ) from exc

from .models import ExtractedArticle

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"
NO_TITLE = "[no-title]"


def extract_article(html: str, base_url: str = "") -> Optional[ExtractedArticle]:
    """Run readability over ``html``; None when nothing usable comes back.

    Readability may drop wrapper elements (and the classes on them) around
    short code blocks, so callers capture language hints beforehand.
    """

    if not (html or "").strip():
        return None
    try:
        document = Document(html, url=base_url or None)
        content_html = document.summary(html_partial=True)
        title = document.short_title()
    except (Unparseable, ParserError) as exc:
        logger.warning("Article extraction failed for %s: %s", base_url, exc)
        return None

    if not BeautifulSoup(content_html, HTML_PARSER).get_text(strip=True):
        logger.warning("Article extraction returned no text for %s", base_url)
        return None
    if title == NO_TITLE:
        title = ""
    logger.debug("Extracted %d characters of article HTML", len(content_html))
    return ExtractedArticle(title=title or "", content_html=content_html)


__all__ = ["extract_article"]
