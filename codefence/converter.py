"""Convert an article page into Markdown with language-tagged code fences."""

from __future__ import annotations

import logging
import re
from collections import Counter
from urllib.parse import urljoin

try:
    from bs4 import BeautifulSoup, Tag  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4"
    ) from exc

try:
    from markdownify import ATX, MarkdownConverter  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'markdownify'. Install with pip install"
        " markdownify"
    ) from exc

from .extraction import HTML_PARSER, extract_article
from .fences import apply_default, pick_default
from .guesser import guess_language
from .hints import apply_hints, capture_hints, code_element, explicit_language
from .models import ConversionResult, ExtractedArticle

logger = logging.getLogger(__name__)

RE_BACKTICK_FENCE = re.compile(r"^ {0,3}(`{3,})", re.MULTILINE)
URL_ATTRIBUTES = (("a", "href"), ("img", "src"))


def fence_for(code_text: str) -> str:
    """Return a backtick fence longer than any fence inside ``code_text``."""

    longest = max(
        (len(run) for run in RE_BACKTICK_FENCE.findall(code_text)), default=0
    )
    return "`" * max(3, longest + 1)


class FencedCodeConverter(MarkdownConverter):
    """Markdownify converter that writes fenced code with an info string.

    One instance handles one document; ``fence_counts`` tallies the language
    of every fence it emitted.
    """

    def __init__(self, **options):
        options.setdefault("heading_style", ATX)
        super().__init__(**options)
        self.fence_counts: Counter[str] = Counter()

    def convert_pre(self, el, text, parent_tags):
        code = code_element(el)
        raw = code.get_text()
        if not raw.strip():
            return super().convert_pre(el, text, parent_tags)

        code_text = raw.rstrip("\n")
        language = explicit_language(el, code) or guess_language(code_text)
        if language:
            self.fence_counts[language] += 1

        fence = fence_for(code_text)
        return f"\n\n{fence}{language or ''}\n{code_text}\n{fence}\n\n"


def page_title(document: BeautifulSoup) -> str:
    if document.title is None:
        return ""
    return document.title.get_text()


def body_fallback(document: BeautifulSoup) -> ExtractedArticle:
    """Use the raw ``<body>`` when article extraction is unavailable."""

    body = document.body
    content_html = body.decode_contents() if body is not None else str(document)
    return ExtractedArticle(title=page_title(document), content_html=content_html)


def resolve_relative_urls(document: Tag, base_url: str) -> None:
    if not base_url:
        return
    for tag_name, attribute in URL_ATTRIBUTES:
        for element in document.find_all(tag_name):
            value = element.get(attribute)
            if isinstance(value, str) and value.strip():
                element[attribute] = urljoin(base_url, value.strip())


def convert(html: str, base_url: str = "") -> ConversionResult:
    """Convert a full HTML page into a title and Markdown body.

    Steps run strictly in order: language hints are captured from the
    original document, the article is extracted, hints are reattached,
    Markdown is rendered, and a dominant page language is backfilled into
    untagged fences.
    """

    original = BeautifulSoup(html or "", HTML_PARSER)
    pack = capture_hints(original)

    article = extract_article(html or "", base_url)
    if article is None:
        logger.info("Falling back to the raw document body for %s", base_url)
        article = body_fallback(original)
    title = article.title or page_title(original)

    content = BeautifulSoup(article.content_html, HTML_PARSER)
    resolve_relative_urls(content, base_url)
    apply_hints(content, pack)

    converter = FencedCodeConverter()
    markdown = converter.convert_soup(content)

    default_language = pick_default(converter.fence_counts)
    if default_language:
        logger.debug("Page default code language: %s", default_language)
        markdown = apply_default(markdown, default_language)

    return ConversionResult(title=title.strip(), markdown=markdown.strip() + "\n")


__all__ = [
    "FencedCodeConverter",
    "body_fallback",
    "convert",
    "fence_for",
    "resolve_relative_urls",
]
