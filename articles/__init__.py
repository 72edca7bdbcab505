"""Article storage helpers: slugs, frontmatter, prompts and translations."""

from .catalog import get_article, list_articles
from .frontmatter import dump_document, parse_document
from .models import AddUrlResult, ArticleDetail, ArticleMeta, ArticleSummary
from .prompt import build_translate_prompt
from .render import fix_strong_adjacency, render_markdown
from .slugs import article_slug, make_slug, make_unique_slug_dir
from .translation import (
    TranslationError,
    apply_translation,
    normalize_emphasis_spacing,
    split_translated_title,
    strip_wrapping_fence,
)

__all__ = [
    "AddUrlResult",
    "ArticleDetail",
    "ArticleMeta",
    "ArticleSummary",
    "TranslationError",
    "apply_translation",
    "article_slug",
    "build_translate_prompt",
    "dump_document",
    "fix_strong_adjacency",
    "get_article",
    "list_articles",
    "make_slug",
    "make_unique_slug_dir",
    "normalize_emphasis_spacing",
    "parse_document",
    "render_markdown",
    "split_translated_title",
    "strip_wrapping_fence",
]
