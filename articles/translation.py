"""Apply an externally produced translation to a stored article."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

import yaml

from codefence.fences import iter_fence_lines, split_lines

from .frontmatter import dump_document, parse_document

SOURCE_NAME = "source.md"

MARKDOWN_INFO = ("markdown", "md")
RE_INLINE_TICKS = re.compile(r"(`+)")
RE_STRONG_SPAN = re.compile(r"\*\*(.*?)\*\*")
RE_EDGE_SPACE = re.compile(r"^[\t \u00a0\u3000]+|[\t \u00a0\u3000]+$")
RE_TITLE_LINE = re.compile(r"^#\s+(.+?)\s*$")


class TranslationError(Exception):
    """Raised when a translation cannot be applied."""


def strip_wrapping_fence(markdown: str) -> str:
    """Remove a code fence that wraps the whole translated document.

    A ``markdown``/``md`` fence is a wrapper when the last line closes it. An
    unlabelled fence is a wrapper only when nothing closes it earlier, since
    otherwise the text merely starts and ends with code blocks.
    """

    text = (markdown or "").strip()
    lines = split_lines(text)
    scanned = list(iter_fence_lines(lines))
    if len(lines) < 2 or scanned[0].kind != "open":
        return text + "\n"

    opener = scanned[0]
    if lines[-1].rstrip() != opener.token:
        return text + "\n"
    if opener.info.lower() in MARKDOWN_INFO:
        wrapped = True
    elif not opener.info:
        first_close = next(
            (line for line in scanned if line.kind == "close"), None
        )
        wrapped = first_close is not None and first_close.index == len(lines) - 1
    else:
        wrapped = False
    if wrapped:
        text = "\n".join(lines[1:-1]).strip()
    return text + "\n"


def _trim_strong_spans(segment: str) -> str:
    return RE_STRONG_SPAN.sub(
        lambda match: f"**{RE_EDGE_SPACE.sub('', match.group(1))}**", segment
    )


def _normalize_line(line: str) -> str:
    """Trim spaces inside ``**`` spans, skipping inline code."""

    parts = RE_INLINE_TICKS.split(line)
    in_inline = False
    out: list[str] = []
    for part in parts:
        if part and set(part) == {"`"}:
            in_inline = not in_inline
            out.append(part)
        elif in_inline:
            out.append(part)
        else:
            out.append(_trim_strong_spans(part))
    return "".join(out)


def normalize_emphasis_spacing(markdown: str) -> str:
    """Fix ``** bold**`` style spans so CommonMark renders them as bold.

    Fenced code blocks and inline code are left byte for byte.
    """

    lines = split_lines(markdown)
    for fence_line in iter_fence_lines(lines):
        if fence_line.kind == "text":
            lines[fence_line.index] = _normalize_line(fence_line.text)
    return "\n".join(lines)


def split_translated_title(markdown: str) -> tuple[Optional[str], str]:
    """Pull a leading ``# Title`` line out of ``markdown``."""

    lines = split_lines(markdown)
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1
    match = RE_TITLE_LINE.match(lines[index]) if index < len(lines) else None
    if not match:
        return None, markdown

    index += 1
    while index < len(lines) and not lines[index].strip():
        index += 1
    body = "\n".join(lines[index:]).strip() + "\n"
    return match.group(1).strip(), body


def apply_translation(
    slug: str,
    translated: str,
    *,
    content_root: Path,
    lang: str,
) -> Path:
    """Write ``<lang>.md`` for ``slug`` and return its path."""

    article_dir = Path(content_root) / slug
    source_path = article_dir / SOURCE_NAME
    if not source_path.is_file():
        raise TranslationError(f"Missing {SOURCE_NAME} at: {source_path}")

    try:
        source_meta, _ = parse_document(source_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise TranslationError(
            f"Invalid frontmatter in {source_path}: {exc}"
        ) from exc

    if not (translated or "").strip():
        raise TranslationError(
            "No translated markdown provided. Use --in <file> or pipe via stdin."
        )

    body = strip_wrapping_fence(translated)
    body = normalize_emphasis_spacing(body)
    title, body = split_translated_title(body)

    metadata = {
        "title": title or source_meta.get("title") or slug,
        "date": source_meta.get("date"),
        "sourceUrl": source_meta.get("sourceUrl"),
        "lang": lang,
    }
    out_path = article_dir / f"{lang}.md"
    out_path.write_text(dump_document(body, metadata), encoding="utf-8")
    return out_path
