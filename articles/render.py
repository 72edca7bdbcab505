"""Render stored article Markdown to HTML."""

from __future__ import annotations

import re

try:
    from markdown_it import MarkdownIt
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'markdown-it-py'. Install with pip install markdown-it-py"
    ) from exc

from codefence.fences import iter_fence_lines, split_lines

# A closing strong marker glued to a letter, digit or CJK ideograph is not
# right-flanking under CommonMark, so the span renders literally.
RE_STRONG_SPAN = re.compile(r"(\*\*|__)(?:(?!\1)[^\n])+?\1")
RE_ADJACENT_CHAR = re.compile(r"[0-9A-Za-z\u4e00-\u9fff]")


def _space_after_strong(line: str) -> str:
    def replace(match: re.Match[str]) -> str:
        following = line[match.end() : match.end() + 1]
        if RE_ADJACENT_CHAR.match(following):
            return match.group(0) + " "
        return match.group(0)

    return RE_STRONG_SPAN.sub(replace, line)


def fix_strong_adjacency(markdown: str) -> str:
    """Insert a space after ``**bold**`` when text follows it directly.

    ``**注意：**这里`` becomes ``**注意：** 这里``. Lines inside fenced code
    blocks are not touched.
    """

    lines = split_lines(markdown)
    for fence_line in iter_fence_lines(lines):
        if fence_line.kind == "text":
            lines[fence_line.index] = _space_after_strong(fence_line.text)
    return "\n".join(lines)


def render_markdown(markdown: str) -> str:
    md = MarkdownIt("commonmark").enable("table")
    return md.render(fix_strong_adjacency(markdown))


__all__ = ["fix_strong_adjacency", "render_markdown"]
