"""Fence scanning and page-level default language propagation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Literal, Mapping, Optional

logger = logging.getLogger(__name__)

RE_FENCE_LINE = re.compile(r"^(`{3,}|~{3,})(.*)$")
RE_LINE_BREAK = re.compile(r"\r?\n")

MIN_DEFAULT_COUNT = 2
MIN_DEFAULT_SHARE = 0.6
MIN_DEFAULT_LEAD = 2
OVERWHELMING_COUNT = 6

FenceLineKind = Literal["text", "open", "code", "close"]


@dataclass(frozen=True, slots=True)
class FenceLine:
    """One Markdown line classified by the fence scanner."""

    index: int
    text: str
    kind: FenceLineKind
    token: str = ""
    info: str = ""


def split_lines(markdown: str) -> list[str]:
    return RE_LINE_BREAK.split(markdown or "")


def iter_fence_lines(lines: list[str]) -> Iterator[FenceLine]:
    """Classify ``lines`` as prose, fence openers, fenced code or closers.

    Fences do not nest. A fence closes only on a line whose token is the
    exact token that opened it, so a ``~~~`` line inside a backtick block is
    code.
    """

    open_token: Optional[str] = None
    for index, line in enumerate(lines):
        match = RE_FENCE_LINE.match(line)
        if open_token is None:
            if match:
                open_token = match.group(1)
                yield FenceLine(index, line, "open", open_token, match.group(2).strip())
            else:
                yield FenceLine(index, line, "text")
        elif match and match.group(1) == open_token:
            yield FenceLine(index, line, "close", open_token, match.group(2).strip())
            open_token = None
        else:
            yield FenceLine(index, line, "code")


def pick_default(counts: Mapping[str, int]) -> Optional[str]:
    """Return the page language when one clearly dominates ``counts``."""

    ranked = sorted(
        ((language, count) for language, count in counts.items() if count > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    if not ranked:
        return None
    total = sum(count for _, count in ranked)
    best_language, best = ranked[0]
    second = ranked[1][1] if len(ranked) > 1 else 0

    if best < MIN_DEFAULT_COUNT:
        return None
    if best / total < MIN_DEFAULT_SHARE:
        return None
    if best - second < MIN_DEFAULT_LEAD and best < OVERWHELMING_COUNT:
        return None
    return best_language


def apply_default(markdown: str, language: str) -> str:
    """Append ``language`` to every opening fence that has no info string."""

    lines = split_lines(markdown)
    tagged = 0
    for fence_line in iter_fence_lines(lines):
        if fence_line.kind == "open" and not fence_line.info:
            lines[fence_line.index] = f"{fence_line.token}{language}"
            tagged += 1
    if tagged:
        logger.debug("Tagged %d untyped fences as %s", tagged, language)
    return "\n".join(lines)


__all__ = [
    "FenceLine",
    "apply_default",
    "iter_fence_lines",
    "pick_default",
    "split_lines",
]
