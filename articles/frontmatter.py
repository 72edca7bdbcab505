"""YAML frontmatter reading and writing for article Markdown files."""

from __future__ import annotations

import datetime as dt
import re
from typing import Any

import yaml

RE_FRONTMATTER = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def dump_document(body: str, metadata: dict[str, Any]) -> str:
    """Return ``body`` prefixed with a YAML frontmatter block."""

    header = yaml.safe_dump(
        {key: value for key, value in metadata.items() if value is not None},
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    text = body if body.endswith("\n") else body + "\n"
    return f"---\n{header}---\n{text}"


def _plain(value: Any) -> Any:
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    return value


def parse_document(text: str) -> tuple[dict[str, Any], str]:
    """Split ``text`` into frontmatter metadata and body.

    Raises ``yaml.YAMLError`` when the frontmatter block is not valid YAML.
    """

    match = RE_FRONTMATTER.match(text or "")
    if not match:
        return {}, text or ""
    data = yaml.safe_load(match.group(1))
    metadata = (
        {str(key): _plain(value) for key, value in data.items()}
        if isinstance(data, dict)
        else {}
    )
    return metadata, text[match.end():]
