import json

import pytest
import yaml

from articles.frontmatter import dump_document, parse_document
from articles.models import AddUrlResult, ArticleMeta
from articles.prompt import build_translate_prompt, language_name
from articles.slugs import article_slug, make_slug, make_unique_slug_dir, slug_from_url


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello, World!", "hello-world"),
        ("Café Crème", "cafe-creme"),
        ("  --Already-slugged--  ", "already-slugged"),
        ("日本語", "untitled"),
        (None, "untitled"),
    ],
)
def test_make_slug(text, expected):
    assert make_slug(text) == expected


def test_make_slug_is_capped():
    assert len(make_slug("word " * 50)) <= 80


def test_slug_from_url():
    assert slug_from_url("https://example.com/blog/my-post.html") == "my-post"
    assert slug_from_url("https://example.com/2024/01/Some_Title/") == "some-title"
    assert slug_from_url("https://example.com/") == "untitled"


def test_article_slug_prefers_title():
    assert article_slug("Great Post", "https://example.com/x") == "great-post"
    assert article_slug("中文标题", "https://example.com/notes/x1") == "x1"


def test_unique_slug_dirs(tmp_path):
    first = make_unique_slug_dir(tmp_path, "post")
    second = make_unique_slug_dir(tmp_path, "post")
    assert first == ("post", tmp_path / "post")
    assert second == ("post-2", tmp_path / "post-2")
    assert second[1].is_dir()


def test_dump_document_drops_missing_values():
    text = dump_document("Body", {"title": "T", "date": None, "lang": "zh"})
    assert text == "---\ntitle: T\nlang: zh\n---\nBody\n"


def test_frontmatter_round_trip():
    metadata = {
        "title": "标题: with colon",
        "date": "2024-01-02T03:04:05Z",
        "sourceUrl": "https://example.com/a",
    }
    parsed, body = parse_document(dump_document("# Hi\n", metadata))
    assert parsed == metadata
    assert body == "# Hi\n"


def test_parse_document_without_frontmatter():
    assert parse_document("just text") == ({}, "just text")


def test_parse_document_converts_yaml_dates():
    metadata, _ = parse_document("---\ndate: 2024-01-02\n---\nx\n")
    assert metadata["date"] == "2024-01-02"


def test_parse_document_rejects_broken_yaml():
    with pytest.raises(yaml.YAMLError):
        parse_document("---\ntitle: [unclosed\n---\nx\n")


def test_translate_prompt():
    prompt = build_translate_prompt("\n# Hello\n\nWorld\n", "zh")
    lines = prompt.split("\n")
    assert lines[0] == "你是一个翻译助手。请把下面的 Markdown 内容翻译成简体中文。"
    assert prompt.endswith("---\n# Hello\n\nWorld")


def test_language_name_passes_unknown_codes_through():
    assert language_name("ja") == "日本語"
    assert language_name("fr") == "fr"


def test_model_json_keys(tmp_path):
    meta = ArticleMeta(
        slug="a", title="A", date="2024-01-01T00:00:00Z",
        source_url="https://example.com/a", target_lang="zh",
    )
    assert json.loads(json.dumps(meta.to_json()))["sourceUrl"] == "https://example.com/a"

    result = AddUrlResult(
        slug="a", dir=tmp_path, lang="zh",
        prompt_path=tmp_path / "p.txt", date="2024-01-01T00:00:00Z",
    )
    assert result.to_json() == {
        "ok": True,
        "slug": "a",
        "dir": str(tmp_path),
        "lang": "zh",
        "promptPath": str(tmp_path / "p.txt"),
        "date": "2024-01-01T00:00:00Z",
    }
