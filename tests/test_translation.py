import pytest

from articles.frontmatter import dump_document, parse_document
from articles.translation import (
    TranslationError,
    apply_translation,
    normalize_emphasis_spacing,
    split_translated_title,
    strip_wrapping_fence,
)


@pytest.mark.parametrize("info", ["markdown", "md", ""])
def test_strip_wrapping_fence(info):
    text = f"```{info}\n# 标题\n\n正文\n```\n"
    assert strip_wrapping_fence(text) == "# 标题\n\n正文\n"


def test_document_starting_and_ending_with_code_is_kept():
    text = "```\nx\n```\n\nmiddle\n\n```\ny\n```"
    assert strip_wrapping_fence(text) == text + "\n"


def test_labelled_code_fence_is_not_a_wrapper():
    text = "```python\nprint(1)\n```"
    assert strip_wrapping_fence(text) == text + "\n"


def test_indented_closing_fence_is_not_a_wrapper():
    text = "```\n# 标题\n\n正文\n  ```"
    assert strip_wrapping_fence(text) == text + "\n"


def test_normalize_emphasis_spacing():
    assert normalize_emphasis_spacing("这是 ** 重点 ** 内容") == "这是 **重点** 内容"
    assert normalize_emphasis_spacing("**　全角　**") == "**全角**"


def test_emphasis_inside_code_is_untouched():
    markdown = "keep `** a **` and ** b **\n```\n** c **\n```\n"
    assert normalize_emphasis_spacing(markdown) == (
        "keep `** a **` and **b**\n```\n** c **\n```\n"
    )


def test_split_translated_title():
    assert split_translated_title("\n# 标题\n\n\n正文\n") == ("标题", "正文\n")
    assert split_translated_title("正文") == (None, "正文")


def write_source(content_root, slug="post"):
    article_dir = content_root / slug
    article_dir.mkdir(parents=True)
    (article_dir / "source.md").write_text(
        dump_document(
            "# Source\n",
            {
                "title": "Source Title",
                "date": "2024-05-06T07:08:09Z",
                "sourceUrl": "https://example.com/post",
                "lang": "source",
            },
        ),
        encoding="utf-8",
    )
    return article_dir


def test_apply_translation_writes_language_file(tmp_path):
    write_source(tmp_path)
    translated = "```markdown\n# 译文标题\n\n这是 ** 重点 **。\n```"

    out_path = apply_translation("post", translated, content_root=tmp_path, lang="zh")

    assert out_path == tmp_path / "post" / "zh.md"
    metadata, body = parse_document(out_path.read_text(encoding="utf-8"))
    assert metadata == {
        "title": "译文标题",
        "date": "2024-05-06T07:08:09Z",
        "sourceUrl": "https://example.com/post",
        "lang": "zh",
    }
    assert body == "这是 **重点**。\n"


def test_apply_translation_keeps_source_title_without_heading(tmp_path):
    write_source(tmp_path)
    out_path = apply_translation("post", "只有正文", content_root=tmp_path, lang="ja")
    metadata, body = parse_document(out_path.read_text(encoding="utf-8"))
    assert metadata["title"] == "Source Title"
    assert metadata["lang"] == "ja"
    assert body == "只有正文\n"


def test_apply_translation_with_unclosed_fence_keeps_text(tmp_path):
    write_source(tmp_path)
    translated = "```\n# 标题\n\n正文\n  ```"

    out_path = apply_translation("post", translated, content_root=tmp_path, lang="zh")

    metadata, body = parse_document(out_path.read_text(encoding="utf-8"))
    assert metadata["title"] == "Source Title"
    assert body == translated + "\n"


def test_apply_translation_requires_source(tmp_path):
    with pytest.raises(TranslationError, match="Missing source.md"):
        apply_translation("missing", "# T", content_root=tmp_path, lang="zh")


def test_apply_translation_rejects_blank_input(tmp_path):
    write_source(tmp_path)
    with pytest.raises(TranslationError, match="No translated markdown"):
        apply_translation("post", "  \n", content_root=tmp_path, lang="zh")


def test_apply_translation_reports_broken_frontmatter(tmp_path):
    article_dir = tmp_path / "post"
    article_dir.mkdir()
    (article_dir / "source.md").write_text("---\ntitle: [x\n---\n", encoding="utf-8")
    with pytest.raises(TranslationError, match="Invalid frontmatter"):
        apply_translation("post", "# T", content_root=tmp_path, lang="zh")
