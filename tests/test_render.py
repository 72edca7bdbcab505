from articles.render import fix_strong_adjacency, render_markdown


def test_space_added_after_glued_strong():
    assert fix_strong_adjacency("**注意：**这里") == "**注意：** 这里"
    assert fix_strong_adjacency("**Note:**Run it") == "**Note:** Run it"
    assert fix_strong_adjacency("__粗体__2") == "__粗体__ 2"


def test_strong_followed_by_space_or_punctuation_is_unchanged():
    text = "**bold** text, **bold**。and **end**"
    assert fix_strong_adjacency(text) == text


def test_fenced_code_is_untouched():
    text = "```python\nprint(2**3**x)\n```\n**提示：**结束"
    assert fix_strong_adjacency(text) == (
        "```python\nprint(2**3**x)\n```\n**提示：** 结束"
    )


def test_render_markdown_produces_strong_and_code():
    html = render_markdown("**步骤：**安装依赖\n\n```bash\nnpm install\n```\n")
    assert "<p><strong>步骤：</strong> 安装依赖</p>" in html
    assert '<code class="language-bash">npm install\n</code>' in html


def test_render_markdown_tables():
    html = render_markdown("| a | b |\n| --- | --- |\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>1</td>" in html
