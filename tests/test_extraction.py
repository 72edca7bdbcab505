from bs4 import BeautifulSoup

from codefence.converter import convert
from codefence.extraction import extract_article

PARAGRAPH = (
    "Code fences keep their language when the page says so, and the guesser"
    " only steps in when it does not."
)


def page(article, title="Release notes"):
    return f"""
    <html><head><title>{title}</title></head><body>
      <nav><a href="/">Home</a> <a href="/about">About</a></nav>
      <article>{article}</article>
      <footer><a href="/legal">Legal</a></footer>
    </body></html>
    """


def test_extracts_article_without_navigation():
    html = page(f"<h1>Release notes</h1><p>{PARAGRAPH}</p><p>{PARAGRAPH}</p>")

    article = extract_article(html, "https://example.com/notes")

    assert article is not None
    assert article.title == "Release notes"
    text = BeautifulSoup(article.content_html, "lxml").get_text()
    assert "guesser only steps in" in text
    assert "Home" not in text
    assert "Legal" not in text


def test_code_inside_aside_survives_conversion():
    html = page(
        f"<h1>Release steps</h1><p>{PARAGRAPH}</p>"
        "<aside><p>Note: run this first.</p>"
        '<pre class="language-bash"><code>rm -rf build dist</code></pre></aside>'
        f"<p>{PARAGRAPH}</p>"
    )

    markdown = convert(html, "https://example.com/steps").markdown

    assert "```bash\nrm -rf build dist\n```" in markdown


def test_blank_input_is_not_extracted():
    assert extract_article("") is None
    assert extract_article("   \n") is None


def test_missing_title_is_empty():
    html = f"<html><body><article><p>{PARAGRAPH}</p><p>{PARAGRAPH}</p></article></body></html>"
    article = extract_article(html)
    assert article is not None
    assert article.title == ""
