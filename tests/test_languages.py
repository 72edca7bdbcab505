import pytest

from codefence.languages import LANGUAGE_ALIASES, detect_from_classes, normalize_language


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("cs", "csharp"),
        ("C#", "csharp"),
        (" JS ", "javascript"),
        ("ts", "typescript"),
        ("sh", "bash"),
        ("shell", "bash"),
        ("py", "python"),
        ("kt", "kotlin"),
        ("Rust", "rust"),
        ("elixir", "elixir"),
    ],
)
def test_normalize_language(raw, expected):
    assert normalize_language(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_normalize_language_empty(raw):
    assert normalize_language(raw) is None


def test_normalize_language_is_idempotent_on_aliases():
    for alias in LANGUAGE_ALIASES:
        once = normalize_language(alias)
        assert normalize_language(once) == once


def test_detect_language_class_on_code_element():
    assert detect_from_classes(["highlight", "language-py", ""]) == "python"


def test_detect_lang_prefix():
    assert detect_from_classes(["lang-TS"]) == "typescript"


def test_detect_prefers_language_over_ext_token():
    assert detect_from_classes(["ext-rb", None, "language-go"]) == "go"


def test_detect_ext_token():
    assert detect_from_classes(["code-block ext-sh"]) == "bash"


def test_detect_nothing():
    assert detect_from_classes([None, "", "highlight"]) is None
    assert detect_from_classes([]) is None
