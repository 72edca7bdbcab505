"""Heuristic language guessing for code blocks without explicit hints.

The guesser is deliberately conservative: a wrong label on a fenced block is
worse than no label, so every language has a minimum score and close calls
are discarded.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_MIN_SCORE = 5
MIN_SCORE_BY_LANGUAGE: dict[str, int] = {
    "jsx": 4,
    "tsx": 6,
    "javascript": 4,
    "typescript": 4,
    "python": 4,
    "bash": 4,
}
CONFIDENCE_MARGIN = 2

SHEBANGS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"^#!\s*/(?:usr/)?(?:local/)?bin/(?:env\s+)?(?:bash|sh)\b"),
        "bash",
    ),
    (
        re.compile(r"^#!\s*/(?:usr/)?(?:local/)?bin/(?:env\s+)?python[0-9.]*\b"),
        "python",
    ),
    (
        re.compile(r"^#!\s*/(?:usr/)?(?:local/)?bin/(?:env\s+)?node(?:js)?\b"),
        "javascript",
    ),
)


@dataclass(frozen=True, slots=True)
class LanguageSignal:
    """A single pattern that, when present, adds ``weight`` to ``language``."""

    language: str
    pattern: re.Pattern[str]
    weight: int

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _signal(language: str, pattern: str, weight: int, flags: int = 0) -> LanguageSignal:
    return LanguageSignal(language, re.compile(pattern, flags), weight)


M = re.MULTILINE

DEFAULT_SIGNALS: tuple[LanguageSignal, ...] = (
    # JavaScript and React
    _signal(
        "javascript",
        r"\b(?:useState|useEffect|useMemo|useCallback|useRef|useContext|createContext)\s*\(",
        3,
    ),
    _signal("javascript", r"^\s*import\s+.+?\s+from\s+['\"]", 2, M),
    _signal("javascript", r"^\s*export\s+(?:default|const|function|class|async)\b", 2, M),
    _signal("javascript", r"\bmodule\.exports\b|\brequire\s*\(\s*['\"]", 2),
    _signal("javascript", r"\bconsole\.(?:log|error|warn)\s*\(", 2),
    _signal("javascript", r"\)\s*=>", 1),
    # TypeScript
    _signal(
        "typescript",
        r"\binterface\s+[A-Z]\w*(?:<[^>]*>)?\s*(?:extends\s+[^{]+)?\{"
        r"|\btype\s+[A-Z]\w*(?:<[^>]*>)?\s*=",
        4,
    ),
    _signal("typescript", r"\b(?:as\s+const|satisfies)\b", 3),
    _signal(
        "typescript",
        r"(?:^|[(,])\s*[A-Za-z_][A-Za-z0-9_]*\??\s*:\s*"
        r"(?:string|number|boolean|any|unknown|void|never|[A-Z][A-Za-z0-9_]*)"
        r"(?:\[\]|<[^<>\n]{0,40}>)?\s*[,)=]",
        2,
        M,
    ),
    # JSX
    _signal("jsx", r"\breturn\s*\(?\s*<[A-Za-z]", 4),
    _signal("jsx", r"<([A-Za-z][\w.]*)(?:\s[^<>]*)?>[\s\S]*?</\1>", 2),
    _signal("jsx", r"<[A-Z][\w.]*(?:\s[^<>]*)?/>", 2),
    _signal("jsx", r"\s(?:className|onClick|onChange|key)=\{", 2),
    # Python
    _signal("python", r"^\s*(?:async\s+)?def\s+[A-Za-z_][A-Za-z0-9_]*\s*\(", 4, M),
    _signal("python", r"^\s*from\s+[\w.]+\s+import\s+\w", 2, M),
    _signal("python", r"^\s*import\s+[\w.]+(?:\s+as\s+\w+)?\s*$", 1, M),
    _signal("python", r"^\s*class\s+\w+(?:\([^)]*\))?:\s*$", 3, M),
    _signal("python", r"if\s+__name__\s*==\s*['\"]__main__['\"]", 4),
    _signal("python", r"^\s*(?:elif|except)\b.*:\s*$", 2, M),
    # Shell
    _signal("bash", r"^\s*set\s+-(?:e|eu|ex|euo\s+pipefail|euxo\s+pipefail)\b", 4, M),
    _signal("bash", r"\|\s*(?:grep|awk|sed|xargs|sort|uniq|head|tail|wc|tee|cut|tr)\b", 2),
    _signal(
        "bash",
        r"^\s*(?:sudo|apt-get|apt|brew|yum|dnf|curl|wget|chmod|chown|mkdir|cd|rm|cp|mv)\s",
        2,
        M,
    ),
    _signal("bash", r"^\s*(?:npm|pnpm|yarn|npx|pip3?|docker|git|kubectl)\s+[a-z]", 2, M),
    _signal("bash", r"^\s*export\s+[A-Z_][A-Z0-9_]*=", 2, M),
    _signal("bash", r"^\s*if\s+\[\[?\s", 3, M),
    _signal("bash", r"^\s*(?:fi|done|esac)\s*$", 2, M),
    # Go
    _signal("go", r"^package\s+\w+\s*$[\s\S]*^func\s", 6, M),
    _signal("go", r"\bfmt\.(?:Print|Sprint|Fprint|Errorf)", 3),
    _signal("go", r"\b\w+\s*:=\s*", 1),
    _signal("go", r"\bfunc\s*\([a-z]\w*\s+\*?[A-Z]\w*\)", 3),
    # Rust
    _signal("rust", r"\bfn\s+main\s*\(\s*\)", 4),
    _signal("rust", r"\bprintln!\s*\(", 4),
    _signal("rust", r"\blet\s+mut\b", 3),
    _signal("rust", r"^\s*use\s+\w+(?:::[\w{}*, ]+)+;", 3, M),
    _signal("rust", r"\bimpl(?:<[^>]*>)?\s+\w+", 2),
    _signal("rust", r"\bfn\s+\w+\s*(?:<[^>]*>)?\([^)]*\)\s*->", 2),
    # Swift
    _signal("swift", r"^\s*import\s+(?:SwiftUI|UIKit|Foundation|Combine)\s*$", 4, M),
    _signal("swift", r"\b(?:guard|if)\s+let\b", 3),
    _signal("swift", r"\bstruct\s+\w+\s*:\s*(?:View|App)\b|\bsome\s+View\b", 3),
    _signal("swift", r"@(?:State|Binding|Published|MainActor)\b", 3),
    _signal("swift", r"^\s*func\s+\w+\s*\(", 2, M),
    # C#
    _signal("csharp", r"^\s*using\s+System(?:\.\w+)*\s*;", 4, M),
    _signal("csharp", r"\bConsole\.Write(?:Line)?\s*\(", 4),
    _signal("csharp", r"\{\s*get;\s*(?:(?:private\s+|init;\s*)?set;\s*)?\}", 3),
    _signal("csharp", r"^\s*namespace\s+[\w.]+\s*(?:;|\{|$)", 2, M),
    _signal("csharp", r"\bvar\s+\w+\s*=\s*new\s+[A-Z]\w*", 2),
    # Kotlin
    _signal("kotlin", r"^\s*(?:(?:private|internal|override|suspend)\s+)*fun\s+\w+\s*\(", 4, M),
    _signal("kotlin", r"\b(?:data\s+class|companion\s+object|sealed\s+class)\b", 3),
    _signal("kotlin", r"^\s*val\s+\w+(?:\s*:\s*\w+)?\s*=", 2, M),
    _signal("kotlin", r"(?<![.\w])println\s*\(", 2),
    # HTML
    _signal("html", r"^\s*<!doctype\s+html", 6, M | re.IGNORECASE),
    _signal("html", r"<(?:html|head|body)\b", 3),
    _signal("html", r"<[a-z][\w-]*\s[^<>]*\bclass=\"", 2),
)


RE_JSX_CONTEXT = re.compile(
    r"\breturn\s*\(?\s*<[A-Za-z]|\s(?:className|onClick|onChange|key)=\{"
)


def _trimmed(code: Optional[str]) -> str:
    return (code or "").replace("\r", "").strip()


def _shebang_language(text: str) -> Optional[str]:
    first_line = text.split("\n", 1)[0]
    for pattern, language in SHEBANGS:
        if pattern.match(first_line):
            return language
    return None


def score_code(
    text: str, signals: Sequence[LanguageSignal] = DEFAULT_SIGNALS
) -> Counter[str]:
    """Return the additive per-language scores for ``text``."""

    scores: Counter[str] = Counter()
    for signal in signals:
        if signal.matches(text):
            scores[signal.language] += signal.weight
    return scores


def _min_score(language: str) -> int:
    return MIN_SCORE_BY_LANGUAGE.get(language, DEFAULT_MIN_SCORE)


def guess_language(
    code: Optional[str],
    signals: Sequence[LanguageSignal] = DEFAULT_SIGNALS,
) -> Optional[str]:
    """Guess the language of ``code`` or return None when unsure."""

    text = _trimmed(code)
    if not text:
        return None

    shebang = _shebang_language(text)
    if shebang:
        return shebang

    scores = score_code(text, signals)

    # Bare markup (XML project files, SVG) scores jsx on tags alone.
    has_script = scores["javascript"] or scores["typescript"]
    if not (has_script or RE_JSX_CONTEXT.search(text)):
        del scores["jsx"]

    # JSX outranks the plain JS signals that usually come with it.
    if scores["jsx"] >= _min_score("jsx"):
        if scores["typescript"] >= _min_score("typescript"):
            return "tsx"
        return "jsx"

    ranked = [item for item in scores.most_common() if item[1] > 0]
    if not ranked:
        return None
    best_language, best_score = ranked[0]
    second_score = ranked[1][1] if len(ranked) > 1 else 0

    min_score = _min_score(best_language)
    if best_score < min_score:
        return None
    if (
        best_score - second_score < CONFIDENCE_MARGIN
        and best_score < min_score + CONFIDENCE_MARGIN
    ):
        return None
    return best_language


__all__ = [
    "DEFAULT_SIGNALS",
    "LanguageSignal",
    "MIN_SCORE_BY_LANGUAGE",
    "guess_language",
    "score_code",
]
