"""Translation prompt handed to the external translating agent."""

from __future__ import annotations

LANGUAGE_NAMES = {
    "zh": "简体中文",
    "zh-cn": "简体中文",
    "zh-tw": "繁體中文",
    "ja": "日本語",
    "en": "English",
}


def language_name(lang: str) -> str:
    return LANGUAGE_NAMES.get(lang.strip().lower(), lang)


def build_translate_prompt(markdown: str, lang: str = "zh") -> str:
    """Return the translation instructions followed by ``markdown``."""

    return "\n".join(
        [
            f"你是一个翻译助手。请把下面的 Markdown 内容翻译成{language_name(lang)}。",
            "要求：",
            "- 保留 Markdown 结构（标题/列表/引用/表格/链接）。",
            "- 代码块、命令、URL、文件路径保持原样，不要翻译。",
            "- 术语以忠实原意为主，但整体表达要通顺自然（约 6/4：忠实/顺畅）。",
            '- **必须同时翻译标题**：请先输出一行 Markdown 一级标题（以 "# " 开头），作为译文标题。',
            "- 然后空一行，再输出译文正文（不要再重复标题）。",
            "- 只输出翻译结果本身，不要附加解释、不要加前后缀。",
            "",
            "---",
            (markdown or "").strip(),
        ]
    )
