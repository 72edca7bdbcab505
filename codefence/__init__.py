"""Article HTML to Markdown conversion that keeps code block languages."""

from .converter import FencedCodeConverter, convert
from .extraction import extract_article
from .fences import apply_default, iter_fence_lines, pick_default
from .guesser import guess_language
from .hints import apply_hints, capture_hints
from .languages import detect_from_classes, normalize_language
from .models import CodeBlockHint, ConversionResult, HintPack

__all__ = [
    "CodeBlockHint",
    "ConversionResult",
    "FencedCodeConverter",
    "HintPack",
    "apply_default",
    "apply_hints",
    "capture_hints",
    "convert",
    "detect_from_classes",
    "extract_article",
    "guess_language",
    "iter_fence_lines",
    "normalize_language",
    "pick_default",
]
