"""Simplify example sentences for learners at beginner levels."""
from __future__ import annotations

from droword.core.proficiency import LearningLevel

JAPANESE_NAMES = {"日本語", "Japanese", "日本語 (Japanese)"}
CHINESE_NAMES = {"中文", "汉语", "Chinese", "中文 (Chinese)"}

MASK_CHAR = "•"
ELLIPSIS = "…"

# Unified ideographs plus extensions A through F.
CJK_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0x2CEB0, 0x2EBEF),
)

BEGINNER_LEVELS = {LearningLevel.A1, LearningLevel.A2}


def is_cjk_ideograph(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in CJK_RANGES)


def shorten(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + ELLIPSIS


def simplify_punctuation(text: str) -> str:
    return text.replace(",", ") ").replace(";", ". ")


def _mask_ideographs(text: str) -> str:
    return "".join(MASK_CHAR if is_cjk_ideograph(char) else char for char in text)


def adapt_example(example: str, target_language: str, level: LearningLevel) -> str:
    """Return ``example`` adjusted to what a learner at ``level`` can read."""

    level = LearningLevel(level)
    if target_language in JAPANESE_NAMES or target_language in CHINESE_NAMES:
        if level in BEGINNER_LEVELS:
            return shorten(_mask_ideographs(example), 45)
        return example

    if level is LearningLevel.A1:
        return shorten(simplify_punctuation(example), 60)
    if level is LearningLevel.A2:
        return shorten(example, 80)
    return example
