"""Unicode predicates over Japanese scripts."""

from .normalizer import remove_special_characters


def is_kanji(ch: str) -> bool:
    """CJK Unified Ideographs, U+4E00-U+9FFF."""
    return len(ch) == 1 and 0x4E00 <= ord(ch) <= 0x9FFF


def is_hiragana(ch: str) -> bool:
    return len(ch) == 1 and 0x3040 <= ord(ch) <= 0x309F


def is_katakana(ch: str) -> bool:
    # Includes the long-vowel mark U+30FC
    return len(ch) == 1 and 0x30A0 <= ord(ch) <= 0x30FF


def is_kana(ch: str) -> bool:
    return is_hiragana(ch) or is_katakana(ch)


def contains_kanji(text: str) -> bool:
    return any(is_kanji(ch) for ch in text or "")


def is_only_kana(text: str) -> bool:
    """True if *text* is non-empty kana once punctuation is stripped."""
    cleaned = remove_special_characters(text or "")
    return bool(cleaned) and all(is_kana(ch) for ch in cleaned)


def kana_proportion(text: str) -> float:
    """Share of kana among the non-punctuation characters of *text*."""
    cleaned = remove_special_characters(text or "")
    if not cleaned:
        return 0.0
    return sum(1 for ch in cleaned if is_kana(ch)) / len(cleaned)
