"""Japanese kana normalization for shiritori rule checking."""

import re

import jaconv

from shiritori.schema import NormalizedWord

LONG_VOWEL_MARK = "ー"

# Punctuation, brackets and whitespace dropped from recognizer transcripts
_SPECIAL_CHARACTERS_RE = re.compile(r"[。、！？\s　「」『』（）()［］\[\]｛｝{}〈〉《》【】〔〕・]")
_ASCII_PUNCTUATION_RE = re.compile(r"[.,!?\-]")

# Iteration marks share the katakana block but sit outside U+30A1-U+30F6
_KATAKANA_IGNORE = "ヽヾ"

SMALL_KANA_MAP = {
    'ぁ': 'あ', 'ぃ': 'い', 'ぅ': 'う', 'ぇ': 'え', 'ぉ': 'お',
    'ゃ': 'や', 'ゅ': 'ゆ', 'ょ': 'よ',
    'ゎ': 'わ', 'ゐ': 'い', 'ゑ': 'え',
    'ゕ': 'か', 'ゖ': 'け',
    'ァ': 'あ', 'ィ': 'い', 'ゥ': 'う', 'ェ': 'え', 'ォ': 'お',
    'ヵ': 'か', 'ヶ': 'け',
    'ャ': 'や', 'ュ': 'ゆ', 'ョ': 'よ',
    'ヮ': 'わ', 'ヰ': 'い', 'ヱ': 'え',
    'っ': 'つ', 'ッ': 'つ',
}
_SMALL_KANA_TABLE = str.maketrans(SMALL_KANA_MAP)


def remove_special_characters(text: str) -> str:
    """Strip punctuation, brackets and spaces (full-width and half-width)."""
    text = _SPECIAL_CHARACTERS_RE.sub("", text)
    return _ASCII_PUNCTUATION_RE.sub("", text)


def katakana_to_hiragana(text: str) -> str:
    """Shift katakana U+30A1-U+30F6 into the hiragana block.

    The long-vowel mark has no hiragana form and is left untouched.
    """
    return jaconv.kata2hira(text, ignore=_KATAKANA_IGNORE)


def expand_small_kana(text: str) -> str:
    """Replace small kana (including the sokuon) with full-size kana."""
    return text.translate(_SMALL_KANA_TABLE)


def normalize_typing_form(text: str) -> str:
    """Hiragana with small kana and long-vowel marks kept, for romanization."""
    if not text:
        return ""
    return katakana_to_hiragana(remove_special_characters(text))


def normalize_display_form(text: str) -> str:
    """Canonical hiragana that still carries long-vowel marks."""
    if not text:
        return ""
    return expand_small_kana(normalize_typing_form(text))


def normalize_chain_form(text: str) -> str:
    """Canonical hiragana used for chaining and duplicate detection.

    Total and idempotent: characters outside the kana blocks pass through.
    """
    return normalize_display_form(text).replace(LONG_VOWEL_MARK, "")


def normalize_word(text: str) -> NormalizedWord:
    text = text or ""
    return NormalizedWord(
        raw=text,
        chain_form=normalize_chain_form(text),
        display_form=normalize_display_form(text),
    )
