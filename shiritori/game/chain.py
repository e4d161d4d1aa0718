"""First/last mora extraction and chain checks.

All functions return "" (or False) for empty input instead of raising.
"""

from typing import Optional

from shiritori.nlp.japanese.normalizer import normalize_chain_form, remove_special_characters

MORA_N = "ん"
_SMALL_TSU = ("っ", "ッ")


def get_last_kana(word: Optional[str]) -> str:
    """The mora the next word has to start with.

    Decision table, first matching row wins:

    | condition                               | result                          |
    |-----------------------------------------|---------------------------------|
    | chain form ends in ん                   | ん (the word loses)             |
    | raw text ends in small tsu っ/ッ        | mora before the final つ, or "" |
    | otherwise                               | last character of chain form    |

    The small tsu row reads the raw text: normalization turns っ into つ,
    which would otherwise look like an ordinary final mora.
    """
    if not word:
        return ""

    ends_with_small_tsu = remove_special_characters(word).endswith(_SMALL_TSU)
    normalized = normalize_chain_form(word)
    if not normalized:
        return ""

    if normalized.endswith(MORA_N):
        return MORA_N

    if ends_with_small_tsu:
        # normalized[-1] is the つ produced from the sokuon
        return normalized[-2] if len(normalized) >= 2 else ""

    return normalized[-1]


def get_first_kana(word: Optional[str]) -> str:
    if not word:
        return ""
    normalized = normalize_chain_form(word)
    return normalized[0] if normalized else ""


def is_valid_chain(previous_word: Optional[str], next_word: Optional[str]) -> bool:
    """True iff *next_word* starts with the mora that ended *previous_word*."""
    if not previous_word or not next_word:
        return False

    last_kana = get_last_kana(previous_word)
    first_kana = get_first_kana(next_word)
    if not last_kana or not first_kana:
        return False
    return last_kana == first_kana
