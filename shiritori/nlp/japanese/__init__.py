"""Japanese language processing module."""

from .characters import is_kanji, is_kana, contains_kanji, is_only_kana, kana_proportion
from .normalizer import (
    normalize_chain_form,
    normalize_display_form,
    normalize_typing_form,
    normalize_word,
    remove_special_characters,
)
from .numbers import convert_numbers_to_hiragana
from .romanizer import JapaneseRomanizer, kana_to_romaji, kana_to_romaji_segments, romaji_variants
from .ranker import RankingPolicy, rank_candidates, select_best_candidate
from .resolver import KanjiResolver, TokenizerProvider

__all__ = [
    'is_kanji',
    'is_kana',
    'contains_kanji',
    'is_only_kana',
    'kana_proportion',
    'normalize_chain_form',
    'normalize_display_form',
    'normalize_typing_form',
    'normalize_word',
    'remove_special_characters',
    'convert_numbers_to_hiragana',
    'JapaneseRomanizer',
    'kana_to_romaji',
    'kana_to_romaji_segments',
    'romaji_variants',
    'RankingPolicy',
    'rank_candidates',
    'select_best_candidate',
    'KanjiResolver',
    'TokenizerProvider',
]
