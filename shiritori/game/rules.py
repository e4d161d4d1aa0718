"""Validation of a submitted word against the game state."""

from typing import Iterable, Optional

from shiritori.nlp.japanese.characters import contains_kanji
from shiritori.nlp.japanese.normalizer import normalize_chain_form
from shiritori.schema import LoseReason, ValidationResult
from .chain import MORA_N, get_last_kana, is_valid_chain

MIN_WORD_LENGTH = 2

LOSE_REASON_MESSAGES = {
    LoseReason.DUPLICATE: 'すでに使われた単語です！',
    LoseReason.N_END: '「ん」で終わってしまいました！',
    LoseReason.INVALID: '無効な単語です！',
    LoseReason.NOT_CHAIN: 'しりとりが続いていません！',
    LoseReason.CPU_NO_WORD: 'コンピュータが単語を思いつきませんでした！',
}


def check_duplicate(word: str, used_words: Iterable[str]) -> bool:
    """Compare chain forms, so "りんご" and "リンゴ" count as the same word."""
    normalized = normalize_chain_form(word)
    return normalized in {normalize_chain_form(w) for w in used_words}


def check_ends_with_n(word: str) -> bool:
    return get_last_kana(word) == MORA_N


def check_chain(previous_word: Optional[str], next_word: Optional[str]) -> bool:
    if not previous_word or not next_word:
        return False
    return is_valid_chain(previous_word, next_word)


def _invalid(reason: LoseReason, message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, reason=reason, message=message)


def validate_user_input(user_input: Optional[str],
                        previous_word: Optional[str],
                        used_words: Iterable[str]) -> ValidationResult:
    """Check *user_input* in a fixed order; the first failing rule is reported.

    Order: empty, kanji, too short, duplicate, ends in ん, chain break.
    Each invalid result carries exactly one reason.
    """
    if not user_input or not user_input.strip():
        return _invalid(LoseReason.INVALID, '単語を入力してください')

    if contains_kanji(user_input):
        return _invalid(LoseReason.INVALID, 'ひらがなで入力してください')

    normalized = normalize_chain_form(user_input)
    if len(normalized) < MIN_WORD_LENGTH:
        return _invalid(LoseReason.INVALID, '2文字以上の単語を入力してください')

    if check_duplicate(user_input, used_words):
        return _invalid(LoseReason.DUPLICATE, 'その単語はすでに使われています')

    if check_ends_with_n(user_input):
        return _invalid(LoseReason.N_END, '「ん」で終わる単語は使えません')

    if previous_word and not check_chain(previous_word, user_input):
        last_kana = get_last_kana(previous_word)
        return _invalid(LoseReason.NOT_CHAIN, f'「{last_kana}」で始まる単語を入力してください')

    return ValidationResult(is_valid=True)


def determine_winner(lose_reason: Optional[LoseReason]) -> Optional[str]:
    """'USER' or 'CPU' depending on who caused the game to end."""
    if lose_reason is None:
        return None
    if lose_reason == LoseReason.CPU_NO_WORD:
        return 'USER'
    return 'CPU'


def get_lose_reason_message(lose_reason: Optional[LoseReason]) -> str:
    return LOSE_REASON_MESSAGES.get(lose_reason, 'ゲーム終了')
