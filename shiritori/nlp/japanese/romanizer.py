"""Hiragana to uppercase romaji for the typing-practice overlay."""

from typing import List, Optional

from shiritori.schema import RomajiSegment
from .normalizer import LONG_VOWEL_MARK, normalize_typing_form

SOKUON = "っ"

# Two-kana morae (yoon and the extended foreign-sound series)
DIGRAPH_ROMAJI = {
    "きゃ": "KYA", "きゅ": "KYU", "きょ": "KYO",
    "ぎゃ": "GYA", "ぎゅ": "GYU", "ぎょ": "GYO",
    "しゃ": "SHA", "しゅ": "SHU", "しぇ": "SHE", "しょ": "SHO",
    "じゃ": "JA", "じゅ": "JU", "じぇ": "JE", "じょ": "JO",
    "ちゃ": "CHA", "ちゅ": "CHU", "ちぇ": "CHE", "ちょ": "CHO",
    "ぢゃ": "DYA", "ぢゅ": "DYU", "ぢょ": "DYO",
    "にゃ": "NYA", "にゅ": "NYU", "にょ": "NYO",
    "ひゃ": "HYA", "ひゅ": "HYU", "ひょ": "HYO",
    "びゃ": "BYA", "びゅ": "BYU", "びょ": "BYO",
    "ぴゃ": "PYA", "ぴゅ": "PYU", "ぴょ": "PYO",
    "みゃ": "MYA", "みゅ": "MYU", "みょ": "MYO",
    "りゃ": "RYA", "りゅ": "RYU", "りょ": "RYO",
    "ふぁ": "FA", "ふぃ": "FI", "ふぇ": "FE", "ふぉ": "FO",
    "てぃ": "THI", "でぃ": "DHI", "とぅ": "TWU", "どぅ": "DWU",
    "うぃ": "WI", "うぇ": "WE", "うぉ": "WHO",
    "つぁ": "TSA", "つぃ": "TSI", "つぇ": "TSE", "つぉ": "TSO",
    "ゔぁ": "VA", "ゔぃ": "VI", "ゔぇ": "VE", "ゔぉ": "VO",
}

KANA_ROMAJI = {
    "あ": "A", "い": "I", "う": "U", "え": "E", "お": "O",
    "か": "KA", "き": "KI", "く": "KU", "け": "KE", "こ": "KO",
    "さ": "SA", "し": "SHI", "す": "SU", "せ": "SE", "そ": "SO",
    "た": "TA", "ち": "CHI", "つ": "TSU", "て": "TE", "と": "TO",
    "な": "NA", "に": "NI", "ぬ": "NU", "ね": "NE", "の": "NO",
    "は": "HA", "ひ": "HI", "ふ": "FU", "へ": "HE", "ほ": "HO",
    "ま": "MA", "み": "MI", "む": "MU", "め": "ME", "も": "MO",
    "や": "YA", "ゆ": "YU", "よ": "YO",
    "ら": "RA", "り": "RI", "る": "RU", "れ": "RE", "ろ": "RO",
    "わ": "WA", "ゐ": "I", "ゑ": "E", "を": "WO",
    "ん": "N",
    # dakuten
    "が": "GA", "ぎ": "GI", "ぐ": "GU", "げ": "GE", "ご": "GO",
    "ざ": "ZA", "じ": "JI", "ず": "ZU", "ぜ": "ZE", "ぞ": "ZO",
    "だ": "DA", "ぢ": "DI", "づ": "DU", "で": "DE", "ど": "DO",
    "ば": "BA", "び": "BI", "ぶ": "BU", "べ": "BE", "ぼ": "BO",
    "ゔ": "VU",
    # handakuten
    "ぱ": "PA", "ぴ": "PI", "ぷ": "PU", "ぺ": "PE", "ぽ": "PO",
    # isolated small kana
    "ぁ": "A", "ぃ": "I", "ぅ": "U", "ぇ": "E", "ぉ": "O",
    "ゃ": "YA", "ゅ": "YU", "ょ": "YO",
    "ゎ": "WA", "ゕ": "KA", "ゖ": "KE",
    "っ": "XTU",
}

# Alternate keyboard spellings accepted for ambiguous morae
ROMAJI_ALTERNATIVES = [
    ("SHI", "SI"),
    ("CHI", "TI"),
    ("TSU", "TU"),
    ("JI", "ZI"),
    ("FU", "HU"),
]

_VOWELS = "AIUEO"


def _mora_at(hira: str, pos: int) -> Optional[RomajiSegment]:
    """Look up the mora starting at *pos*, preferring a digraph."""
    if pos >= len(hira):
        return None
    pair = hira[pos:pos + 2]
    if len(pair) == 2 and pair in DIGRAPH_ROMAJI:
        return RomajiSegment(kana=pair, romaji=DIGRAPH_ROMAJI[pair])
    ch = hira[pos]
    return RomajiSegment(kana=ch, romaji=KANA_ROMAJI.get(ch, ch.upper()))


def _sokuon_romaji(hira: str, pos: int) -> str:
    """Romaji for the small tsu at *pos*: the next mora's leading consonant.

    A run of small tsu all double the consonant of the mora after the run.
    """
    pos += 1
    while pos < len(hira) and hira[pos] == SOKUON:
        pos += 1
    following = _mora_at(hira, pos)
    if following is None:
        return "XTU"
    first = following.romaji[0]
    if "A" <= first <= "Z" and first not in _VOWELS:
        return first
    return "T"


def kana_to_romaji_segments(text: str) -> List[RomajiSegment]:
    """Split *text* into kana/romaji pairs, one per mora.

    Katakana is folded to hiragana first; small kana and long-vowel marks are
    kept so that digraphs and the sokuon can be recognised.
    """
    hira = normalize_typing_form(text)
    segments: List[RomajiSegment] = []
    i = 0
    while i < len(hira):
        ch = hira[i]
        if ch == LONG_VOWEL_MARK:
            segments.append(RomajiSegment(kana=ch, romaji="-"))
            i += 1
            continue
        if ch == SOKUON:
            segments.append(RomajiSegment(kana=ch, romaji=_sokuon_romaji(hira, i)))
            i += 1
            continue
        segment = _mora_at(hira, i)
        segments.append(segment)
        i += len(segment.kana)
    return segments


def kana_to_romaji(text: str) -> str:
    """Flat uppercase romaji; equals the concatenation of the segments."""
    return "".join(segment.romaji for segment in kana_to_romaji_segments(text))


def romaji_variants(romaji: str) -> List[str]:
    """Return *romaji* followed by every alternate spelling a child may type."""
    variants = [romaji]
    for primary, alternative in ROMAJI_ALTERNATIVES:
        for variant in list(variants):
            if primary in variant:
                candidate = variant.replace(primary, alternative)
                if candidate not in variants:
                    variants.append(candidate)
    return variants


class JapaneseRomanizer:
    """Typing-practice helper bound to one target word."""

    def __init__(self, target_word: str = ""):
        self.set_target(target_word)

    def set_target(self, target_word: str) -> None:
        self.target_word = target_word or ""
        self.segments = kana_to_romaji_segments(self.target_word)
        self.romaji = "".join(segment.romaji for segment in self.segments)
        self._accepted = romaji_variants(self.romaji)

    def accepted_spellings(self) -> List[str]:
        return list(self._accepted)

    def is_typed_correctly(self, typed: str) -> bool:
        """True when *typed* spells the whole target in any accepted way."""
        return (typed or "").upper() in self._accepted

    def is_prefix(self, typed: str) -> bool:
        """True while *typed* can still be completed to an accepted spelling."""
        typed = (typed or "").upper()
        return any(spelling.startswith(typed) for spelling in self._accepted)
