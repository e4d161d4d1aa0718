"""Reading Arabic numerals as hiragana.

Speech recognizers often return digits ("3びき", "１００えん") where the child
said the number out loud. Integers up to 9999 are read the usual way, larger
ones digit by digit.
"""

import re

import jaconv

_DIGIT_MAP = {
    "0": "ぜろ",
    "1": "いち",
    "2": "に",
    "3": "さん",
    "4": "よん",
    "5": "ご",
    "6": "ろく",
    "7": "なな",
    "8": "はち",
    "9": "きゅう",
}

_TENS = {1: "じゅう", 2: "にじゅう", 3: "さんじゅう", 4: "よんじゅう", 5: "ごじゅう",
         6: "ろくじゅう", 7: "ななじゅう", 8: "はちじゅう", 9: "きゅうじゅう"}
_HUNDREDS = {1: "ひゃく", 2: "にひゃく", 3: "さんびゃく", 4: "よんひゃく", 5: "ごひゃく",
             6: "ろっぴゃく", 7: "ななひゃく", 8: "はっぴゃく", 9: "きゅうひゃく"}
_THOUSANDS = {1: "せん", 2: "にせん", 3: "さんぜん", 4: "よんせん", 5: "ごせん",
              6: "ろくせん", 7: "ななせん", 8: "はっせん", 9: "きゅうせん"}

_NUMBER_RE = re.compile(r"[0-9]+")


def int_to_hiragana(n: int) -> str:
    if n < 0:
        raise ValueError(f"Negative numbers are not read: {n}")
    if n == 0:
        return _DIGIT_MAP["0"]
    if n > 9999:
        return "".join(_DIGIT_MAP[ch] for ch in str(n))

    parts = []
    thousands = n // 1000
    hundreds = (n // 100) % 10
    tens = (n // 10) % 10
    ones = n % 10

    if thousands:
        parts.append(_THOUSANDS[thousands])
    if hundreds:
        parts.append(_HUNDREDS[hundreds])
    if tens:
        parts.append(_TENS[tens])
    if ones:
        parts.append(_DIGIT_MAP[str(ones)])
    return "".join(parts)


def convert_numbers_to_hiragana(text: str) -> str:
    """Fold full-width digits to ASCII and replace every number with its reading."""
    if not text:
        return ""
    text = jaconv.z2h(text, kana=False, ascii=False, digit=True)

    def repl(m: re.Match) -> str:
        digits = m.group(0)
        # Leading zeros ("007") are read digit by digit
        if len(digits) > 1 and digits.startswith("0"):
            return "".join(_DIGIT_MAP[ch] for ch in digits)
        return int_to_hiragana(int(digits))

    return _NUMBER_RE.sub(repl, text)
