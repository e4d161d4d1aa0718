"""Morphological tokenizer backends used to read kanji."""

from typing import List, Optional

import pykakasi
from janome.tokenizer import Tokenizer

from shiritori.logger import logger
from shiritori.nlp.base import BaseTokenizer, Token

# Janome marks unknown fields with an asterisk
_JANOME_EMPTY = "*"


class JanomeTokenizer(BaseTokenizer):
    """Dictionary-backed tokenizer (IPADIC bundled with Janome)."""

    def __init__(self, dictionary_location: Optional[str] = None):
        """Load the system dictionary and, optionally, a user dictionary CSV.

        Loading takes a noticeable amount of time; build it once and reuse.
        """
        self.dictionary_location = dictionary_location
        if dictionary_location:
            logger.info(f"Loading Janome with user dictionary: {dictionary_location}")
            self._tokenizer = Tokenizer(udic=dictionary_location, udic_type="simpledic", udic_enc="utf8")
        else:
            self._tokenizer = Tokenizer()

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        for token in self._tokenizer.tokenize(text, wakati=False):
            reading = token.reading if token.reading and token.reading != _JANOME_EMPTY else None
            tokens.append(Token(surface_form=token.surface, reading=reading))
        return tokens


class KakasiTokenizer(BaseTokenizer):
    """Lightweight fallback backend built on pykakasi's word splitter."""

    def __init__(self, dictionary_location: Optional[str] = None):
        if dictionary_location:
            logger.warning(f"⚠️ pykakasi has no user dictionary support, ignoring {dictionary_location}")
        self._kks = pykakasi.kakasi()

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        for item in self._kks.convert(text):
            # pykakasi echoes the original text when it has no reading
            reading = item.get("kana") or None
            tokens.append(Token(surface_form=item["orig"], reading=reading))
        return tokens
