"""CPU opponent: picks an answer from a word source."""

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from shiritori.logger import logger
from shiritori.nlp.japanese.normalizer import normalize_chain_form
from .chain import MORA_N, get_first_kana, get_last_kana


class BaseWordSource(ABC):
    """Abstract base class for the CPU's vocabulary"""

    @abstractmethod
    def find_words(self, head: str, used_words: Iterable[str]) -> List[str]:
        """Return unused words starting with the mora *head*"""
        pass


class ListWordSource(BaseWordSource):
    """Vocabulary held in memory, e.g. read from a word list file."""

    def __init__(self, words: Iterable[str]):
        self.words = [w.strip() for w in words if w and w.strip()]

    @classmethod
    def from_file(cls, path: str) -> 'ListWordSource':
        """One word per line; blank lines and lines starting with '#' are skipped."""
        with open(path, 'r', encoding='utf-8') as f:
            words = [line for line in f if not line.lstrip().startswith('#')]
        source = cls(words)
        logger.info(f"Read {len(source.words)} words from {path}")
        return source

    def find_words(self, head: str, used_words: Iterable[str]) -> List[str]:
        used = {normalize_chain_form(w) for w in used_words}
        return [
            w for w in self.words
            if get_first_kana(w) == head
            and normalize_chain_form(w) not in used
            and get_last_kana(w) != MORA_N
        ]


def generate_cpu_response(previous_word: str,
                          used_words: Iterable[str],
                          source: BaseWordSource,
                          rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick a random unused word chaining from *previous_word*, or None."""
    last_kana = get_last_kana(previous_word)
    if not last_kana:
        logger.error(f"Cannot get last kana from previous word: {previous_word}")
        return None

    candidates = source.find_words(last_kana, list(used_words))
    if not candidates:
        logger.info(f"No candidates found for: {last_kana}")
        return None

    selected = (rng or random).choice(candidates)
    logger.info(f"CPU selected '{selected}' from {len(candidates)} candidates starting with '{last_kana}'")
    return selected
