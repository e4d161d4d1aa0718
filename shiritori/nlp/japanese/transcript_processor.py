from typing import Any, Optional, Sequence

from shiritori.logger import logger
from shiritori.nlp.base import BaseTranscriptProcessor
from shiritori.schema import NormalizedWord
from .numbers import convert_numbers_to_hiragana
from .normalizer import normalize_word
from .ranker import RankingPolicy, select_best_candidate
from .resolver import KanjiResolver


class JapaneseTranscriptProcessor(BaseTranscriptProcessor):
    """Japanese recognizer output to a canonical game word"""

    def __init__(self, resolver: KanjiResolver, policy: Optional[RankingPolicy] = None):
        self.resolver = resolver
        self.policy = policy

    async def preload(self) -> bool:
        return await self.resolver.preload()

    async def process(self, hypotheses: Sequence[Any]) -> NormalizedWord:
        """
        Select the best hypothesis and canonicalize it.

        Args:
            hypotheses: SpeechHypothesis objects or {"text", "confidence"} dicts

        Returns:
            NormalizedWord; kanji the tokenizer could not read are left in place
        """
        best = select_best_candidate(hypotheses, self.policy)
        resolved = await self.resolver.resolve(best)
        with_numbers = convert_numbers_to_hiragana(resolved)
        word = normalize_word(with_numbers)
        logger.info(f"Final result: {word.chain_form}")
        return word
