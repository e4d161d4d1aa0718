"""Choosing one transcript among the speech recognizer's alternatives."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from shiritori import KANA_PROPORTION_THRESHOLD
from shiritori.logger import logger
from shiritori.schema import ScoredCandidate, SpeechHypothesis
from .characters import contains_kanji, kana_proportion

Hypothesis = Union[SpeechHypothesis, Dict[str, Any]]


@dataclass(frozen=True)
class RankingPolicy:
    """How candidates are ordered after the kanji-free ones.

    kana_proportion_threshold: when set, a candidate whose kana proportion
    beats another's by more than this margin ranks first, before confidence
    is compared. ``None`` compares confidence only.
    """
    kana_proportion_threshold: Optional[float] = None

    @classmethod
    def from_config(cls) -> 'RankingPolicy':
        return cls(kana_proportion_threshold=KANA_PROPORTION_THRESHOLD)


def score_candidate(hypothesis: Hypothesis) -> ScoredCandidate:
    if not isinstance(hypothesis, SpeechHypothesis):
        hypothesis = SpeechHypothesis.model_validate(hypothesis)
    return ScoredCandidate(
        text=hypothesis.text,
        confidence=hypothesis.confidence,
        has_only_kana=not contains_kanji(hypothesis.text),
        kana_proportion=kana_proportion(hypothesis.text),
    )


def rank_candidates(hypotheses: Sequence[Hypothesis],
                    policy: Optional[RankingPolicy] = None) -> List[ScoredCandidate]:
    """Return the hypotheses best first.

    Kanji-free text always outranks text with kanji, since readings are
    unreliable; ties keep the recognizer's order.
    """
    policy = policy or RankingPolicy.from_config()
    threshold = policy.kana_proportion_threshold
    candidates = [score_candidate(h) for h in hypotheses]

    # Stable sorts, least significant key first
    candidates.sort(key=lambda c: c.confidence, reverse=True)
    if threshold is not None:
        candidates = _sort_by_kana_proportion(candidates, threshold)
    candidates.sort(key=lambda c: not c.has_only_kana)
    return candidates


def _sort_by_kana_proportion(candidates: List[ScoredCandidate], threshold: float) -> List[ScoredCandidate]:
    """Stable insertion sort: move a candidate ahead only on a clear kana margin."""
    ordered: List[ScoredCandidate] = []
    for candidate in candidates:
        index = len(ordered)
        while index > 0 and candidate.kana_proportion - ordered[index - 1].kana_proportion > threshold:
            index -= 1
        ordered.insert(index, candidate)
    return ordered


def select_best_candidate(hypotheses: Sequence[Hypothesis],
                          policy: Optional[RankingPolicy] = None) -> str:
    """Text of the top-ranked hypothesis, or "" when there is none."""
    if not hypotheses:
        logger.warning("⚠️ No recognition candidates to choose from")
        return ""
    candidates = rank_candidates(hypotheses, policy)
    for i, c in enumerate(candidates):
        logger.info(f"[{i}] '{c.text}' (kana: {'yes' if c.has_only_kana else 'no'}, "
                    f"prop: {c.kana_proportion:.2f}, conf: {c.confidence:.2f})")
    logger.info(f"Selected candidate: {candidates[0].text}")
    return candidates[0].text
