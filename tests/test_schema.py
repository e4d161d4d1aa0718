"""Tests for value types."""
import pytest
from pydantic import ValidationError
from shiritori.schema import LoseReason, NormalizedWord, RomajiSegment, ScoredCandidate, SpeechHypothesis


class TestSchema:
    """Test pydantic models."""

    def test_segment_requires_content(self):
        with pytest.raises(ValidationError):
            RomajiSegment(kana="", romaji="A")

    def test_hypothesis_confidence_range(self):
        SpeechHypothesis(text="ねこ", confidence=0.0)
        SpeechHypothesis(text="ねこ", confidence=1.0)
        with pytest.raises(ValidationError):
            SpeechHypothesis(text="ねこ", confidence=-0.1)

    def test_scored_candidate_defaults(self):
        candidate = ScoredCandidate(text="ねこ", confidence=0.5, has_only_kana=True)
        assert candidate.kana_proportion == 0.0

    def test_frozen(self):
        word = NormalizedWord(raw="ネコ", chain_form="ねこ", display_form="ねこ")
        with pytest.raises(ValidationError):
            word.chain_form = "いぬ"

    def test_lose_reason_is_string(self):
        assert LoseReason.N_END == "N_END"
        assert LoseReason("NOT_CHAIN") is LoseReason.NOT_CHAIN
