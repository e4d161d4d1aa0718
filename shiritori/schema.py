from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class LoseReason(str, Enum):
    DUPLICATE = "DUPLICATE"
    N_END = "N_END"
    INVALID = "INVALID"
    NOT_CHAIN = "NOT_CHAIN"
    CPU_NO_WORD = "CPU_NO_WORD"


class NormalizedWord(BaseModel):
    raw: str
    chain_form: str    # long-vowel marks stripped, used for rule matching
    display_form: str  # long-vowel marks kept, used for presentation
    model_config = ConfigDict(frozen=True)


class RomajiSegment(BaseModel):
    kana: str = Field(..., min_length=1)
    romaji: str = Field(..., min_length=1)
    model_config = ConfigDict(frozen=True)


class SpeechHypothesis(BaseModel):
    """One alternative produced by the speech recognizer."""
    text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    model_config = ConfigDict(frozen=True)


class ScoredCandidate(BaseModel):
    text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    has_only_kana: bool  # no kanji in the raw text
    kana_proportion: float = Field(0.0, ge=0.0, le=1.0)
    model_config = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    is_valid: bool
    reason: Optional[LoseReason] = None
    message: Optional[str] = None
    model_config = ConfigDict(frozen=True)
