from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Any


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class TokenizerUnavailableError(Exception):
    """Raised when the morphological tokenizer cannot be built."""
    def __init__(self, backend: str, reason: str):
        super().__init__(f"Tokenizer '{backend}' is unavailable: {reason}")
        self.backend = backend
        self.reason = reason


@dataclass(frozen=True)
class Token:
    """One morphological unit: surface text plus its katakana reading, if known."""
    surface_form: str
    reading: Optional[str] = None


class BaseTokenizer(ABC):
    """Abstract base class for morphological tokenization"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text into morphological units"""
        pass


class BaseTranscriptProcessor(ABC):
    """Abstract base class for turning recognizer output into a game word"""

    @abstractmethod
    async def process(self, hypotheses: Sequence[Any]) -> Any:
        """
        Pick one hypothesis and canonicalize it.

        Args:
            hypotheses: Recognizer alternatives for a single utterance

        Returns:
            The canonicalized word
        """
        pass
