"""In-memory state of one shiritori game against the CPU."""

import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from shiritori.logger import logger
from shiritori.schema import LoseReason, ValidationResult
from .chain import get_last_kana
from .cpu import BaseWordSource, generate_cpu_response
from .rules import determine_winner, validate_user_input


class GameStatus(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    THINKING = "THINKING"
    RESULT = "RESULT"


class Turn(str, Enum):
    USER = "USER"
    CPU = "CPU"


@dataclass
class Message:
    sender: str  # USER, CPU or SYSTEM
    text: str
    timestamp: float = field(default_factory=time.time)


class GameSession:
    """Turn bookkeeping; rule checks live in :mod:`shiritori.game.rules`."""

    FIRST_WORD = "しりとり"

    def __init__(self, word_source: BaseWordSource, rng: Optional[random.Random] = None):
        self.word_source = word_source
        self.rng = rng
        self.reset()

    def reset(self) -> None:
        self.status = GameStatus.IDLE
        self.turn = Turn.CPU
        self.used_words: List[str] = []
        self.current_word = ""
        self.need_head = ""
        self.messages: List[Message] = []
        self.lose_reason: Optional[LoseReason] = None

    def start(self) -> None:
        """The CPU opens with しりとり and the user answers."""
        self.reset()
        self.status = GameStatus.PLAYING
        self.messages.append(Message("SYSTEM", 'ゲームを開始します！'))
        self._record(Turn.CPU, self.FIRST_WORD)
        self.turn = Turn.USER

    def submit_user_word(self, word: str) -> ValidationResult:
        """Validate and record the user's word; an invalid word ends the game."""
        if self.status != GameStatus.PLAYING or self.turn != Turn.USER:
            raise RuntimeError(f"Not the user's turn (status={self.status.value}, turn={self.turn.value})")

        result = validate_user_input(word, self.current_word, self.used_words)
        if not result.is_valid:
            self._record(Turn.USER, word, used=False)
            self.end(result.reason)
            return result

        self._record(Turn.USER, word)
        self.status = GameStatus.THINKING
        self.turn = Turn.CPU
        return result

    def play_cpu_turn(self) -> Optional[str]:
        """Answer the last word; returns None when the CPU gives up."""
        if self.status != GameStatus.THINKING or self.turn != Turn.CPU:
            raise RuntimeError(f"Not the CPU's turn (status={self.status.value}, turn={self.turn.value})")

        word = generate_cpu_response(self.current_word, self.used_words, self.word_source, self.rng)
        if word is None:
            self.end(LoseReason.CPU_NO_WORD)
            return None

        self._record(Turn.CPU, word)
        self.status = GameStatus.PLAYING
        self.turn = Turn.USER
        return word

    def end(self, reason: LoseReason) -> None:
        self.status = GameStatus.RESULT
        self.lose_reason = reason
        self.messages.append(Message("SYSTEM", 'ゲーム終了！'))
        logger.info(f"Game over: {reason.value} after {len(self.used_words)} words")

    @property
    def winner(self) -> Optional[str]:
        return determine_winner(self.lose_reason)

    def _record(self, sender: Turn, word: str, used: bool = True) -> None:
        self.messages.append(Message(sender.value, word))
        if used:
            self.current_word = word
            self.need_head = get_last_kana(word)
            self.used_words.append(word)
