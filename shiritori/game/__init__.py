"""Shiritori rules and the in-memory game session."""

from .chain import get_first_kana, get_last_kana, is_valid_chain
from .rules import validate_user_input, determine_winner, get_lose_reason_message
from .cpu import BaseWordSource, ListWordSource, generate_cpu_response
from .session import GameSession, GameStatus, Turn

__all__ = [
    'get_first_kana',
    'get_last_kana',
    'is_valid_chain',
    'validate_user_input',
    'determine_winner',
    'get_lose_reason_message',
    'BaseWordSource',
    'ListWordSource',
    'generate_cpu_response',
    'GameSession',
    'GameStatus',
    'Turn',
]
