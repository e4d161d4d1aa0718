"""Natural Language Processing module for shiritori

This module provides the Japanese text engine: kana normalization,
romanization, kanji reading and recognizer-candidate ranking.
"""

from typing import Optional

from .base import BaseTokenizer, BaseTranscriptProcessor, Token, TokenizerUnavailableError

def get_tokenizer(backend: str, dictionary_location: Optional[str] = None) -> BaseTokenizer:
    """Build a morphological tokenizer.

    Args:
        backend: Tokenizer backend ('janome' or 'kakasi')
        dictionary_location: Optional user dictionary passed to the backend

    Returns:
        Backend-specific tokenizer instance

    Raises:
        ValueError: If backend is not supported
    """
    backend = backend.lower()

    if backend == 'janome':
        from .japanese.tokenizer import JanomeTokenizer
        return JanomeTokenizer(dictionary_location)
    elif backend in ['kakasi', 'pykakasi']:
        from .japanese.tokenizer import KakasiTokenizer
        return KakasiTokenizer(dictionary_location)
    else:
        raise ValueError(f"Unsupported tokenizer backend: {backend}")

def get_transcript_processor(backend: Optional[str] = None,
                             dictionary_location: Optional[str] = None) -> BaseTranscriptProcessor:
    """Get a transcript processor wired to a lazily built tokenizer.

    Args:
        backend: Tokenizer backend, defaults to the configured one
        dictionary_location: Optional user dictionary, defaults to the configured one

    Returns:
        Japanese transcript processor instance
    """
    from shiritori import TOKENIZER_BACKEND, USER_DICTIONARY
    from .japanese.resolver import KanjiResolver, TokenizerProvider
    from .japanese.transcript_processor import JapaneseTranscriptProcessor

    backend = backend or TOKENIZER_BACKEND
    dictionary_location = dictionary_location or USER_DICTIONARY
    provider = TokenizerProvider(lambda: get_tokenizer(backend, dictionary_location), name=backend)
    return JapaneseTranscriptProcessor(KanjiResolver(provider))

__all__ = [
    'BaseTokenizer',
    'BaseTranscriptProcessor',
    'Token',
    'TokenizerUnavailableError',
    'get_tokenizer',
    'get_transcript_processor',
]
