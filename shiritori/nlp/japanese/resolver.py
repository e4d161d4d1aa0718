"""Kanji to hiragana resolution through a morphological tokenizer."""

import asyncio
import time
from typing import Callable, Optional

from shiritori import RESOLVER_TIMEOUT_MS
from shiritori.logger import logger
from shiritori.nlp.base import BaseTokenizer, TokenizerUnavailableError
from .characters import contains_kanji
from .normalizer import katakana_to_hiragana


class TokenizerProvider:
    """Lazily builds one tokenizer and hands the same instance to every caller.

    The build runs in a worker thread. Callers arriving while it is in
    progress await the same task; a failed build is forgotten so the next
    call starts over.
    """

    def __init__(self, factory: Callable[[], BaseTokenizer], name: str = "tokenizer"):
        self._factory = factory
        self.name = name
        self._tokenizer: Optional[BaseTokenizer] = None
        self._loading: Optional[asyncio.Future] = None

    @property
    def is_ready(self) -> bool:
        return self._tokenizer is not None

    async def get(self) -> BaseTokenizer:
        if self._tokenizer is not None:
            return self._tokenizer
        if self._loading is None:
            self._loading = asyncio.ensure_future(self._build())
            self._loading.add_done_callback(self._on_build_done)
        # A waiter that gives up must not cancel the load for everyone else
        return await asyncio.shield(self._loading)

    def _on_build_done(self, future: asyncio.Future) -> None:
        if future.cancelled():
            # A cancelled build (e.g. loop shutdown) is retried like a failed one
            if self._loading is future:
                self._loading = None
            logger.warning(f"⚠️ Loading {self.name} tokenizer was cancelled")
            return
        # Retrieve the exception so an unawaited failure is not reported as lost
        future.exception()

    async def _build(self) -> BaseTokenizer:
        loop = asyncio.get_running_loop()
        logger.info(f"Loading {self.name} tokenizer...")
        started = time.monotonic()
        try:
            tokenizer = await loop.run_in_executor(None, self._factory)
        except Exception as e:
            self._loading = None
            logger.error(f"❌ Failed to load {self.name} tokenizer: {e}")
            raise TokenizerUnavailableError(self.name, str(e)) from e
        self._tokenizer = tokenizer
        logger.info(f"✅ {self.name} tokenizer ready in {time.monotonic() - started:.2f}s")
        return tokenizer


class KanjiResolver:
    """Best-effort conversion of kanji to their hiragana reading.

    Any failure (timeout, tokenizer error) returns the input unchanged; the
    game's validation rejects words that still contain kanji.
    """

    def __init__(self, provider: TokenizerProvider, timeout_ms: Optional[int] = None):
        self.provider = provider
        self.timeout_ms = RESOLVER_TIMEOUT_MS if timeout_ms is None else timeout_ms

    async def preload(self) -> bool:
        """Start loading the tokenizer ahead of time. Never raises."""
        try:
            await self.provider.get()
            return True
        except Exception as e:
            logger.warning(f"⚠️ Tokenizer preload failed: {e}")
            return False

    async def resolve(self, text: str, timeout_ms: Optional[int] = None) -> str:
        if not text or not contains_kanji(text):
            return text
        timeout_ms = self.timeout_ms if timeout_ms is None else timeout_ms

        try:
            converted = await asyncio.wait_for(self._read(text), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError:
            logger.warning(f"⚠️ Kanji resolution timed out after {timeout_ms}ms, keeping '{text}'")
            return text
        except Exception as e:
            logger.warning(f"⚠️ Kanji resolution failed for '{text}': {e}")
            return text

        logger.info(f"Resolved '{text}' -> '{converted}'")
        return converted

    async def _read(self, text: str) -> str:
        tokenizer = await self.provider.get()
        loop = asyncio.get_running_loop()
        tokens = await loop.run_in_executor(None, tokenizer.tokenize, text)
        # Unknown words carry no reading; keep their surface form
        reading = "".join(token.reading or token.surface_form for token in tokens)
        return katakana_to_hiragana(reading)
