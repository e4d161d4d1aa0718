"""Test configuration and fixtures."""
import pytest
import threading
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from shiritori.nlp.base import BaseTokenizer, Token


class FakeTokenizer(BaseTokenizer):
    """Dictionary-free tokenizer with a fixed reading table."""

    READINGS = {
        "図書館": "トショカン",
        "学校": "ガッコウ",
        "犬": "イヌ",
    }

    def __init__(self):
        self.calls = []

    def tokenize(self, text):
        self.calls.append(text)
        tokens = []
        i = 0
        while i < len(text):
            for surface, reading in self.READINGS.items():
                if text.startswith(surface, i):
                    tokens.append(Token(surface_form=surface, reading=reading))
                    i += len(surface)
                    break
            else:
                # Unknown words come back without a reading
                tokens.append(Token(surface_form=text[i], reading=None))
                i += 1
        return tokens


@pytest.fixture
def fake_tokenizer():
    return FakeTokenizer()


@pytest.fixture
def counting_factory(fake_tokenizer):
    """Factory that records how many times the tokenizer was built."""
    calls = {"count": 0}

    def factory():
        calls["count"] += 1
        return fake_tokenizer

    factory.calls = calls
    return factory


@pytest.fixture
def blocking_factory(fake_tokenizer):
    """Factory that does not return until the test releases it."""
    release = threading.Event()

    def factory():
        release.wait(timeout=5)
        return fake_tokenizer

    factory.release = release
    yield factory
    release.set()


@pytest.fixture
def sample_hypotheses():
    """Recognizer alternatives for one utterance of としょかん."""
    return [
        {"text": "図書館", "confidence": 0.95},
        {"text": "としょかん", "confidence": 0.80},
        {"text": "トショカン", "confidence": 0.60},
    ]
