"""Tests for the console game's typing practice."""
import asyncio
import pytest
from play import practice_typing, typing_feedback
from shiritori.nlp.japanese.romanizer import JapaneseRomanizer


def scripted_input(monkeypatch, answers):
    """Replace input() with a fixed script; EOF once it runs out."""
    answers = iter(answers)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


class TestTypingFeedback:
    """Test feedback for a single romaji attempt."""

    def test_complete_answer(self):
        assert typing_feedback(JapaneseRomanizer("しりとり"), "shiritori") == "⭕ SHIRITORI"

    def test_alternate_spelling_accepted(self):
        assert typing_feedback(JapaneseRomanizer("しりとり"), "SIRITORI") == "⭕ SIRITORI"

    def test_correct_so_far(self):
        assert typing_feedback(JapaneseRomanizer("しりとり"), "shiri") == "… SHIRI"

    def test_marks_first_wrong_key(self):
        assert typing_feedback(JapaneseRomanizer("しりとり"), "shx") == "❌ SH[X]"

    def test_wrong_from_start(self):
        assert typing_feedback(JapaneseRomanizer("がっこう"), "x") == "❌ [X]"


class TestPracticeTyping:
    """Test the prompt loop around one CPU word."""

    @pytest.mark.asyncio
    async def test_retries_until_correct(self, monkeypatch, capsys):
        prompts = scripted_input(monkeypatch, ["gako", "gakkou"])
        assert await practice_typing(asyncio.get_running_loop(), "がっこう") is True
        assert len(prompts) == 2
        out = capsys.readouterr().out
        assert "が=GA っ=K こ=KO う=U" in out
        assert "❌ GAK[O]" in out
        assert "⭕ GAKKOU" in out

    @pytest.mark.asyncio
    async def test_empty_line_skips(self, monkeypatch):
        prompts = scripted_input(monkeypatch, [""])
        assert await practice_typing(asyncio.get_running_loop(), "いぬ") is True
        assert len(prompts) == 1

    @pytest.mark.asyncio
    async def test_eof_quits(self, monkeypatch):
        scripted_input(monkeypatch, ["i"])
        assert await practice_typing(asyncio.get_running_loop(), "いぬ") is False
