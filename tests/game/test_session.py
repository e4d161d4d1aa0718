"""Tests for the in-memory game session."""
import pytest
from shiritori.schema import LoseReason
from shiritori.game.cpu import ListWordSource
from shiritori.game.session import GameSession, GameStatus, Turn


@pytest.fixture
def session():
    return GameSession(ListWordSource(["ごりら", "らっぱ", "すいか"]))


class TestGameSession:
    """Test turn flow and game over handling."""

    def test_initial_state(self, session):
        assert session.status == GameStatus.IDLE
        assert session.used_words == []
        assert session.winner is None

    def test_start(self, session):
        session.start()
        assert session.status == GameStatus.PLAYING
        assert session.turn == Turn.USER
        assert session.current_word == "しりとり"
        assert session.need_head == "り"
        assert session.used_words == ["しりとり"]
        assert [m.sender for m in session.messages] == ["SYSTEM", "CPU"]

    def test_valid_turn_then_cpu(self, session):
        session.start()
        result = session.submit_user_word("りんご")
        assert result.is_valid
        assert session.status == GameStatus.THINKING
        assert session.turn == Turn.CPU

        assert session.play_cpu_turn() == "ごりら"
        assert session.status == GameStatus.PLAYING
        assert session.need_head == "ら"
        assert session.used_words == ["しりとり", "りんご", "ごりら"]

    def test_invalid_word_ends_game(self, session):
        session.start()
        result = session.submit_user_word("ごりら")
        assert result.reason == LoseReason.NOT_CHAIN
        assert session.status == GameStatus.RESULT
        assert session.lose_reason == LoseReason.NOT_CHAIN
        assert session.winner == "CPU"
        assert "ごりら" not in session.used_words

    def test_cpu_gives_up(self, session):
        session.start()
        session.submit_user_word("りす")
        assert session.play_cpu_turn() == "すいか"
        session.submit_user_word("かめ")
        assert session.play_cpu_turn() is None
        assert session.lose_reason == LoseReason.CPU_NO_WORD
        assert session.winner == "USER"
        assert session.messages[-1].text == 'ゲーム終了！'

    def test_out_of_turn(self, session):
        with pytest.raises(RuntimeError):
            session.submit_user_word("りんご")
        session.start()
        with pytest.raises(RuntimeError):
            session.play_cpu_turn()

    def test_reset(self, session):
        session.start()
        session.submit_user_word("りんご")
        session.reset()
        assert session.status == GameStatus.IDLE
        assert session.used_words == []
        assert session.lose_reason is None
