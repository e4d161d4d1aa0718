"""Tests for first/last mora extraction and chaining."""
import pytest
from shiritori.game.chain import get_first_kana, get_last_kana, is_valid_chain


class TestGetLastKana:
    """One test group per row of the decision table."""

    # Row 1: chain form ends in ん
    @pytest.mark.parametrize("word", ["ほん", "かばん", "ミカン", "らいおん！", "ぱんー"])
    def test_terminal_n(self, word):
        assert get_last_kana(word) == "ん"

    def test_terminal_n_wins_over_small_tsu(self):
        # ends in っ, but the mora before it is ん
        assert get_last_kana("んっ") == "ん"

    # Row 2: raw text ends in small tsu
    @pytest.mark.parametrize("word,expected", [
        ("あっ", "あ"),
        ("きっ", "き"),
        ("ヤッ", "や"),
        ("はっ！", "は"),
    ])
    def test_final_small_tsu(self, word, expected):
        assert get_last_kana(word) == expected

    def test_lone_small_tsu_has_no_mora(self):
        assert get_last_kana("っ") == ""

    def test_full_size_tsu_is_ordinary(self):
        assert get_last_kana("くつ") == "つ"

    # Row 3: last character of chain form
    @pytest.mark.parametrize("word,expected", [
        ("しりとり", "り"),
        ("きって", "て"),
        ("がっこう", "う"),
        ("すいか", "か"),
        ("でんしゃ", "や"),
        ("コーヒー", "ひ"),
        ("ぎたー", "た"),
    ])
    def test_last_character(self, word, expected):
        assert get_last_kana(word) == expected

    @pytest.mark.parametrize("word", ["", None, "ー", "ーー", "。、", "  "])
    def test_empty_sentinel(self, word):
        assert get_last_kana(word) == ""


class TestGetFirstKana:
    """Test first mora extraction."""

    @pytest.mark.parametrize("word,expected", [
        ("りんご", "り"),
        ("リンゴ", "り"),
        ("「ねこ」", "ね"),
        ("ーあめ", "あ"),
        ("ぁいす", "あ"),
    ])
    def test_first(self, word, expected):
        assert get_first_kana(word) == expected

    @pytest.mark.parametrize("word", ["", None, "ー", "！"])
    def test_empty_sentinel(self, word):
        assert get_first_kana(word) == ""


class TestIsValidChain:
    """Test chain checks."""

    @pytest.mark.parametrize("previous,following", [
        ("しりとり", "りんご"),
        ("すいか", "かばん"),
        ("でんしゃ", "やま"),
        ("コーヒー", "ひこうき"),
        ("あっ", "あめ"),
        ("リンゴ", "ごりら"),
    ])
    def test_chains(self, previous, following):
        assert is_valid_chain(previous, following)

    @pytest.mark.parametrize("previous,following", [
        ("しりとり", "ごりら"),
        ("コーヒー", "いぬ"),
        ("ほん", "まめ"),
    ])
    def test_does_not_chain(self, previous, following):
        assert not is_valid_chain(previous, following)

    @pytest.mark.parametrize("previous,following", [
        ("", "りんご"),
        ("しりとり", ""),
        (None, "りんご"),
        ("しりとり", None),
        ("ー", "ーー"),
        ("っ", "つくえ"),
    ])
    def test_empty_never_chains(self, previous, following):
        assert is_valid_chain(previous, following) is False

    def test_last_of_kaban(self):
        assert get_last_kana("かばん") == "ん"
