import random
import pytest
from termwordle.game.errors import NotInWordList
from termwordle.words.bank import WordBank

def test_words_are_normalised():
    bank = WordBank([" crane", "Grape ", "", "toolong", "ab3de"], ["grape", "GRAPE"])
    assert bank.legal_words == frozenset({"CRANE", "GRAPE"})
    assert bank.secrets == ["GRAPE"]
    assert "TOOLONG" not in bank.legal_words
    assert "AB3DE" not in bank.legal_words

def test_pick_secret_is_seeded():
    bank = WordBank(["crane", "grape", "trace"], ["crane", "grape", "trace"])
    first = bank.pick_secret(random.Random(7))
    second = bank.pick_secret(random.Random(7))
    assert first == second
    assert first.contents in bank.secrets

def test_secret_must_be_a_legal_guess():
    bank = WordBank(["crane"], ["grape"])
    with pytest.raises(NotInWordList):
        bank.pick_secret()

def test_no_secrets():
    with pytest.raises(ValueError):
        WordBank(["crane"], []).pick_secret()

def test_from_files(tmp_path):
    guesses = tmp_path / "guesses.txt"
    answers = tmp_path / "answers.txt"
    guesses.write_text("crane\ngrape\n")
    answers.write_text("GRAPE\n")

    bank = WordBank.from_files(guesses, answers)
    assert bank.pick_secret().contents == "GRAPE"

def test_bundled_lists():
    bank = WordBank.from_default_files()
    assert bank.secrets
    assert set(bank.secrets) <= bank.legal_words
