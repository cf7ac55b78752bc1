import logging
import random
from pathlib import Path
from typing import Iterable
from termwordle.game.models import WORD_LENGTH, WordValue

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_GUESSES_FILE = DATA_DIR / "guesses.txt"
DEFAULT_ANSWERS_FILE = DATA_DIR / "answers.txt"

class WordBank:
    """
    Holds the legal guesses and the candidate secret words.
    """

    def __init__(self, guesses: Iterable[str], answers: Iterable[str]):
        # Store as uppercase for consistent comparison
        self.legal_words = frozenset(self._normalise(guesses))
        self.secrets = list(dict.fromkeys(self._normalise(answers)))

    @staticmethod
    def _normalise(words: Iterable[str]) -> list[str]:
        normalised = []
        for raw in words:
            word = raw.strip()
            if not word:
                continue
            if len(word) != WORD_LENGTH or not word.isalpha():
                logger.warning(f"Skipping malformed word list entry {word!r}")
                continue
            normalised.append(word.upper())
        return normalised

    @classmethod
    def from_files(cls, guesses_path: str | Path, answers_path: str | Path) -> "WordBank":
        with open(guesses_path, "r", encoding="utf-8") as f:
            guesses = f.read().splitlines()
        with open(answers_path, "r", encoding="utf-8") as f:
            answers = f.read().splitlines()
        return cls(guesses, answers)

    @classmethod
    def from_default_files(cls) -> "WordBank":
        return cls.from_files(DEFAULT_GUESSES_FILE, DEFAULT_ANSWERS_FILE)

    def pick_secret(self, rng: random.Random | None = None) -> WordValue:
        """
        Picks a secret at random. Secrets must also be legal guesses, so
        this raises NotInWordList for an answer missing from the guess list.
        """
        if not self.secrets:
            raise ValueError("No secret words available")
        choice = (rng or random).choice(self.secrets)
        return WordValue.create(choice, self.legal_words)
