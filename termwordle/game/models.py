from enum import Enum
from pathlib import Path
from typing import Collection
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from termwordle.game.errors import NonAlphabetic, NotInWordList, WrongLength

WORD_LENGTH = 5
MAX_GUESSES = 6

class LetterOutcome(str, Enum):
    EXACT = "exact"      # right letter, right spot (green)
    PRESENT = "present"  # right letter, wrong spot (yellow)
    ABSENT = "absent"    # grey

class ToggleResult(str, Enum):
    APPLIED = "applied"
    ALREADY_SET = "already_set"
    LOCKED = "locked"            # a guess has already been accepted

class WordValue(BaseModel):
    """
    A normalised five-letter word. Use WordValue.create to build one from
    player input; it also checks the word against the legal word list.

    Constructing WordValue(contents=...) directly only checks the shape and
    is meant for words already known to be legal, such as list entries.
    """
    model_config = ConfigDict(frozen=True)

    contents: str

    @field_validator("contents")
    @classmethod
    def _check_shape(cls, value: str) -> str:
        if len(value) != WORD_LENGTH or not value.isalpha() or value != value.upper():
            raise ValueError(f"not a normalised {WORD_LENGTH}-letter word: {value!r}")
        return value

    @classmethod
    def create(cls, raw: str, legal_words: Collection[str]) -> "WordValue":
        if len(raw) != WORD_LENGTH:
            raise WrongLength(raw)
        if not raw.isalpha():
            raise NonAlphabetic(raw)
        word = raw.upper()
        # legal_words holds uppercase entries (see WordBank)
        if word not in legal_words:
            raise NotInWordList(word)
        return cls(contents=word)

    def count(self, letter: str) -> int:
        return self.contents.count(letter)

    def __str__(self) -> str:
        return self.contents

class GuessRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: WordValue
    outcomes: tuple[LetterOutcome, ...]

    @property
    def solved(self) -> bool:
        return all(o is LetterOutcome.EXACT for o in self.outcomes)

class RoundOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    won: bool
    winning_turn: int | None = None    # 1..6 when won, otherwise None

    @model_validator(mode="after")
    def _check_turn(self) -> "RoundOutcome":
        if self.won:
            if self.winning_turn is None or not 1 <= self.winning_turn <= MAX_GUESSES:
                raise ValueError(f"winning_turn must be within 1..{MAX_GUESSES} for a win")
        elif self.winning_turn is not None:
            raise ValueError("winning_turn must be None for a loss")
        return self

class GameConfig(BaseModel):
    guesses_file: Path | None = None   # None selects the bundled list
    answers_file: Path | None = None
    stats_file: Path = Path("wordle_stats.txt")
    hard_mode: bool = False
    contrast: bool = False
    seed: int | None = None
