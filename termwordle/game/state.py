import logging
from enum import Enum
from typing import Collection
from termwordle.game.errors import RoundAlreadyComplete, RoundInProgress
from termwordle.game.models import (
    MAX_GUESSES,
    GuessRecord,
    LetterOutcome,
    RoundOutcome,
    ToggleResult,
    WordValue,
)
from termwordle.game.rules import check_hard_mode, score_guess

logger = logging.getLogger(__name__)

class RoundPhase(str, Enum):
    SETUP = "setup"
    AWAITING_GUESS = "awaiting_guess"
    COMPLETE = "complete"

class RoundState:
    """
    One round of the game: the secret word and every guess accepted so far.
    Settings can only change before the first guess is accepted.
    """

    def __init__(self, secret: WordValue):
        self.secret = secret
        self.history: list[GuessRecord] = []
        self.hard_mode = False
        self.contrast = False
        self.won = False
        self._started = False

    @classmethod
    def begin(cls, secret: WordValue) -> "RoundState":
        return cls(secret)

    @property
    def turn(self) -> int:
        return len(self.history)

    @property
    def guesses(self) -> list[WordValue]:
        return [record.word for record in self.history]

    @property
    def is_complete(self) -> bool:
        return self.won or self.turn >= MAX_GUESSES

    @property
    def phase(self) -> RoundPhase:
        if self.is_complete:
            return RoundPhase.COMPLETE
        if self._started or self.history:
            return RoundPhase.AWAITING_GUESS
        return RoundPhase.SETUP

    def start(self):
        self._started = True

    def set_hard_mode(self, enabled: bool = True) -> ToggleResult:
        return self._toggle("hard_mode", enabled)

    def set_contrast(self, enabled: bool = True) -> ToggleResult:
        return self._toggle("contrast", enabled)

    def _toggle(self, setting: str, enabled: bool) -> ToggleResult:
        if getattr(self, setting) == enabled:
            return ToggleResult.ALREADY_SET
        if self.history:
            logger.debug(f"Refusing to change {setting} after turn {self.turn}")
            return ToggleResult.LOCKED
        setattr(self, setting, enabled)
        return ToggleResult.APPLIED

    def submit_guess(self, raw: str, legal_words: Collection[str]) -> tuple[LetterOutcome, ...]:
        """
        Validates and scores a guess, then advances the round.
        Rejected guesses raise and leave the round untouched.
        """
        if self.is_complete:
            raise RoundAlreadyComplete(f"Round already finished after {self.turn} guesses")

        guess = WordValue.create(raw, legal_words)
        if self.hard_mode:
            previous = self.history[-1].word if self.history else None
            check_hard_mode(self.secret, previous, guess, self.turn + 1)

        self._started = True
        outcomes = score_guess(self.secret, guess)
        self.history.append(GuessRecord(word=guess, outcomes=outcomes))
        self.won = self.history[-1].solved
        logger.debug(f"Turn {self.turn}: {guess} -> {[o.value for o in outcomes]}")
        return outcomes

    def outcome(self) -> RoundOutcome:
        if not self.is_complete:
            raise RoundInProgress(f"Round still running at turn {self.turn}")
        if self.won:
            return RoundOutcome(won=True, winning_turn=self.turn)
        return RoundOutcome(won=False)
