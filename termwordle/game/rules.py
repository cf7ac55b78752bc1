from collections import Counter
from typing import Iterable
from termwordle.game.errors import MustContain, MustPlaceAt
from termwordle.game.models import WORD_LENGTH, GuessRecord, LetterOutcome, WordValue

OUTCOME_RANK = {LetterOutcome.ABSENT: 0, LetterOutcome.PRESENT: 1, LetterOutcome.EXACT: 2}

def score_guess(secret: WordValue, guess: WordValue) -> tuple[LetterOutcome, ...]:
    """
    Scores a guess against the secret word.

    Exact matches are marked first. Remaining guess letters are then marked
    present, walking the secret left to right, while the secret still has
    unclaimed copies of that letter. A letter is therefore never reported
    (exact or present) more times than it occurs in the secret:
    MARRY vs ERROR gives one exact R and one present R.
    """
    outcomes: list[LetterOutcome | None] = [None] * WORD_LENGTH
    used: Counter[str] = Counter()

    for index, (secret_letter, guess_letter) in enumerate(zip(secret.contents, guess.contents)):
        if secret_letter == guess_letter:
            outcomes[index] = LetterOutcome.EXACT
            used[secret_letter] += 1

    totals = Counter(secret.contents)
    for secret_letter in secret.contents:
        for index, guess_letter in enumerate(guess.contents):
            if guess_letter != secret_letter or outcomes[index] is not None:
                continue
            if totals[secret_letter] > used[secret_letter]:
                outcomes[index] = LetterOutcome.PRESENT
                used[secret_letter] += 1

    return tuple(LetterOutcome.ABSENT if o is None else o for o in outcomes)

def check_hard_mode(
    secret: WordValue,
    previous_guess: WordValue | None,
    candidate: WordValue,
    turn_number: int,
) -> None:
    """
    Raises the first hard mode violation of candidate, if any.

    1. Letters placed exactly in the previous guess must stay in place
       (checked by position, first failing position wins).
    2. Every letter of the previous guess must appear in the candidate at
       least min(copies in previous guess, copies in secret) times
       (checked in previous-guess order, first failing letter wins).

    Rule 1 always runs first, so a letter that is both placed and revealed
    elsewhere is reported as a placement error.
    """
    if turn_number <= 1 or previous_guess is None:
        return

    for index, letter in enumerate(previous_guess.contents):
        if secret.contents[index] == letter and candidate.contents[index] != letter:
            raise MustPlaceAt(index, letter)

    for letter in previous_guess.contents:
        required = min(previous_guess.count(letter), secret.count(letter))
        if candidate.count(letter) < required:
            raise MustContain(letter)

def keyboard_state(history: Iterable[GuessRecord]) -> dict[str, LetterOutcome]:
    """
    Best known outcome for every guessed letter. A letter is only ever
    upgraded: exact beats present, present beats absent.
    """
    state: dict[str, LetterOutcome] = {}
    for record in history:
        for letter, outcome in zip(record.word.contents, record.outcomes):
            known = state.get(letter)
            if known is None or OUTCOME_RANK[outcome] > OUTCOME_RANK[known]:
                state[letter] = outcome
    return state
