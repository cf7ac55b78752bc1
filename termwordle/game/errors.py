ORDINALS = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th", 5: "5th"}

class WordleError(Exception):
    """
    Base class for every error raised by the game core.
    """

class WordValidationError(WordleError):
    """
    Raw text could not be turned into a WordValue. The guess is rejected
    and the player may retry the same turn.
    """
    message = "Invalid word"

    def __init__(self, word: str):
        self.word = word
        super().__init__(self.message)

class WrongLength(WordValidationError):
    message = "Please choose a 5-letter word"

class NonAlphabetic(WordValidationError):
    message = "Please choose a real word"

class NotInWordList(WordValidationError):
    message = "Not in word list"

class HardModeViolation(WordleError):
    """
    A guess ignores information revealed by the previous guess.
    Only the first violation found is ever raised.
    """
    def __init__(self, letter: str, message: str):
        self.letter = letter
        super().__init__(message)

class MustPlaceAt(HardModeViolation):
    def __init__(self, index: int, letter: str):
        self.index = index
        super().__init__(letter, f"{ORDINALS[index + 1]} letter must be {letter}")

class MustContain(HardModeViolation):
    def __init__(self, letter: str):
        super().__init__(letter, f"Guess must contain {letter}")

class RoundAlreadyComplete(WordleError):
    """
    A guess was submitted after the round ended. This is a caller bug.
    """

class RoundInProgress(WordleError):
    """
    The outcome of a round was requested before the round ended.
    """

class GameAborted(WordleError):
    """
    The player quit before the round ended.
    """
