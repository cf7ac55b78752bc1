from termwordle.game.models import RoundOutcome, ToggleResult, WordValue

TITLE = "W O R D L E"

HELP_TEXT = """
Guess by typing a word
and pressing Enter

Type ` to Exit,
1 for Hard Mode,
2 for High Contrast
"""

HOW_TO_PLAY = """
HOW TO PLAY

Guess the Wordle in 6 tries
Each guess must be a valid 5-letter word

The colour of the tiles will
change to show how close
your guess was to the word

Hard mode: revealed hints must be
used in every following guess
"""

WIN_MESSAGES = {
    1: "Genius",
    2: "Magnificent",
    3: "Impressive",
    4: "Splendid",
    5: "Great",
    6: "Phew",
}

SETTING_NAMES = {
    "hard_mode": "Hard mode",
    "contrast": "High contrast mode",
}

def result_message(outcome: RoundOutcome, secret: WordValue) -> str:
    if outcome.won:
        return WIN_MESSAGES[outcome.winning_turn]
    return f"Failure: {secret}"

def toggle_message(setting: str, result: ToggleResult) -> str:
    name = SETTING_NAMES[setting]
    if result is ToggleResult.APPLIED:
        return f"{name} enabled"
    if result is ToggleResult.ALREADY_SET:
        return f"{name} already enabled"
    return f"Cannot enable {name.lower()}"
