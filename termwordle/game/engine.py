import logging
from typing import Collection
from termwordle.display.templates import toggle_message
from termwordle.game.errors import GameAborted, HardModeViolation, WordValidationError
from termwordle.game.models import RoundOutcome
from termwordle.game.state import RoundState
from termwordle.players.base import Player

logger = logging.getLogger(__name__)

QUIT_COMMAND = "`"
TOGGLE_COMMANDS = {
    "1": "hard_mode",
    "2": "contrast",
}

class GameEngine:
    """
    Orchestrates a single round between a RoundState and a Player.
    """

    def __init__(self, legal_words: Collection[str]):
        self.legal_words = legal_words

    async def run_round(self, state: RoundState, player: Player) -> RoundOutcome:
        state.start()
        message = None

        while not state.is_complete:
            raw = await player.submit_guess(state.turn + 1, state.history, message)
            message = None

            if raw is None or raw.strip() == QUIT_COMMAND:
                logger.info(f"{player.name} quit on turn {state.turn + 1}")
                raise GameAborted(f"{player.name} quit")

            raw = raw.strip()
            if raw in TOGGLE_COMMANDS:
                message = self._toggle(state, TOGGLE_COMMANDS[raw])
                continue

            try:
                state.submit_guess(raw, self.legal_words)
            except (WordValidationError, HardModeViolation) as e:
                # Rejected guesses don't use up a turn; tell the player and ask again
                logger.debug(f"Rejected {raw!r} from {player.name}: {e}")
                message = str(e)
                continue

            await player.show_feedback(state.history[-1], state)

        outcome = state.outcome()
        await player.show_result(outcome, state)
        return outcome

    def _toggle(self, state: RoundState, setting: str) -> str:
        if setting == "hard_mode":
            result = state.set_hard_mode(True)
        else:
            result = state.set_contrast(True)
        logger.debug(f"Toggle {setting}: {result.value}")
        return toggle_message(setting, result)
