import asyncio
import logging
from typing import Iterable
from rich.console import Console
from termwordle.display.render import render_keyboard, render_row
from termwordle.game.models import MAX_GUESSES, GuessRecord, RoundOutcome
from termwordle.game.state import RoundState
from termwordle.players.base import Player

logger = logging.getLogger(__name__)

class ConsolePlayer(Player):
    """
    A human at the terminal.
    """
    def __init__(self, name: str, console: Console | None = None):
        super().__init__(name)
        self.console = console or Console()

    async def submit_guess(
        self,
        attempt: int,
        history: list[GuessRecord],
        message: str | None = None,
    ) -> str | None:
        if message:
            self.console.print(f"[yellow]{message}[/yellow]")
        try:
            return await asyncio.to_thread(self.console.input, f"Guess {attempt}/{MAX_GUESSES}: ")
        except EOFError:
            logger.debug(f"Input closed for {self.name}")
            return None

    async def show_feedback(self, record: GuessRecord, state: RoundState) -> None:
        self.console.print(render_row(record, state.contrast))
        self.console.print(render_keyboard(state.history, state.contrast))

class ScriptedPlayer(Player):
    """
    Replays a fixed list of inputs. Returns None (quit) once they run out.
    Everything the engine reports back is kept for inspection.
    """
    def __init__(self, name: str, inputs: Iterable[str]):
        super().__init__(name)
        self.inputs = list(inputs)
        self.messages: list[str | None] = []
        self.feedback: list[GuessRecord] = []
        self.result: RoundOutcome | None = None

    async def submit_guess(
        self,
        attempt: int,
        history: list[GuessRecord],
        message: str | None = None,
    ) -> str | None:
        self.messages.append(message)
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    async def show_feedback(self, record: GuessRecord, state: RoundState) -> None:
        self.feedback.append(record)

    async def show_result(self, outcome: RoundOutcome, state: RoundState) -> None:
        self.result = outcome
