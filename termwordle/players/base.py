from abc import ABC, abstractmethod
from termwordle.game.models import GuessRecord, RoundOutcome
from termwordle.game.state import RoundState

class Player(ABC):
    """
    Abstract base class for anything that can play a round.
    The engine calls submit_guess until the round is over.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def submit_guess(
        self,
        attempt: int,
        history: list[GuessRecord],
        message: str | None = None,
    ) -> str | None:
        """
        Returns raw text for the given attempt (1-6), or None to quit.
        message explains why the previous input was not accepted.
        """
        pass

    async def show_feedback(self, record: GuessRecord, state: RoundState) -> None:
        pass

    async def show_result(self, outcome: RoundOutcome, state: RoundState) -> None:
        pass
