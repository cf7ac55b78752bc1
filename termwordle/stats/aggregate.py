from typing import Annotated, Sequence
from pydantic import BaseModel, ConfigDict, Field
from termwordle.game.models import MAX_GUESSES, RoundOutcome

COUNTER_COUNT = MAX_GUESSES + 3
BAR_WIDTH = 40

Count = Annotated[int, Field(ge=0)]

class StatsAggregate(BaseModel):
    """
    Lifetime results: wins per winning turn, losses and streaks.
    Values are immutable; apply returns an updated copy.
    """
    model_config = ConfigDict(frozen=True)

    wins: tuple[Count, Count, Count, Count, Count, Count] = (0, 0, 0, 0, 0, 0)
    losses: Count = 0
    current_streak: Count = 0
    max_streak: Count = 0

    @classmethod
    def from_counters(cls, counters: Sequence[int]) -> "StatsAggregate":
        if len(counters) != COUNTER_COUNT:
            raise ValueError(f"Expected {COUNTER_COUNT} counters, got {len(counters)}")
        return cls(
            wins=tuple(counters[:MAX_GUESSES]),
            losses=counters[MAX_GUESSES],
            current_streak=counters[MAX_GUESSES + 1],
            max_streak=counters[MAX_GUESSES + 2],
        )

    def to_counters(self) -> list[int]:
        return [*self.wins, self.losses, self.current_streak, self.max_streak]

    def apply(self, outcome: RoundOutcome) -> "StatsAggregate":
        wins = list(self.wins)
        losses = self.losses
        if outcome.won:
            wins[outcome.winning_turn - 1] += 1
            streak = self.current_streak + 1
        else:
            losses += 1
            streak = 0

        return StatsAggregate(
            wins=tuple(wins),
            losses=losses,
            current_streak=streak,
            max_streak=max(self.max_streak, streak),
        )

    @property
    def total_wins(self) -> int:
        return sum(self.wins)

    @property
    def played(self) -> int:
        return self.total_wins + self.losses

    @property
    def win_percentage(self) -> int:
        if not self.played:
            return 0
        return int(self.total_wins / self.played * 100)

    def distribution(self, width: int = BAR_WIDTH) -> list[tuple[int, int]]:
        """
        (count, bar length) per winning turn, scaled so the most common
        winning turn spans the full width.
        """
        biggest = max(self.wins)
        if not biggest:
            return [(count, 0) for count in self.wins]
        return [(count, int(count / biggest * width)) for count in self.wins]
