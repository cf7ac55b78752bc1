import logging
from pathlib import Path
from termwordle.stats.aggregate import COUNTER_COUNT, StatsAggregate

logger = logging.getLogger(__name__)

DEFAULT_STATS_FILE = "wordle_stats.txt"

class StatsStore:
    """
    Persists StatsAggregate as a plain text file of nine non-negative
    integers, one per line: wins on turns 1-6, losses, current streak,
    max streak.
    """

    def __init__(self, path: str | Path = DEFAULT_STATS_FILE):
        self.path = Path(path)

    def load(self) -> StatsAggregate:
        """
        Anything other than exactly nine counters yields all zeros.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No stats file at {self.path}, starting fresh")
            return StatsAggregate()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read stats from {self.path}: {e}")
            return StatsAggregate()

        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if len(lines) != COUNTER_COUNT or not all(line.isascii() and line.isdigit() for line in lines):
            logger.warning(f"Ignoring malformed stats file {self.path}")
            return StatsAggregate()

        return StatsAggregate.from_counters([int(line) for line in lines])

    def save(self, stats: StatsAggregate) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                for value in stats.to_counters():
                    f.write(f"{value}\n")
        except OSError as e:
            logger.error(f"Could not save stats to {self.path}: {e}")
            return False
        return True
