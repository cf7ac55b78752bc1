import pytest
from termwordle.game.models import RoundOutcome
from termwordle.stats.aggregate import StatsAggregate
from termwordle.storage.stats_store import StatsStore

WIN_ON_3 = RoundOutcome(won=True, winning_turn=3)
LOSS = RoundOutcome(won=False)

def test_apply_win_then_loss():
    stats = StatsAggregate().apply(WIN_ON_3)
    assert stats.to_counters() == [0, 0, 1, 0, 0, 0, 0, 1, 1]

    stats = stats.apply(LOSS)
    assert stats.to_counters() == [0, 0, 1, 0, 0, 0, 1, 0, 1]

def test_streaks():
    stats = StatsAggregate()
    for outcome in [WIN_ON_3, WIN_ON_3, LOSS, WIN_ON_3]:
        stats = stats.apply(outcome)
        assert stats.max_streak >= stats.current_streak
    assert stats.current_streak == 1
    assert stats.max_streak == 2

def test_apply_does_not_mutate():
    stats = StatsAggregate()
    stats.apply(WIN_ON_3)
    assert stats.to_counters() == [0] * 9

def test_derived_figures():
    stats = StatsAggregate.from_counters([1, 2, 0, 0, 0, 4, 3, 0, 5])
    assert stats.played == 10
    assert stats.win_percentage == 70
    assert stats.distribution() == [(1, 10), (2, 20), (0, 0), (0, 0), (0, 0), (4, 40)]

    assert StatsAggregate.from_counters([2, 0, 0, 0, 0, 0, 1, 0, 2]).win_percentage == 66
    assert StatsAggregate().win_percentage == 0
    assert StatsAggregate().distribution() == [(0, 0)] * 6

def test_from_counters_needs_nine_values():
    with pytest.raises(ValueError):
        StatsAggregate.from_counters([0] * 8)

def test_store_missing_file(tmp_path):
    assert StatsStore(tmp_path / "missing.txt").load() == StatsAggregate()

def test_store_save_and_load(tmp_path):
    path = tmp_path / "wordle_stats.txt"
    store = StatsStore(path)
    stats = StatsAggregate().apply(WIN_ON_3)

    assert store.save(stats)
    assert path.read_text() == "0\n0\n1\n0\n0\n0\n0\n1\n1\n"
    assert store.load() == stats

def test_store_overwrites_previous_content(tmp_path):
    path = tmp_path / "wordle_stats.txt"
    path.write_text("junk\n" * 20)
    StatsStore(path).save(StatsAggregate())
    assert path.read_text() == "0\n" * 9

@pytest.mark.parametrize("content", [
    "1\n2\n3\n4\n5\n6\n7\n8\n",           # too short
    "1\n2\n3\n4\n5\n6\n7\n8\n9\n10\n",    # too long
    "1\n2\n3\nfour\n5\n6\n7\n8\n9\n",
    "1\n2\n3\n-4\n5\n6\n7\n8\n9\n",
    "1.5\n2\n3\n4\n5\n6\n7\n8\n9\n",
])
def test_store_malformed_file_gives_zeros(tmp_path, content):
    path = tmp_path / "wordle_stats.txt"
    path.write_text(content)
    assert StatsStore(path).load() == StatsAggregate()

def test_store_ignores_blank_lines(tmp_path):
    path = tmp_path / "wordle_stats.txt"
    path.write_text("1\n2\n3\n4\n5\n6\n7\n8\n9\n\n")
    assert StatsStore(path).load().to_counters() == [1, 2, 3, 4, 5, 6, 7, 8, 9]

def test_store_write_failure_is_reported(tmp_path):
    # a directory can't be opened for writing
    assert StatsStore(tmp_path).save(StatsAggregate()) is False
