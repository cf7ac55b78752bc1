from typer.testing import CliRunner
from termwordle.cli import app

runner = CliRunner()

def write_lists(tmp_path, answers="grape\n"):
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("crane\ngrape\ntrace\n")
    answers_file = tmp_path / "answers.txt"
    answers_file.write_text(answers)
    return guesses, answers_file

def play(tmp_path, inputs, *extra, answers="grape\n"):
    guesses, answers_file = write_lists(tmp_path, answers)
    script = tmp_path / "script.txt"
    script.write_text("\n".join(inputs) + "\n")
    return runner.invoke(app, [
        "play",
        "--guesses-file", str(guesses),
        "--answers-file", str(answers_file),
        "--stats-file", str(tmp_path / "stats.txt"),
        "--script", str(script),
        *extra,
    ])

def test_play_records_win(tmp_path):
    result = play(tmp_path, ["crane", "grape"])

    assert result.exit_code == 0, result.output
    assert "Magnificent" in result.output
    assert "Stats saved" in result.output
    assert (tmp_path / "stats.txt").read_text() == "0\n1\n0\n0\n0\n0\n0\n1\n1\n"

def test_play_records_loss(tmp_path):
    result = play(tmp_path, ["crane"] * 6)

    assert result.exit_code == 0, result.output
    assert "Failure: GRAPE" in result.output
    assert (tmp_path / "stats.txt").read_text() == "0\n0\n0\n0\n0\n0\n1\n0\n0\n"

def test_play_shows_keyboard(tmp_path):
    result = play(tmp_path, ["crane", "grape"])

    assert result.exit_code == 0, result.output
    assert "Q W E R T Y U I O P" in result.output
    assert "Z X C V B N M" in result.output

def test_play_hard_mode_flag(tmp_path):
    result = play(tmp_path, ["crane", "grape"], "--hard")

    assert result.exit_code == 0, result.output
    assert "Hard mode enabled" in result.output

def test_quitting_skips_stats(tmp_path):
    result = play(tmp_path, ["crane", "`"])

    assert result.exit_code == 0, result.output
    assert "Exiting" in result.output
    assert not (tmp_path / "stats.txt").exists()

def test_illegal_secret_exits(tmp_path):
    result = play(tmp_path, ["crane"], answers="mould\n")
    assert result.exit_code == 1

def test_stats_command(tmp_path):
    stats_file = tmp_path / "stats.txt"
    stats_file.write_text("0\n0\n1\n0\n0\n0\n0\n1\n1\n")

    result = runner.invoke(app, ["stats", "--stats-file", str(stats_file)])

    assert result.exit_code == 0, result.output
    assert "Played" in result.output
    assert "Guess Distribution" in result.output

def test_how_to():
    result = runner.invoke(app, ["how-to"])
    assert result.exit_code == 0
    assert "HOW TO PLAY" in result.output
