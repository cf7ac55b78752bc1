import asyncio
import logging
import random
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from termwordle.display.render import render_board, render_keyboard, render_stats
from termwordle.display.templates import HELP_TEXT, HOW_TO_PLAY, TITLE, result_message, toggle_message
from termwordle.game.engine import GameEngine
from termwordle.game.errors import GameAborted, NotInWordList
from termwordle.game.models import GameConfig, RoundOutcome
from termwordle.game.state import RoundState
from termwordle.players.factory import create_player
from termwordle.storage.stats_store import DEFAULT_STATS_FILE, StatsStore
from termwordle.words.bank import DEFAULT_ANSWERS_FILE, DEFAULT_GUESSES_FILE, WordBank

app = typer.Typer(help="termwordle: guess the five-letter word in six tries.")
console = Console()

def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

def _load_bank(config: GameConfig) -> WordBank:
    return WordBank.from_files(
        config.guesses_file or DEFAULT_GUESSES_FILE,
        config.answers_file or DEFAULT_ANSWERS_FILE,
    )

@app.command()
def play(
    guesses_file: Optional[Path] = typer.Option(
        None, envvar="TERMWORDLE_GUESSES_FILE", help="Word list of legal guesses"
    ),
    answers_file: Optional[Path] = typer.Option(
        None, envvar="TERMWORDLE_ANSWERS_FILE", help="Word list of possible secret words"
    ),
    stats_file: Path = typer.Option(
        Path(DEFAULT_STATS_FILE), envvar="TERMWORDLE_STATS_FILE", help="Where to keep statistics"
    ),
    hard: bool = typer.Option(False, "--hard", help="Start in hard mode"),
    contrast: bool = typer.Option(False, "--contrast", help="Start in high contrast mode"),
    seed: Optional[int] = typer.Option(None, help="Seed for choosing the secret word"),
    script: Optional[Path] = typer.Option(
        None,
        exists=True,
        dir_okay=False,
        help="Read inputs from a file (one per line) instead of the terminal",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Plays one round and records the result.
    """
    _configure_logging(verbose)
    config = GameConfig(
        guesses_file=guesses_file,
        answers_file=answers_file,
        stats_file=stats_file,
        hard_mode=hard,
        contrast=contrast,
        seed=seed,
    )

    # 1. Load word lists and pick the secret
    try:
        bank = _load_bank(config)
        secret = bank.pick_secret(random.Random(config.seed))
    except (OSError, ValueError) as e:
        console.print(f"[red]Error loading word lists: {e}[/red]")
        raise typer.Exit(code=1)
    except NotInWordList as e:
        console.print(f"[red]Error choosing secret word: {e.word} is not a legal guess[/red]")
        raise typer.Exit(code=1)

    # 2. Set up the round
    state = RoundState.begin(secret)
    console.print(Panel(HELP_TEXT.strip(), title=TITLE, expand=False))
    if config.hard_mode:
        console.print(toggle_message("hard_mode", state.set_hard_mode(True)))
    if config.contrast:
        console.print(toggle_message("contrast", state.set_contrast(True)))

    # 3. Play
    if script:
        with open(script, "r", encoding="utf-8") as f:
            player = create_player("player", "scripted", inputs=f.read().splitlines())
    else:
        player = create_player("player", "console", console=console)

    try:
        outcome = asyncio.run(GameEngine(bank.legal_words).run_round(state, player))
    except GameAborted:
        console.print("Exiting")
        raise typer.Exit()

    console.print(render_board(state.history, state.contrast))
    console.print(render_keyboard(state.history, state.contrast))
    style = "bold green" if outcome.won else "bold red"
    console.print(f"[{style}]{result_message(outcome, state.secret)}[/{style}]")

    # 4. Record the result
    _record_outcome(StatsStore(config.stats_file), outcome, state.contrast)

def _record_outcome(store: StatsStore, outcome: RoundOutcome, contrast: bool):
    stats = store.load().apply(outcome)
    console.print(render_stats(stats, highlight_turn=outcome.winning_turn, contrast=contrast))
    if store.save(stats):
        console.print("Stats saved")
    else:
        console.print(f"[yellow]Warning: could not save stats to {store.path}[/yellow]")

@app.command()
def stats(
    stats_file: Path = typer.Option(
        Path(DEFAULT_STATS_FILE), envvar="TERMWORDLE_STATS_FILE", help="Where statistics are kept"
    ),
):
    """
    Displays the saved statistics.
    """
    _configure_logging(False)
    console.print(render_stats(StatsStore(stats_file).load()))

@app.command(name="how-to")
def how_to():
    """
    Explains the rules.
    """
    console.print(HOW_TO_PLAY.strip())

if __name__ == "__main__":
    app()
