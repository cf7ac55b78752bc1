from rich.console import Group
from rich.table import Table
from rich.text import Text
from termwordle.game.models import MAX_GUESSES, WORD_LENGTH, GuessRecord, LetterOutcome
from termwordle.game.rules import keyboard_state
from termwordle.stats.aggregate import StatsAggregate

KEYBOARD_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

TILE_STYLES = {
    LetterOutcome.EXACT: "bold white on green",
    LetterOutcome.PRESENT: "bold black on yellow",
    LetterOutcome.ABSENT: "white on #666666",
}

CONTRAST_TILE_STYLES = {
    LetterOutcome.EXACT: "bold white on magenta",
    LetterOutcome.PRESENT: "bold black on cyan",
    LetterOutcome.ABSENT: "white on #666666",
}

def tile_styles(contrast: bool) -> dict[LetterOutcome, str]:
    return CONTRAST_TILE_STYLES if contrast else TILE_STYLES

def render_row(record: GuessRecord, contrast: bool = False) -> Text:
    styles = tile_styles(contrast)
    row = Text()
    for letter, outcome in zip(record.word.contents, record.outcomes):
        row.append(f" {letter} ", style=styles[outcome])
        row.append(" ")
    return row

def render_board(history: list[GuessRecord], contrast: bool = False) -> Group:
    rows = [render_row(record, contrast) for record in history]
    blank = Text(" _  " * WORD_LENGTH, style="dim")
    rows.extend(blank.copy() for _ in range(MAX_GUESSES - len(history)))
    return Group(*rows)

def render_keyboard(history: list[GuessRecord], contrast: bool = False) -> Text:
    styles = tile_styles(contrast)
    known = keyboard_state(history)
    keyboard = Text()
    for indent, row in enumerate(KEYBOARD_ROWS):
        keyboard.append(" " * indent)
        for letter in row:
            outcome = known.get(letter)
            keyboard.append(letter, style=styles[outcome] if outcome else None)
            keyboard.append(" ")
        keyboard.append("\n")
    keyboard.rstrip()
    return keyboard

def render_stats(
    stats: StatsAggregate,
    highlight_turn: int | None = None,
    contrast: bool = False,
) -> Group:
    summary = Table(box=None, show_header=True, header_style="bold")
    for column in ["Played", "Win %", "Current Streak", "Max Streak"]:
        summary.add_column(column, justify="center")
    summary.add_row(
        str(stats.played),
        str(stats.win_percentage),
        str(stats.current_streak),
        str(stats.max_streak),
    )

    graph = Table(title="Guess Distribution", box=None, show_header=False)
    graph.add_column("Turn", justify="right")
    graph.add_column("Bar")
    highlight = "bright_magenta" if contrast else "bright_green"
    for turn, (count, ticks) in enumerate(stats.distribution(), start=1):
        bar = Text("|" * ticks + f" {count}")
        if turn == highlight_turn:
            bar.stylize(highlight)
        graph.add_row(f"| {turn} |", bar)

    return Group(summary, Text(), graph)
