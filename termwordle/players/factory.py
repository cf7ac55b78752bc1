from termwordle.players.adapters import ConsolePlayer, ScriptedPlayer
from termwordle.players.base import Player

def create_player(name: str, kind: str, **kwargs) -> Player:
    kind = kind.lower()
    if kind == "console":
        return ConsolePlayer(name, **kwargs)
    elif kind == "scripted":
        return ScriptedPlayer(name, **kwargs)
    else:
        raise ValueError(f"Unknown player kind: {kind}")
