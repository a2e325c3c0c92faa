from __future__ import annotations

from checkers.board import BoardSnapshot
from checkers.game import Game
from checkers.pieces import Side
from checkers.player import PlayerRoster


def render_board(snapshot: BoardSnapshot) -> str:
    size = len(snapshot)
    lines = ["   " + " ".join(str(col) for col in range(size))]
    for row, cells in enumerate(snapshot):
        lines.append(f"{row} " + "".join(f"{symbol} " for symbol in cells))
    return "\n".join(lines)


def render_scores(game: Game, roster: PlayerRoster) -> str:
    return "\n".join(
        [
            f"{roster.label(Side.RED)} Score: {game.redScore()}",
            f"{roster.label(Side.BLACK)} Score: {game.blackScore()}",
        ]
    )


def render_recent_move(game: Game) -> str:
    recent = game.mostRecentByPriority()
    if recent is None:
        return "No moves made yet."
    return f"Most recent move: {recent}"
