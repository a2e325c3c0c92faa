"""Move classification.

Each gate short-circuits, in this order:

1. every coordinate must lie on the board,
2. the source square must hold a piece of the acting player,
3. an empty destination with an opponent on the midpoint square is a jump,
4. any other empty destination is a simple move,
5. an occupied destination blocks the move.

Direction and distance are not checked. The midpoint uses integer division,
so only moves with even row and column deltas can land on a distinct
midpoint square; for adjacent moves the midpoint collapses onto the source.
"""

from __future__ import annotations

from enum import Enum

from .board import Board
from .move import MoveRecord
from .pieces import Side


class MoveKind(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    WRONG_PIECE = "wrong_piece"
    JUMP = "jump"
    SIMPLE = "simple"
    BLOCKED = "blocked"

    @property
    def accepted(self) -> bool:
        return self in (MoveKind.JUMP, MoveKind.SIMPLE)


def classify(
    player: Side,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
    board: Board,
) -> MoveKind:
    if not (board.inBounds(from_row, from_col) and board.inBounds(to_row, to_col)):
        return MoveKind.OUT_OF_BOUNDS

    source = board.getPiece(from_row, from_col)
    if source is None or not source.belongs_to(player):
        return MoveKind.WRONG_PIECE

    if board.getPiece(to_row, to_col) is not None:
        return MoveKind.BLOCKED

    mid_row = (from_row + to_row) // 2
    mid_col = (from_col + to_col) // 2
    middle = board.getPiece(mid_row, mid_col)
    if middle is not None and middle.belongs_to(player.opponent):
        return MoveKind.JUMP
    return MoveKind.SIMPLE


def classify_move(move: MoveRecord, board: Board) -> MoveKind:
    return classify(move.player, move.from_row, move.from_col, move.to_row, move.to_col, board)
