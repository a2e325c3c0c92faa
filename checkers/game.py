from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .board import Board, BoardSnapshot
from .history import MoveHistory
from .move import MoveRecord
from .pieces import Side
from .validator import MoveKind, classify

logger = logging.getLogger(__name__)

PlayerLike = Union[Side, str]

PROMOTION_ROW = {
    Side.RED: 0,
    Side.BLACK: 7,
}


def _new_scores() -> dict[Side, int]:
    return {Side.RED: 0, Side.BLACK: 0}


@dataclass
class GameState:
    board: Board = field(default_factory=Board)
    scores: dict[Side, int] = field(default_factory=_new_scores)
    history: MoveHistory = field(default_factory=MoveHistory)

    def reset(self) -> None:
        self.board.initialize()
        self.scores = _new_scores()
        self.history.clear()


def _as_side(player: PlayerLike) -> Side:
    if isinstance(player, Side):
        return player
    return Side.from_symbol(player)


def apply_move(
    state: GameState,
    player: PlayerLike,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
) -> bool:
    side = _as_side(player)
    board = state.board
    kind = classify(side, from_row, from_col, to_row, to_col, board)
    if not kind.accepted:
        logger.debug(
            "Rejected %s move (%d,%d)->(%d,%d): %s",
            side.name, from_row, from_col, to_row, to_col, kind.value,
        )
        return False

    move = MoveRecord(side, from_row, from_col, to_row, to_col)
    piece = board.getPiece(from_row, from_col)
    if piece is None:
        raise RuntimeError("Validated move has no piece on its source square.")

    board.setPiece(to_row, to_col, piece)
    board.setPiece(from_row, from_col, None)

    if kind is MoveKind.JUMP:
        mid_row, mid_col = move.midpoint
        board.setPiece(mid_row, mid_col, None)
        state.scores[side] += 1
        logger.info("%s captured at (%d,%d)", side.name, mid_row, mid_col)

    if to_row == PROMOTION_ROW[side] and not piece.is_king:
        board.setPiece(to_row, to_col, piece.promote())
        logger.info("%s piece crowned at (%d,%d)", side.name, to_row, to_col)

    text = state.history.record(move)
    logger.info("Accepted move %s", text)
    return True


class Game:
    """Session facade over a single ``GameState``."""

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state if state is not None else GameState()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def history(self) -> MoveHistory:
        return self.state.history

    def reset(self) -> None:
        self.state.reset()

    def classifyMove(
        self,
        player: PlayerLike,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
    ) -> MoveKind:
        return classify(_as_side(player), from_row, from_col, to_row, to_col, self.state.board)

    def applyMove(
        self,
        player: PlayerLike,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
    ) -> bool:
        return apply_move(self.state, player, from_row, from_col, to_row, to_col)

    def mostRecentByPriority(self) -> Optional[str]:
        return self.state.history.mostRecentByPriority()

    def lastMove(self) -> Optional[str]:
        return self.state.history.lastMove()

    def score(self, side: Side) -> int:
        return self.state.scores[side]

    def redScore(self) -> int:
        return self.score(Side.RED)

    def blackScore(self) -> int:
        return self.score(Side.BLACK)

    def boardSnapshot(self) -> BoardSnapshot:
        return self.state.board.snapshot()
