"""Core checkers engine package."""

from .board import BOARD_SIZE, Board
from .game import Game, GameState, apply_move
from .history import MoveHistory
from .move import Coordinate, MoveRecord
from .pieces import Cell, Rank, Side
from .player import PlayerRoster
from .tree import StringTree
from .validator import MoveKind, classify

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "Coordinate",
    "Game",
    "GameState",
    "MoveHistory",
    "MoveKind",
    "MoveRecord",
    "PlayerRoster",
    "Rank",
    "Side",
    "StringTree",
    "apply_move",
    "classify",
]
