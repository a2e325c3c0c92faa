from __future__ import annotations

from typing import Optional

from .pieces import EMPTY_SYMBOL, Cell, Side

BOARD_SIZE = 8
STARTING_ROWS = 3

BoardSnapshot = list[list[str]]


class Board:
    """8x8 grid of cells. ``getPiece``/``setPiece`` trust their coordinates."""

    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.board: list[list[Optional[Cell]]] = []
        self.initialize()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    def initialize(self) -> None:
        self.board = [[None for _ in range(self.boardSize)] for _ in range(self.boardSize)]
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if (row + col) % 2 == 0:
                    continue
                if row < STARTING_ROWS:
                    self.board[row][col] = Cell(Side.RED)
                elif row >= self.boardSize - STARTING_ROWS:
                    self.board[row][col] = Cell(Side.BLACK)

    def getPiece(self, row: int, col: int) -> Optional[Cell]:
        return self.board[row][col]

    def setPiece(self, row: int, col: int, cell: Optional[Cell]) -> None:
        self.board[row][col] = cell

    def inBounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def countPieces(self, side: Side) -> int:
        return sum(
            1
            for row in self.board
            for cell in row
            if cell is not None and cell.belongs_to(side)
        )

    def snapshot(self) -> BoardSnapshot:
        return [
            [EMPTY_SYMBOL if cell is None else cell.symbol for cell in row]
            for row in self.board
        ]

    def copy(self) -> "Board":
        clone = Board.empty()
        # Cells are immutable, copying the rows is enough.
        clone.board = [list(row) for row in self.board]
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.board == other.board
