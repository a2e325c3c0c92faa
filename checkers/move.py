from __future__ import annotations

from dataclasses import dataclass

from .pieces import Side

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player: Side
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def start(self) -> Coordinate:
        return (self.from_row, self.from_col)

    @property
    def end(self) -> Coordinate:
        return (self.to_row, self.to_col)

    @property
    def midpoint(self) -> Coordinate:
        return ((self.from_row + self.to_row) // 2, (self.from_col + self.to_col) // 2)

    def __str__(self) -> str:
        return (
            f"{self.player.symbol}({self.from_row},{self.from_col})"
            f"->({self.to_row},{self.to_col})"
        )
