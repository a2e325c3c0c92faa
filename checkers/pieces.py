from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    RED = "R"
    BLACK = "B"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.RED else Side.RED

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Side":
        try:
            return cls(symbol.strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unsupported player '{symbol}'.") from exc


class Rank(Enum):
    MAN = "man"
    KING = "king"


KING_SYMBOL = "K"
EMPTY_SYMBOL = " "


@dataclass(frozen=True, slots=True)
class Cell:
    """Occupied square contents. An empty square is represented by ``None``."""

    side: Side
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    @property
    def symbol(self) -> str:
        return KING_SYMBOL if self.is_king else self.side.symbol

    def belongs_to(self, side: Side) -> bool:
        return self.side is side

    def promote(self) -> "Cell":
        if self.is_king:
            return self
        return Cell(self.side, Rank.KING)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.side.name})"
