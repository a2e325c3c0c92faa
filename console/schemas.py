from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from checkers.pieces import Side

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class SessionSettings(BaseModel):
    red_name: Optional[str] = Field(default=None, description="Skip the red name prompt.")
    black_name: Optional[str] = Field(default=None, description="Skip the black name prompt.")
    show_board: bool = True
    log_level: LogLevel = "warning"

    @field_validator("red_name", "black_name")
    @classmethod
    def _strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class MoveCommand(BaseModel):
    """One move as typed at the console. Coordinates are not range-checked here."""

    player: Side
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @field_validator("player", mode="before")
    @classmethod
    def _normalize_player(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_input(cls, player: str, coordinates: str) -> "MoveCommand":
        parts = coordinates.split()
        if len(parts) != 4:
            raise ValueError(f"Expected 4 coordinates, got {len(parts)}.")
        from_row, from_col, to_row, to_col = parts
        return cls(
            player=player,
            from_row=from_row,
            from_col=from_col,
            to_row=to_row,
            to_col=to_col,
        )

    def as_args(self) -> tuple[Side, int, int, int, int]:
        return (self.player, self.from_row, self.from_col, self.to_row, self.to_col)
