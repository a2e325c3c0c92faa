from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .pieces import Side
from .tree import StringTree


def _new_trees() -> dict[Side, StringTree]:
    return {Side.RED: StringTree(), Side.BLACK: StringTree()}


@dataclass
class PlayerRoster:
    """Player names per side, each side in its own search tree."""

    trees: dict[Side, StringTree] = field(default_factory=_new_trees)

    def register(self, side: Side, name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Player name must not be blank.")
        self.trees[side].insert(cleaned)
        return cleaned

    def name(self, side: Side) -> Optional[str]:
        """First name registered for ``side`` (the tree root)."""
        return self.trees[side].root

    def names(self, side: Side) -> list[str]:
        return list(self.trees[side].in_order())

    def label(self, side: Side) -> str:
        name = self.name(side)
        default = "Red" if side is Side.RED else "Black"
        return f"{name} ({default})" if name else default
