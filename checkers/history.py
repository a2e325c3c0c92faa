from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .move import MoveRecord
from .tree import StringTree


@dataclass(frozen=True, slots=True, order=True)
class _MaxKey:
    """Inverts string ordering so ``heapq``'s min-heap behaves as a max-heap."""

    text: str = field(compare=False)
    _inverted: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Negated code points plus a trailing 1 make longer strings sort first
        # when one key is a prefix of the other, mirroring ``a < a + suffix``.
        object.__setattr__(self, "_inverted", tuple(-ord(ch) for ch in self.text) + (1,))


class MoveHistory:
    """Accepted moves in chronological order plus two string indexes over them.

    ``tree`` keeps the canonical move strings in lexicographic order and
    ``priority`` is a max-heap on the same comparison. Neither index is
    chronological: ``mostRecentByPriority`` returns the greatest string.
    """

    def __init__(self) -> None:
        self.records: list[MoveRecord] = []
        self.tree = StringTree()
        self.priority: list[_MaxKey] = []

    @classmethod
    def from_records(cls, records: list[MoveRecord]) -> "MoveHistory":
        history = cls()
        for record in records:
            history.record(record)
        return history

    def record(self, move: MoveRecord) -> str:
        text = str(move)
        self.records.append(move)
        self.tree.insert(text)
        heapq.heappush(self.priority, _MaxKey(text))
        return text

    def mostRecentByPriority(self) -> Optional[str]:
        if not self.priority:
            return None
        return self.priority[0].text

    def lastMove(self) -> Optional[str]:
        if not self.records:
            return None
        return str(self.records[-1])

    def ordered(self) -> list[str]:
        return list(self.tree.in_order())

    def movesWithPrefix(self, prefix: str) -> list[str]:
        return self.tree.with_prefix(prefix)

    def movesBetween(self, low: str, high: str) -> list[str]:
        return list(self.tree.in_order(low=low, high=high))

    def clear(self) -> None:
        self.records.clear()
        self.tree = StringTree()
        self.priority.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self.records)
