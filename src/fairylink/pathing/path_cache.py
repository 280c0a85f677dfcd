from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from fairylink.components.position import Position

PairKey = Tuple[Position, Position]


def pair_key(a: Position, b: Position) -> PairKey:
    """Order-independent key for two endpoints."""
    if (a.row, a.col) <= (b.row, b.col):
        return a, b
    return b, a


@dataclass(slots=True)
class PathCache:
    """Bounded memo of found paths keyed by unordered endpoint pair.

    Entries are only valid for the board generation they were stored under. The
    first lookup or store with a different generation drops every entry, so a
    path computed before a removal or shuffle is never handed back afterwards.
    """

    max_entries: int = 512
    generation: int = 0
    hits: int = 0
    misses: int = 0
    _entries: "OrderedDict[PairKey, List[Position]]" = field(default_factory=OrderedDict, repr=False)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, start: Position, end: Position, generation: int) -> Optional[List[Position]]:
        """Return the cached path oriented from ``start`` to ``end``, if any."""
        self._sync(generation)
        key = pair_key(start, end)
        path = self._entries.get(key)
        if path is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        if path[0] == start:
            return list(path)
        return list(reversed(path))

    def put(self, start: Position, end: Position, path: List[Position], generation: int) -> None:
        self._sync(generation)
        if self.max_entries <= 0:
            return
        key = pair_key(start, end)
        self._entries[key] = list(path)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def _sync(self, generation: int) -> None:
        if generation != self.generation:
            self._entries.clear()
            self.generation = generation
