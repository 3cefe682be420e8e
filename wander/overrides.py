# wander/overrides.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterable, Iterator, Set

OPEN = 0
WALL = 1

class TypeOverrideSet:
    """
    Node types currently treated as passable regardless of their true type.
    Walls are absolute and can never be overridden.
    """
    def __init__(self, types: Iterable[int] = ()):
        self._types: Set[int] = set()
        for t in types:
            self.add(t)

    def contains(self, node_type: int) -> bool:
        return node_type in self._types

    __contains__ = contains

    def add(self, node_type: int) -> None:
        if node_type == WALL:
            raise ValueError("wall type cannot be overridden")
        self._types.add(node_type)

    def remove(self, node_type: int) -> None:
        self._types.discard(node_type)

    @contextmanager
    def trial(self, node_type: int) -> Iterator["TypeOverrideSet"]:
        """Temporarily treat node_type as passable for the duration of the block."""
        self.add(node_type)
        try:
            yield self
        finally:
            self.remove(node_type)

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._types))

    def __repr__(self) -> str:
        return f"TypeOverrideSet({sorted(self._types)})"
