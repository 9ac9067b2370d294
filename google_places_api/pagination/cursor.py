"""
Place Cursor

Forward-only view over the places of a finished search. Holds a
reference to the aggregate; create a new cursor to start over.
"""

from typing import Iterator, Optional, Sequence

from ..models.place import Place


class PlaceCursor(Iterator[Place]):
    """Iterates places in the order they were received.

    Also supports ``len()``, ``cursor[i]`` and ``at(i)`` for direct access;
    negative positions are out of range for both.
    An empty cursor is returned by queries that have not completed yet.
    """

    def __init__(self, places: Optional[Sequence[Place]] = None):
        self._places = places if places is not None else ()
        self._index = 0

    def __iter__(self):
        return self

    def __next__(self) -> Place:
        if self._index >= len(self._places):
            raise StopIteration
        place = self._places[self._index]
        self._index += 1
        return place

    def __len__(self):
        return len(self._places)

    def __getitem__(self, index: int) -> Place:
        """Place at ``index``; positions count from the start only."""
        place = self.at(index)
        if place is None:
            raise IndexError(f"cursor index out of range: {index}")
        return place

    def at(self, index: int) -> Optional[Place]:
        """Place at ``index``, or None if out of range (negative included)."""
        if 0 <= index < len(self._places):
            return self._places[index]
        return None
