"""Slot storage addressed by generational ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Slot index plus the generation the slot had when the id was issued."""

    index: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """Stores values in reusable slots; stale ids never reach new values."""

    def __init__(self) -> None:
        self._cells: List[Optional[_Cell[T]]] = []
        self._free_indices: List[Tuple[int, int]] = []

    def _cell(self, gen_id: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= gen_id.index < len(self._cells):
            return None
        cell = self._cells[gen_id.index]
        if cell is None or cell.generation != gen_id.generation:
            return None
        return cell

    def push(self, data: T) -> GenerationalId:
        """Store a value, reusing the most recently freed slot if any."""
        if self._free_indices:
            index, old_generation = self._free_indices.pop()
            assert self._cells[index] is None
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            generation = 0
            self._cells.append(_Cell(generation, data))
            index = len(self._cells) - 1
        return GenerationalId(index, generation)

    def get(self, gen_id: GenerationalId) -> Optional[T]:
        """Value stored under the id, or None if it is gone or stale."""
        cell = self._cell(gen_id)
        return None if cell is None else cell.state

    def set(self, gen_id: GenerationalId, data: T) -> None:
        """Replace the value under a live id; raise KeyError if it is stale."""
        cell = self._cell(gen_id)
        if cell is None:
            raise KeyError(gen_id)
        cell.state = data

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Free every value for which ``predicate`` returns false, in slot order."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                continue
            if not predicate(cell.state):
                self._free_indices.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of live values."""
        return sum(1 for cell in self._cells if cell is not None)

    def __len__(self) -> int:
        return self.count()

    def clear(self) -> None:
        """Drop every value and every slot."""
        self._cells.clear()
        self._free_indices.clear()

    def free(self, gen_id: GenerationalId) -> None:
        """Free the slot under the id; stale or unknown ids are ignored."""
        if self._cell(gen_id) is None:
            return
        self._free_indices.append((gen_id.index, gen_id.generation))
        self._cells[gen_id.index] = None