from collections.abc import Iterable, MutableSet, Set
from typing import Any

from .debug import dump_table
from .errors import InvalidArgumentError
from .iterator import HashSetIterator
from .shared import printf_err, render_elements
from .slot import EMPTY, TOMBSTONE, is_occupied
from .table import Table, find_element, insert, new_table


DEFAULT_CAPACITY = 11
TABLE_MAX_LOAD = 0.75

_HASH_MASK = (1 << 64) - 1


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


class OpenHashSet(MutableSet):
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise InvalidArgumentError(
                "capacity must be greater than or equal to 0", capacity
            )

        self._table: Table = new_table(capacity)
        self._count = 0
        self._modifications = 0

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[Any], capacity: int = DEFAULT_CAPACITY
    ) -> "OpenHashSet":
        s = cls(capacity)
        for element in iterable:
            s.add(element)
        return s

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> "OpenHashSet":
        return cls.from_iterable(it)

    @property
    def capacity(self) -> int:
        return len(self._table)

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def load_factor(self) -> float:
        if len(self._table) == 0:
            return float("inf")
        return self._count / len(self._table)

    def add(self, element: Any) -> bool:
        _check_element(element, "add")
        # unhashable elements fail here, before the table is touched
        hash(element)

        if self.load_factor() > TABLE_MAX_LOAD:
            self._resize()

        inserted = insert(self._table, element, self._count)
        if inserted:
            self._count += 1
            self._modifications += 1
        return inserted

    def contains(self, element: Any) -> bool:
        _check_element(element, "contains")
        return find_element(self._table, element, self._count) is not None

    def contains_all(self, elements: Iterable[Any]) -> bool:
        for element in elements:
            if not self.contains(element):
                return False
        return True

    def remove(self, element: Any) -> bool:
        _check_element(element, "remove")

        index = find_element(self._table, element, self._count)
        if index is None:
            return False

        self._remove_at(index)
        return True

    def discard(self, element: Any) -> None:
        self.remove(element)

    def clear(self) -> None:
        for i in range(len(self._table)):
            self._table[i] = EMPTY
        self._count = 0
        self._modifications += 1

    def _remove_at(self, index: int):
        # a tombstone, never empty, keeps probe chains through it intact
        assert is_occupied(self._table[index])
        self._table[index] = TOMBSTONE
        self._count -= 1
        self._modifications += 1

    def _resize(self):
        old_table = self._table
        new_entries = new_table(2 * self._count + 1)

        placed = 0
        for slot in old_table:
            if not is_occupied(slot):
                continue
            insert(new_entries, slot.element, placed)
            placed += 1

        assert placed == self._count
        self._table = new_entries
        self._modifications += 1

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} ({2:d} live)\n",
                len(old_table),
                len(new_entries),
                self._count,
            )
            dump_table(self._table, "resized")

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> HashSetIterator:
        return HashSetIterator(self)

    def __len__(self) -> int:
        return self._count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        if len(other) != self._count:
            return False

        for element in other:
            if element is None or not self.contains(element):
                return False
        return True

    def __hash__(self) -> int:
        # folded over slot order: equal sets with different table
        # histories may hash differently
        hash_code = 1
        for element in self:
            hash_code = (31 * hash_code + hash(element)) & _HASH_MASK
        return hash_code

    def __str__(self) -> str:
        return render_elements(self)

    def __repr__(self) -> str:
        return "OpenHashSet(" + render_elements(self, repr) + ")"


def _check_element(element: Any, operation: str):
    if element is None:
        raise InvalidArgumentError(
            "None may not be used as an element", operation
        )
