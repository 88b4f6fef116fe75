from typing import TYPE_CHECKING, Any

from .errors import InvalidIteratorStateError, IteratorExhaustedError
from .slot import is_occupied

if TYPE_CHECKING:
    from .hashset import OpenHashSet


class HashSetIterator:
    def __init__(self, owner: "OpenHashSet") -> None:
        self._owner = owner
        self._position = -1
        self._returned = 0
        self._remove_ok = False
        self._expected_modifications = owner._modifications

    def __iter__(self) -> "HashSetIterator":
        return self

    def has_next(self) -> bool:
        return self._returned < self._owner.size()

    def __next__(self) -> Any:
        self._check_owner()
        if not self.has_next():
            raise IteratorExhaustedError("the iteration has no more elements")

        table = self._owner._table
        self._position += 1
        while not is_occupied(table[self._position]):
            self._position += 1

        self._returned += 1
        self._remove_ok = True
        return table[self._position].element

    def next(self) -> Any:
        return self.__next__()

    def remove(self):
        self._check_owner()
        if not self._remove_ok:
            raise InvalidIteratorStateError(
                "remove() can be called only once per call to next()"
            )

        self._remove_ok = False
        self._owner._remove_at(self._position)
        self._expected_modifications = self._owner._modifications
        # the live count dropped by one
        self._returned -= 1

    def _check_owner(self):
        if self._owner._modifications != self._expected_modifications:
            raise InvalidIteratorStateError("set changed during iteration")
