from dataclasses import dataclass
from typing import Any, TypeGuard


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass(frozen=True)
class Occupied:
    element: Any


Slot = Empty | Tombstone | Occupied


EMPTY = Empty()
TOMBSTONE = Tombstone()


def is_empty(slot: Slot) -> TypeGuard[Empty]:
    return isinstance(slot, Empty)


def is_tombstone(slot: Slot) -> TypeGuard[Tombstone]:
    return isinstance(slot, Tombstone)


def is_occupied(slot: Slot) -> TypeGuard[Occupied]:
    return isinstance(slot, Occupied)
