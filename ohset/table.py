from dataclasses import dataclass
from typing import Any

from .slot import EMPTY, Occupied, Slot, is_empty, is_occupied, is_tombstone


Table = list[Slot]


@dataclass(frozen=True)
class Probe:
    index: int
    found: bool


def new_table(capacity: int) -> Table:
    return [EMPTY for _ in range(capacity)]


def start_index(element: Any, length: int) -> int:
    # non-negative for any hash, including the most negative one
    return hash(element) % length


def find_element(table: Table, element: Any, count: int) -> int | None:
    if len(table) == 0:
        return None

    index = start_index(element, len(table))
    checked = 0

    for _ in range(len(table)):
        if checked >= count:
            return None

        slot = table[index]
        if is_empty(slot):
            return None
        if is_occupied(slot):
            if slot.element == element:
                return index
            checked += 1

        index = (index + 1) % len(table)

    return None


def find_insert(table: Table, element: Any, count: int) -> Probe:
    tombstone: int | None = None
    index = start_index(element, len(table))
    checked = 0

    for _ in range(len(table)):
        slot = table[index]
        if is_empty(slot):
            if tombstone is not None:
                return Probe(tombstone, found=False)
            return Probe(index, found=False)
        elif is_tombstone(slot):
            if tombstone is None:
                tombstone = index
        else:
            assert is_occupied(slot)
            if slot.element == element:
                return Probe(index, found=True)
            checked += 1

        if checked >= count and tombstone is not None:
            # every live element has been seen
            return Probe(tombstone, found=False)

        index = (index + 1) % len(table)

    if tombstone is None:
        raise KeyError(element)
    return Probe(tombstone, found=False)


def insert(table: Table, element: Any, count: int) -> bool:
    probe = find_insert(table, element, count)
    if probe.found:
        return False

    table[probe.index] = Occupied(element)
    return True
