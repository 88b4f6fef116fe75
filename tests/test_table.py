from ohset.slot import EMPTY, TOMBSTONE, Occupied, is_empty
from ohset.table import (
    Probe,
    find_element,
    find_insert,
    insert,
    new_table,
    start_index,
)


class MostNegativeHash:
    def __hash__(self) -> int:
        return -(2**63)


def test_new_table():
    assert new_table(0) == []
    assert all(is_empty(slot) for slot in new_table(11))


def test_start_index():
    for n in (0, 5, 10, 11, 12, -5, 2**70, -(2**70)):
        # should stay inside the table for any hash
        assert 0 <= start_index(n, 11) < 11

    assert start_index(MostNegativeHash(), 11) == -(2**63) % 11


def test_linear_probing():
    table = new_table(11)
    n = 3

    for i in range(n):
        # colliding elements should land in consecutive slots
        assert insert(table, i * 11, i)

    for i in range(n):
        assert table[i] == Occupied(i * 11)
        assert find_element(table, i * 11, n) == i

    for i in range(n):
        # should return false if the element is already present
        assert not insert(table, i * 11, n)

    # should wrap around the end of the table
    assert insert(table, 10, n)
    assert insert(table, 21, n + 1)
    assert table[10] == Occupied(10)
    assert table[3] == Occupied(21)


def test_tombstones_keep_chains_reachable():
    table = new_table(11)
    for i in range(3):
        insert(table, i * 11, i)

    table[0] = TOMBSTONE

    # should probe through the tombstone
    assert find_element(table, 11, 2) == 1
    assert find_element(table, 22, 2) == 2
    assert find_element(table, 0, 2) is None

    # should find the existing element displaced past the tombstone
    assert find_insert(table, 22, 2) == Probe(2, found=True)
    # should reuse the first tombstone for a new element
    assert find_insert(table, 33, 2) == Probe(0, found=False)


def test_empty_slot_ends_probe():
    table = new_table(11)
    insert(table, 0, 0)
    assert find_element(table, 11, 1) is None
    assert find_insert(table, 11, 1) == Probe(1, found=False)


def test_all_tombstone_ring():
    table = [TOMBSTONE for _ in range(5)]

    # should terminate without a live element to stop on
    assert find_element(table, 3, 0) is None
    assert find_insert(table, 3, 0) == Probe(3, found=False)
    assert insert(table, 3, 0)
    assert table[3] == Occupied(3)


def test_zero_length_table():
    assert find_element([], "a", 0) is None
    assert find_element([EMPTY], "a", 0) is None
