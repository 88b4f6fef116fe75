from .shared import printf
from .slot import is_empty, is_occupied
from .table import Table, start_index


def dump_table(table: Table, name: str):
    printf("== {0:s} ({1:d} slots) ==\n", name, len(table))

    for index in range(len(table)):
        dump_slot(table, index)


def dump_slot(table: Table, index: int):
    slot = table[index]
    printf("{0:04d} ", index)

    if is_empty(slot):
        printf("EMPTY\n")
    elif is_occupied(slot):
        printf("{0!r} (home {1:d})\n", slot.element, start_index(slot.element, len(table)))
    else:
        printf("TOMBSTONE\n")
