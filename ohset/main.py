from dataclasses import dataclass
import sys

from .debug import dump_table
from .hashset import DEFAULT_CAPACITY, OpenHashSet, set_debug_trace_resize
from .shared import printf, printf_err


@dataclass(frozen=True)
class InterpretOk:
    pass


@dataclass(frozen=True)
class CommandError:
    line: int
    message: str


InterpretResult = InterpretOk | CommandError


_ELEMENT_COMMANDS = ("add", "remove", "contains")
_BARE_COMMANDS = ("size", "print", "clear", "dump")


session: OpenHashSet


def init_session(capacity: int = DEFAULT_CAPACITY):
    global session
    session = OpenHashSet(capacity)


def interpret(source: str) -> InterpretResult:
    for line, text in enumerate(source.splitlines(), start=1):
        words = text.split("#", 1)[0].split()
        if not words:
            continue

        result = execute(line, words[0], words[1:])
        if isinstance(result, CommandError):
            printf_err("[line {0:d}] Error: {1:s}\n", result.line, result.message)
            return result

    return InterpretOk()


def execute(line: int, command: str, args: list[str]) -> InterpretResult:
    if command in _ELEMENT_COMMANDS:
        if len(args) != 1:
            return CommandError(line, f"'{command}' expects one element")
        match command:
            case "add":
                print_bool(session.add(args[0]))
            case "remove":
                print_bool(session.remove(args[0]))
            case "contains":
                print_bool(session.contains(args[0]))
        return InterpretOk()

    if command in _BARE_COMMANDS:
        if args:
            return CommandError(line, f"'{command}' takes no arguments")
        match command:
            case "size":
                printf("{0:d}\n", session.size())
            case "print":
                printf("{0:s}\n", str(session))
            case "clear":
                session.clear()
            case "dump":
                dump_table(session._table, "set")
        return InterpretOk()

    if command == "trace":
        if args not in (["on"], ["off"]):
            return CommandError(line, "'trace' expects 'on' or 'off'")
        set_debug_trace_resize(args[0] == "on")
        return InterpretOk()

    return CommandError(line, f"unknown command '{command}'")


def print_bool(b: bool):
    printf("true\n" if b else "false\n")


def repl():
    while True:
        try:
            inpt = input()
        except EOFError:
            return
        interpret(inpt)


def run_file(filepath: str):
    with open(filepath) as fp:
        result = interpret(fp.read())

    if isinstance(result, CommandError):
        sys.exit(65)


def main():
    init_session()

    if len(sys.argv) == 1:
        repl()
    elif len(sys.argv) == 2:
        run_file(sys.argv[1])
    else:
        printf("Usage: ohset [path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()
