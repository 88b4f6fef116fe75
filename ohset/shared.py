import sys
from typing import Any, Iterable


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def render_elements(elements: Iterable[Any], show=str) -> str:
    return "[" + ", ".join(show(element) for element in elements) + "]"
