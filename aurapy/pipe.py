from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pipe[T]:
    """
    Threads a value through a chain of unary functions, left to right.

    ``Pipe(1).pipe(inc).pipe(double).into_inner()`` is ``double(inc(1))``.
    """

    value: T

    def pipe[U](self, f: Callable[[T], U]) -> "Pipe[U]":
        return Pipe(f(self.value))

    def into_inner(self) -> T:
        return self.value


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Apply ``funcs`` to ``value`` in order and return the final result."""
    piped = Pipe(value)
    for f in funcs:
        piped = piped.pipe(f)
    return piped.into_inner()


__all__ = [
    "Pipe",
    "pipe",
]
