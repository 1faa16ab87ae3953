"""Loops as repeated application of a step function.

Instead of mutating loop variables, a loop threads an immutable *carry* value
through a step function. Each call returns a signal: ``Continue(carry)`` to
run again with a new carry, or ``Break(result)`` to stop and produce the
loop's result::

    from aurapy.recur import Break, Continue, recur

    def count_up(i: int) -> Continue[int] | Break[str]:
        if i < 10:
            return Continue(i + 1)
        return Break(str(i))

    recur(0, count_up)  # "10"
"""

from collections.abc import Callable
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Continue[C]:
    """Run the step function again with ``value`` as the carry."""

    value: C


@dataclass(frozen=True)
class Break[B]:
    """Stop iterating and return ``value`` from :func:`recur`."""

    value: B


type LoopSignal[C, B] = Continue[C] | Break[B]


def recur[C, B](initial: C, step: Callable[[C], LoopSignal[C, B]]) -> B:
    """
    Call ``step`` with ``initial``, then with each carry it passes back via
    ``Continue``, until it returns ``Break``; return the value of that
    ``Break``.

    Termination is up to ``step``. Nothing here bounds the number of
    iterations or looks at the carry, so a step function that never breaks
    loops forever. The loop runs in constant stack space however many steps
    it takes.

    Exceptions raised by ``step`` propagate unchanged and stop the loop.
    Returning anything other than ``Continue`` or ``Break`` raises
    ``TypeError``.
    """
    carry = initial
    steps = 0
    while True:
        signal = step(carry)
        steps += 1
        match signal:
            case Continue(value):
                carry = value
            case Break(value):
                logger.debug("recur finished after %d steps", steps)
                return value
            case _:
                raise TypeError(
                    f"step must return Continue or Break, got {type(signal).__name__}"
                )


__all__ = [
    "Break",
    "Continue",
    "LoopSignal",
    "recur",
]
