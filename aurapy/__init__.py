from .either import (
    Either,
    Left,
    Right,
    UnwrapError,
    either,
    from_optional_left,
    from_optional_right,
    from_result,
    into_result,
)
from .pipe import Pipe, pipe
from .recur import Break, Continue, LoopSignal, recur

__all__ = [
    "Break",
    "Continue",
    "Either",
    "Left",
    "LoopSignal",
    "Pipe",
    "Right",
    "UnwrapError",
    "either",
    "from_optional_left",
    "from_optional_right",
    "from_result",
    "into_result",
    "pipe",
    "recur",
]
