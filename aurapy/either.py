"""A neutral two-way choice between values of two types.

``Either`` is shaped like a result type but carries no success or failure
meaning: ``Left`` and ``Right`` are simply the two sides. The union is closed
over exactly the two variant classes, which share no base class, so a
``match`` over ``Left(...)`` and ``Right(...)`` is exhaustive.

Example::

    from aurapy.either import Either, Left, Right, either

    def parse(raw: str) -> Either[int, str]:
        return Left(int(raw)) if raw.isdigit() else Right(raw)

    either(parse("42"), lambda n: n * 2, str.upper)  # 84
"""

from collections.abc import Callable
from typing import Any, Literal, NoReturn
import typing

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticSerializationUnexpectedValue, core_schema
from thelabtyping.result import Err, Ok, Result


class UnwrapError(ValueError):
    """Raised when unwrapping the side an ``Either`` does not hold."""

    def __init__(self, either: "Either[Any, Any]", message: str) -> None:
        super().__init__(message)
        self.either = either


def _readonly(self: object, name: str, value: Any = None) -> NoReturn:
    raise AttributeError(f"{type(self).__name__} is immutable")


def _variant_core_schema(
    cls: type["Left[Any]"] | type["Right[Any]"],
    key: str,
    source_type: Any,
    handler: GetCoreSchemaHandler,
) -> core_schema.CoreSchema:
    """
    Build the pydantic schema for one variant.

    Variants travel as a single-key mapping (``{"left": ...}`` or
    ``{"right": ...}``) so that a ``Left[A] | Right[B]`` union can tell the
    sides apart even when ``A`` and ``B`` are the same type.
    """
    args = typing.get_args(source_type)
    inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()
    # Exactly one key: a mapping naming both sides, or anything else, is invalid
    mapping = core_schema.typed_dict_schema(
        {key: core_schema.typed_dict_field(inner)},
        extra_behavior="forbid",
    )
    from_mapping = core_schema.chain_schema(
        [
            mapping,
            core_schema.no_info_plain_validator_function(lambda data: cls(data[key])),
        ]
    )

    def to_mapping(data: Any) -> Any:
        # Re-validate the value held by an existing instance
        if isinstance(data, cls):
            return {key: data.value}
        return data

    def dump(instance: Any) -> dict[str, Any]:
        # Lets a Left[A] | Right[B] union move on to the other variant
        if not isinstance(instance, cls):
            raise PydanticSerializationUnexpectedValue(
                f"expected {cls.__name__}, got {type(instance).__name__}"
            )
        return {key: instance.value}

    return core_schema.json_or_python_schema(
        json_schema=from_mapping,
        python_schema=core_schema.chain_schema(
            [
                core_schema.no_info_plain_validator_function(to_mapping),
                from_mapping,
            ]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            dump,
            return_schema=mapping,
        ),
    )


class Left[_LT]:
    """The left side of an ``Either``."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    value: _LT

    def __init__(self, value: _LT) -> None:
        object.__setattr__(self, "value", value)

    __setattr__ = _readonly
    __delattr__ = _readonly

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Left):
            return bool(self.value == other.value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Left, self.value))

    def __reduce__(self) -> tuple[type["Left[_LT]"], tuple[_LT]]:
        return (Left, (self.value,))

    @property
    def is_left(self) -> Literal[True]:
        return True

    @property
    def is_right(self) -> Literal[False]:
        return False

    def left(self) -> _LT:
        return self.value

    def right(self) -> None:
        return None

    def unwrap_left(self) -> _LT:
        return self.value

    def unwrap_right(self) -> NoReturn:
        raise UnwrapError(self, "called `unwrap_right()` on a `Left` value")

    def expect_left(self, message: str) -> _LT:
        return self.value

    def expect_right(self, message: str) -> NoReturn:
        raise UnwrapError(self, message)

    def either[T](
        self,
        on_left: Callable[[_LT], T],
        on_right: Callable[[Any], T],
    ) -> T:
        return on_left(self.value)

    def map_left[U](self, f: Callable[[_LT], U]) -> "Left[U]":
        return Left(f(self.value))

    def map_right(self, f: Callable[[Any], Any]) -> "Left[_LT]":
        return self

    def map_either[U](
        self,
        on_left: Callable[[_LT], U],
        on_right: Callable[[Any], Any],
    ) -> "Left[U]":
        return Left(on_left(self.value))

    def swap(self) -> "Right[_LT]":
        return Right(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return _variant_core_schema(cls, "left", source_type, handler)


class Right[_RT]:
    """The right side of an ``Either``."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    value: _RT

    def __init__(self, value: _RT) -> None:
        object.__setattr__(self, "value", value)

    __setattr__ = _readonly
    __delattr__ = _readonly

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Right):
            return bool(self.value == other.value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Right, self.value))

    def __reduce__(self) -> tuple[type["Right[_RT]"], tuple[_RT]]:
        return (Right, (self.value,))

    @property
    def is_left(self) -> Literal[False]:
        return False

    @property
    def is_right(self) -> Literal[True]:
        return True

    def left(self) -> None:
        return None

    def right(self) -> _RT:
        return self.value

    def unwrap_left(self) -> NoReturn:
        raise UnwrapError(self, "called `unwrap_left()` on a `Right` value")

    def unwrap_right(self) -> _RT:
        return self.value

    def expect_left(self, message: str) -> NoReturn:
        raise UnwrapError(self, message)

    def expect_right(self, message: str) -> _RT:
        return self.value

    def either[T](
        self,
        on_left: Callable[[Any], T],
        on_right: Callable[[_RT], T],
    ) -> T:
        return on_right(self.value)

    def map_left(self, f: Callable[[Any], Any]) -> "Right[_RT]":
        return self

    def map_right[U](self, f: Callable[[_RT], U]) -> "Right[U]":
        return Right(f(self.value))

    def map_either[U](
        self,
        on_left: Callable[[Any], Any],
        on_right: Callable[[_RT], U],
    ) -> "Right[U]":
        return Right(on_right(self.value))

    def swap(self) -> "Left[_RT]":
        return Left(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return _variant_core_schema(cls, "right", source_type, handler)


type Either[_LT, _RT] = Left[_LT] | Right[_RT]


def either[L, R, T](
    value: Either[L, R],
    on_left: Callable[[L], T],
    on_right: Callable[[R], T],
) -> T:
    """
    Case split: call exactly one handler with the held value and return its
    result.
    """
    match value:
        case Left(held):
            return on_left(held)
        case Right(held):
            return on_right(held)
    raise TypeError(f"expected Left or Right, got {type(value).__name__}")


def from_optional_left[L](value: L | None) -> Either[L, None]:
    """``Left(value)``, or ``Right(None)`` when there is no value."""
    if value is None:
        return Right(None)
    return Left(value)


def from_optional_right[R](value: R | None) -> Either[None, R]:
    """``Right(value)``, or ``Left(None)`` when there is no value."""
    if value is None:
        return Left(None)
    return Right(value)


def from_result[L, R](result: Result[L, R]) -> Either[L, R]:
    """
    Convert a ``thelabtyping`` result positionally: ``Ok`` becomes ``Left``
    and ``Err`` becomes ``Right``. The error meaning is not carried over.
    """
    if isinstance(result, Ok):
        return Left(result.ok_value)
    if isinstance(result, Err):
        return Right(result.err_value)
    raise TypeError(f"expected Ok or Err, got {type(result).__name__}")


def into_result[L, R](value: Either[L, R]) -> Result[L, R]:
    """Inverse of :func:`from_result`."""
    return either(value, Ok, Err)


__all__ = [
    "Either",
    "Left",
    "Right",
    "UnwrapError",
    "either",
    "from_optional_left",
    "from_optional_right",
    "from_result",
    "into_result",
]
