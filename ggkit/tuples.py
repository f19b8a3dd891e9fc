"""Fixed-size tuples from 2 to 10 elements, and lists of them that zip and unzip."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

__all__ = ["Tuple", "TupleList", "make", "zip_tuples"]

MIN_ARITY = 2
MAX_ARITY = 10

_FIELD_NAMES = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
)


def _check_arity(arity: Any) -> int:
    if not isinstance(arity, int) or isinstance(arity, bool):
        raise TypeError(f"arity must be an integer, got {arity!r}")
    if not MIN_ARITY <= arity <= MAX_ARITY:
        raise ValueError(
            f"arity must be between {MIN_ARITY} and {MAX_ARITY}, got {arity}"
        )
    return arity


def _field(index: int, name: str) -> property:
    def getter(self: Tuple) -> Any:
        if index >= len(self):
            raise AttributeError(f"{len(self)}-ary tuple has no field {name!r}")
        return tuple.__getitem__(self, index)

    getter.__name__ = name
    getter.__doc__ = f"The {name} element."
    return property(getter)


class Tuple(tuple):
    """An immutable tuple of 2 to 10 elements with named fields ``first`` .. ``tenth``."""

    __slots__ = ()

    def __new__(cls, *values: Any) -> Tuple:
        _check_arity(len(values))
        return super().__new__(cls, values)

    def values(self) -> tuple[Any, ...]:
        """Return all elements as a plain tuple."""
        return tuple(self)

    def __repr__(self) -> str:
        inner = ", ".join(repr(value) for value in self)
        return f"Tuple({inner})"


for _index, _name in enumerate(_FIELD_NAMES):
    setattr(Tuple, _name, _field(_index, _name))
del _index, _name


class TupleList(list):
    """A list of tuples that all have the same arity."""

    def __init__(self, arity: int, items: Iterable[Sequence[Any]] = ()) -> None:
        self.arity = _check_arity(arity)
        converted = []
        for item in items:
            if len(item) != self.arity:
                raise ValueError(
                    f"expected a tuple of {self.arity} elements, got {len(item)}"
                )
            converted.append(item if isinstance(item, Tuple) else Tuple(*item))
        super().__init__(converted)

    def unzip(self) -> tuple[list[Any], ...]:
        """Split the tuples into one list per position."""
        if not self:
            return tuple([] for _ in range(self.arity))
        return tuple(list(column) for column in zip(*self))

    def __repr__(self) -> str:
        return f"TupleList({self.arity}, {list.__repr__(self)})"


def make(*args: Any) -> Tuple:
    """Create a tuple of the given 2 to 10 elements."""
    return Tuple(*args)


def zip_tuples(*args: Iterable[Any] | None) -> TupleList:
    """Pair up 2 to 10 sequences element-wise, stopping at the shortest.

    ``None`` is treated as an empty sequence.
    """
    arity = _check_arity(len(args))
    sequences = [() if seq is None else seq for seq in args]
    return TupleList(arity, (Tuple(*values) for values in zip(*sequences)))