"""Functions of fixed arity with partial application from either end."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["Func", "partial"]


class Func:
    """A callable of known arity that can bind its leftmost or rightmost argument."""

    def __init__(self, fn: Callable[..., Any], arity: int) -> None:
        if not isinstance(arity, int) or isinstance(arity, bool) or arity < 0:
            raise ValueError(f"arity must be a non-negative integer, got {arity!r}")
        self.fn = fn
        self.arity = arity

    def __call__(self, *args: Any) -> Any:
        if len(args) != self.arity:
            raise TypeError(
                f"function takes {self.arity} argument(s) but {len(args)} were given"
            )
        return self.fn(*args)

    def _require_argument(self) -> None:
        if self.arity == 0:
            raise TypeError("cannot bind an argument of a function that takes none")

    def partial(self, arg: Any) -> Func:
        """Bind the first argument, producing a function of one fewer argument."""
        self._require_argument()
        fn = self.fn
        return Func(lambda *rest: fn(arg, *rest), self.arity - 1)

    def partial_r(self, arg: Any) -> Func:
        """Bind the last argument, producing a function of one fewer argument."""
        self._require_argument()
        fn = self.fn
        return Func(lambda *rest: fn(*rest, arg), self.arity - 1)

    def __repr__(self) -> str:
        return f"Func({self.fn!r}, arity={self.arity})"


def partial(fn: Callable[..., Any], arity: int) -> Func:
    """Wrap ``fn`` taking ``arity`` arguments so it supports partial application."""
    return Func(fn, arity)