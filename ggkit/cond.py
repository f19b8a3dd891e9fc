"""Pick values by condition in a single expression."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

R = TypeVar("R")

__all__ = ["if_", "if_lazy", "if_lazy_l", "if_lazy_r", "Switch", "WhenClause"]


def if_(cond: bool, on_true: R, on_false: R) -> R:
    """Return ``on_true`` when ``cond`` is true, otherwise ``on_false``.

    Both values are evaluated by the caller before the call; use
    :func:`if_lazy` and its variants to defer evaluation.
    """
    return on_true if cond else on_false


def if_lazy(cond: bool, on_true: Callable[[], R], on_false: Callable[[], R]) -> R:
    """Call and return ``on_true`` or ``on_false`` depending on ``cond``."""
    return on_true() if cond else on_false()


def if_lazy_l(cond: bool, on_true: Callable[[], R], on_false: R) -> R:
    """Like :func:`if_`, but ``on_true`` is called only when ``cond`` holds."""
    return on_true() if cond else on_false


def if_lazy_r(cond: bool, on_true: R, on_false: Callable[[], R]) -> R:
    """Like :func:`if_`, but ``on_false`` is called only when ``cond`` fails."""
    return on_true if cond else on_false()


class Switch(Generic[R]):
    """A chainable switch expression over a single value.

    The first matching clause fixes the result; later clauses are ignored
    and their lazy results are never computed.
    """

    def __init__(self, variable: Any) -> None:
        self.variable = variable
        self._matched = False
        self._result: R | None = None

    def _settle(self, result: R) -> None:
        self._matched = True
        self._result = result

    def case(self, value: Any, result: R) -> Switch[R]:
        """Use ``result`` if ``value`` equals the variable and nothing matched yet."""
        if not self._matched and self.variable == value:
            self._settle(result)
        return self

    def case_lazy(self, value: Any, result_fn: Callable[[], R]) -> Switch[R]:
        """Like :meth:`case`, calling ``result_fn`` only on a match."""
        if not self._matched and self.variable == value:
            self._settle(result_fn())
        return self

    def when(self, *args: Any) -> WhenClause[R]:
        """Start a clause matching any of ``args``; finish it with ``then``."""
        matched = not self._matched and any(self.variable == value for value in args)
        return WhenClause(self, matched)

    def default(self, result: R) -> R:
        """Return the matched result, or ``result`` if no clause matched."""
        if not self._matched:
            self._result = result
        return self._result  # type: ignore[return-value]

    def default_lazy(self, result_fn: Callable[[], R]) -> R:
        """Like :meth:`default`, calling ``result_fn`` only if nothing matched."""
        if not self._matched:
            self._result = result_fn()
        return self._result  # type: ignore[return-value]


class WhenClause(Generic[R]):
    """A pending multi-value clause of a :class:`Switch`."""

    def __init__(self, parent: Switch[R], matched: bool) -> None:
        self._parent = parent
        self._matched = matched

    def then(self, result: R) -> Switch[R]:
        """Use ``result`` if this clause matched and the switch is still open."""
        if self._matched and not self._parent._matched:
            self._parent._settle(result)
        return self._parent

    def then_lazy(self, result_fn: Callable[[], R]) -> Switch[R]:
        """Like :meth:`then`, calling ``result_fn`` only when it takes effect."""
        if self._matched and not self._parent._matched:
            self._parent._settle(result_fn())
        return self._parent