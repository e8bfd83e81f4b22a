"""Infix operator parsing with the precedence climbing method."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

__all__ = ["Assoc", "Operator", "PrecClimber"]

R = TypeVar("R")
P = TypeVar("P")
T = TypeVar("T")

_END = object()


class Assoc(Enum):
    """Associativity of an operator."""

    LEFT = "left"
    RIGHT = "right"


class Operator(Generic[R]):
    """An infix operator; operators joined with ``|`` share one precedence."""

    __slots__ = ("rule", "assoc", "_rest")

    def __init__(self, rule: R, assoc: Assoc) -> None:
        self.rule = rule
        self.assoc = assoc
        self._rest: tuple[tuple[R, Assoc], ...] = ()

    def __or__(self, other: Operator[R]) -> Operator[R]:
        if not isinstance(other, Operator):
            return NotImplemented
        joined = Operator(self.rule, self.assoc)
        joined._rest = self._rest + tuple(other)
        return joined

    def __iter__(self) -> Iterator[tuple[R, Assoc]]:
        """Yield ``(rule, assoc)`` for every operator in the chain, in order."""
        yield self.rule, self.assoc
        yield from self._rest

    def __repr__(self) -> str:
        chain = " | ".join(f"{rule!r}:{assoc.name}" for rule, assoc in self)
        return f"Operator({chain})"


class _Peekable(Generic[P]):
    def __init__(self, items: Iterable[P]) -> None:
        self._it = iter(items)
        self._head: Any = _END
        self._filled = False

    def peek(self) -> Any:
        if not self._filled:
            self._head = next(self._it, _END)
            self._filled = True
        return self._head

    def next(self) -> Any:
        item = self.peek()
        self._filled = False
        self._head = _END
        return item


class PrecClimber(Generic[R]):
    """A table of operators with precedences and associativities.

    ``climb`` reduces a sequence that starts with a primary item and then
    alternates between an operator and a primary item.
    """

    def __init__(self, ops: Iterable[Operator[R]]) -> None:
        self._ops: list[tuple[R, int, Assoc]] = [
            (rule, precedence, assoc)
            for precedence, op in enumerate(ops, start=1)
            for rule, assoc in op
        ]

    @classmethod
    def from_table(cls, ops: Iterable[tuple[R, int, Assoc]]) -> PrecClimber[R]:
        """Create a climber from ``(rule, precedence, assoc)`` entries."""
        climber = cls(())
        climber._ops = [(rule, int(prec), assoc) for rule, prec, assoc in ops]
        return climber

    def get(self, rule: R) -> tuple[int, Assoc] | None:
        """Return the precedence and associativity of ``rule``, if it is an operator."""
        for candidate, precedence, assoc in self._ops:
            if candidate == rule:
                return precedence, assoc
        return None

    def climb(
        self,
        pairs: Iterable[P],
        primary: Callable[[P], T],
        infix: Callable[[T, P, T], T],
        rule_of: Callable[[P], R],
    ) -> T:
        """Map primary items with ``primary`` and reduce them with ``infix``.

        ``rule_of`` gives the rule of an item, used to look up operators.
        Raises ``ValueError`` when ``pairs`` is empty or an operator is not
        followed by a primary item.
        """
        stream: _Peekable[P] = _Peekable(pairs)
        first = stream.next()
        if first is _END:
            raise ValueError("precedence climbing requires a non-empty Pairs")
        return self._climb_rec(primary(first), 0, stream, primary, infix, rule_of)

    def _climb_rec(
        self,
        lhs: T,
        min_prec: int,
        stream: _Peekable[P],
        primary: Callable[[P], T],
        infix: Callable[[T, P, T], T],
        rule_of: Callable[[P], R],
    ) -> T:
        while (item := stream.peek()) is not _END:
            found = self.get(rule_of(item))
            if found is None or found[0] < min_prec:
                break
            prec = found[0]
            op = stream.next()
            rhs_item = stream.next()
            if rhs_item is _END:
                raise ValueError(
                    "infix operator must be followed by a primary expression"
                )
            rhs = primary(rhs_item)

            while (ahead := stream.peek()) is not _END:
                following = self.get(rule_of(ahead))
                if following is None:
                    break
                new_prec, assoc = following
                if new_prec > prec or (assoc is Assoc.RIGHT and new_prec == prec):
                    rhs = self._climb_rec(rhs, new_prec, stream, primary, infix, rule_of)
                else:
                    break

            lhs = infix(lhs, op, rhs)
        return lhs