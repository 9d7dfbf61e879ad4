"""List: an immutable, ordered, finite sequence.

Backed by a tuple. ``cata(nil_value, fn)`` exposes the cons view
(``fn(head, tail)``); the remaining operations work on the tuple directly
so long lists never recurse.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Final, overload

from highkind import hkt
from highkind.data.maybe import Maybe
from highkind.errors import EmptyValueAccessError, InvalidArgumentError
from highkind.hkt import Kind, Witness
from highkind.show import show
from highkind.typeclass.foldable import Traversable
from highkind.typeclass.group import Monoid
from highkind.typeclass.monad import Applicative, MonadPlus

__all__ = ['List', 'ListMonad', 'ListMu']


class ListMu(Witness):
    """Witness of :class:`List`."""


@dataclass(slots=True, frozen=True, repr=False)
class List[A](Kind[ListMu, A]):
    """An immutable list of A.

    Examples:
        >>> List.of(1, 2, 3).map(lambda x: x * 10)
        List(10,20,30)
        >>> List.range(1, 1, 3).bind(lambda x: List.of(x, -x))
        List(1,-1,2,-2,3,-3)
    """

    items: tuple[A, ...] = ()

    Mu = ListMu
    monad: ClassVar[ListMonad]
    traversable: ClassVar[Traversable[ListMu]]

    # --- Construction ---

    @staticmethod
    def nil[T]() -> List[T]:
        return _NIL

    @staticmethod
    def of[T](*items: T) -> List[T]:
        return List(items) if items else _NIL

    @staticmethod
    def from_iterable[T](items: Iterable[T]) -> List[T]:
        return List.of(*items)

    @staticmethod
    def cons[T](head: T, tail: List[T]) -> List[T]:
        return List((head, *tail.items))

    @staticmethod
    def range(start: int, step: int, stop: int) -> List[int]:
        """Integers from ``start`` towards ``stop`` (inclusive) in increments of ``step``.

        Raises:
            InvalidArgumentError: If step is 0.
        """
        if step == 0:
            raise InvalidArgumentError('step', 'must not be 0')
        if step > 0:
            return List(tuple(range(start, stop + 1, step)))
        return List(tuple(range(start, stop - 1, step)))

    # --- Primitive ---

    def cata[B](self, nil_value: B, fn: Callable[[A, List[A]], B]) -> B:
        """Collapse to a B: ``nil_value`` when empty, ``fn(head, tail)`` otherwise."""
        if not self.items:
            return nil_value
        return fn(self.items[0], List.of(*self.items[1:]))

    # --- Queries ---

    def is_empty(self) -> bool:
        return not self.items

    def size(self) -> int:
        return len(self.items)

    def head(self) -> A:
        """The first element.

        Raises:
            EmptyValueAccessError: On an empty list.
        """
        if not self.items:
            raise EmptyValueAccessError('head() called on empty List')
        return self.items[0]

    def tail(self) -> List[A]:
        """Everything but the first element.

        Raises:
            EmptyValueAccessError: On an empty list.
        """
        if not self.items:
            raise EmptyValueAccessError('tail() called on empty List')
        return List.of(*self.items[1:])

    def maybe_head(self) -> Maybe[A]:
        return Maybe.from_optional(self.items[0]) if self.items else Maybe.empty()

    # --- Transformation ---

    def map[B](self, fn: Callable[[A], B]) -> List[B]:
        return List.of(*(fn(a) for a in self.items))

    def bind[B](self, fn: Callable[[A], List[B]]) -> List[B]:
        return List.of(*(b for a in self.items for b in fn(a).items))

    def filter(self, predicate: Callable[[A], bool]) -> List[A]:
        return List.of(*(a for a in self.items if predicate(a)))

    def take(self, n: int) -> List[A]:
        return List.of(*self.items[: max(n, 0)])

    def drop(self, n: int) -> List[A]:
        return List.of(*self.items[max(n, 0) :])

    def reverse(self) -> List[A]:
        return List.of(*reversed(self.items))

    def append(self, other: List[A]) -> List[A]:
        return List.of(*self.items, *other.items)

    def fold_left[B](self, fn: Callable[[B, A], B], start: B) -> B:
        return functools.reduce(fn, self.items, start)

    def fold_right[B](self, fn: Callable[[A, B], B], start: B) -> B:
        result = start
        for a in reversed(self.items):
            result = fn(a, result)
        return result

    # --- HKT ---

    @staticmethod
    def narrow[T](value: Kind[ListMu, T]) -> List[T]:
        """Recover a List from its Kind representation."""
        return hkt.narrow(value, List)

    @staticmethod
    def monoid[T]() -> Monoid[List[T]]:
        """Concatenation with the empty list as identity."""
        return Monoid.create(_NIL, List.append)

    # --- Object protocol ---

    def __add__(self, other: List[A]) -> List[A]:
        if not isinstance(other, List):
            return NotImplemented
        return self.append(other)

    def __iter__(self) -> Iterator[A]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    @overload
    def __getitem__(self, index: int) -> A: ...
    @overload
    def __getitem__(self, index: slice) -> List[A]: ...
    def __getitem__(self, index: int | slice) -> A | List[A]:
        if isinstance(index, slice):
            return List.of(*self.items[index])
        return self.items[index]

    def __str__(self) -> str:
        return show(self)

    __repr__ = __str__


_NIL: Final[List[Any]] = List()


@show.instance(List)
def _show_list(value: List[Any]) -> str:
    return 'List(' + ','.join(show(a) for a in value.items) + ')'


# --- Typeclass instances ---


class ListMonad(MonadPlus[ListMu], Traversable[ListMu]):
    """Monad of non-determinism: ``bind`` explores every element, ``mplus`` concatenates."""

    def pure[T](self, value: T) -> List[T]:
        return List.of(value)

    def map[T, U](self, fn: Callable[[T], U], nested: Kind[ListMu, T]) -> List[U]:
        return List.narrow(nested).map(fn)

    def bind[T, U](self, nested: Kind[ListMu, T], fn: Callable[[T], Kind[ListMu, U]]) -> List[U]:
        return List.narrow(nested).bind(lambda a: List.narrow(fn(a)))

    def mzero[T](self) -> List[T]:
        return _NIL

    def mplus[T](self, first: Kind[ListMu, T], second: Kind[ListMu, T]) -> List[T]:
        return List.narrow(first).append(List.narrow(second))

    def fold_right[T, B](self, fn: Callable[[T, B], B], start: B, nested: Kind[ListMu, T]) -> B:
        return List.narrow(nested).fold_right(fn, start)

    def traverse[F, T, U](
        self, applicative: Applicative[F], fn: Callable[[T], Kind[F, U]], nested: Kind[ListMu, T]
    ) -> Kind[F, List[U]]:
        cons = applicative.lift2(List.cons)
        return List.narrow(nested).fold_right(lambda a, acc: cons(fn(a), acc), applicative.pure(_NIL))


List.monad = ListMonad()
List.traversable = List.monad
