"""Foldable and Traversable."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from highkind.typeclass.functor import Functor

if TYPE_CHECKING:
    from highkind.data.list_ import List
    from highkind.hkt import Kind
    from highkind.typeclass.group import Monoid
    from highkind.typeclass.monad import Applicative

__all__ = ['Foldable', 'Traversable']


class Foldable[W](ABC):
    """Reduce every element of the family to a single value."""

    @abstractmethod
    def fold_right[A, B](self, fn: Callable[[A, B], B], start: B, nested: Kind[W, A]) -> B:
        """Right-associative fold: ``fn(a1, fn(a2, ... fn(an, start)))``."""

    def fold_map[A, M](self, monoid: Monoid[M], fn: Callable[[A], M], nested: Kind[W, A]) -> M:
        return self.fold_right(lambda a, acc: monoid.apply(fn(a), acc), monoid.identity(), nested)

    def fold[A](self, monoid: Monoid[A], nested: Kind[W, A]) -> A:
        return self.fold_map(monoid, lambda a: a, nested)

    def to_list[A](self, nested: Kind[W, A]) -> List[A]:
        from highkind.data.list_ import List

        return self.fold_right(List.cons, List.nil(), nested)

    def length(self, nested: Kind[W, object]) -> int:
        return self.fold_right(lambda _, n: n + 1, 0, nested)


class Traversable[W](Functor[W], Foldable[W]):
    """Functor and Foldable whose elements can be visited with an effect."""

    @abstractmethod
    def traverse[F, A, B](
        self, applicative: Applicative[F], fn: Callable[[A], Kind[F, B]], nested: Kind[W, A]
    ) -> Kind[F, Kind[W, B]]:
        """Apply an effectful ``fn`` to every element and collect the effects outside."""

    def sequence_a[F, A](self, applicative: Applicative[F], nested: Kind[W, Kind[F, A]]) -> Kind[F, Kind[W, A]]:
        return self.traverse(applicative, lambda inner: inner, nested)
