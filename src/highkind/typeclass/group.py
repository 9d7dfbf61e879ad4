"""Semigroup and Monoid: associative combination, with and without identity.

Laws (not mechanically checked, covered by the property tests):

- associativity: ``apply(apply(x, y), z) == apply(x, apply(y, z))``
- identity (Monoid only): ``apply(identity(), x) == x == apply(x, identity())``

Example:
    ```python
    from highkind.typeclass import Monoid, Semigroup

    Semigroup.min().fold(27, [25, 11, 64, 57])
    # 11

    Monoid.create(0, lambda x, y: x + y).mconcat([1, 2, 3])
    # 6
    ```
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

__all__ = ['Monoid', 'Semigroup']


class Semigroup[A](ABC):
    """An associative binary operation on A."""

    @abstractmethod
    def apply(self, x: A, y: A) -> A:
        """Combine two values."""

    def fold(self, first: A, rest: Iterable[A]) -> A:
        """Combine ``first`` with every value of ``rest``, left to right."""
        return functools.reduce(self.apply, rest, first)

    @staticmethod
    def create[T](op: Callable[[T, T], T]) -> Semigroup[T]:
        return _FnSemigroup(op)

    @staticmethod
    def first[T]() -> Semigroup[T]:
        """Keeps the left operand."""
        return _FnSemigroup(lambda x, y: x)

    @staticmethod
    def last[T]() -> Semigroup[T]:
        """Keeps the right operand."""
        return _FnSemigroup(lambda x, y: y)

    @staticmethod
    def min[T]() -> Semigroup[T]:
        return _FnSemigroup(min)

    @staticmethod
    def max[T]() -> Semigroup[T]:
        return _FnSemigroup(max)

    @staticmethod
    def dual[T](semigroup: Semigroup[T]) -> Semigroup[T]:
        """The same operation with its operands swapped."""
        return _FnSemigroup(lambda x, y: semigroup.apply(y, x))


class Monoid[A](Semigroup[A]):
    """A semigroup with an identity element."""

    @abstractmethod
    def identity(self) -> A:
        """The neutral element of :meth:`apply`."""

    def mconcat(self, values: Iterable[A]) -> A:
        """Fold all values, starting from the identity."""
        return self.fold(self.identity(), values)

    @staticmethod
    def create[T](identity: T, op: Callable[[T, T], T]) -> Monoid[T]:
        """Build a monoid from its identity element and operation.

        Args:
            identity: Neutral element; immutable values only, it is shared between calls.
            op: Associative operation.
        """
        return _FnMonoid(identity, op)

    @staticmethod
    def dual[T](monoid: Monoid[T]) -> Monoid[T]:  # type: ignore[override]
        """The same monoid with its operands swapped."""
        return _FnMonoid(monoid.identity(), lambda x, y: monoid.apply(y, x))


class _FnSemigroup[A](Semigroup[A]):
    __slots__ = ('_op',)

    def __init__(self, op: Callable[[A, A], A]) -> None:
        self._op = op

    def apply(self, x: A, y: A) -> A:
        return self._op(x, y)


class _FnMonoid[A](Monoid[A]):
    __slots__ = ('_identity', '_op')

    def __init__(self, identity: A, op: Callable[[A, A], A]) -> None:
        self._identity = identity
        self._op = op

    def apply(self, x: A, y: A) -> A:
        return self._op(x, y)

    def identity(self) -> A:
        return self._identity
