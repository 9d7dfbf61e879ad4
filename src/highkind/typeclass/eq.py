"""Eq: explicit equality instances."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

__all__ = ['Eq']


class Eq[A](ABC):
    """Equality on A, passed explicitly where ``==`` is not the relation wanted."""

    @abstractmethod
    def eq(self, one: A, two: A) -> bool: ...

    def neq(self, one: A, two: A) -> bool:
        return not self.eq(one, two)

    @staticmethod
    def create[T](fn: Callable[[T, T], bool]) -> Eq[T]:
        """Build an instance from a binary predicate."""
        return _FnEq(fn)

    @staticmethod
    def default[T]() -> Eq[T]:
        """The instance delegating to the values' own ``__eq__``."""
        return _DEFAULT


class _FnEq[A](Eq[A]):
    __slots__ = ('_fn',)

    def __init__(self, fn: Callable[[A, A], bool]) -> None:
        self._fn = fn

    def eq(self, one: A, two: A) -> bool:
        return self._fn(one, two)


_DEFAULT: Eq[object] = _FnEq(lambda one, two: one == two)
