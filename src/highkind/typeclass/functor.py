"""Functor over a witness W."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from highkind.hkt import Kind

__all__ = ['Functor']


class Functor[W](ABC):
    """Structure-preserving map over the family identified by W.

    Laws:
        map(id, x) == x
        map(g . f, x) == map(g, map(f, x))
    """

    @abstractmethod
    def map[A, B](self, fn: Callable[[A], B], nested: Kind[W, A]) -> Kind[W, B]:
        """Apply ``fn`` to every element of ``nested``."""

    def lift[A, B](self, fn: Callable[[A], B]) -> Callable[[Kind[W, A]], Kind[W, B]]:
        """Turn a plain function into one operating on the family."""
        return lambda nested: self.map(fn, nested)
