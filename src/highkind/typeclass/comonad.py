"""Extend: the dual of Bind."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from highkind.typeclass.functor import Functor

if TYPE_CHECKING:
    from highkind.hkt import Kind

__all__ = ['Extend']


class Extend[W](Functor[W]):
    """Functor that can see its whole context when mapping.

    Law:
        extend(f, extend(g, w)) == extend(lambda x: f(extend(g, x)), w)
    """

    @abstractmethod
    def duplicate[A](self, nested: Kind[W, A]) -> Kind[W, Kind[W, A]]: ...

    def extend[A, B](self, fn: Callable[[Kind[W, A]], B], nested: Kind[W, A]) -> Kind[W, B]:
        return self.map(fn, self.duplicate(nested))
