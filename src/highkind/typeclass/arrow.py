"""Category, the function arrow F1 and the Dual category wrapper.

Two- and three-parameter shapes here go through the nested-witness
encoding: ``F1[A, B]`` is ``Kind[Kind[F1.Mu, A], B]`` and
``Dual[M, A, B]`` is ``Kind[Kind[Kind[Dual.Mu, M], A], B]``, so
``Category[Kind[Dual.Mu, M]]`` is an ordinary single-witness instance.

Example:
    ```python
    category = Dual.category(F1.category)
    square = Dual(F1(lambda x: x * x))
    negate = Dual(F1(lambda x: -x))

    # Dual flips composition: square runs first, then negate
    F1.narrow(Dual.narrow(category.dot(square, negate)).get())(4)
    # -16
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from highkind import hkt
from highkind.hkt import Kind, Witness

__all__ = ['Category', 'Dual', 'DualMu', 'F1', 'F1Mu']


class Category[W](ABC):
    """Identity arrows and associative composition.

    Laws:
        dot(identity(), f) == f == dot(f, identity())
        dot(f, dot(g, h)) == dot(dot(f, g), h)
    """

    @abstractmethod
    def identity[A](self) -> Kind[Kind[W, A], A]: ...

    @abstractmethod
    def dot[A, B, C](self, bc: Kind[Kind[W, B], C], ab: Kind[Kind[W, A], B]) -> Kind[Kind[W, A], C]:
        """Compose so that ``ab`` runs first and ``bc`` second."""


class F1Mu(Witness):
    """Witness of :class:`F1`."""


class DualMu(Witness):
    """Witness of :class:`Dual`."""


@dataclass(slots=True, frozen=True)
class F1[A, B](Kind[Kind[F1Mu, A], B]):
    """A plain one-argument function as a two-parameter family."""

    fn: Callable[[A], B]

    Mu = F1Mu
    category: ClassVar[Category[F1Mu]]

    def __call__(self, value: A) -> B:
        return self.fn(value)

    @staticmethod
    def narrow[X, Y](value: Kind[Kind[F1Mu, X], Y]) -> F1[X, Y]:
        return hkt.narrow(value, F1)


class _F1Category(Category[F1Mu]):
    def identity[A](self) -> F1[A, A]:
        return F1(lambda a: a)

    def dot[A, B, C](self, bc: Kind[Kind[F1Mu, B], C], ab: Kind[Kind[F1Mu, A], B]) -> F1[A, C]:
        f, g = F1.narrow(bc), F1.narrow(ab)
        return F1(lambda a: f(g(a)))


F1.category = _F1Category()


@dataclass(slots=True, frozen=True)
class Dual[M, A, B](Kind[Kind[Kind[DualMu, M], A], B]):
    """An arrow of family M read backwards: a ``Dual[M, A, B]`` holds an ``M``-arrow from B to A."""

    value: Kind[Kind[M, B], A]

    Mu = DualMu

    def get(self) -> Kind[Kind[M, B], A]:
        return self.value

    @staticmethod
    def narrow[N, X, Y](value: Kind[Kind[Kind[DualMu, N], X], Y]) -> Dual[N, X, Y]:
        return hkt.narrow(value, Dual)

    @staticmethod
    def category[N](inner: Category[N]) -> Category[Kind[DualMu, N]]:
        """The category of ``inner`` with composition reversed."""
        return _DualCategory(inner)


class _DualCategory[M](Category[Kind[DualMu, M]]):
    __slots__ = ('_inner',)

    def __init__(self, inner: Category[M]) -> None:
        self._inner = inner

    def identity[A](self) -> Dual[M, A, A]:
        return Dual(self._inner.identity())

    def dot[A, B, C](self, bc: Any, ab: Any) -> Dual[M, A, C]:
        return Dual(self._inner.dot(Dual.narrow(ab).get(), Dual.narrow(bc).get()))
