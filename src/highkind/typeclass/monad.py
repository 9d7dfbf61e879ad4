"""Apply, Applicative, Bind, Monad and their zero/plus/error refinements.

Instances are plain objects passed as arguments; nothing is looked up
implicitly. Code written against these classes never learns which family
it is running over:

    ```python
    from highkind import List, Maybe
    from highkind.typeclass import monad

    monad.sequence(Maybe.monad, [Maybe.present(1), Maybe.present(2)])
    # Present(List(1,2))

    monad.sequence(List.monad, [List.of(1, 2), List.of(3)])
    # List(List(1,3),List(2,3))
    ```
"""

from __future__ import annotations

import enum
from abc import abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from highkind.typeclass.functor import Functor

if TYPE_CHECKING:
    from highkind.data.list_ import List
    from highkind.hkt import Kind

__all__ = [
    'Applicative',
    'Apply',
    'Bias',
    'Bind',
    'Monad',
    'MonadError',
    'MonadPlus',
    'MonadZero',
    'fold_m',
    'sequence',
    'traverse',
]


class Apply[W](Functor[W]):
    """Functor with application of wrapped functions."""

    @abstractmethod
    def ap[A, B](self, fn: Kind[W, Callable[[A], B]], nested: Kind[W, A]) -> Kind[W, B]:
        """Apply the wrapped function(s) to the wrapped value(s)."""

    def lift2[A, B, C](self, fn: Callable[[A, B], C]) -> Callable[[Kind[W, A], Kind[W, B]], Kind[W, C]]:
        return lambda na, nb: self.ap(self.map(lambda a: lambda b: fn(a, b), na), nb)

    def lift3[A, B, C, D](
        self, fn: Callable[[A, B, C], D]
    ) -> Callable[[Kind[W, A], Kind[W, B], Kind[W, C]], Kind[W, D]]:
        return lambda na, nb, nc: self.ap(self.ap(self.map(lambda a: lambda b: lambda c: fn(a, b, c), na), nb), nc)


class Applicative[W](Apply[W]):
    """Apply with a way to put a plain value into the family."""

    @abstractmethod
    def pure[A](self, value: A) -> Kind[W, A]: ...


class Bind[W](Apply[W]):
    """Apply with sequencing where the next step depends on the previous result."""

    @abstractmethod
    def bind[A, B](self, nested: Kind[W, A], fn: Callable[[A], Kind[W, B]]) -> Kind[W, B]: ...

    def join[A](self, nested: Kind[W, Kind[W, A]]) -> Kind[W, A]:
        """Flatten one level of nesting."""
        return self.bind(nested, lambda inner: inner)


class Monad[W](Applicative[W], Bind[W]):
    """Applicative plus Bind.

    ``map`` and ``ap`` default to their bind/pure derivations so an
    instance only has to supply ``pure`` and ``bind``.

    Laws:
        bind(pure(x), f) == f(x)
        bind(m, pure) == m
        bind(bind(m, f), g) == bind(m, lambda x: bind(f(x), g))
    """

    def map[A, B](self, fn: Callable[[A], B], nested: Kind[W, A]) -> Kind[W, B]:
        return self.bind(nested, lambda a: self.pure(fn(a)))

    def ap[A, B](self, fn: Kind[W, Callable[[A], B]], nested: Kind[W, A]) -> Kind[W, B]:
        return self.bind(fn, lambda f: self.map(f, nested))


class MonadZero[W](Monad[W]):
    """Monad with a failure/empty element."""

    @abstractmethod
    def mzero[A](self) -> Kind[W, A]: ...

    def guard(self, condition: bool) -> Kind[W, tuple[()]]:
        """``pure(())`` when the condition holds, ``mzero()`` otherwise."""
        return self.pure(()) if condition else self.mzero()


class Bias(enum.Enum):
    """Which operand a biased MonadPlus keeps when both are non-empty."""

    FIRST = 'first'
    LAST = 'last'


class MonadPlus[W](MonadZero[W]):
    """MonadZero with an associative choice/combination operation."""

    @abstractmethod
    def mplus[A](self, first: Kind[W, A], second: Kind[W, A]) -> Kind[W, A]: ...

    def msum[A](self, values: Iterable[Kind[W, A]]) -> Kind[W, A]:
        result: Kind[W, A] = self.mzero()
        for value in values:
            result = self.mplus(result, value)
        return result


class MonadError[E, W](Monad[W]):
    """Monad able to raise and recover from errors of type E inside the family."""

    @abstractmethod
    def throw_error[A](self, error: E) -> Kind[W, A]: ...

    @abstractmethod
    def catch_error[A](self, nested: Kind[W, A], handler: Callable[[E], Kind[W, A]]) -> Kind[W, A]: ...


def sequence[W, A](monad: Monad[W], values: Iterable[Kind[W, A]]) -> Kind[W, List[A]]:
    """Run the values left to right and collect their results in a List."""
    return traverse(monad, lambda value: value, values)


def traverse[W, A, B](monad: Monad[W], fn: Callable[[A], Kind[W, B]], values: Iterable[A]) -> Kind[W, List[B]]:
    """Map each value to an action, run the actions left to right, collect the results."""
    from highkind.data.list_ import List

    def step(acc: tuple[Any, ...], value: A) -> Kind[W, tuple[Any, ...]]:
        return monad.map(lambda b: (*acc, b), fn(value))

    result: Kind[W, tuple[Any, ...]] = monad.pure(())
    for value in values:
        result = monad.bind(result, lambda acc, value=value: step(acc, value))
    return monad.map(List.from_iterable, result)


def fold_m[W, A, B](monad: Monad[W], fn: Callable[[B, A], Kind[W, B]], start: B, values: Iterable[A]) -> Kind[W, B]:
    """Left fold where each step is an action of the monad."""
    result: Kind[W, B] = monad.pure(start)
    for value in values:
        result = monad.bind(result, lambda acc, value=value: fn(acc, value))
    return result
