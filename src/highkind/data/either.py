"""Either: a value of one of two types, Left or Right.

``Either[L, R]`` is the two-parameter family of the library. Its Kind form
is ``Kind[Kind[Either.Mu, L], R]``: fixing the left type gives the
single-witness family ``Kind[Either.Mu, L]`` the Monad instance works over.
Right is the success side; ``map`` and ``bind`` act on it and pass a Left
through unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, final

from highkind import hkt
from highkind.data.maybe import Maybe
from highkind.errors import EmptyValueAccessError
from highkind.hkt import Kind, Witness
from highkind.show import show
from highkind.typeclass.monad import MonadError

if TYPE_CHECKING:
    from highkind.data.list_ import List

__all__ = ['Either', 'EitherMonad', 'EitherMu']

SHOW_LEFT: Final = 'Left({})'
SHOW_RIGHT: Final = 'Right({})'


class EitherMu(Witness):
    """Witness of :class:`Either`."""


class Either[L, R](Kind[Kind[EitherMu, L], R], ABC):
    """Left(value) or Right(value)."""

    __slots__ = ()

    Mu = EitherMu

    @staticmethod
    def left[X, Y](value: X) -> Either[X, Y]:
        return _Left(value)

    @staticmethod
    def right[X, Y](value: Y) -> Either[X, Y]:
        return _Right(value)

    @abstractmethod
    def either[T](self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """Collapse to a T by handling both sides."""

    def cata[T](self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """Alias of :meth:`either`."""
        return self.either(left_fn, right_fn)

    def is_left(self) -> bool:
        return self.either(lambda _: True, lambda _: False)

    def is_right(self) -> bool:
        return self.either(lambda _: False, lambda _: True)

    def map[T](self, fn: Callable[[R], T]) -> Either[L, T]:
        return self.either(Either.left, lambda r: _Right(fn(r)))

    def bind[T](self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return self.either(Either.left, fn)

    def map_left[T](self, fn: Callable[[L], T]) -> Either[T, R]:
        return self.either(lambda l_: _Left(fn(l_)), Either.right)

    def bimap[T, U](self, left_fn: Callable[[L], T], right_fn: Callable[[R], U]) -> Either[T, U]:
        return self.either(lambda l_: _Left(left_fn(l_)), lambda r: _Right(right_fn(r)))

    def swap(self) -> Either[R, L]:
        return self.either(Either.right, Either.left)

    def maybe_left(self) -> Maybe[L]:
        """Present(left value), or Empty for a Right or a Left holding None."""
        return self.either(Maybe.from_optional, lambda _: Maybe.empty())

    def maybe_right(self) -> Maybe[R]:
        """Present(right value), or Empty for a Left or a Right holding None."""
        return self.either(lambda _: Maybe.empty(), Maybe.from_optional)

    def get_or_else(self, default: R) -> R:
        return self.either(lambda _: default, lambda r: r)

    def get_or_fail(self) -> R:
        """Return the Right value.

        Raises:
            EmptyValueAccessError: On a Left. A Left holding an exception is
                chained as the cause; a struct with ``to_exception`` is converted.
        """
        return self.either(_fail_right, lambda r: r)

    def left_or_fail(self) -> L:
        """Return the Left value, raising EmptyValueAccessError on a Right."""

        def fail(value: R) -> L:
            raise EmptyValueAccessError(f'left_or_fail() called on Right({show(value)})')

        return self.either(lambda l_: l_, fail)

    @staticmethod
    def lefts[X, Y](values: Iterable[Either[X, Y]]) -> List[X]:
        """The Left values, in order."""
        from highkind.data.list_ import List

        return List.from_iterable(v for value in values for v in value.either(lambda x: (x,), lambda _: ()))

    @staticmethod
    def rights[X, Y](values: Iterable[Either[X, Y]]) -> List[Y]:
        """The Right values, in order."""
        from highkind.data.list_ import List

        return List.from_iterable(v for value in values for v in value.either(lambda _: (), lambda y: (y,)))

    @staticmethod
    def narrow[X, Y](value: Kind[Kind[EitherMu, X], Y]) -> Either[X, Y]:
        """Recover an Either from its Kind representation."""
        return hkt.narrow(value, Either)

    @staticmethod
    def monad[X]() -> EitherMonad[X]:
        """Monad instance for Eithers with left type X."""
        return _MONAD

    @staticmethod
    def monad_error[X]() -> EitherMonad[X]:
        """MonadError instance for Eithers with left type X; errors are Lefts."""
        return _MONAD

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Either):
            return NotImplemented
        return self.either(
            lambda x: other.either(lambda y: bool(x == y), lambda _: False),
            lambda x: other.either(lambda _: False, lambda y: bool(x == y)),
        )

    def __hash__(self) -> int:
        return self.either(lambda l_: hash(('Left', l_)), lambda r: hash(('Right', r)))

    def __str__(self) -> str:
        return show(self)

    __repr__ = __str__


def _fail_right(value: Any) -> Any:
    if isinstance(value, BaseException):
        raise EmptyValueAccessError(f'get_or_fail() called on Left({show(value)})') from value
    to_exception = getattr(value, 'to_exception', None)
    if callable(to_exception):
        raise to_exception()
    raise EmptyValueAccessError(f'get_or_fail() called on Left({show(value)})')


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class _Left[L](Either[L, Any]):
    value: L

    def either[T](self, left_fn: Callable[[L], T], right_fn: Callable[[Any], T]) -> T:
        return left_fn(self.value)


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class _Right[R](Either[Any, R]):
    value: R

    def either[T](self, left_fn: Callable[[Any], T], right_fn: Callable[[R], T]) -> T:
        return right_fn(self.value)


@show.instance(Either)
def _show_either(value: Either[Any, Any]) -> str:
    return value.either(
        lambda l_: SHOW_LEFT.format(show(l_)),
        lambda r: SHOW_RIGHT.format(show(r)),
    )


class EitherMonad[L](MonadError[L, Kind[EitherMu, L]]):
    """Monad and MonadError instance of Either for a fixed left type."""

    def pure[T](self, value: T) -> Either[L, T]:
        return _Right(value)

    def map[T, U](self, fn: Callable[[T], U], nested: Kind[Kind[EitherMu, L], T]) -> Either[L, U]:
        return Either.narrow(nested).map(fn)

    def bind[T, U](
        self, nested: Kind[Kind[EitherMu, L], T], fn: Callable[[T], Kind[Kind[EitherMu, L], U]]
    ) -> Either[L, U]:
        return Either.narrow(nested).bind(lambda r: Either.narrow(fn(r)))

    def throw_error[T](self, error: L) -> Either[L, T]:
        return _Left(error)

    def catch_error[T](
        self, nested: Kind[Kind[EitherMu, L], T], handler: Callable[[L], Kind[Kind[EitherMu, L], T]]
    ) -> Either[L, T]:
        either = Either.narrow(nested)
        return either.either(lambda l_: Either.narrow(handler(l_)), lambda _: either)


_MONAD: Final[EitherMonad[Any]] = EitherMonad()
