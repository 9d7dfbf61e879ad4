"""ErrorT: adds short-circuiting errors of type E on top of any monad M.

An ``ErrorT[E, M, A]`` wraps ``run: Kind[M, Either[E, A]]``. Its instances
are built from an instance of M and are themselves ordinary single-witness
instances over ``Kind[Kind[ErrorT.Mu, E], M]``:

    ```python
    from highkind import Either, ErrorT, List

    errors = ErrorT.monad_error(List.monad)
    program = errors.bind(
        ErrorT.lift(List.monad, List.of(1, 2)),
        lambda x: errors.throw_error('odd') if x % 2 else errors.pure(x * 10),
    )
    program.run
    # List(Left(odd),Right(20))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from highkind import hkt
from highkind.data.either import Either
from highkind.hkt import Kind, Witness
from highkind.typeclass.functor import Functor
from highkind.typeclass.monad import Applicative, Apply, Bind, Monad, MonadError

__all__ = [
    'ErrorT',
    'ErrorTApplicative',
    'ErrorTApply',
    'ErrorTBind',
    'ErrorTFunctor',
    'ErrorTMonad',
    'ErrorTMonadError',
    'ErrorTMu',
]

type _ErrorTOf[E, M] = Kind[Kind[ErrorTMu, E], M]


class ErrorTMu(Witness):
    """Witness of :class:`ErrorT`."""


@dataclass(slots=True, frozen=True)
class ErrorT[E, M, A](Kind[Kind[Kind[ErrorTMu, E], M], A]):
    """An M-action producing either an error E or a value A."""

    run: Kind[M, Either[E, A]]

    Mu = ErrorTMu

    @staticmethod
    def narrow[X, N, T](value: Kind[Kind[Kind[ErrorTMu, X], N], T]) -> ErrorT[X, N, T]:
        """Recover an ErrorT from its Kind representation."""
        return hkt.narrow(value, ErrorT)

    @staticmethod
    def lift[X, N, T](inner: Functor[N], action: Kind[N, T]) -> ErrorT[X, N, T]:
        """Run an inner action as a successful ErrorT."""
        return ErrorT(inner.map(Either.right, action))

    @staticmethod
    def functor[X, N](inner: Functor[N]) -> ErrorTFunctor[X, N]:
        return ErrorTFunctor(inner)

    @staticmethod
    def apply[X, N](inner: Apply[N]) -> ErrorTApply[X, N]:
        return ErrorTApply(inner)

    @staticmethod
    def applicative[X, N](inner: Applicative[N]) -> ErrorTApplicative[X, N]:
        return ErrorTApplicative(inner)

    @staticmethod
    def bind[X, N](inner: Monad[N]) -> ErrorTBind[X, N]:
        return ErrorTBind(inner)

    @staticmethod
    def monad[X, N](inner: Monad[N]) -> ErrorTMonad[X, N]:
        return ErrorTMonad(inner)

    @staticmethod
    def monad_error[X, N](inner: Monad[N]) -> ErrorTMonadError[X, N]:
        return ErrorTMonadError(inner)


# --- Typeclass instances ---


class ErrorTFunctor[E, M](Functor[_ErrorTOf[E, M]]):
    """Maps the success value inside every inner Either."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner

    def map[A, B](self, fn: Callable[[A], B], nested: Kind[_ErrorTOf[E, M], A]) -> ErrorT[E, M, B]:
        return ErrorT(self.inner.map(lambda either: either.map(fn), ErrorT.narrow(nested).run))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.inner!r})'


class ErrorTApply[E, M](ErrorTFunctor[E, M], Apply[_ErrorTOf[E, M]]):
    """Combines two actions with the inner ``ap``; the left-most error wins."""

    def ap[A, B](
        self, fn: Kind[_ErrorTOf[E, M], Callable[[A], B]], nested: Kind[_ErrorTOf[E, M], A]
    ) -> ErrorT[E, M, B]:
        def combine(ef: Either[E, Callable[[A], B]]) -> Callable[[Either[E, A]], Either[E, B]]:
            return lambda ea: ef.bind(lambda f: ea.map(f))

        inner_fn = self.inner.map(combine, ErrorT.narrow(fn).run)
        return ErrorT(self.inner.ap(inner_fn, ErrorT.narrow(nested).run))


class ErrorTApplicative[E, M](ErrorTApply[E, M], Applicative[_ErrorTOf[E, M]]):
    def pure[A](self, value: A) -> ErrorT[E, M, A]:
        return ErrorT(self.inner.pure(Either.right(value)))


class ErrorTBind[E, M](ErrorTApply[E, M], Bind[_ErrorTOf[E, M]]):
    """Sequencing that stops at the first Left.

    The Left is re-wrapped with the inner ``pure`` so the inner effects run
    so far are kept.
    """

    def bind[A, B](
        self, nested: Kind[_ErrorTOf[E, M], A], fn: Callable[[A], Kind[_ErrorTOf[E, M], B]]
    ) -> ErrorT[E, M, B]:
        inner = self.inner
        return ErrorT(
            inner.bind(
                ErrorT.narrow(nested).run,
                lambda either: either.either(
                    lambda error: inner.pure(Either.left(error)),
                    lambda value: ErrorT.narrow(fn(value)).run,
                ),
            )
        )


class ErrorTMonad[E, M](ErrorTApplicative[E, M], ErrorTBind[E, M], Monad[_ErrorTOf[E, M]]):
    pass


class ErrorTMonadError[E, M](ErrorTMonad[E, M], MonadError[E, _ErrorTOf[E, M]]):
    """Raises errors as inner Lefts and recovers from them with a handler."""

    def throw_error[A](self, error: E) -> ErrorT[E, M, A]:
        return ErrorT(self.inner.pure(Either.left(error)))

    def catch_error[A](
        self, nested: Kind[_ErrorTOf[E, M], A], handler: Callable[[E], Kind[_ErrorTOf[E, M], A]]
    ) -> ErrorT[E, M, A]:
        inner = self.inner
        return ErrorT(
            inner.bind(
                ErrorT.narrow(nested).run,
                lambda either: either.either(
                    lambda error: ErrorT.narrow(handler(error)).run,
                    lambda _: inner.pure(either),
                ),
            )
        )
