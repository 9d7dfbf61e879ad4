"""Maybe: a value that may or may not be present.

A ``Maybe`` is either the shared ``Empty`` instance or ``Present(value)``
with a non-None value. ``cata`` is the only primitive; everything else
(emptiness, extraction, ``map``, ``bind``, ``filter``, equality, hashing,
rendering) is derived from it, and external code can derive new
operations the same way without touching the class.

Examples:
    >>> present(21).map(lambda x: x * 2)
    Present(42)
    >>> empty().get_or_else(0)
    0
    >>> present(1).or_else(present(2))
    Present(1)
    >>> Maybe.collect_present([present(1), empty(), present(3)])
    List(1,3)
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Final, final

from highkind import hkt
from highkind.errors import EmptyValueAccess, EmptyValueAccessError, InvalidArgumentError
from highkind.hkt import Kind, Witness
from highkind.show import show
from highkind.typeclass.comonad import Extend
from highkind.typeclass.eq import Eq
from highkind.typeclass.foldable import Traversable
from highkind.typeclass.group import Monoid
from highkind.typeclass.monad import Applicative, Bias, MonadPlus, MonadZero

if TYPE_CHECKING:
    from highkind.data.either import Either
    from highkind.data.list_ import List

__all__ = [
    'Maybe',
    'MaybeMonad',
    'MaybeMonadPlus',
    'MaybeMu',
    'empty',
    'present',
]

SHOW_EMPTY: Final = 'Empty'
SHOW_PRESENT: Final = 'Present({})'


class MaybeMu(Witness):
    """Witness of :class:`Maybe`."""


def _identity[T](value: T) -> T:
    return value


def _raise(error_kind: type[BaseException], message: str | None) -> Any:
    if message is None:
        raise error_kind()
    raise error_kind(message)


class Maybe[A](Kind[MaybeMu, A], ABC):
    """A container holding zero or one value of type A.

    Construct through :meth:`empty`, :meth:`present`, :meth:`lazy_present`,
    :meth:`present_when` or :meth:`from_optional`; subclassing outside this
    module would break the witness contract :meth:`narrow` relies on.
    """

    __slots__ = ()

    Mu = MaybeMu

    monad: ClassVar[MaybeMonad]
    first_biased_monad_plus: ClassVar[MaybeMonadPlus]
    last_biased_monad_plus: ClassVar[MaybeMonadPlus]
    traversable: ClassVar[Traversable[MaybeMu]]
    extend: ClassVar[Extend[MaybeMu]]

    # --- Construction ---

    @staticmethod
    def empty[T]() -> Maybe[T]:
        """Return the shared empty instance.

        No A values are involved, so one instance serves every element type.
        """
        return _EMPTY

    @staticmethod
    def present[T](value: T) -> Maybe[T]:
        """Wrap a value.

        Raises:
            InvalidArgumentError: If value is None.
        """
        return _Present(value)

    @staticmethod
    def lazy_present[T](thunk: Callable[[], T]) -> Maybe[T]:
        """A present value computed by ``thunk`` each time the Maybe is collapsed.

        Collapsing raises InvalidArgumentError if the thunk returns None.
        """
        return _LazyPresent(thunk)

    @staticmethod
    def present_when[T](condition: bool, thunk: Callable[[], T]) -> Maybe[T]:
        """Present(thunk()) when the condition holds, Empty otherwise. The thunk runs only if needed."""
        return _Present(thunk()) if condition else _EMPTY

    @staticmethod
    def from_optional[T](value: T | None) -> Maybe[T]:
        """Empty for None, Present otherwise."""
        return _EMPTY if value is None else _Present(value)

    # --- Primitive ---

    @abstractmethod
    def cata[B](self, default: B, fn: Callable[[A], B]) -> B:
        """Collapse to a B: ``default`` when empty, ``fn(value)`` when present.

        Args:
            default: Result for the empty case.
            fn: Applied to the contained value.

        Returns:
            The default value or the result of fn.
        """

    @abstractmethod
    def lazy_cata[B](self, default_thunk: Callable[[], B], fn: Callable[[A], B]) -> B:
        """Like :meth:`cata`, but the default is computed only when empty."""

    # --- Queries ---

    def is_empty(self) -> bool:
        return self is _EMPTY

    def is_present(self) -> bool:
        return self is not _EMPTY

    # --- Extraction ---

    def get_or_else(self, default: A) -> A:
        """Return the value, or ``default`` when empty."""
        return self.cata(default, _identity)

    def get_or_else_compute(self, supplier: Callable[[], A]) -> A:
        """Return the value, or the result of ``supplier()`` when empty."""
        return self.lazy_cata(supplier, _identity)

    def get_or_fail(
        self,
        error_kind: type[BaseException] = EmptyValueAccessError,
        message: str | None = None,
    ) -> A:
        """Return the value, raising ``error_kind`` when empty.

        Args:
            error_kind: Exception class to raise. Called with ``message`` when one
                is given, without arguments otherwise.
            message: Optional error message.

        Raises:
            error_kind: When the Maybe is empty.
        """
        return self.lazy_cata(functools.partial(_raise, error_kind, message), _identity)

    def get(self) -> A:
        """Return the value.

        Raises:
            EmptyValueAccessError: When the Maybe is empty.
        """
        return self.get_or_fail(EmptyValueAccessError, 'get() called on Empty')

    # --- Transformation ---

    def or_else(self, other: Maybe[A]) -> Maybe[A]:
        """Return self when present, else ``other``. Left-biased, never merges."""
        return self if self.is_present() else other

    def filter(self, predicate: Callable[[A], bool]) -> Maybe[A]:
        """Keep the value only if it satisfies ``predicate``."""
        return self.bind(lambda a: self if predicate(a) else _EMPTY)

    def bind[B](self, fn: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Chain a computation that may itself produce Empty."""
        return self.cata(_EMPTY, fn)

    def map[B](self, fn: Callable[[A], B]) -> Maybe[B]:
        """Transform the value.

        Raises:
            InvalidArgumentError: If fn returns None; use :meth:`bind` with
                :meth:`from_optional` for functions that may return None.
        """
        return self.bind(lambda a: _Present(fn(a)))

    def for_each(self, fn: Callable[[A], Any]) -> None:
        """Call ``fn`` with the value for side effects, if present."""
        self.cata(None, fn)

    # --- Conversion ---

    def as_list(self) -> List[A]:
        """A List holding zero or one element."""
        from highkind.data.list_ import List

        return self.cata(List.nil(), List.of)

    def to_either[L](self, left: L | None = None) -> Either[L | EmptyValueAccess, A]:
        """Right(value) when present, Left(left) when empty.

        Args:
            left: Left value for the empty case. Defaults to an EmptyValueAccess struct.
        """
        from highkind.data.either import Either

        return self.lazy_cata(
            lambda: Either.left(EmptyValueAccess('empty Maybe') if left is None else left),
            Either.right,
        )

    def __iter__(self) -> Iterator[A]:
        if self.is_present():
            yield self.get()

    # --- Lifting ---

    @staticmethod
    def lift[T, U](fn: Callable[[T], U]) -> Callable[[Maybe[T]], Maybe[U]]:
        return lambda ma: ma.map(fn)

    @staticmethod
    def lift2[T, U, V](fn: Callable[[T, U], V]) -> Callable[[Maybe[T], Maybe[U]], Maybe[V]]:
        """Lift a binary function; Empty in any argument gives Empty."""
        return lambda ma, mb: ma.bind(lambda a: mb.map(lambda b: fn(a, b)))

    @staticmethod
    def lift3[T, U, V, R](fn: Callable[[T, U, V], R]) -> Callable[[Maybe[T], Maybe[U], Maybe[V]], Maybe[R]]:
        """Lift a ternary function; Empty in any argument gives Empty."""
        return lambda ma, mb, mc: ma.bind(lambda a: mb.bind(lambda b: mc.map(lambda c: fn(a, b, c))))

    # --- Collections ---

    @staticmethod
    def collect_present[T](values: Iterable[Maybe[T]]) -> List[T]:
        """The values of the present items, in their original order."""
        from highkind.data.list_ import List

        collected: list[T] = []
        for value in values:
            value.for_each(collected.append)
        return List.from_iterable(collected)

    # --- HKT ---

    @staticmethod
    def narrow[T](value: Kind[MaybeMu, T]) -> Maybe[T]:
        """Recover a Maybe from its Kind representation.

        Only valid for values built by this module; see :func:`highkind.hkt.narrow`.
        """
        return hkt.narrow(value, Maybe)

    # --- Instances ---

    @staticmethod
    def eq[T](eq_a: Eq[T]) -> Eq[Maybe[T]]:
        """Equality of Maybes given an equality for their elements."""
        return Eq.create(lambda one, two: one.cata(two.is_empty(), lambda x: two.cata(False, lambda y: eq_a.eq(x, y))))

    @staticmethod
    def first_monoid[T]() -> Monoid[Maybe[T]]:
        """Keeps the first present value."""
        return Monoid.create(_EMPTY, lambda x, y: x.or_else(y))

    @staticmethod
    def last_monoid[T]() -> Monoid[Maybe[T]]:
        """Keeps the last present value."""
        return Monoid.create(_EMPTY, lambda x, y: y.or_else(x))

    @staticmethod
    def monoid[T](semigroup: Callable[[T, T], T]) -> Monoid[Maybe[T]]:
        """Combines present values with ``semigroup``; an Empty side yields the other side."""

        def op(mx: Maybe[T], my: Maybe[T]) -> Maybe[T]:
            return mx.map(lambda x: my.map(lambda y: semigroup(x, y)).get_or_else(x)).or_else(my)

        return Monoid.create(_EMPTY, op)

    # --- Object protocol ---

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.cata(other.is_empty(), lambda x: other.cata(False, lambda y: bool(x == y)))

    def __hash__(self) -> int:
        return self.cata(0, hash)

    def __str__(self) -> str:
        return show(self)

    __repr__ = __str__


@final
class _Empty(Maybe[Any]):
    __slots__ = ()

    def cata[B](self, default: B, fn: Callable[[Any], B]) -> B:
        return default

    def lazy_cata[B](self, default_thunk: Callable[[], B], fn: Callable[[Any], B]) -> B:
        return default_thunk()

    def __copy__(self) -> Maybe[Any]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Maybe[Any]:
        return self

    def __reduce__(self) -> tuple[Callable[[], Maybe[Any]], tuple[()]]:
        return (empty, ())


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class _Present[A](Maybe[A]):
    value: A

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError('value', 'a present Maybe cannot hold None')

    def cata[B](self, default: B, fn: Callable[[A], B]) -> B:
        return fn(self.value)

    def lazy_cata[B](self, default_thunk: Callable[[], B], fn: Callable[[A], B]) -> B:
        return fn(self.value)


@final
@dataclass(slots=True, frozen=True, eq=False, repr=False)
class _LazyPresent[A](Maybe[A]):
    thunk: Callable[[], A]

    def force(self) -> A:
        """Run the thunk; a None result is rejected like ``present(None)``."""
        return _Present(self.thunk()).value

    def cata[B](self, default: B, fn: Callable[[A], B]) -> B:
        return fn(self.force())

    def lazy_cata[B](self, default_thunk: Callable[[], B], fn: Callable[[A], B]) -> B:
        return fn(self.force())


_EMPTY: Final[Maybe[Any]] = _Empty()


def empty[T]() -> Maybe[T]:
    """Return the shared empty Maybe."""
    return _EMPTY


def present[T](value: T) -> Maybe[T]:
    """Wrap a non-None value in a Maybe."""
    return _Present(value)


@show.instance(Maybe)
def _show_maybe(value: Maybe[Any]) -> str:
    return value.cata(SHOW_EMPTY, lambda a: SHOW_PRESENT.format(show(a)))


# --- Typeclass instances ---


class MaybeMonad(MonadZero[MaybeMu]):
    """Monad instance of Maybe; ``mzero`` is Empty."""

    def pure[T](self, value: T) -> Maybe[T]:
        return Maybe.present(value)

    def map[T, U](self, fn: Callable[[T], U], nested: Kind[MaybeMu, T]) -> Maybe[U]:
        return Maybe.narrow(nested).map(fn)

    def ap[T, U](self, fn: Kind[MaybeMu, Callable[[T], U]], nested: Kind[MaybeMu, T]) -> Maybe[U]:
        return Maybe.narrow(fn).bind(lambda f: Maybe.narrow(nested).map(f))

    def bind[T, U](self, nested: Kind[MaybeMu, T], fn: Callable[[T], Kind[MaybeMu, U]]) -> Maybe[U]:
        return Maybe.narrow(nested).bind(lambda a: Maybe.narrow(fn(a)))

    def mzero[T](self) -> Maybe[T]:
        return _EMPTY


class MaybeMonadPlus(MaybeMonad, MonadPlus[MaybeMu]):
    """MonadPlus instance of Maybe keeping the first or the last present operand."""

    __slots__ = ('bias',)

    def __init__(self, bias: Bias) -> None:
        self.bias = bias

    def mplus[T](self, first: Kind[MaybeMu, T], second: Kind[MaybeMu, T]) -> Maybe[T]:
        one, two = Maybe.narrow(first), Maybe.narrow(second)
        if self.bias is Bias.FIRST:
            return one.or_else(two)
        return two.or_else(one)


class _MaybeTraversable(Traversable[MaybeMu]):
    def map[T, U](self, fn: Callable[[T], U], nested: Kind[MaybeMu, T]) -> Maybe[U]:
        return Maybe.narrow(nested).map(fn)

    def fold_right[T, B](self, fn: Callable[[T, B], B], start: B, nested: Kind[MaybeMu, T]) -> B:
        return Maybe.narrow(nested).cata(start, lambda a: fn(a, start))

    def traverse[F, T, U](
        self, applicative: Applicative[F], fn: Callable[[T], Kind[F, U]], nested: Kind[MaybeMu, T]
    ) -> Kind[F, Maybe[U]]:
        return Maybe.narrow(nested).lazy_cata(
            lambda: applicative.pure(_EMPTY),
            lambda a: applicative.map(Maybe.present, fn(a)),
        )


class _MaybeExtend(Extend[MaybeMu]):
    def map[T, U](self, fn: Callable[[T], U], nested: Kind[MaybeMu, T]) -> Maybe[U]:
        return Maybe.narrow(nested).map(fn)

    def duplicate[T](self, nested: Kind[MaybeMu, T]) -> Maybe[Maybe[T]]:
        maybe = Maybe.narrow(nested)
        return maybe.map(lambda _: maybe)


Maybe.monad = MaybeMonad()
Maybe.first_biased_monad_plus = MaybeMonadPlus(Bias.FIRST)
Maybe.last_biased_monad_plus = MaybeMonadPlus(Bias.LAST)
Maybe.traversable = _MaybeTraversable()
Maybe.extend = _MaybeExtend()
