"""Stream: an infinite sequence with an eager head and a lazily computed tail.

Every cell computes its tail at most once. Operations that build new streams
(``map``, ``zip``, ``intersperse`` ...) never force more than the cell they
are asked for, so they compose over infinite input.

Example:
    ```python
    from highkind import Stream

    Stream.range(1).filter(lambda x: x % 2 == 0)
    # Stream(2,4,6,8,10,12,14,16,18,20...)
    Stream.range(10, 3).to_string(4)
    # 'Stream(10,13,16,19...)'
    ```
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import Any, ClassVar, Final, cast

from highkind import hkt
from highkind._config import get_config
from highkind.data.list_ import List
from highkind.errors import InvalidArgumentError
from highkind.hkt import Kind, Witness
from highkind.show import show
from highkind.typeclass.monad import Monad

__all__ = ['Stream', 'StreamMonad', 'StreamMu', 'interleave', 'unzip', 'zip', 'zip_with']

_UNSET: Final = object()


class StreamMu(Witness):
    """Witness of :class:`Stream`."""


class Stream[A](Kind[StreamMu, A]):
    """An infinite stream of A."""

    __slots__ = ('_head', '_tail', '_tail_fn')

    Mu = StreamMu
    monad: ClassVar[StreamMonad]

    def __init__(self, head: A, tail_fn: Callable[[], Stream[A]]) -> None:
        self._head = head
        self._tail_fn: Callable[[], Stream[A]] | None = tail_fn
        self._tail: Any = _UNSET

    # --- Construction ---

    @staticmethod
    def new[T](head: T, tail: Stream[T]) -> Stream[T]:
        """A stream starting with ``head`` followed by an existing stream."""
        return Stream(head, lambda: tail)

    @staticmethod
    def new_lazy[T](head: T, thunk: Callable[[], Stream[T]]) -> Stream[T]:
        """A stream whose tail is computed on first access."""
        return Stream(head, thunk)

    @staticmethod
    def from_iterator[T](iterator: Iterator[T]) -> Stream[T]:
        """Consume an infinite iterator lazily.

        Raises:
            InvalidArgumentError: If the iterator runs out.
        """
        try:
            head = next(iterator)
        except StopIteration:
            raise InvalidArgumentError('iterator', 'exhausted before the stream ended') from None
        return Stream(head, lambda: Stream.from_iterator(iterator))

    @staticmethod
    def repeat[T](value: T) -> Stream[T]:
        stream: Stream[T] = Stream(value, lambda: stream)
        return stream

    @staticmethod
    def cycle[T](*values: T) -> Stream[T]:
        """Repeat the given values in order, forever.

        Raises:
            InvalidArgumentError: If no values are given.
        """
        if not values:
            raise InvalidArgumentError('values', 'cycle needs at least one value')
        if len(values) == 1:
            return Stream.repeat(values[0])
        return Stream.from_iterator(itertools.cycle(values))

    @staticmethod
    def unfold[T](fn: Callable[[T], T], seed: T) -> Stream[T]:
        """``seed, fn(seed), fn(fn(seed)), ...``"""
        return Stream(seed, lambda: Stream.unfold(fn, fn(seed)))

    @staticmethod
    def range(start: int, step: int = 1) -> Stream[int]:
        return Stream.unfold(lambda x: x + step, start)

    # --- Primitive ---

    def head(self) -> A:
        return self._head

    def tail(self) -> Stream[A]:
        if self._tail is _UNSET:
            self._tail = cast('Callable[[], Stream[A]]', self._tail_fn)()
            self._tail_fn = None
        return self._tail

    def cata[B](self, fn: Callable[[A, Stream[A]], B]) -> B:
        """Collapse to a B from the head and the tail."""
        return fn(self._head, self.tail())

    # --- Transformation ---

    def map[B](self, fn: Callable[[A], B]) -> Stream[B]:
        return Stream(fn(self._head), lambda: self.tail().map(fn))

    def filter(self, predicate: Callable[[A], bool]) -> Stream[A]:
        """Keep the elements matching ``predicate``.

        Searching for the next match does not terminate if none exists.
        """
        stream = self
        while not predicate(stream._head):
            stream = stream.tail()
        return Stream(stream._head, lambda: stream.tail().filter(predicate))

    def take(self, n: int) -> List[A]:
        """The first ``n`` elements; an empty List when ``n <= 0``."""
        return List.from_iterable(itertools.islice(self, max(n, 0)))

    def take_while(self, predicate: Callable[[A], bool]) -> List[A]:
        return List.from_iterable(itertools.takewhile(predicate, self))

    def drop(self, n: int) -> Stream[A]:
        stream = self
        for _ in range(n):
            stream = stream.tail()
        return stream

    def drop_while(self, predicate: Callable[[A], bool]) -> Stream[A]:
        stream = self
        while predicate(stream._head):
            stream = stream.tail()
        return stream

    def inits(self) -> Stream[List[A]]:
        """``List(), List(a0), List(a0,a1), ...``"""
        return Stream.range(0).map(self.take)

    def tails(self) -> Stream[Stream[A]]:
        """The stream itself, then its tail, then the tail of that, ..."""
        return Stream.unfold(Stream.tail, self)

    def intersperse(self, separator: A) -> Stream[A]:
        """Put ``separator`` after every element."""
        return Stream(self._head, lambda: Stream(separator, lambda: self.tail().intersperse(separator)))

    # --- HKT ---

    @staticmethod
    def narrow[T](value: Kind[StreamMu, T]) -> Stream[T]:
        """Recover a Stream from its Kind representation."""
        return hkt.narrow(value, Stream)

    # --- Object protocol ---

    def __iter__(self) -> Iterator[A]:
        stream = self
        while True:
            yield stream._head
            stream = stream.tail()

    def to_string(self, n: int) -> str:
        """Render the first ``n`` elements followed by an ellipsis."""
        return 'Stream(' + ','.join(show(a) for a in itertools.islice(self, max(n, 0))) + '...)'

    def __str__(self) -> str:
        return show(self)

    __repr__ = __str__


@show.instance(Stream)
def _show_stream(value: Stream[Any]) -> str:
    return value.to_string(get_config().show_limit)


# --- Module functions ---


def interleave[A](first: Stream[A], second: Stream[A]) -> Stream[A]:
    """Alternate elements: ``first[0], second[0], first[1], second[1], ...``"""
    return Stream(first.head(), lambda: interleave(second, first.tail()))


def zip_with[A, B, C](fn: Callable[[A, B], C], first: Stream[A], second: Stream[B]) -> Stream[C]:
    return Stream(fn(first.head(), second.head()), lambda: zip_with(fn, first.tail(), second.tail()))


def zip[A, B](first: Stream[A], second: Stream[B]) -> Stream[tuple[A, B]]:
    """Pair up elements position by position."""
    return zip_with(lambda a, b: (a, b), first, second)


def unzip[A, B](pairs: Stream[tuple[A, B]]) -> tuple[Stream[A], Stream[B]]:
    return pairs.map(lambda pair: pair[0]), pairs.map(lambda pair: pair[1])


def _diagonal[A](streams: Stream[Stream[A]]) -> Stream[A]:
    return Stream(streams.head().head(), lambda: _diagonal(streams.tail().map(Stream.tail)))


# --- Typeclass instances ---


class StreamMonad(Monad[StreamMu]):
    """Zipping monad: ``pure`` repeats, ``ap`` zips, ``bind`` takes the diagonal.

    The n-th element of ``bind(s, fn)`` is the n-th element of ``fn(s[n])``.
    """

    def pure[T](self, value: T) -> Stream[T]:
        return Stream.repeat(value)

    def map[T, U](self, fn: Callable[[T], U], nested: Kind[StreamMu, T]) -> Stream[U]:
        return Stream.narrow(nested).map(fn)

    def ap[T, U](self, fn: Kind[StreamMu, Callable[[T], U]], nested: Kind[StreamMu, T]) -> Stream[U]:
        return zip_with(lambda f, a: f(a), Stream.narrow(fn), Stream.narrow(nested))

    def bind[T, U](self, nested: Kind[StreamMu, T], fn: Callable[[T], Kind[StreamMu, U]]) -> Stream[U]:
        return _diagonal(Stream.narrow(nested).map(lambda a: Stream.narrow(fn(a))))

    def join[T](self, nested: Kind[StreamMu, Kind[StreamMu, T]]) -> Stream[T]:
        return _diagonal(Stream.narrow(nested).map(Stream.narrow))


Stream.monad = StreamMonad()
