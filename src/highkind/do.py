"""@do decorator for generator-based do-notation over any Monad."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import wrapt

from highkind.hkt import Kind
from highkind.typeclass.monad import Monad

__all__ = ['do']

type _Block[W] = Callable[..., Generator[Kind[W, Any], Any, Any]]


def do[W](monad: Monad[W]) -> Callable[[_Block[W]], Callable[..., Kind[W, Any]]]:
    """Decorator for generator-based do-notation with an explicit Monad.

    Each yielded ``Kind[W, A]`` is bound through ``monad.bind`` and the
    generator receives the bound value; the returned value is wrapped with
    ``monad.pure``. The generator is replayed from the start for every bound
    value, so monads that call the continuation more than once (List) see
    every branch. Generator bodies must therefore be free of side effects.

    Args:
        monad: Monad instance the block runs in.

    Returns:
        A decorator turning a generator function into a function returning ``Kind[W, R]``.

    Example:
        ```python
        @do(List.monad)
        def products():
            a = yield List.range(1, 1, 3)
            b = yield List.range(1, 1, 3)
            return f'{a} x {b} = {a * b}'

        products().take(2)
        # List(1 x 1 = 1,1 x 2 = 2)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: _Block[W],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Kind[W, Any]:
        return _resume(monad, lambda: wrapped(*args, **kwargs), ())

    return wrapper


def _resume[W](
    monad: Monad[W], start: Callable[[], Generator[Kind[W, Any], Any, Any]], history: tuple[Any, ...]
) -> Kind[W, Any]:
    gen = start()
    try:
        yielded = next(gen)
        for value in history:
            yielded = gen.send(value)
    except StopIteration as e:
        return monad.pure(e.value)
    finally:
        gen.close()
    return monad.bind(yielded, lambda value: _resume(monad, start, (*history, value)))
