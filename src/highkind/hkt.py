"""Higher-kinded type encoding: witness markers, Kind and narrowing.

Python has no way to abstract over a type constructor, so ``Functor[Maybe]``
cannot be written directly. Instead every container family declares a
*witness* (an instance-less marker class) and subclasses ``Kind[W, A]`` with
it. Typeclass code is written against ``Kind[W, A]`` and only ever hands back
values it received or built through the family's own instance, so the
family's ``narrow`` can turn the ``Kind`` back into the concrete type.

Two- and three-parameter families nest the witness, which is partial
application at the type level:

    Either[L, R]     is  Kind[Kind[Either.Mu, L], R]
    ErrorT[E, M, A]  is  Kind[Kind[Kind[ErrorT.Mu, E], M], A]

so ``Kind[Either.Mu, L]`` is itself a witness a single-parameter
typeclass such as ``Monad`` can be instantiated with.

Example:
    ```python
    from highkind import Maybe

    def double_all(functor, value):
        return functor.map(lambda x: x * 2, value)

    Maybe.narrow(double_all(Maybe.monad, Maybe.present(21)))
    # Present(42)
    ```
"""

from __future__ import annotations

from typing import Any, NoReturn, cast

from highkind._config import get_config
from highkind._logging import get_logger
from highkind.errors import UnsoundNarrowError

__all__ = [
    'Kind',
    'Kind2',
    'Kind3',
    'Witness',
    'narrow',
]

_logger = get_logger(__name__)


class Witness:
    """Base class for witness markers.

    A witness identifies one container family at the type level and is never
    instantiated.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f'{cls.__qualname__} is a witness type and has no instances')


class Kind[W, A]:
    """A value of the family identified by witness W holding elements of type A."""

    __slots__ = ()


type Kind2[W, A, B] = Kind[Kind[W, A], B]
"""Two-parameter family with its first parameter applied at the witness level."""

type Kind3[W, A, B, C] = Kind[Kind[Kind[W, A], B], C]
"""Three-parameter family with its first two parameters applied at the witness level."""


def narrow[F](value: object, family: type[F]) -> F:
    """Cast a witness-tagged value back to its concrete family.

    The cast is unchecked: callers must only pass values the family's own
    constructors produced, which holds as long as no public API tags a
    foreign value with the family's witness. With ``check_narrow`` switched
    on in the configuration the family is verified and a mismatch raises
    instead of propagating a wrongly-typed value.

    Args:
        value: The Kind-typed value.
        family: The concrete container class owning the witness.

    Returns:
        The same object, typed as the concrete family.

    Raises:
        UnsoundNarrowError: Only when check_narrow is on and value is not a family instance.
    """
    if get_config().check_narrow and not isinstance(value, family):
        _logger.warning(
            'narrow rejected',
            expected=family.__qualname__,
            actual=type(value).__qualname__,
        )
        raise UnsoundNarrowError(family.__qualname__, type(value).__qualname__)
    return cast(F, value)
