"""Diagnostic rendering with ad-hoc, type-dispatched instances.

The containers render their elements through :func:`show` rather than plain
``str()`` so that nesting stays in the library's textual convention, e.g.
``Present(List(1,2))`` or ``Stream((1,foo),(2,bar)...)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['AdHoc', 'adhoc', 'show']

F = TypeVar('F', bound=Callable[..., Any])


class AdHoc(wrapt.ObjectProxy, Generic[F]):
    """A function that dispatches on the type of its first argument.

    Attributes:
        _self_name: The name of the wrapped function.
        _self_default: The fallback implementation.
        _self_instances: Mapping from type to its registered implementation.
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F = default_fn
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for ``type_`` and its subclasses.

        Example:
            ```python
            @show.instance(Point)
            def show_point(value: Point) -> str:
                return f"<{value.x},{value.y}>"
            ```
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        """Exact type first, then the nearest registered base along the MRO."""
        for base in type(value).__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self._find_instance(args[0])
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)
        return self._self_default(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<adhoc {self._self_name} with {len(self._self_instances)} instances>'


def adhoc(fn: F) -> AdHoc[F]:
    """Decorator turning ``fn`` into the fallback of a type-dispatched function."""
    return AdHoc(fn)


@adhoc
def show(value: object) -> str:
    """Render a value for diagnostics. Falls back to ``str()``."""
    return str(value)


@show.instance(tuple)
def _show_tuple(value: tuple[Any, ...]) -> str:
    return '(' + ','.join(show(item) for item in value) + ')'
