"""Typeclass abstractions. Instances are passed explicitly, never looked up.

Flat imports:
    from highkind.typeclass import Functor, Monad, Monoid, Traversable

Generic helpers written once against the abstractions live in
:mod:`highkind.typeclass.monad` (``sequence``, ``traverse``, ``fold_m``).
"""

from highkind.typeclass.arrow import Category, Dual, DualMu, F1, F1Mu
from highkind.typeclass.comonad import Extend
from highkind.typeclass.eq import Eq
from highkind.typeclass.foldable import Foldable, Traversable
from highkind.typeclass.functor import Functor
from highkind.typeclass.group import Monoid, Semigroup
from highkind.typeclass.monad import (
    Applicative,
    Apply,
    Bias,
    Bind,
    Monad,
    MonadError,
    MonadPlus,
    MonadZero,
)

__all__ = [
    'Applicative',
    'Apply',
    'Bias',
    'Bind',
    'Category',
    'Dual',
    'DualMu',
    'Eq',
    'Extend',
    'F1',
    'F1Mu',
    'Foldable',
    'Functor',
    'Monad',
    'MonadError',
    'MonadPlus',
    'MonadZero',
    'Monoid',
    'Semigroup',
    'Traversable',
]
