"""highkind: algebraic data types and typeclasses over a higher-kinded-type encoding.

Containers (Maybe, Either, List, Stream) expose ``cata`` as their only
primitive; typeclass instances (Functor, Monad, Traversable, ...) are plain
objects passed explicitly, so generic code is written once and run over any
family.

Flat imports (preferred):
    from highkind import Maybe, Either, List, Stream, ErrorT, do, show

Submodule imports (for organization):
    from highkind.data.maybe import Maybe, empty, present
    from highkind.typeclass import Monad, Monoid
    from highkind.typeclass.monad import sequence, traverse
    from highkind.hkt import Kind, Witness, narrow
"""

# Configuration and logging
from highkind._config import HighKindConfig, get_config, init, reset
from highkind._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Containers
from highkind.data import Either, List, Maybe, Stream, empty, present

# Do-notation
from highkind.do import do

# Errors
from highkind.errors import (
    EmptyValueAccess,
    EmptyValueAccessError,
    HighKindError,
    InvalidArgument,
    InvalidArgumentError,
    UnsoundNarrow,
    UnsoundNarrowError,
)

# HKT encoding
from highkind.hkt import Kind, Kind2, Kind3, Witness, narrow

# Rendering
from highkind.show import adhoc, show

# Transformers
from highkind.transformer import ErrorT

__all__ = [
    # Containers
    'Either',
    # Errors
    'EmptyValueAccess',
    'EmptyValueAccessError',
    # Transformers
    'ErrorT',
    'HighKindConfig',
    'HighKindError',
    'InvalidArgument',
    'InvalidArgumentError',
    # HKT encoding
    'Kind',
    'Kind2',
    'Kind3',
    'List',
    'Maybe',
    'Stream',
    'UnsoundNarrow',
    'UnsoundNarrowError',
    'Witness',
    # Logging
    'add_log_hook',
    'adhoc',
    'clear_log_hooks',
    'configure_logging',
    # Do-notation
    'do',
    'empty',
    # Configuration
    'get_config',
    'get_logger',
    'init',
    'narrow',
    'present',
    'remove_log_hook',
    'reset',
    # Rendering
    'show',
]
