"""Container types: Maybe, Either, List and Stream."""

from highkind.data.maybe import Maybe, MaybeMu, empty, present
from highkind.data.either import Either, EitherMu
from highkind.data.list_ import List, ListMu
from highkind.data.stream import Stream, StreamMu

__all__ = [
    'Either',
    'EitherMu',
    'List',
    'ListMu',
    'Maybe',
    'MaybeMu',
    'Stream',
    'StreamMu',
    'empty',
    'present',
]
