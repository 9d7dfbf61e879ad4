"""Error types: dual struct+exception for Either-carried values and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyValueAccess',
    'EmptyValueAccessError',
    'HighKindError',
    'InvalidArgument',
    'InvalidArgumentError',
    'UnsoundNarrow',
    'UnsoundNarrowError',
]


class HighKindError(Exception):
    """Base exception class for highkind errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


# --- Empty access ---


class EmptyValueAccess(msgspec.Struct, frozen=True, gc=False):
    """A value was required from an empty container - struct variant for Either[EmptyValueAccess, A]."""

    reason: str | None = None

    def to_exception(self) -> EmptyValueAccessError:
        """Convert to exception for raise-based code."""
        return EmptyValueAccessError(self.reason)


class EmptyValueAccessError(HighKindError, LookupError):
    """A value was required from an empty container - exception variant."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason or 'Value accessed on Empty', code='empty_value_access')

    def to_struct(self) -> EmptyValueAccess:
        """Convert to struct for Either-based code."""
        return EmptyValueAccess(self.reason)


# --- Constructor contract ---


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """A constructor contract was violated - struct variant."""

    argument: str
    reason: str | None = None

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.argument, self.reason)


class InvalidArgumentError(HighKindError, ValueError):
    """A constructor contract was violated - exception variant."""

    def __init__(self, argument: str, reason: str | None = None) -> None:
        self.argument = argument
        self.reason = reason
        msg = f'Invalid argument {argument!r}'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg, code='invalid_argument')

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for Either-based code."""
        return InvalidArgument(self.argument, self.reason)


# --- Witness narrowing ---


class UnsoundNarrow(msgspec.Struct, frozen=True, gc=False):
    """A witness-tagged value was narrowed to a family that did not build it - struct variant.

    Only produced when narrow checking is switched on; unchecked narrowing
    never detects this.
    """

    expected: str
    actual: str

    def to_exception(self) -> UnsoundNarrowError:
        """Convert to exception for raise-based code."""
        return UnsoundNarrowError(self.expected, self.actual)


class UnsoundNarrowError(HighKindError, TypeError):
    """A witness-tagged value was narrowed to a family that did not build it - exception variant."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f'Cannot narrow {actual} to {expected}', code='unsound_narrow')

    def to_struct(self) -> UnsoundNarrow:
        """Convert to struct for Either-based code."""
        return UnsoundNarrow(self.expected, self.actual)
