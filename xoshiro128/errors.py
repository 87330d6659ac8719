"""
Exception taxonomy for the xoshiro128 generator family.

Every error is raised synchronously at the call that introduced the bad value
and leaves generator state exactly as it was before the call.
"""


class Xoshiro128Error(Exception):
    """Base class for all xoshiro128 errors."""
    pass


class StateValidationError(Xoshiro128Error, ValueError):
    """
    Raised when a seed or state word is not an unsigned 32-bit integer,
    when a state does not have exactly four words, or when an all-zero
    state is passed to restore().
    """
    pass


class RangeValidationError(Xoshiro128Error, ValueError):
    """Raised when an integer range is malformed (non-integer, min > max, or too wide)."""
    pass


class ResetError(Xoshiro128Error, RuntimeError):
    """Raised by reset() when the generator remembers neither a seed nor an initial state."""
    pass


class UnknownKindError(Xoshiro128Error, ValueError):
    """Raised when a variant selector is not one of the known xoshiro128 kinds."""
    pass
