"""
xoshiro128 - seedable, non-cryptographic PRNG family

xoshiro128+, xoshiro128++ and xoshiro128** over one 128-bit state, with
SplitMix32 seed expansion, 2^64 / 2^96 jump-ahead, and a Random facade for
unbiased integers, floats, picks, shuffles and samples.

Modules:
    engine      - Xoshiro128 generator, Kind, transition, jump tables
    splitmix32  - seed -> state expansion
    murmur3     - name -> seed hash
    options     - xoshiro128() construction surface
    facade      - Random, Iter, RandomState
    registry    - per-kind CPU reference streams
    cli         - command line stream dumper

Not suitable for cryptographic use.
"""

__version__ = "1.0.0"

from xoshiro128.errors import (
    RangeValidationError,
    ResetError,
    StateValidationError,
    UnknownKindError,
    Xoshiro128Error,
)
from xoshiro128.engine import Explicit, Kind, Seeded, State, Unspecified, Xoshiro128
from xoshiro128.splitmix32 import seed_state
from xoshiro128.murmur3 import hash_name
from xoshiro128.options import xoshiro128
from xoshiro128.facade import Iter, Random, RandomState

__all__ = [
    'Xoshiro128', 'Kind', 'State', 'Seeded', 'Explicit', 'Unspecified',
    'xoshiro128', 'seed_state', 'hash_name',
    'Random', 'Iter', 'RandomState',
    'Xoshiro128Error', 'StateValidationError', 'RangeValidationError',
    'ResetError', 'UnknownKindError',
]
