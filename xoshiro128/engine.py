"""
xoshiro128 Generator Engine
============================================================================

One shared linear state transition, three output scramblers, and the GF(2)
jump-ahead shared by all of them.

    Kind         output (from the state BEFORE the transition)
    ----------   -----------------------------------------------
    PLUS         s0 + s3
    PLUS_PLUS    rotl(s0 + s3, 7) + s0
    STAR_STAR    rotl(s1 * 5, 7) * 9           (default)

All arithmetic is unsigned 32-bit with wraparound. The state is four 32-bit
words and must never be all zero: that is a fixed point of the transition.

Usage:
    from xoshiro128.engine import Xoshiro128, Kind
    from xoshiro128.splitmix32 import seed_state

    rng = Xoshiro128(seed_state(1234), Kind.STAR_STAR)
    rng.next()      # 1927626933
    rng.jump()      # advance 2^64 steps
============================================================================
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from xoshiro128 import config
from xoshiro128.errors import ResetError, StateValidationError, UnknownKindError
from xoshiro128.murmur3 import hash_name
from xoshiro128.splitmix32 import seed_state
from xoshiro128.uint32 import MASK32, mul32, rotl32, validate32

logger = logging.getLogger(__name__)

State = List[int]

# 2^-32, exact in binary64
TWO_POW_NEG_32 = 2.3283064365386963e-10


# ============================================================================
# KINDS
# ============================================================================

class Kind(str, Enum):
    """Output scrambler selector. State transition and jumps are shared."""
    PLUS = "xoshiro128plus"
    PLUS_PLUS = "xoshiro128plusplus"
    STAR_STAR = "xoshiro128starstar"

    @classmethod
    def parse(cls, value: Any) -> "Kind":
        """Resolve a Kind member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise UnknownKindError(f"unknown algorithm: {value!r}. Available: {known}") from None


def _output_plus(s0: int, s1: int, s2: int, s3: int) -> int:
    return (s0 + s3) & MASK32


def _output_plus_plus(s0: int, s1: int, s2: int, s3: int) -> int:
    return (rotl32((s0 + s3) & MASK32, 7) + s0) & MASK32


def _output_star_star(s0: int, s1: int, s2: int, s3: int) -> int:
    return mul32(rotl32(mul32(s1, 5), 7), 9)


OUTPUT_FUNCTIONS: Dict[Kind, Callable[[int, int, int, int], int]] = {
    Kind.PLUS: _output_plus,
    Kind.PLUS_PLUS: _output_plus_plus,
    Kind.STAR_STAR: _output_star_star,
}


# ============================================================================
# STATE VALIDATION
# ============================================================================

def _validate_words(state: Sequence[Any]) -> State:
    try:
        length = len(state)
    except TypeError:
        raise StateValidationError(f"state must be a sequence of 4 integers: {state!r}") from None

    if length != 4:
        raise StateValidationError(f"state must have exactly 4 words, got {length}")

    return [validate32(state[i], f"state[{i}]") for i in range(4)]


def is_zero_state(state: Sequence[int]) -> bool:
    return state[0] == 0 and state[1] == 0 and state[2] == 0 and state[3] == 0


def validate_state(state: Sequence[Any]) -> State:
    """
    Validate a state for restore(): four unsigned 32-bit words, not all zero.

    Returns a detached list copy.
    """
    words = _validate_words(state)
    if is_zero_state(words):
        raise StateValidationError("state must not be all zeroes")
    return words


def sanitize_state(state: Sequence[Any]) -> State:
    """
    Validate a state for construction. An all-zero state is replaced by the
    expansion of seed 0 instead of being rejected.
    """
    words = _validate_words(state)
    if is_zero_state(words):
        logger.warning("All-zero state replaced by the expansion of seed 0")
        return seed_state(0)
    return words


# ============================================================================
# TRANSITION AND JUMP ENGINE
# ============================================================================

# Jump polynomials for 2^64 and 2^96 steps (Blackman & Vigna)
JUMP: Tuple[int, int, int, int] = (0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B)
LONG_JUMP: Tuple[int, int, int, int] = (0xB523952E, 0x0B6F099F, 0xCCF5A0EF, 0x1C580662)


def advance(s: State) -> None:
    """Apply one step of the xoshiro128 linear transition to s in place."""
    t = (s[1] << 9) & MASK32

    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]

    s[2] ^= t

    s[3] = rotl32(s[3], 11)


def jump_with(s: State, table: Sequence[int]) -> None:
    """
    Advance s in place by the polynomial encoded in table.

    For each bit of the table (word 0 first, least significant bit first) the
    accumulator takes the current state when the bit is set, then the state
    steps once. 128 steps in total.
    """
    a0 = a1 = a2 = a3 = 0

    for word in table:
        for b in range(32):
            if word & (1 << b):
                a0 ^= s[0]
                a1 ^= s[1]
                a2 ^= s[2]
                a3 ^= s[3]
            advance(s)

    s[0] = a0 & MASK32
    s[1] = a1 & MASK32
    s[2] = a2 & MASK32
    s[3] = a3 & MASK32


def jump(s: State) -> None:
    """Advance s by 2^64 steps."""
    jump_with(s, JUMP)


def long_jump(s: State) -> None:
    """Advance s by 2^96 steps."""
    jump_with(s, LONG_JUMP)


# ============================================================================
# PROVENANCE
# ============================================================================

@dataclass(frozen=True)
class Seeded:
    """Initial state was (or is reproducible as) the expansion of seed."""
    seed: int


@dataclass(frozen=True)
class Explicit:
    """Initial state was supplied directly."""
    state: Tuple[int, int, int, int]


@dataclass(frozen=True)
class Unspecified:
    """Nothing to reset to."""
    pass


Origin = Union[Seeded, Explicit, Unspecified]


# ============================================================================
# GENERATOR
# ============================================================================

class Xoshiro128:
    """
    A xoshiro128 generator: one mutable 4-word state plus its provenance.

    Not safe for concurrent use from several threads. Clones share nothing.
    """

    def __init__(self, state: Sequence[int], kind: Union[Kind, str] = config.DEFAULT_KIND,
                 origin: Optional[Origin] = None, name: Optional[str] = None):
        """
        Args:
            state: Four unsigned 32-bit words. All zeros become the seed-0 expansion.
            kind: Output scrambler.
            origin: What reset() returns to. Defaults to Unspecified.
            name: Optional name kept for reference only.
        """
        self._kind = Kind.parse(kind)
        self._output = OUTPUT_FUNCTIONS[self._kind]
        self._s = sanitize_state(state)
        self._origin = origin if origin is not None else Unspecified()
        self._name = name

    @classmethod
    def from_seed(cls, seed: int, kind: Union[Kind, str] = config.DEFAULT_KIND) -> "Xoshiro128":
        seed = validate32(seed, "seed")
        return cls(seed_state(seed), kind, Seeded(seed))

    @classmethod
    def from_name(cls, name: str, kind: Union[Kind, str] = config.DEFAULT_KIND) -> "Xoshiro128":
        seed = hash_name(name)
        return cls(seed_state(seed), kind, Seeded(seed), name)

    @classmethod
    def from_state(cls, state: Sequence[int], kind: Union[Kind, str] = config.DEFAULT_KIND) -> "Xoshiro128":
        words = sanitize_state(state)
        return cls(words, kind, Explicit(tuple(words)))

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def seed(self) -> Optional[int]:
        """Seed that produced the initial state, or None."""
        return self._origin.seed if isinstance(self._origin, Seeded) else None

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def origin(self) -> Origin:
        return self._origin

    def __repr__(self) -> str:
        return f"Xoshiro128(kind={self._kind.value!r}, seed={self.seed!r}, name={self._name!r})"

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def next(self) -> int:
        """Return the next unsigned 32-bit output and step the state."""
        s = self._s
        s0, s1, s2, s3 = s

        result = self._output(s0, s1, s2, s3)

        # inlined advance(); keep the two in step
        t = (s1 << 9) & MASK32
        s2 ^= s0
        s3 ^= s1
        s[1] = s1 ^ s2
        s[0] = s0 ^ s3
        s[2] = s2 ^ t
        s[3] = rotl32(s3, 11)

        return result

    def random(self) -> float:
        """
        Float in [0, 1) with 32 bits of randomness in the upper fraction bits.
        """
        return self.next() * TWO_POW_NEG_32

    def generate(self, n: int) -> np.ndarray:
        """Return the next n outputs as a uint32 array."""
        return np.fromiter((self.next() for _ in range(n)), dtype=np.uint32, count=n)

    def jump(self) -> None:
        """Advance 2^64 steps, as if next() were called 2^64 times."""
        jump(self._s)
        logger.debug("%s jumped 2^64 steps", self._kind.value)

    def long_jump(self) -> None:
        """Advance 2^96 steps, as if next() were called 2^96 times."""
        long_jump(self._s)
        logger.debug("%s jumped 2^96 steps", self._kind.value)

    # ------------------------------------------------------------------
    # State management
    # ------------------------------------------------------------------

    def save(self) -> State:
        return list(self._s)

    def restore(self, state: Sequence[int]) -> None:
        """
        Overwrite the state with a previously saved one.

        Raises:
            StateValidationError: malformed or all-zero state; nothing is changed
        """
        self._s = validate_state(state)
        logger.debug("%s restored to %s", self._kind.value, self._s)

    def clone(self) -> "Xoshiro128":
        return Xoshiro128(list(self._s), self._kind, self._origin, self._name)

    def reset(self) -> None:
        """
        Return to the initial state.

        Raises:
            ResetError: the generator remembers neither a seed nor a state
        """
        origin = self._origin
        if isinstance(origin, Seeded):
            self._s = seed_state(origin.seed)
        elif isinstance(origin, Explicit):
            self._s = list(origin.state)
        else:
            raise ResetError("No initial state or seed was provided")
        logger.debug("%s reset via %s", self._kind.value, origin)
