"""
Random Facade
============================================================================

Integers, floats, booleans, strings, picks, shuffles and samples on top of
one Xoshiro128 generator.

Integer ranges use rejection sampling so every value in the range is equally
likely: draws at or above end = 2^32 - (2^32 mod max) are discarded before
reducing mod max. Degenerate ranges (min == max) and 0/1-item inputs return
immediately without consuming any output, so replays stay aligned.

Usage:
    from xoshiro128.facade import Random

    random = Random(1234)
    random.int(1, 100)
    random.sample(["a", "b", "c", "d", "e"], 3)

    record = random.save()          # RandomState (pydantic)
    random.restore(record)
    for n in random.iter(10).int(1, 6):
        ...
============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, MutableSequence, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_validator

from xoshiro128.engine import Kind, Xoshiro128
from xoshiro128.errors import RangeValidationError
from xoshiro128.options import Options, xoshiro128
from xoshiro128.uint32 import is_integer, validate32

logger = logging.getLogger(__name__)

T = TypeVar("T")

TWO_POW_32 = 0x100000000
TWO_POW_31 = 0x80000000


# ============================================================================
# SAVE RECORD
# ============================================================================

class RandomState(BaseModel):
    """
    Saved state of a Random instance: the engine state plus provenance.

    Restoring rebuilds a generator from this record, so reset() afterwards
    goes back to the seed (when present) or to this state.
    """
    model_config = ConfigDict(frozen=True)

    kind: Kind
    state: Tuple[int, int, int, int]
    seed: Optional[int] = None
    name: Optional[str] = None

    @field_validator("state", mode="before")
    @classmethod
    def validate_words(cls, v):
        if isinstance(v, (str, bytes)) or not hasattr(v, "__len__"):
            return v
        return tuple(validate32(word, f"state[{i}]") for i, word in enumerate(v))

    @field_validator("seed", mode="before")
    @classmethod
    def validate_seed(cls, v):
        if v is None:
            return v
        return validate32(v, "seed")


# ============================================================================
# UNBIASED RANGE LAYER
# ============================================================================

def uniform(rng: Xoshiro128, max: int) -> int:
    """
    Unbiased integer in [0, max) for 0 < max <= 2^32. Not validated.
    """
    end = TWO_POW_32 - (TWO_POW_32 % max)

    n = rng.next()
    while n >= end:
        n = rng.next()

    return n % max


def boolean(rng: Xoshiro128) -> bool:
    return rng.next() < TWO_POW_31


def validate_int(min: Any, max: Any) -> None:
    """
    Raises:
        RangeValidationError: non-integer bound, min > max, or max - min >= 2^32
    """
    if not is_integer(min):
        raise RangeValidationError(f"min must be an integer: {min!r}")

    if not is_integer(max):
        raise RangeValidationError(f"max must be an integer: {max!r}")

    # numpy scalars wrap on subtraction
    min, max = int(min), int(max)

    if min > max:
        raise RangeValidationError(f"min must be less than or equal to max: {min} > {max}")

    if max - min >= TWO_POW_32:
        raise RangeValidationError(f"max - min must be less than 2^32: {max - min}")


def randint(rng: Xoshiro128, min: int, max: int) -> int:
    """Integer in [min, max]. Not validated."""
    return int(min) + uniform(rng, int(max) - int(min) + 1)


def uniform_float(rng: Xoshiro128, min: float, max: float) -> float:
    """Float in [min, max) with 32 bits of precision."""
    return min + rng.random() * (max - min)


def pick(rng: Xoshiro128, items: Sequence[T]) -> T:
    return items[uniform(rng, len(items))]


# ============================================================================
# FACADE
# ============================================================================

class Random:
    """
    A utility wrapper around one Xoshiro128 generator.

    All methods, including the iterators from iter(), draw from the same
    generator, so interleaving them is deterministic.
    """

    def __init__(self, options: Union[Options, Xoshiro128] = None, kind: Optional[Union[Kind, str]] = None):
        """
        Args:
            options: Construction options for xoshiro128(), or an existing
                Xoshiro128 which is used as-is (not copied).
            kind: Algorithm override, ignored when options is a generator.
        """
        if isinstance(options, Xoshiro128):
            self._rng = options
        else:
            self._rng = xoshiro128(options, kind)

    @property
    def generator(self) -> Xoshiro128:
        return self._rng

    def __repr__(self) -> str:
        return f"Random({self._rng!r})"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def reset(self, options: Options = None) -> None:
        """Reset the generator, or rebuild it from options when given."""
        if options is None:
            self._rng.reset()
            return

        self._rng = xoshiro128(options)

    def save(self) -> RandomState:
        rng = self._rng
        return RandomState(
            kind=rng.kind,
            state=tuple(rng.save()),
            seed=rng.seed,
            name=rng.name,
        )

    def restore(self, state: Union[RandomState, dict]) -> None:
        """
        Rebuild the generator from a save() record or its model_dump().

        Raises:
            pydantic.ValidationError: malformed record
        """
        record = state if isinstance(state, RandomState) else RandomState.model_validate(state)
        self._rng = xoshiro128(record)
        logger.debug("Random restored to %s", record)

    def clone(self) -> Random:
        return Random(self._rng.clone())

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def uniform(self, max: int) -> int:
        """
        Unbiased integer in [0, max).

        Raises:
            RangeValidationError: max is not an integer in (0, 2^32]
        """
        if not is_integer(max) or max <= 0 or max > TWO_POW_32:
            raise RangeValidationError(f"max must be an integer in (0, 2^32]: {max!r}")

        return uniform(self._rng, int(max))

    def int(self, min: int, max: int) -> int:
        """
        Integer in [min, max], both inclusive. The range must hold fewer
        than 2^32 values.
        """
        if min == max:
            return min

        validate_int(min, max)

        return randint(self._rng, min, max)

    def random(self) -> float:
        """Float in [0, 1) with 32 bits of randomness."""
        return self._rng.random()

    def float(self, min: float, max: float) -> float:
        """
        Float in [min, max). Only the upper 32 bits of the fraction are
        random.
        """
        if min == max:
            return min

        return uniform_float(self._rng, min, max)

    def boolean(self) -> bool:
        return boolean(self._rng)

    # ------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------

    def string(self, length: int, alphabet: str) -> str:
        """
        Random string of length characters from alphabet, one draw per
        character. Characters are Python code points.
        """
        if len(alphabet) == 0:
            return ""

        rng = self._rng
        n = len(alphabet)

        return "".join(alphabet[uniform(rng, n)] for _ in range(length))

    def array(self, items: Sequence[T], length: int) -> List[Optional[T]]:
        """length independent picks from items (with replacement)."""
        if len(items) == 0 or len(items) == 1:
            return [items[0] if len(items) else None] * length

        rng = self._rng
        n = len(items)

        return [items[uniform(rng, n)] for _ in range(length)]

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Random element of items; None for an empty sequence."""
        if len(items) == 0 or len(items) == 1:
            return items[0] if len(items) else None

        return pick(self._rng, items)

    def shuffle_in_place(self, items: MutableSequence[T], start: int = 0, end: Optional[int] = None) -> None:
        """
        Fisher-Yates shuffle of items[start:end] from the high end down.

        Each position i draws j from [0, i], so elements before start can be
        swapped into the window:

            0           start        end          len(items)
            v           v            v            v
             [ mutated ] [ shuffled ] [ untouched ]
        """
        if end is None:
            end = len(items)

        rng = self._rng

        for i in range(end - 1, start, -1):
            j = uniform(rng, i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle items in place and return the same object."""
        if len(items) == 0 or len(items) == 1:
            return items

        self.shuffle_in_place(items)

        return items

    def shuffled(self, items: Sequence[T]) -> List[T]:
        return self.shuffle(list(items))

    def sample(self, items: Sequence[T], k: int) -> List[Optional[T]]:
        """
        k elements of items without replacement, in random order. When k is
        at least len(items), the result is a shuffled copy of items.
        """
        if k == 0:
            return []

        if k == 1:
            return [self.pick(items)]

        if len(items) == 0 or len(items) == 1:
            return [items[0] if len(items) else None] * k

        items = list(items)

        if k >= len(items):
            return self.shuffle(items)

        start = len(items) - k
        self.shuffle_in_place(items, start)
        return items[start:]

    def iter(self, n: int) -> Iter:
        """Lazy iterators producing n values each."""
        return Iter(self._rng, n)


class Iter:
    """
    n-value generators over a shared Xoshiro128. Each method returns a fresh
    one-shot generator; argument validation happens on the first next().
    """

    def __init__(self, rng: Xoshiro128, n: int):
        self._rng = rng
        self._n = n

    def int(self, min: int, max: int) -> Iterator[int]:
        if min == max:
            for _ in range(self._n):
                yield min
            return

        validate_int(min, max)

        rng = self._rng
        for _ in range(self._n):
            yield randint(rng, min, max)

    def random(self) -> Iterator[float]:
        rng = self._rng
        for _ in range(self._n):
            yield rng.random()

    def float(self, min: float, max: float) -> Iterator[float]:
        if min == max:
            for _ in range(self._n):
                yield min
            return

        rng = self._rng
        for _ in range(self._n):
            yield uniform_float(rng, min, max)

    def boolean(self) -> Iterator[bool]:
        rng = self._rng
        for _ in range(self._n):
            yield boolean(rng)

    def pick(self, items: Sequence[T]) -> Iterator[Optional[T]]:
        if len(items) == 0 or len(items) == 1:
            only = items[0] if len(items) else None
            for _ in range(self._n):
                yield only
            return

        rng = self._rng
        for _ in range(self._n):
            yield pick(rng, items)
