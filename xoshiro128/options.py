"""
Construction surface: turn a seed, a name, a state, or an options mapping
into a Xoshiro128 generator.

    xoshiro128()                                  # seed 0
    xoshiro128(1234)                              # seed
    xoshiro128("hello")                           # name, seed = hash_name("hello")
    xoshiro128([1, 2, 3, 4])                      # explicit state
    xoshiro128({"state": [1, 2, 3, 4], "seed": 1234, "name": "hello"})
    xoshiro128({"random": True})                  # fresh random seed
    xoshiro128(1234, Kind.PLUS)                   # kind overrides options["kind"]

A state with all words zero falls back to the seed-0 expansion.
"""

import logging
import numbers
from typing import Any, Mapping, Optional, Union

import numpy as np
from pydantic import BaseModel

from xoshiro128 import config
from xoshiro128.engine import Explicit, Kind, Seeded, Xoshiro128, sanitize_state
from xoshiro128.murmur3 import hash_name
from xoshiro128.splitmix32 import seed_state
from xoshiro128.uint32 import validate32

logger = logging.getLogger(__name__)

Options = Union[None, int, str, list, tuple, np.ndarray, Mapping[str, Any], BaseModel]


def random_seed() -> int:
    """Draw a fresh 32-bit seed from numpy's default bit generator."""
    return int(np.random.default_rng().integers(0, 1 << 32))


def xoshiro128(options: Options = None, kind: Optional[Union[Kind, str]] = None) -> Xoshiro128:
    """
    Create a xoshiro128 generator.

    Args:
        options: Seed, name, state, or a mapping / pydantic model with any of
            kind, state (+ reference seed/name), random, seed, name.
        kind: Algorithm. Overrides the kind carried in options.
            Defaults to xoshiro128starstar.

    Raises:
        StateValidationError: seed or state out of range
        UnknownKindError: kind is not a known algorithm
    """
    state = None
    seed = None
    name = None

    if isinstance(options, BaseModel):
        options = options.model_dump()

    if options is None:
        seed = config.DEFAULT_SEED
    elif isinstance(options, str):
        name = options
    elif isinstance(options, numbers.Number):
        seed = options
    elif isinstance(options, Mapping):
        if options.get("state") is not None:
            state = options["state"]
            seed = options.get("seed")
            name = options.get("name")
        elif options.get("random"):
            seed = random_seed()
        elif options.get("seed") is not None:
            seed = options["seed"]
        elif options.get("name") is not None:
            name = options["name"]

        if kind is None:
            kind = options.get("kind")
    elif hasattr(options, "__len__"):
        state = options
    else:
        raise TypeError(f"unsupported xoshiro128 options: {options!r}")

    kind = Kind.parse(kind if kind is not None else config.DEFAULT_KIND)

    if name is not None and not isinstance(name, str):
        raise TypeError(f"name must be a string: {name!r}")

    if state is None:
        if seed is None:
            seed = config.DEFAULT_SEED if name is None else hash_name(name)
        else:
            seed = validate32(seed, "seed")
        state = seed_state(seed)
    else:
        state = sanitize_state(state)
        if seed is not None:
            seed = validate32(seed, "seed")

    origin = Seeded(seed) if seed is not None else Explicit(tuple(state))

    logger.debug("Created %s (seed=%s, name=%s)", kind.value, seed, name)
    return Xoshiro128(state, kind, origin, name)
