"""
SplitMix32 seed expander.

A Weyl sequence (increment 0x9e3779b9) passed through the murmur3 fmix32
finalizer. Four consecutive outputs from a 32-bit seed form the initial
xoshiro128 state.
"""

from typing import List

from xoshiro128.uint32 import MASK32, mul32

GOLDEN_GAMMA = 0x9E3779B9


def fmix32(h: int) -> int:
    """murmur3 32-bit avalanche finalizer."""
    h ^= h >> 16
    h = mul32(h, 0x85EBCA6B)
    h ^= h >> 13
    h = mul32(h, 0xC2B2AE35)
    h ^= h >> 16
    return h


class SplitMix32:
    """Stateful SplitMix32 scrambler."""

    def __init__(self, seed: int = 0):
        self.state = seed & MASK32

    def next(self) -> int:
        self.state = (self.state + GOLDEN_GAMMA) & MASK32
        return fmix32(self.state)


def seed_state(seed: int) -> List[int]:
    """Expand a 32-bit seed into a 4-word xoshiro128 state."""
    sm = SplitMix32(seed)
    return [sm.next(), sm.next(), sm.next(), sm.next()]
