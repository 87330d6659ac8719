"""
Generator Registry
============================================================================

One entry per xoshiro128 kind, with a CPU reference stream function:

    xoshiro128starstar_cpu(seed, n, skip=0) -> List[int]

returns the n outputs that follow `skip` discarded outputs of the generator
seeded with `seed`.

Usage:
    from xoshiro128.registry import get_cpu_reference, list_available_generators

    ref = get_cpu_reference('xoshiro128starstar')
    ref(1234, 3)    # [1927626933, 2777857285, 1362201715]
============================================================================
"""

from typing import Any, Callable, Dict, List

from xoshiro128.engine import Kind, Xoshiro128
from xoshiro128.errors import UnknownKindError


# ============================================================================
# CPU REFERENCE IMPLEMENTATIONS
# ============================================================================

def _reference_stream(kind: Kind, seed: int, n: int, skip: int) -> List[int]:
    rng = Xoshiro128.from_seed(seed, kind)

    for _ in range(skip):
        rng.next()

    return [rng.next() for _ in range(n)]


def xoshiro128plus_cpu(seed: int, n: int, skip: int = 0) -> List[int]:
    """xoshiro128+ CPU reference"""
    return _reference_stream(Kind.PLUS, seed, n, skip)


def xoshiro128plusplus_cpu(seed: int, n: int, skip: int = 0) -> List[int]:
    """xoshiro128++ CPU reference"""
    return _reference_stream(Kind.PLUS_PLUS, seed, n, skip)


def xoshiro128starstar_cpu(seed: int, n: int, skip: int = 0) -> List[int]:
    """xoshiro128** CPU reference"""
    return _reference_stream(Kind.STAR_STAR, seed, n, skip)


# ============================================================================
# GENERATOR REGISTRY
# ============================================================================

GENERATOR_REGISTRY = {
    Kind.PLUS.value: {
        'kind': Kind.PLUS,
        'cpu_reference': xoshiro128plus_cpu,
        'description': 'xoshiro128+ (s0 + s3), fastest, weak low bits',
        'seed_type': 'uint32',
        'state_size': 16,
        'output_bits': 32,
    },
    Kind.PLUS_PLUS.value: {
        'kind': Kind.PLUS_PLUS,
        'cpu_reference': xoshiro128plusplus_cpu,
        'description': 'xoshiro128++ (rotl(s0 + s3, 7) + s0)',
        'seed_type': 'uint32',
        'state_size': 16,
        'output_bits': 32,
    },
    Kind.STAR_STAR.value: {
        'kind': Kind.STAR_STAR,
        'cpu_reference': xoshiro128starstar_cpu,
        'description': 'xoshiro128** (rotl(s1 * 5, 7) * 9), default',
        'seed_type': 'uint32',
        'state_size': 16,
        'output_bits': 32,
    },
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_generator_info(name: str) -> Dict[str, Any]:
    """Get registry entry for a generator kind"""
    key = name.value if isinstance(name, Kind) else name
    if key not in GENERATOR_REGISTRY:
        raise UnknownKindError(f"Unknown generator: {name}. Available: {list_available_generators()}")
    return GENERATOR_REGISTRY[key]


def list_available_generators() -> List[str]:
    """List all available generator kinds"""
    return list(GENERATOR_REGISTRY.keys())


def get_cpu_reference(name: str) -> Callable[..., List[int]]:
    """Get CPU reference stream function for a generator kind"""
    return get_generator_info(name)['cpu_reference']
