"""
Shared fixtures for the xoshiro128 test suite.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xoshiro128.engine import Xoshiro128
from xoshiro128.facade import Random


@pytest.fixture
def random():
    """Random seeded with 0."""
    return Random()


@pytest.fixture
def starstar():
    """Default-kind generator seeded with 1234."""
    return Xoshiro128.from_seed(1234)
