#!/usr/bin/env python3
"""
Tests for the xoshiro128() construction surface.
"""

import numpy as np
import pytest

from vectors import INVALID_WORDS
from xoshiro128 import xoshiro128
from xoshiro128.engine import Explicit, Kind, Seeded
from xoshiro128.errors import StateValidationError, UnknownKindError
from xoshiro128.facade import RandomState
from xoshiro128.splitmix32 import seed_state


class TestSeed:
    """Numeric seeds and the default seed."""

    def test_default_seed(self):
        assert xoshiro128().seed == 0
        assert xoshiro128({}).seed == 0

    def test_seed(self):
        assert xoshiro128(1234).seed == 1234
        assert xoshiro128({"seed": 1234}).seed == 1234

    def test_numpy_seed(self):
        assert xoshiro128(np.uint32(1234)).seed == 1234

    def test_seed_expands_state(self):
        assert xoshiro128(1234).save() == seed_state(1234)

    @pytest.mark.parametrize("seed", [-1, 0x100000000, 0.5, float("nan"), float("inf"), float("-inf"), True])
    def test_invalid_seed(self, seed):
        with pytest.raises(StateValidationError):
            xoshiro128(seed)
        with pytest.raises(StateValidationError):
            xoshiro128({"seed": seed})

    def test_random_seed(self):
        assert xoshiro128({"random": True}).seed is not None
        assert xoshiro128({"random": False}).seed == 0

    def test_unsupported_options(self):
        with pytest.raises(TypeError):
            xoshiro128(object())


class TestName:
    """Names are hashed into seeds and kept for reference."""

    @pytest.mark.parametrize("name,seed", [
        ("hello", 3619887497),
        ("世界", 1428577284),
        ("🌍", 3908689134),
    ])
    def test_name_hash(self, name, seed):
        assert xoshiro128(name).seed == seed
        assert xoshiro128(name).name == name
        assert xoshiro128({"name": name}).seed == seed
        assert xoshiro128({"name": name}).name == name

    def test_name_must_be_string(self):
        with pytest.raises(TypeError):
            xoshiro128({"name": 5})


class TestState:
    """Explicit states with optional reference metadata."""

    def test_bare_state(self):
        rng = xoshiro128([1, 2, 3, 4])
        assert rng.save() == [1, 2, 3, 4]
        assert rng.seed is None
        assert rng.name is None
        assert rng.origin == Explicit((1, 2, 3, 4))

    def test_state_option(self):
        rng = xoshiro128({"state": [1, 2, 3, 4]})
        assert rng.save() == [1, 2, 3, 4]
        assert rng.seed is None
        assert rng.name is None

    def test_tuple_and_array_state(self):
        assert xoshiro128((1, 2, 3, 4)).save() == [1, 2, 3, 4]
        assert xoshiro128(np.array([1, 2, 3, 4], dtype=np.uint32)).save() == [1, 2, 3, 4]

    def test_state_with_metadata(self):
        rng = xoshiro128({"state": [1, 2, 3, 4], "seed": 1234})
        assert rng.seed == 1234
        assert rng.name is None

        rng = xoshiro128({"state": [1, 2, 3, 4], "name": "hello"})
        assert rng.seed is None
        assert rng.name == "hello"

        rng = xoshiro128({"state": [1, 2, 3, 4], "seed": 1234, "name": "hello"})
        assert rng.seed == 1234
        assert rng.name == "hello"
        assert rng.save() == [1, 2, 3, 4]

    def test_state_with_seed_resets_to_seed(self):
        """A reference seed wins over the explicit state on reset()."""
        rng = xoshiro128({"state": [1, 2, 3, 4], "seed": 1234})
        assert rng.origin == Seeded(1234)
        rng.reset()
        assert rng.save() == seed_state(1234)

    def test_state_resets_to_state(self):
        rng = xoshiro128([1, 2, 3, 4])
        rng.next()
        rng.reset()
        assert rng.save() == [1, 2, 3, 4]

    def test_zero_state_is_replaced(self):
        assert xoshiro128([0, 0, 0, 0]).save() == seed_state(0)
        assert xoshiro128({"state": [0, 0, 0, 0]}).save() == seed_state(0)

    @pytest.mark.parametrize("word", INVALID_WORDS)
    def test_invalid_state(self, word):
        with pytest.raises(StateValidationError):
            xoshiro128([word, 0, 0, 0])
        with pytest.raises(StateValidationError):
            xoshiro128({"state": [word, 0, 0, 0]})

    def test_empty_state(self):
        with pytest.raises(StateValidationError):
            xoshiro128([])
        with pytest.raises(StateValidationError):
            xoshiro128({"state": []})

    def test_record_model(self):
        record = RandomState(kind=Kind.PLUS, state=(1, 2, 3, 4), seed=7, name="x")
        rng = xoshiro128(record)
        assert rng.kind is Kind.PLUS
        assert rng.save() == [1, 2, 3, 4]
        assert rng.seed == 7
        assert rng.name == "x"


class TestKindSelection:
    """kind argument, options kind, and the default."""

    @pytest.mark.parametrize("options", [
        None, 1234, "hello", [1, 2, 3, 4], {}, {"seed": 1234}, {"name": "hello"},
        {"random": True}, {"state": [1, 2, 3, 4]},
    ])
    def test_default_and_override(self, options):
        assert xoshiro128(options).kind is Kind.STAR_STAR
        assert xoshiro128(options, Kind.PLUS).kind is Kind.PLUS

    @pytest.mark.parametrize("options", [
        {"seed": 1234}, {"name": "hello"}, {"random": True}, {"state": [1, 2, 3, 4]},
    ])
    def test_options_kind(self, options):
        assert xoshiro128({**options, "kind": Kind.PLUS}).kind is Kind.PLUS
        assert xoshiro128({**options, "kind": Kind.PLUS_PLUS}, Kind.PLUS).kind is Kind.PLUS

    def test_kind_only(self):
        assert xoshiro128({"kind": Kind.PLUS}).kind is Kind.PLUS
        assert xoshiro128({"kind": Kind.PLUS_PLUS}).kind is Kind.PLUS_PLUS
        assert xoshiro128({"kind": "xoshiro128starstar"}).kind is Kind.STAR_STAR
        assert xoshiro128({"kind": Kind.PLUS}, Kind.STAR_STAR).kind is Kind.STAR_STAR

    def test_unknown_kind(self):
        with pytest.raises(UnknownKindError):
            xoshiro128({"kind": "invalid"})
        with pytest.raises(UnknownKindError):
            xoshiro128(1234, "invalid")


class TestGolden:
    """Seed 1234 first outputs through the factory."""

    def test_next(self):
        rng = xoshiro128(1234)
        assert [rng.next(), rng.next(), rng.next()] == [1927626933, 2777857285, 1362201715]

    def test_random(self):
        rng = xoshiro128(1234)
        assert rng.random() == 0.4488106195349246
        assert rng.random() == 0.6467702996451408
        assert rng.random() == 0.3171623020898551

    def test_kinds(self):
        assert xoshiro128(1234, Kind.STAR_STAR).random() == 0.4488106195349246
        assert xoshiro128(1234, Kind.PLUS_PLUS).random() == 0.05153296561911702
        assert xoshiro128(1234, Kind.PLUS).random() == 0.41102893161587417

    def test_factory_generators_reset(self):
        for options in [1234, "hello", [1, 2, 3, 4]]:
            rng = xoshiro128(options)
            first = rng.next()
            rng.next()
            rng.reset()
            assert rng.next() == first
