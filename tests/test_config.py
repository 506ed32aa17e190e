"""Tests for the generator configuration system."""

import json
import re
from dataclasses import FrozenInstanceError, replace

import pytest

from tgpa.config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    GPAConfig,
    HolmeConfig,
    TGPAConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    generation_config_hash,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG has the documented values."""

    def test_default_config(self):
        assert DEFAULT_CONFIG.model == "tgpa"
        assert DEFAULT_CONFIG.n == 1000
        assert DEFAULT_CONFIG.k0 == 0
        assert DEFAULT_CONFIG.tgpa.p == 0.5
        assert DEFAULT_CONFIG.tgpa.r == 0.3
        assert DEFAULT_CONFIG.gpa.self_loops is False
        assert DEFAULT_CONFIG.gpa.max_resample_attempts is None
        assert DEFAULT_CONFIG.holme.m == 2
        assert DEFAULT_CONFIG.seed == 42

    def test_model_params_selects_block(self):
        assert DEFAULT_CONFIG.model_params() is DEFAULT_CONFIG.tgpa
        cfg = replace(DEFAULT_CONFIG, model="holme")
        assert isinstance(cfg.model_params(), HolmeConfig)


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_model_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.tgpa.p = 0.1  # type: ignore[misc]


class TestConfigValidation:
    """__post_init__ rejects configs that cannot select a generator."""

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="model"):
            GeneratorConfig(model="barabasi")

    def test_negative_seed(self):
        with pytest.raises(ValueError, match="seed"):
            GeneratorConfig(seed=-1)


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_round_trip_values(self):
        cfg = GeneratorConfig(
            model="gpa",
            n=77,
            k0=3,
            gpa=GPAConfig(p=0.2, r=0.7, self_loops=True, max_resample_attempts=50),
            tags=("sweep", "gpa"),
        )
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert restored.tags == ("sweep", "gpa")

    def test_integer_probabilities_accepted(self):
        d = config_to_dict(DEFAULT_CONFIG)
        d["tgpa"]["p"] = 1
        d["tgpa"]["r"] = 0
        cfg = config_from_dict(d)
        assert cfg.tgpa == TGPAConfig(p=1.0, r=0.0)
        assert isinstance(cfg.tgpa.p, float)

    def test_strict_rejects_extra_keys(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["unknown_field"] = "sneaky"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))

    def test_unknown_model_in_json(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["model"] = "er"
        with pytest.raises(ValueError):
            config_from_json(json.dumps(data))


class TestConfigHashing:
    """Hashing behavior for graph caching and full identity."""

    def test_generation_hash_ignores_seed_and_metadata(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99, description="x", tags=("a",))
        assert generation_config_hash(DEFAULT_CONFIG) == generation_config_hash(cfg2)

    def test_generation_hash_ignores_unused_models(self):
        cfg2 = replace(DEFAULT_CONFIG, gpa=GPAConfig(p=0.9, r=0.1))
        assert generation_config_hash(DEFAULT_CONFIG) == generation_config_hash(cfg2)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_generation_hash_tracks_selected_model(self):
        cfg2 = replace(DEFAULT_CONFIG, tgpa=TGPAConfig(p=0.4, r=0.3))
        assert generation_config_hash(DEFAULT_CONFIG) != generation_config_hash(cfg2)
        cfg3 = replace(DEFAULT_CONFIG, model="gpa")
        assert generation_config_hash(DEFAULT_CONFIG) != generation_config_hash(cfg3)

    def test_full_hash_includes_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_full_hash_is_config_hash(self):
        assert full_config_hash(DEFAULT_CONFIG) == config_hash(DEFAULT_CONFIG)
        cfg2 = replace(DEFAULT_CONFIG, tgpa=TGPAConfig(p=0.1, r=0.3))
        assert config_hash(DEFAULT_CONFIG) != config_hash(cfg2)

    def test_config_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert re.match(r"^[0-9a-f]{16}$", h)
