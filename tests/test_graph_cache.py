"""Tests for graph caching by config hash."""

import json
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

import numpy as np

from tgpa.config.defaults import DEFAULT_CONFIG
from tgpa.config.generator import GPAConfig
from tgpa.config.hashing import generation_config_hash
from tgpa.graph.cache import (
    generate_or_load_graph,
    graph_cache_key,
    load_graph,
    save_graph,
)
from tgpa.graph.generate import generate_graph

SMALL_CONFIG = replace(DEFAULT_CONFIG, n=120, k0=2)


class TestCacheKey:
    """Tests for cache key computation."""

    def test_cache_key_includes_seed(self) -> None:
        assert graph_cache_key(SMALL_CONFIG).endswith(f"_s{SMALL_CONFIG.seed}")

    def test_cache_key_includes_generation_hash(self) -> None:
        assert generation_config_hash(SMALL_CONFIG) in graph_cache_key(SMALL_CONFIG)

    def test_cache_key_differs_for_different_seed(self) -> None:
        cfg2 = replace(SMALL_CONFIG, seed=99)
        assert graph_cache_key(SMALL_CONFIG) != graph_cache_key(cfg2)

    def test_cache_key_ignores_non_generation_params(self) -> None:
        cfg2 = replace(SMALL_CONFIG, description="test run", tags=("foo",))
        assert graph_cache_key(SMALL_CONFIG) == graph_cache_key(cfg2)
        cfg3 = replace(SMALL_CONFIG, gpa=GPAConfig(p=0.9, r=0.0))
        assert graph_cache_key(SMALL_CONFIG) == graph_cache_key(cfg3)


class TestSaveLoad:
    """Tests for graph save/load round-trip."""

    def test_save_and_load_roundtrip(self, tmp_path: Path) -> None:
        graph = generate_graph(SMALL_CONFIG)
        save_graph(graph, SMALL_CONFIG, tmp_path)
        loaded = load_graph(SMALL_CONFIG, tmp_path)

        assert loaded is not None
        assert np.array_equal(loaded.edges, graph.edges)
        assert loaded.edges.dtype == np.int64
        assert loaded.n == graph.n
        assert loaded.model == graph.model
        assert loaded.events == graph.events

    def test_load_returns_none_for_missing_cache(self, tmp_path: Path) -> None:
        assert load_graph(SMALL_CONFIG, tmp_path) is None

    def test_cache_metadata_contains_expected_fields(self, tmp_path: Path) -> None:
        graph = generate_graph(SMALL_CONFIG)
        path = save_graph(graph, SMALL_CONFIG, tmp_path)
        metadata = json.loads((path / "metadata.json").read_text())
        for key in ("model", "n", "num_entries", "events", "generation",
                    "config_hash", "seed", "timestamp"):
            assert key in metadata
        assert metadata["generation"]["params"] == {"p": 0.5, "r": 0.3}
        assert metadata["num_entries"] == graph.num_entries


class TestGenerateOrLoad:
    """Cache miss generates and saves; cache hit skips generation."""

    def test_miss_then_hit(self, tmp_path: Path) -> None:
        first = generate_or_load_graph(SMALL_CONFIG, tmp_path)
        assert (tmp_path / graph_cache_key(SMALL_CONFIG) / "edges.npz").exists()

        with patch("tgpa.graph.cache.generate_graph") as mock_generate:
            second = generate_or_load_graph(SMALL_CONFIG, tmp_path)
        mock_generate.assert_not_called()
        assert np.array_equal(first.edges, second.edges)

    def test_cached_graph_matches_fresh_generation(self, tmp_path: Path) -> None:
        cached = generate_or_load_graph(SMALL_CONFIG, tmp_path)
        fresh = generate_graph(SMALL_CONFIG)
        assert np.array_equal(cached.edges, fresh.edges)
