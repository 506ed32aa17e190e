"""Graph caching by config hash with compressed edge-array storage.

Caches generated edge lists to disk so sweeps that revisit the same model
parameters and seed skip regeneration.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from tgpa.config.generator import GeneratorConfig
from tgpa.config.hashing import generation_config_hash, generation_params
from tgpa.graph.generate import generate_graph
from tgpa.graph.types import EventCounts, GeneratedGraph

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/graphs")


def graph_cache_key(config: GeneratorConfig) -> str:
    """Compute cache key for a generator configuration.

    Key = generation_config_hash + seed. Same model params + same seed =
    cache hit. Description, tags and unused model blocks don't affect the key.

    Returns:
        Cache key string like "a1b2c3d4e5f6g7h8_s42".
    """
    return f"{generation_config_hash(config)}_s{config.seed}"


def _cache_path(
    config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> Path:
    """Compute the directory path for a cached graph."""
    return cache_dir / graph_cache_key(config)


def save_graph(
    graph: GeneratedGraph,
    config: GeneratorConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Save a generated graph to the cache.

    Stores:
    - edges.npz: the raw directed edge entries
    - metadata.json: model, node count, parameters, seed, event counts

    Returns:
        Path to the cache directory for this graph.
    """
    cache_path = _cache_path(config, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    np.savez_compressed(cache_path / "edges.npz", edges=graph.edges)

    metadata = {
        "model": graph.model,
        "n": graph.n,
        "num_entries": graph.num_entries,
        "events": graph.events.as_dict(),
        "generation": generation_params(config),
        "config_hash": generation_config_hash(config),
        "seed": config.seed,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Graph cached at %s", cache_path)
    return cache_path


def load_graph(
    config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> GeneratedGraph | None:
    """Load a cached graph if it exists.

    Returns:
        GeneratedGraph on a cache hit, None on a miss.
    """
    cache_path = _cache_path(config, cache_dir)

    for fname in ("edges.npz", "metadata.json"):
        if not (cache_path / fname).exists():
            return None

    with np.load(cache_path / "edges.npz") as archive:
        edges = archive["edges"].astype(np.int64)

    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)

    graph = GeneratedGraph(
        edges=edges,
        n=metadata["n"],
        model=metadata["model"],
        events=EventCounts(**metadata["events"]),
    )
    log.info("Graph loaded from cache: %s", cache_path)
    return graph


def generate_or_load_graph(
    config: GeneratorConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> GeneratedGraph:
    """Generate a graph or load it from cache if available.

    On cache miss: generates from config.seed and saves to cache.
    On cache hit: loads from disk without regeneration.
    """
    key = graph_cache_key(config)

    cached = load_graph(config, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, generating...", key)
    graph = generate_graph(config)
    save_graph(graph, config, cache_dir)
    return graph
