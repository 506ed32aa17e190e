#!/usr/bin/env python3
"""Entry point for generating preferential-attachment graphs.

Chains config loading, generation (or cache lookup) and output writing
into a single command.

Usage:
    python generate_graph.py --config config.json --output graph.npz
    python generate_graph.py --config config.json --output graph.edges --no-cache
    python generate_graph.py --config config.json --dry-run
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import numpy as np

from tgpa.config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    config_from_json,
    full_config_hash,
    generation_config_hash,
)
from tgpa.graph.cache import DEFAULT_CACHE_DIR

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def write_edges(edges: np.ndarray, output: Path) -> None:
    """Write edge entries as .npz, or as a whitespace-separated list otherwise."""
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix == ".npz":
        np.savez_compressed(output, edges=edges)
    else:
        np.savetxt(output, edges, fmt="%d")


def run_generation(
    config: GeneratorConfig,
    output: Path | None,
    cache_dir: Path | None,
) -> Path | None:
    """Generate (or load) the configured graph and write it out.

    Args:
        config: Generator configuration.
        output: Where to write the edge entries. Nothing is written when None.
        cache_dir: Cache root. Caching is skipped when None.

    Returns:
        The output path, or None when no output was requested.
    """
    # Lazy imports to keep --dry-run fast
    from tgpa.graph import generate_graph, generate_or_load_graph, to_adjacency

    with stage_timer("Graph Generation"):
        if cache_dir is None:
            graph = generate_graph(config)
        else:
            graph = generate_or_load_graph(config, cache_dir)
        simple = to_adjacency(graph, simple=True)
        log.info(
            "Graph: model=%s, n=%d, entries=%d, simple edges=%d",
            graph.model, graph.n, graph.num_entries, simple.nnz // 2,
        )

    if output is not None:
        with stage_timer("Write Output"):
            write_edges(graph.edges, output)
            log.info("Edges written to %s", output)

    print(f"\n{'=' * 60}")
    print(f"  Model:        {graph.model}")
    print(f"  Nodes:        {graph.n}")
    print(f"  Entries:      {graph.num_entries}")
    print(f"  Simple edges: {simple.nnz // 2}")
    print(f"  Events:       {graph.events.as_dict()}")
    if output is not None:
        print(f"  Output:       {output}")
    print(f"{'=' * 60}")
    return output


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate a GPA, TGPA or Holme random graph"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to generator config JSON file (defaults built in)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output path: .npz for a compressed array, else a text edge list",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=str(DEFAULT_CACHE_DIR),
        help="Graph cache directory",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always regenerate and do not write to the cache",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the generation plan without generating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = DEFAULT_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())

    print(f"Config hash:     {full_config_hash(config)}")
    print(f"Generation hash: {generation_config_hash(config)}")
    print(f"Model:           {config.model} {config.model_params()}")
    print(f"Nodes:           n={config.n}, k0={config.k0}")
    print(f"Seed:            {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    output = Path(args.output) if args.output else None
    cache_dir = None if args.no_cache else Path(args.cache_dir)
    try:
        run_generation(config, output, cache_dir)
    except Exception:
        log.exception("Generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
