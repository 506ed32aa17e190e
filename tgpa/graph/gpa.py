"""Generalized preferential attachment (GPA) graphs.

Follows the Avin, Lotker, Nahum, Peleg description. Starting from a k0-node
clique, each time step draws one of three events until the graph has n
nodes:

- node event (probability p): a new node attaches to a degree-weighted
  existing node
- edge event (probability r): an edge joins two degree-weighted existing
  nodes
- component event (probability 1 - p - r): two new nodes joined by an edge
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from tgpa.graph.store import EdgeStore, seed_clique
from tgpa.graph.types import EventCounts, GeneratedGraph, RandomSource
from tgpa.graph.validation import (
    StructuralPrecondition,
    has_two_distinct_nodes,
    validate_gpa_params,
    validate_seed_edges,
)

log = logging.getLogger(__name__)


def _grow(
    store: EdgeStore,
    n: int,
    p: float,
    r: float,
    n0: int,
    rng: RandomSource,
    self_loops: bool,
    max_resample_attempts: int | None,
) -> EventCounts:
    """Run the GPA event loop on store until it holds n nodes."""
    counts = EventCounts()
    i = n0
    if i >= n:
        return counts

    if not self_loops and not has_two_distinct_nodes(store.to_list()):
        raise StructuralPrecondition(
            "The starting graph must have at least two distinct nodes"
        )

    while i < n:
        x = rng.random()
        if x < p:  # node event
            v = store.sample_node(rng)
            if v is None:
                v = i + 1
            store.push(i + 1, v)
            i += 1
            counts.node += 1
        elif x < p + r:  # edge event
            v1 = store.sample_node(rng)
            if v1 is None:
                counts.wasted += 1
                continue
            v2 = store.sample_node(rng)
            if not self_loops:
                # i != 1: a single-node graph can only ever draw a self-loop
                attempts = 0
                while v1 == v2 and i != 1:
                    if (
                        max_resample_attempts is not None
                        and attempts >= max_resample_attempts
                    ):
                        raise StructuralPrecondition(
                            f"no distinct endpoint after {attempts} resamples "
                            f"for node {v1}"
                        )
                    v2 = store.sample_node(rng)
                    attempts += 1
            store.push(v1, v2)
            counts.edge += 1
        else:  # component event
            if i + 2 <= n:
                store.push(i + 1, i + 2)
                i += 2
                counts.component += 1
            else:
                counts.wasted += 1

    return counts


def generalized_preferential_attachment_edges(
    n: int,
    p: float,
    r: float,
    edges: Iterable[Sequence[int]],
    n0: int,
    rng: RandomSource | None = None,
    self_loops: bool = False,
    max_resample_attempts: int | None = None,
) -> list[tuple[int, int]]:
    """Grow an existing edge list with GPA events until it has n nodes.

    Args:
        n: Number of nodes in the final graph.
        p: Probability of a node event.
        r: Probability of an edge event. p + r <= 1.
        edges: Existing directed edge entries; not modified.
        n0: Number of nodes the existing edges span.
        rng: Random source. A fresh unseeded Generator when None.
        self_loops: Allow edge events to join a node to itself.
        max_resample_attempts: Bound on the self-loop rejection loop. None
            keeps it unbounded.

    Returns:
        The seed entries followed by the generated ones.

    Raises:
        InvalidParameter: On bad parameters or malformed seed edges.
        StructuralPrecondition: If self-loops are disallowed and the seed
            does not contain two distinct node ids.
    """
    validate_gpa_params(n, p, r, n0)
    store = EdgeStore(validate_seed_edges(edges, n, n0))
    if rng is None:
        rng = np.random.default_rng()
    _grow(store, n, p, r, n0, rng, self_loops, max_resample_attempts)
    return store.to_list()


def generalized_preferential_attachment_graph(
    n: int,
    p: float,
    r: float,
    k0: int,
    rng: RandomSource | None = None,
    self_loops: bool = False,
    max_resample_attempts: int | None = None,
) -> GeneratedGraph:
    """Generate a GPA graph with a k0-node seed clique and n total nodes.

    Example:
        >>> g = gpa_graph(100, 1 / 3, 1 / 2, 2, rng=np.random.default_rng(0))
        >>> g.n
        100

    Raises:
        InvalidParameter: On out-of-range parameters.
        StructuralPrecondition: If self-loops are disallowed and k0 < 2
            while nodes remain to be added.
    """
    validate_gpa_params(n, p, r, k0)
    store = EdgeStore(seed_clique(k0))
    if rng is None:
        rng = np.random.default_rng()
    counts = _grow(store, n, p, r, k0, rng, self_loops, max_resample_attempts)
    log.info("GPA graph generated (n=%d, entries=%d)", n, len(store))
    log.debug("GPA events: %s", counts.as_dict())
    return GeneratedGraph(edges=store.to_array(), n=n, model="gpa", events=counts)


gpa_graph = generalized_preferential_attachment_graph
gpa_edges = generalized_preferential_attachment_edges
