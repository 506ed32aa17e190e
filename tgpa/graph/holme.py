"""Holme-style preferential attachment with triad closure.

Starting from a k0-node clique, every time step adds exactly one node and
performs m attachment steps for it. Each step links the new node to a
degree-weighted node v and then, with probability 1 - p, also to a uniform
neighbor of v. Note the closure fires when the draw exceeds p, so p is the
probability of skipping it.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from tgpa.graph.store import GrowthState, seed_clique
from tgpa.graph.types import EventCounts, GeneratedGraph, RandomSource
from tgpa.graph.validation import validate_holme_params, validate_seed_edges

log = logging.getLogger(__name__)


def _grow(
    state: GrowthState, n: int, m: int, p: float, rng: RandomSource
) -> EventCounts:
    counts = EventCounts()
    while state.i < n:
        new = state.add_nodes(1)
        for _ in range(m):
            v = state.sample_node(rng)
            existing = v is not None
            if not existing:
                v = new
            state.connect(new, v)

            x = rng.random()
            if x > p and existing:
                v2 = state.sample_neighbor(v, rng)
                if v2 is not None:
                    state.connect(new, v2)
                    counts.closure += 1
        counts.node += 1
    return counts


def holme_edges(
    n: int,
    edges: Iterable[Sequence[int]],
    k0: int,
    m: int,
    p: float,
    rng: RandomSource | None = None,
) -> list[tuple[int, int]]:
    """Grow an existing edge list one node at a time until it has n nodes.

    Args:
        n: Number of nodes in the final graph.
        edges: Existing directed edge entries over nodes 1..k0.
        k0: Number of nodes the existing edges span.
        m: Attachment steps per new node.
        p: Probability of skipping the closure edge in each step.
        rng: Random source. A fresh unseeded Generator when None.

    Returns:
        The seed entries followed by the generated ones.
    """
    validate_holme_params(n, k0, m, p)
    state = GrowthState(validate_seed_edges(edges, n, k0, bounded=True), k0)
    if rng is None:
        rng = np.random.default_rng()
    _grow(state, n, m, p, rng)
    return state.edges.to_list()


def holme_graph(
    n: int,
    k0: int,
    m: int,
    p: float,
    rng: RandomSource | None = None,
) -> GeneratedGraph:
    """Generate a Holme graph with a k0-node seed clique and n total nodes.

    Example:
        >>> g = holme_graph(50, 2, 2, 0.8, rng=np.random.default_rng(0))
        >>> g.n
        50

    Raises:
        InvalidParameter: On out-of-range parameters.
    """
    validate_holme_params(n, k0, m, p)
    state = GrowthState(seed_clique(k0), k0)
    if rng is None:
        rng = np.random.default_rng()
    counts = _grow(state, n, m, p, rng)
    log.info("Holme graph generated (n=%d, entries=%d)", n, len(state.edges))
    log.debug("Holme events: %s", counts.as_dict())
    return GeneratedGraph(
        edges=state.edges.to_array(), n=n, model="holme", events=counts
    )
