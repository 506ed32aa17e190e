"""Triangle generalized preferential attachment (TGPA) graphs.

Follows the Eikmeier, Gleich description. Starting from an empty graph (or
a k0-node clique), each time step draws one of three events until the graph
has n nodes:

- node event (probability p): a new node attaches to a degree-weighted node
  v and to a uniform neighbor of v, closing a triangle
- wedge event (probability r): an edge joins two degree-weighted nodes v1
  and v2, and a second edge joins v1 to a uniform neighbor of v1
- component event (probability 1 - p - r): three new nodes forming a wedge

Self-loops and parallel edges are permitted throughout.
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from tgpa.graph.store import GrowthState, seed_clique
from tgpa.graph.types import EventCounts, GeneratedGraph, RandomSource
from tgpa.graph.validation import validate_seed_edges, validate_tgpa_params

log = logging.getLogger(__name__)


def _grow(
    state: GrowthState, n: int, p: float, r: float, rng: RandomSource
) -> EventCounts:
    counts = EventCounts()
    while state.i < n:
        x = rng.random()
        if x < p:  # node event
            v = state.sample_node(rng)
            new = state.add_nodes(1)
            existing = v is not None
            if not existing:
                v = new
            state.connect(new, v)
            # v's list already holds the new node, so v2 may equal it
            if existing:
                v2 = state.sample_neighbor(v, rng)
                if v2 is not None:
                    state.connect(new, v2)
                    counts.closure += 1
            counts.node += 1
        elif x < p + r:  # wedge event
            v1 = state.sample_node(rng)
            if v1 is None:
                counts.wasted += 1
                continue
            v2 = state.sample_node(rng)
            state.connect(v1, v2)
            # v2 was just recorded, so it is eligible for v3
            v3 = state.sample_neighbor(v1, rng)
            if v3 is not None:
                state.connect(v1, v3)
            counts.edge += 1
        else:  # component event
            if state.i + 3 <= n:
                first = state.add_nodes(3)
                state.connect(first, first + 1)
                state.connect(first, first + 2)
                counts.component += 1
            else:
                counts.wasted += 1
    return counts


def triangle_generalized_preferential_attachment_edges(
    n: int,
    p: float,
    r: float,
    edges: Iterable[Sequence[int]],
    k0: int,
    rng: RandomSource | None = None,
) -> list[tuple[int, int]]:
    """Grow an existing edge list with TGPA events until it has n nodes.

    Args:
        n: Number of nodes in the final graph.
        p: Probability of a node event.
        r: Probability of a wedge event. p + r <= 1.
        edges: Existing directed edge entries over nodes 1..k0.
        k0: Number of nodes the existing edges span.
        rng: Random source. A fresh unseeded Generator when None.

    Returns:
        The seed entries followed by the generated ones.
    """
    validate_tgpa_params(n, p, r, k0)
    state = GrowthState(validate_seed_edges(edges, n, k0, bounded=True), k0)
    if rng is None:
        rng = np.random.default_rng()
    _grow(state, n, p, r, rng)
    return state.edges.to_list()


def triangle_generalized_preferential_attachment_graph(
    n: int,
    p: float,
    r: float,
    k0: int = 0,
    rng: RandomSource | None = None,
) -> GeneratedGraph:
    """Generate a TGPA graph with n total nodes.

    Args:
        n: Number of nodes in the final graph.
        p: Probability of a node event.
        r: Probability of a wedge event. p + r <= 1.
        k0: Size of the seed clique.
        rng: Random source. A fresh unseeded Generator when None.

    Returns:
        GeneratedGraph with the raw doubled entries. Self-loops and parallel
        edges may be present.

    Raises:
        InvalidParameter: On out-of-range parameters.
    """
    validate_tgpa_params(n, p, r, k0)
    state = GrowthState(seed_clique(k0), k0)
    if rng is None:
        rng = np.random.default_rng()
    counts = _grow(state, n, p, r, rng)
    log.info("TGPA graph generated (n=%d, entries=%d)", n, len(state.edges))
    log.debug("TGPA events: %s", counts.as_dict())
    return GeneratedGraph(
        edges=state.edges.to_array(), n=n, model="tgpa", events=counts
    )


tgpa_graph = triangle_generalized_preferential_attachment_graph
tgpa_edges = triangle_generalized_preferential_attachment_edges
