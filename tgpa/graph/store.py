"""Incremental edge and neighbor bookkeeping for the growth models.

The edge list doubles as the preferential sampling pool: every undirected
edge is stored once per direction, so a node appears as the first endpoint
of exactly deg(node) entries. Drawing a uniform entry and taking its first
endpoint is therefore a degree-proportional node draw in O(1), and no
separate degree table is maintained.
"""

from collections.abc import Iterable, Iterator

import numpy as np

from tgpa.graph.types import RandomSource


def seed_clique(k0: int) -> list[tuple[int, int]]:
    """Build the directed entries of a k0-node clique.

    Emits (i, j) then (j, i) for every 1 <= j < i <= k0. k0 = 0 or 1
    yields an empty list.
    """
    edges: list[tuple[int, int]] = []
    for i in range(1, k0 + 1):
        for j in range(1, i):
            edges.append((i, j))
            edges.append((j, i))
    return edges


class EdgeStore:
    """Append-only sequence of directed edge entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[int, int]] = ()) -> None:
        self._entries: list[tuple[int, int]] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._entries)

    def push(self, u: int, v: int) -> None:
        """Record the undirected edge {u, v} as (u, v) then (v, u)."""
        self._entries.append((u, v))
        self._entries.append((v, u))

    def sample_node(self, rng: RandomSource) -> int | None:
        """Degree-weighted node draw, or None if the store is empty."""
        size = len(self._entries)
        if size == 0:
            return None
        return self._entries[int(rng.integers(size))][0]

    def to_list(self) -> list[tuple[int, int]]:
        return list(self._entries)

    def to_array(self) -> np.ndarray:
        """Entries as an int64 array of shape (len, 2)."""
        if not self._entries:
            return np.zeros((0, 2), dtype=np.int64)
        return np.asarray(self._entries, dtype=np.int64)


class NeighborIndex:
    """Per-node ordered neighbor lists, indexed by 1-based node id.

    Lists are never deduplicated: a node connected twice to the same
    neighbor is twice as likely to draw it.
    """

    __slots__ = ("_neighbors",)

    def __init__(self, num_nodes: int = 0) -> None:
        self._neighbors: list[list[int]] = [[] for _ in range(num_nodes)]

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[int, int]], num_nodes: int
    ) -> "NeighborIndex":
        """Build the table from directed entries.

        Only the first endpoint of each entry is recorded, since the reverse
        entry accounts for the other direction.
        """
        index = cls(num_nodes)
        for u, v in edges:
            index._neighbors[u - 1].append(v)
        return index

    def __len__(self) -> int:
        return len(self._neighbors)

    def add_nodes(self, count: int) -> None:
        for _ in range(count):
            self._neighbors.append([])

    def record(self, u: int, v: int) -> None:
        self._neighbors[u - 1].append(v)
        self._neighbors[v - 1].append(u)

    def neighbors(self, u: int) -> list[int]:
        return self._neighbors[u - 1]

    def degree(self, u: int) -> int:
        return len(self._neighbors[u - 1])

    def sample_neighbor(self, u: int, rng: RandomSource) -> int | None:
        """Uniform entry of u's neighbor list, or None if it is empty."""
        row = self._neighbors[u - 1]
        if not row:
            return None
        return row[int(rng.integers(len(row)))]


class GrowthState:
    """Mutable state of one generation call.

    Owns the edge store, the neighbor table and the node counter i. Between
    events the neighbor table has exactly i rows.
    """

    __slots__ = ("edges", "neighbors", "i")

    def __init__(self, edges: Iterable[tuple[int, int]], num_nodes: int) -> None:
        self.edges = EdgeStore(edges)
        self.neighbors = NeighborIndex.from_edges(self.edges, num_nodes)
        self.i = num_nodes

    def connect(self, u: int, v: int) -> None:
        self.edges.push(u, v)
        self.neighbors.record(u, v)

    def add_nodes(self, count: int) -> int:
        """Append count new nodes and return the id of the first one."""
        first = self.i + 1
        self.neighbors.add_nodes(count)
        self.i += count
        return first

    def sample_node(self, rng: RandomSource) -> int | None:
        return self.edges.sample_node(rng)

    def sample_neighbor(self, u: int, rng: RandomSource) -> int | None:
        return self.neighbors.sample_neighbor(u, rng)
