"""Conversion of generated edge entries to sparse adjacency matrices."""

import numpy as np
import scipy.sparse

from tgpa.graph.types import GeneratedGraph


def to_adjacency(
    graph: GeneratedGraph, simple: bool = False
) -> scipy.sparse.csr_matrix:
    """Build the n x n adjacency matrix of a generated graph.

    Node id u maps to row and column u - 1. Duplicate entries are summed, so
    the raw matrix holds edge multiplicities (a self-loop contributes 2 to
    its diagonal cell, one per stored direction).

    Args:
        graph: Output of one of the generators.
        simple: Clip multiplicities to 1 and drop self-loops.

    Returns:
        Sparse CSR matrix of shape (n, n).
    """
    n = graph.n
    edges = graph.edges
    if simple:
        edges = edges[edges[:, 0] != edges[:, 1]]

    data = np.ones(edges.shape[0], dtype=np.int64)
    adj = scipy.sparse.coo_matrix(
        (data, (edges[:, 0] - 1, edges[:, 1] - 1)), shape=(n, n)
    ).tocsr()
    adj.sum_duplicates()

    if simple:
        adj.data[:] = 1
    return adj


def num_nodes(graph: GeneratedGraph) -> int:
    return graph.n


def is_empty(graph: GeneratedGraph) -> bool:
    """True when the graph has no nodes."""
    return graph.n == 0


def is_undirected(graph: GeneratedGraph) -> bool:
    """True when every (u, v) entry is matched by a (v, u) entry."""
    adj = to_adjacency(graph)
    return (adj != adj.T).nnz == 0
