"""Preferential-attachment graph generators (GPA, TGPA, Holme)."""

from tgpa.graph.assemble import is_empty, is_undirected, num_nodes, to_adjacency
from tgpa.graph.cache import (
    generate_or_load_graph,
    graph_cache_key,
    load_graph,
    save_graph,
)
from tgpa.graph.generate import generate_graph
from tgpa.graph.gpa import (
    generalized_preferential_attachment_edges,
    generalized_preferential_attachment_graph,
    gpa_edges,
    gpa_graph,
)
from tgpa.graph.holme import holme_edges, holme_graph
from tgpa.graph.store import EdgeStore, GrowthState, NeighborIndex, seed_clique
from tgpa.graph.tgpa import (
    tgpa_edges,
    tgpa_graph,
    triangle_generalized_preferential_attachment_edges,
    triangle_generalized_preferential_attachment_graph,
)
from tgpa.graph.types import EventCounts, GeneratedGraph, RandomSource
from tgpa.graph.validation import (
    GraphGenerationError,
    InvalidParameter,
    StructuralPrecondition,
)

__all__ = [
    "EdgeStore",
    "EventCounts",
    "GeneratedGraph",
    "GraphGenerationError",
    "GrowthState",
    "InvalidParameter",
    "NeighborIndex",
    "RandomSource",
    "StructuralPrecondition",
    "generalized_preferential_attachment_edges",
    "generalized_preferential_attachment_graph",
    "generate_graph",
    "generate_or_load_graph",
    "gpa_edges",
    "gpa_graph",
    "graph_cache_key",
    "holme_edges",
    "holme_graph",
    "is_empty",
    "is_undirected",
    "load_graph",
    "num_nodes",
    "save_graph",
    "seed_clique",
    "tgpa_edges",
    "tgpa_graph",
    "to_adjacency",
    "triangle_generalized_preferential_attachment_edges",
    "triangle_generalized_preferential_attachment_graph",
]
