"""Data structures shared by the growth models."""

from dataclasses import asdict, dataclass
from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """The two draws the generators need.

    numpy.random.Generator satisfies this protocol, so tests can pass
    either a seeded Generator or a scripted stand-in.
    """

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def integers(self, high: int) -> int:
        """Uniform integer in [0, high)."""
        ...


@dataclass(slots=True)
class EventCounts:
    """Tally of the events drawn during one generation call."""

    node: int = 0  # node events (Holme: one per new node)
    edge: int = 0  # GPA edge events, TGPA wedge events
    component: int = 0  # new-component events
    closure: int = 0  # triangle-closing edges added
    wasted: int = 0  # draws skipped because they would overshoot or had no pool

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class GeneratedGraph:
    """Immutable result of one generation call.

    Holds the raw directed edge entries in insertion order. Every undirected
    edge appears twice, once per direction; parallel edges and self-loops
    are kept as generated. Omits slots=True since numpy arrays are stored.
    """

    edges: np.ndarray  # int64 array of shape (entries, 2), 1-based node ids
    n: int  # final node count
    model: str  # "gpa", "tgpa" or "holme"
    events: EventCounts

    @property
    def num_entries(self) -> int:
        return int(self.edges.shape[0])

    def edge_list(self) -> list[tuple[int, int]]:
        """Return the entries as a list of (u, v) tuples."""
        return [(int(u), int(v)) for u, v in self.edges]
