"""Parameter and seed validation for the growth models.

All checks run before any edge is written. Problems are collected into a
list of error strings (cheapest first) and raised together, so a caller
sees every bad argument at once.
"""

import numbers
from collections.abc import Iterable, Sequence

import numpy as np


class GraphGenerationError(Exception):
    """Base class for errors raised while generating a graph."""


class InvalidParameter(GraphGenerationError, ValueError):
    """Raised when a model parameter is out of range or inconsistent."""


class StructuralPrecondition(GraphGenerationError):
    """Raised when the seed edges cannot support the requested mode."""


def _is_int(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_node_counts(n: int, k0: int, name: str = "k0") -> list[str]:
    """Check the target node count against the seed size."""
    errors: list[str] = []
    if not _is_int(n):
        errors.append(f"n={n!r} must be an integer")
    if not _is_int(k0):
        errors.append(f"{name}={k0!r} must be an integer")
    if errors:
        return errors

    if k0 < 0:
        errors.append(f"{name}={k0} must be non-negative")
    if n < k0:
        errors.append(f"n={n} must be >= {name}={k0}")
    return errors


def check_probability(name: str, value: float) -> list[str]:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return [f"{name}={value!r} must be a real number"]
    if not 0.0 <= value <= 1.0:
        return [f"{name}={value:0.3f} must be between 0 and 1"]
    return []


def check_event_probabilities(p: float, r: float) -> list[str]:
    """Check a (p, r) pair where 1 - p - r is the leftover event."""
    errors = check_probability("p", p) + check_probability("r", r)
    if not errors and p + r > 1.0:
        errors.append(f"(p={p:0.3f})+(r={r:0.3f}) must be <= 1")
    return errors


def check_triangle_count(m: int, n: int) -> list[str]:
    if not _is_int(m):
        return [f"m={m!r} must be an integer"]
    errors: list[str] = []
    if m < 1:
        errors.append(f"m={m} must be >= 1")
    if _is_int(n) and m > max(n, 1):
        errors.append(f"m={m} must be <= n={n}")
    return errors


def _raise_if(errors: list[str]) -> None:
    if errors:
        raise InvalidParameter("; ".join(errors))


def validate_gpa_params(n: int, p: float, r: float, k0: int) -> None:
    """Validate GPA parameters.

    Raises:
        InvalidParameter: If any check fails.
    """
    _raise_if(check_node_counts(n, k0) + check_event_probabilities(p, r))


def validate_tgpa_params(n: int, p: float, r: float, k0: int) -> None:
    """Validate TGPA parameters (same ranges as GPA)."""
    _raise_if(check_node_counts(n, k0) + check_event_probabilities(p, r))


def validate_holme_params(n: int, k0: int, m: int, p: float) -> None:
    """Validate Holme parameters.

    Checks the node counts, the number of attachment steps per new node
    (1 <= m <= max(n, 1)) and the closure parameter p in [0, 1].

    Raises:
        InvalidParameter: If any check fails.
    """
    _raise_if(
        check_node_counts(n, k0)
        + check_triangle_count(m, n)
        + check_probability("p", p)
    )


def validate_seed_edges(
    edges: Iterable[Sequence[int]],
    n: int,
    n0: int,
    bounded: bool = False,
) -> list[tuple[int, int]]:
    """Validate a caller-supplied seed edge list and normalize it to tuples.

    Args:
        edges: Existing directed edge entries (pairs of node ids).
        n: Target node count.
        n0: Number of nodes already present.
        bounded: Require every id to be <= n0. Models that keep a
            neighbor table sized by n0 need this.

    Returns:
        The seed entries as a list of (int, int) tuples.

    Raises:
        InvalidParameter: On malformed pairs or out-of-range ids.
    """
    errors = check_node_counts(n, n0, name="n0")
    seed: list[tuple[int, int]] = []
    for entry in edges:
        if not isinstance(entry, (Sequence, np.ndarray)) or len(entry) != 2:
            errors.append(f"edge {entry!r} must be a pair of node ids")
            continue
        u, v = entry
        if not (_is_int(u) and _is_int(v)):
            errors.append(f"edge {(u, v)!r} must hold integer node ids")
            continue
        if u < 1 or v < 1:
            errors.append(f"edge {(u, v)!r} has a node id < 1")
            continue
        if bounded and _is_int(n0) and (u > n0 or v > n0):
            errors.append(f"edge {(u, v)!r} has a node id > n0={n0}")
            continue
        seed.append((int(u), int(v)))
    _raise_if(errors)
    return seed


def has_two_distinct_nodes(edges: Sequence[tuple[int, int]]) -> bool:
    """Check whether the edge entries mention at least two node ids.

    Raises:
        StructuralPrecondition: If there are no edges at all.
    """
    if len(edges) == 0:
        raise StructuralPrecondition("requires at least one edge")
    first = edges[0][0]
    return any(u != first or v != first for u, v in edges)
