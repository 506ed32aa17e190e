"""Reproducibility infrastructure: explicit, seedable random sources."""

from tgpa.reproducibility.seed import make_rng, spawn_rngs, verify_seed_determinism

__all__ = [
    "make_rng",
    "spawn_rngs",
    "verify_seed_determinism",
]
