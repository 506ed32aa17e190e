"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from tgpa.config.generator import GeneratorConfig


def _hash_dict(d: dict[str, Any]) -> str:
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def config_hash(config: Any) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    return _hash_dict(asdict(config))


def generation_params(config: GeneratorConfig) -> dict[str, Any]:
    """The fields that determine the generated edges, seed excluded."""
    return {
        "model": config.model,
        "n": config.n,
        "k0": config.k0,
        "params": asdict(config.model_params()),
    }


def generation_config_hash(config: GeneratorConfig) -> str:
    """Hash for graph caching, covering only the selected model's parameters.

    Two configs differing only in seed, description, tags or the parameter
    blocks of unused models produce the same hash.
    """
    return _hash_dict(generation_params(config))


def full_config_hash(config: GeneratorConfig) -> str:
    """Hash for full identity, including seed and metadata."""
    return config_hash(config)
