"""Generator configuration system with frozen, hashable, serializable dataclasses."""

from tgpa.config.generator import (
    MODEL_NAMES,
    GeneratorConfig,
    GPAConfig,
    HolmeConfig,
    TGPAConfig,
)
from tgpa.config.defaults import DEFAULT_CONFIG
from tgpa.config.hashing import (
    config_hash,
    full_config_hash,
    generation_config_hash,
    generation_params,
)
from tgpa.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MODEL_NAMES",
    "GeneratorConfig",
    "GPAConfig",
    "TGPAConfig",
    "HolmeConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "full_config_hash",
    "generation_config_hash",
    "generation_params",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
