"""Default configuration, single source of truth for generator parameters."""

from tgpa.config.generator import GeneratorConfig

# n=1000, k0=0, TGPA with p=0.5, r=0.3, seed=42.
DEFAULT_CONFIG = GeneratorConfig()
