"""Config-driven dispatch to the growth models."""

import logging

from tgpa.config.generator import GeneratorConfig
from tgpa.graph.gpa import gpa_graph
from tgpa.graph.holme import holme_graph
from tgpa.graph.tgpa import tgpa_graph
from tgpa.graph.types import GeneratedGraph, RandomSource
from tgpa.reproducibility.seed import make_rng

log = logging.getLogger(__name__)


def generate_graph(
    config: GeneratorConfig, rng: RandomSource | None = None
) -> GeneratedGraph:
    """Generate a graph for the model selected in config.

    Args:
        config: Generator configuration.
        rng: Random source. Built from config.seed when None, so the same
            config always produces the same graph.

    Returns:
        GeneratedGraph for config.model.

    Raises:
        InvalidParameter: If the selected model's parameters are invalid.
        StructuralPrecondition: If the seed cannot support the mode.
    """
    if rng is None:
        rng = make_rng(config.seed)

    log.debug(
        "Generating %s graph (n=%d, k0=%d, seed=%d)",
        config.model, config.n, config.k0, config.seed,
    )
    if config.model == "gpa":
        params = config.gpa
        return gpa_graph(
            config.n,
            params.p,
            params.r,
            config.k0,
            rng,
            self_loops=params.self_loops,
            max_resample_attempts=params.max_resample_attempts,
        )
    if config.model == "tgpa":
        return tgpa_graph(config.n, config.tgpa.p, config.tgpa.r, config.k0, rng)
    return holme_graph(config.n, config.k0, config.holme.m, config.holme.p, rng)
