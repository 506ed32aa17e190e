"""Generator configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

MODEL_NAMES = ("gpa", "tgpa", "holme")


@dataclass(frozen=True, slots=True)
class GPAConfig:
    """Generalized preferential attachment parameters."""

    p: float = 1 / 3  # node event probability
    r: float = 0.5  # edge event probability, p + r <= 1
    self_loops: bool = False
    max_resample_attempts: int | None = None  # None keeps the rejection loop unbounded


@dataclass(frozen=True, slots=True)
class TGPAConfig:
    """Triangle generalized preferential attachment parameters."""

    p: float = 0.5  # node event probability
    r: float = 0.3  # wedge event probability, p + r <= 1


@dataclass(frozen=True, slots=True)
class HolmeConfig:
    """Holme attachment parameters."""

    m: int = 2  # attachment steps per new node
    p: float = 0.8  # probability of skipping the closure edge


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Top-level generation configuration.

    Carries the parameters of every model; only the block named by
    ``model`` is used. Range checks on the model parameters happen in the
    generators themselves, so a config can be built and serialized before
    it is known to be valid.
    """

    model: str = "tgpa"
    n: int = 1000  # nodes in the final graph
    k0: int = 0  # seed clique size
    gpa: GPAConfig = field(default_factory=GPAConfig)
    tgpa: TGPAConfig = field(default_factory=TGPAConfig)
    holme: HolmeConfig = field(default_factory=HolmeConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.model not in MODEL_NAMES:
            raise ValueError(
                f"model must be one of {', '.join(MODEL_NAMES)}, got {self.model!r}"
            )
        if self.seed < 0:
            raise ValueError(f"seed ({self.seed}) must be non-negative")

    def model_params(self) -> GPAConfig | TGPAConfig | HolmeConfig:
        """The parameter block of the selected model."""
        return getattr(self, self.model)
