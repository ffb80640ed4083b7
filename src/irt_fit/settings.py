from pydantic_settings import BaseSettings

from irt_fit.irt.estimation.config import (
    DEFAULT_DECAY_FACTOR,
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PARAM_TOLERANCE,
    DEFAULT_TOLERANCE,
    EstimationConfig,
)
from irt_fit.irt.estimation.enums import MissingStrategy, ModelType

IRT_FIT_ENV_PREFIX = "IRT_FIT_"


class EstimationSettings(BaseSettings):
    """Environment-driven defaults for scripts (e.g. IRT_FIT_LEARNING_RATE)."""

    model_config = {
        "env_prefix": IRT_FIT_ENV_PREFIX,
        "protected_namespaces": (),
    }

    model_type: ModelType = ModelType.RASCH
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE
    param_tolerance: float = DEFAULT_PARAM_TOLERANCE
    learning_rate: float = DEFAULT_LEARNING_RATE
    decay_factor: float = DEFAULT_DECAY_FACTOR
    missing_strategy: MissingStrategy = MissingStrategy.IGNORE
    seed: int | None = None

    def to_config(self) -> EstimationConfig:
        return EstimationConfig(
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
            param_tolerance=self.param_tolerance,
            learning_rate=self.learning_rate,
            decay_factor=self.decay_factor,
            missing_strategy=self.missing_strategy,
        )
