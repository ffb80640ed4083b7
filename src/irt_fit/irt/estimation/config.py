"""
Configuration dataclasses for IRT model estimation.

This module defines the configuration parameters for:
- Parameter bounds applied after every gradient step
- Ranges used to draw starting values
- Overall estimation settings (convergence, learning rate, missing data)
"""

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import toml

from irt_fit.core.errors import ConfigurationError
from irt_fit.core.paths import ProjectRootNotFound, get_project_root_dir
from irt_fit.irt.estimation.enums import MissingStrategy

DISTRIBUTION_NAME = "irt-fit"
UNKNOWN_VERSION = "unknown"

# Default parameter bounds
DEFAULT_DISCRIMINATION_BOUNDS = (0.01, 5.0)
DEFAULT_GUESSING_BOUNDS = (0.0, 0.35)

# Default starting value ranges (uniform draws)
DEFAULT_ABILITY_RANGE = (-0.25, 0.25)
DEFAULT_DIFFICULTY_RANGE = (-0.25, 0.25)
DEFAULT_DISCRIMINATION_RANGE = (0.5, 1.5)
DEFAULT_GUESSING_RANGE = (0.0, 0.3)

# Default convergence settings
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_TOLERANCE = 1e-6
DEFAULT_PARAM_TOLERANCE = 1e-6

# Default step size settings
DEFAULT_LEARNING_RATE = 0.01
DEFAULT_DECAY_FACTOR = 0.5


def _get_project_version(start: Path | None = None) -> str:
    """
    Version of the installed distribution, else of the source checkout.

    The pyproject.toml fallback only counts when it describes this
    distribution, so a host project's file is never mistaken for ours.
    Returns "unknown" when neither source yields a version.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    try:
        root_dir = get_project_root_dir(start)
        with open(root_dir / "pyproject.toml") as f:
            data = toml.load(f)
    except (ProjectRootNotFound, OSError, toml.TomlDecodeError):
        return UNKNOWN_VERSION

    project = data.get("project", {})
    if project.get("name") != DISTRIBUTION_NAME:
        return UNKNOWN_VERSION

    version_str = project.get("version")
    if not isinstance(version_str, str) or not version_str:
        return UNKNOWN_VERSION
    return version_str


def _validate_range(name: str, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= high:
        raise ConfigurationError(
            f"{name} lower bound must not exceed upper bound, got {bounds}"
        )


@dataclass(frozen=True)
class ParameterBounds:
    """
    Bounds for item parameters, enforced by clamping after each update.

    Attributes:
        discrimination: (min, max) for discriminations (2PL, 3PL).
        guessing: (min, max) for guessing parameters (3PL).
    """

    discrimination: tuple[float, float] = DEFAULT_DISCRIMINATION_BOUNDS
    guessing: tuple[float, float] = DEFAULT_GUESSING_BOUNDS

    def __post_init__(self) -> None:
        _validate_range("discrimination", self.discrimination)
        _validate_range("guessing", self.guessing)
        if self.guessing[0] < 0.0 or self.guessing[1] >= 1.0:
            raise ConfigurationError(
                f"guessing bounds must lie in [0, 1), got {self.guessing}"
            )


@dataclass(frozen=True)
class InitializationConfig:
    """
    Uniform ranges for drawing starting values.

    Attributes:
        ability: Range for person abilities.
        difficulty: Range for item difficulties.
        discrimination: Range for item discriminations (2PL, 3PL).
        guessing: Range for guessing parameters (3PL).
    """

    ability: tuple[float, float] = DEFAULT_ABILITY_RANGE
    difficulty: tuple[float, float] = DEFAULT_DIFFICULTY_RANGE
    discrimination: tuple[float, float] = DEFAULT_DISCRIMINATION_RANGE
    guessing: tuple[float, float] = DEFAULT_GUESSING_RANGE

    def __post_init__(self) -> None:
        _validate_range("ability", self.ability)
        _validate_range("difficulty", self.difficulty)
        _validate_range("discrimination", self.discrimination)
        _validate_range("guessing", self.guessing)


@dataclass(frozen=True)
class EstimationConfig:
    """
    Master configuration for gradient-ascent IRT estimation.

    Attributes:
        max_iterations: Maximum number of gradient steps per fit call.
        tolerance: Convergence threshold on the absolute log-likelihood
            change of an accepted step.
        param_tolerance: Convergence threshold on the mean absolute
            parameter change of an accepted step. Both thresholds must be
            met to stop early.
        learning_rate: Starting step size.
        decay_factor: Multiplier in (0, 1) applied to the step size every
            time a step lowers the log-likelihood and is reverted.
        missing_strategy: How missing responses enter the likelihood.
        bounds: Clamping bounds for discrimination and guessing.
        initialization: Ranges for random starting values.
        model_version: Version string for reproducibility tracking.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE
    param_tolerance: float = DEFAULT_PARAM_TOLERANCE
    learning_rate: float = DEFAULT_LEARNING_RATE
    decay_factor: float = DEFAULT_DECAY_FACTOR
    missing_strategy: MissingStrategy = MissingStrategy.IGNORE
    bounds: ParameterBounds = ParameterBounds()
    initialization: InitializationConfig = InitializationConfig()
    model_version: str = field(default_factory=_get_project_version)

    def __post_init__(self) -> None:
        # Accept plain strings such as "treat_as_incorrect"
        object.__setattr__(
            self,
            "missing_strategy",
            MissingStrategy.parse(self.missing_strategy),
        )
        if isinstance(self.max_iterations, bool) or not isinstance(
            self.max_iterations, int
        ):
            raise ConfigurationError(
                f"max_iterations must be an integer, "
                f"got {type(self.max_iterations).__name__}"
            )
        if self.max_iterations < 1:
            raise ConfigurationError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )
        for name in ("tolerance", "param_tolerance", "learning_rate"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigurationError(f"{name} must be > 0, got {value}")
        if not 0.0 < self.decay_factor < 1.0:
            raise ConfigurationError(
                f"decay_factor must be in (0, 1), got {self.decay_factor}"
            )


def default_config() -> EstimationConfig:
    """Create a default estimation configuration."""
    return EstimationConfig()
