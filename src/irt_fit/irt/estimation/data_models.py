from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from irt_fit.irt.estimation.enums import ConvergenceStatus, ModelType


@dataclass(frozen=True)
class IRTEstimationResult:
    """
    Result of one call to fit.

    Attributes:
        parameters: Estimated vectors keyed by name ("abilities",
            "difficulties" and, per variant, "discriminations",
            "guessings").
        model_type: Variant that was fitted.
        log_likelihood: Log-likelihood at the returned parameters.
        initial_log_likelihood: Log-likelihood when fit was called.
        n_iterations: Number of gradient steps attempted.
        n_reverts: Number of steps rejected and rolled back.
        convergence_status: Status indicating how estimation terminated.
        learning_rate: Step size after any decay, carried into the next
            fit call.
        accepted_log_likelihoods: Log-likelihood at the start and after
            every accepted step, in order.
        model_version: Version string for reproducibility tracking.
    """

    parameters: dict[str, NDArray[np.float64]]
    model_type: ModelType
    log_likelihood: float
    initial_log_likelihood: float
    n_iterations: int
    n_reverts: int
    convergence_status: ConvergenceStatus
    learning_rate: float
    accepted_log_likelihoods: tuple[float, ...]
    model_version: str

    @property
    def n_persons(self) -> int:
        """Number of persons in the model."""
        return len(self.parameters["abilities"])

    @property
    def n_items(self) -> int:
        """Number of items in the model."""
        return len(self.parameters["difficulties"])

    @property
    def converged(self) -> bool:
        """Whether estimation met both convergence thresholds."""
        return self.convergence_status == ConvergenceStatus.CONVERGED

    @property
    def improvement(self) -> float:
        """Log-likelihood gained during this fit call."""
        return self.log_likelihood - self.initial_log_likelihood
