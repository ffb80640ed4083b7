"""
Binary IRT estimator using adaptive gradient ascent.

Implements joint maximum likelihood for the 1PL, 2PL and 3PL models with
one optimiser; the variants differ only in their ResponseModel.

Each iteration:
    1. compute the gradient of the log-likelihood
    2. snapshot the parameters and take a step of size learning_rate
    3. clamp bounded item parameters
    4. if the log-likelihood went down, restore the snapshot and shrink
       the learning rate by decay_factor
    5. otherwise accept, and stop once both the log-likelihood change and
       the mean parameter change fall below their tolerances
"""

import dataclasses
import logging
from typing import Any

import numpy as np
from numpy.random import Generator
from numpy.typing import NDArray

from irt_fit.core.data_models import ResponseMatrix
from irt_fit.core.utils import get_rng
from irt_fit.irt.estimation.config import EstimationConfig
from irt_fit.irt.estimation.data_models import IRTEstimationResult
from irt_fit.irt.estimation.enums import ConvergenceStatus, ModelType
from irt_fit.irt.estimation.gradients import compute_gradient, log_likelihood
from irt_fit.irt.estimation.missing import (
    ResolvedResponses,
    resolve_responses,
)
from irt_fit.irt.estimation.parameters import IRTParameters
from irt_fit.irt.estimation.starting_values import initialize_parameters
from irt_fit.irt.response_models import ResponseModel, get_response_model

logger = logging.getLogger(__name__)


class GradientAscentEstimator:
    """
    Joint maximum likelihood estimator for binary IRT models.

    Owns its parameter vectors: they are drawn at construction, updated in
    place by fit, and carried over between fit calls.

    Example:
        >>> estimator = GradientAscentEstimator(
        ...     [[1, 1, 0], [1, 0, 1], [0, 1, 1], [1, 1, 1]],
        ...     model_type="2pl",
        ...     max_iterations=300,
        ...     learning_rate=0.1,
        ... )
        >>> result = estimator.fit()
        >>> sorted(result)
        ['abilities', 'difficulties', 'discriminations']
    """

    model_type: ModelType = ModelType.RASCH

    def __init__(
        self,
        data: ResponseMatrix | Any,
        model_type: ModelType | str | None = None,
        config: EstimationConfig | None = None,
        rng: Generator | None = None,
        **overrides: Any,
    ):
        """
        Initialize estimator.

        Args:
            data: ResponseMatrix, or nested rows / 2D array of 0, 1 and
                None/NaN for missing.
            model_type: Variant to fit. Defaults to the class model_type.
            config: Estimation configuration. If None, uses defaults.
            rng: Random source for starting values. If None, a fresh
                entropy-seeded Generator is used.
            **overrides: EstimationConfig fields overriding config, e.g.
                max_iterations=300.

        Raises:
            ConfigurationError: Unknown model type or missing strategy, or
                invalid numeric settings.
            ShapeError: Ragged or empty response data.
            ResponseValueError: Cells other than 0, 1 or missing.
        """
        config = config or EstimationConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config

        self.data = ResponseMatrix.from_rows(data)
        if model_type is not None:
            self.model_type = ModelType.parse(model_type)
        self.response_model: ResponseModel = get_response_model(
            self.model_type
        )

        if rng is None:
            self.rng = get_rng()
        else:
            self.rng = rng

        self._responses: ResolvedResponses = resolve_responses(
            self.data, self.config.missing_strategy
        )
        self._params: IRTParameters = initialize_parameters(
            self.response_model,
            self.data.n_persons,
            self.data.n_items,
            self.rng,
            self.config.initialization,
        )
        self._learning_rate = self.config.learning_rate
        self.last_result: IRTEstimationResult | None = None

        logger.info(
            f"Initialized {self.model_type.value} estimator: "
            f"{self.data.n_persons} persons, {self.data.n_items} items, "
            f"{self.data.n_missing} missing "
            f"({self.config.missing_strategy.value})"
        )

    @property
    def n_persons(self) -> int:
        return self.data.n_persons

    @property
    def n_items(self) -> int:
        return self.data.n_items

    @property
    def learning_rate(self) -> float:
        """Current step size, after any decay."""
        return self._learning_rate

    @property
    def parameters(self) -> dict[str, NDArray[np.float64]]:
        """Copies of the current parameter vectors keyed by name."""
        return self._params.as_dict()

    def log_likelihood(self) -> float:
        """Log-likelihood of the data under the current parameters."""
        return log_likelihood(
            self._params, self._responses, self.response_model
        )

    def compute_gradient(self) -> dict[str, NDArray[np.float64]]:
        """Gradient at the current parameters keyed by parameter name."""
        return self._gradient().as_dict()

    def _gradient(self) -> IRTParameters:
        return compute_gradient(
            self._params, self._responses, self.response_model
        )

    def _is_converged(self, ll_diff: float, param_delta: float) -> bool:
        return (
            ll_diff < self.config.tolerance
            and param_delta < self.config.param_tolerance
        )

    def fit(self) -> dict[str, NDArray[np.float64]]:
        """
        Run gradient ascent from the current parameters.

        Stops on convergence or after max_iterations steps; both are
        normal outcomes. A summary is stored in last_result.

        Returns:
            Copies of the fitted vectors keyed by name.
        """
        prev_ll = self.log_likelihood()
        initial_ll = prev_ll
        accepted = [prev_ll]
        convergence_status = ConvergenceStatus.MAX_ITERATIONS
        n_iterations = 0
        n_reverts = 0

        for iteration in range(self.config.max_iterations):
            n_iterations = iteration + 1

            gradient = self._gradient()
            snapshot = self._params.copy()

            self._params.step(gradient, self._learning_rate)
            self.response_model.clamp(self._params, self.config.bounds)

            current_ll = self.log_likelihood()
            param_delta = self._params.mean_abs_change(snapshot)

            if current_ll < prev_ll:
                self._params.restore(snapshot)
                self._learning_rate *= self.config.decay_factor
                n_reverts += 1
                logger.debug(
                    f"Iteration {n_iterations}: LL = {current_ll:.4f} < "
                    f"{prev_ll:.4f}, reverted, "
                    f"learning rate = {self._learning_rate:.3g}"
                )
                continue

            accepted.append(current_ll)
            ll_diff = abs(current_ll - prev_ll)
            logger.debug(
                f"Iteration {n_iterations}: LL = {current_ll:.4f}, "
                f"param delta = {param_delta:.3g}"
            )

            if self._is_converged(ll_diff, param_delta):
                convergence_status = ConvergenceStatus.CONVERGED
                break

            prev_ll = current_ll

        final_ll = self.log_likelihood()
        self.last_result = IRTEstimationResult(
            parameters=self._params.as_dict(),
            model_type=self.model_type,
            log_likelihood=final_ll,
            initial_log_likelihood=initial_ll,
            n_iterations=n_iterations,
            n_reverts=n_reverts,
            convergence_status=convergence_status,
            learning_rate=self._learning_rate,
            accepted_log_likelihoods=tuple(accepted),
            model_version=self.config.model_version,
        )
        logger.info(
            f"{self.model_type.value} fit {convergence_status.value} "
            f"({n_iterations} iterations, {n_reverts} reverts, "
            f"LL={final_ll:.4f})"
        )

        return self._params.as_dict()


class RaschEstimator(GradientAscentEstimator):
    """1PL (Rasch) estimator: abilities and difficulties."""

    model_type = ModelType.RASCH


class TwoPLEstimator(GradientAscentEstimator):
    """2PL estimator: adds item discriminations."""

    model_type = ModelType.TWO_PL


class ThreePLEstimator(GradientAscentEstimator):
    """3PL estimator: adds item discriminations and guessing."""

    model_type = ModelType.THREE_PL
