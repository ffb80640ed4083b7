"""Tests for the estimation result summary."""

import numpy as np

from irt_fit.irt.estimation.data_models import IRTEstimationResult
from irt_fit.irt.estimation.enums import ConvergenceStatus, ModelType


def _result(
    status: ConvergenceStatus = ConvergenceStatus.CONVERGED,
) -> IRTEstimationResult:
    return IRTEstimationResult(
        parameters={
            "abilities": np.zeros(4),
            "difficulties": np.zeros(3),
        },
        model_type=ModelType.RASCH,
        log_likelihood=-5.0,
        initial_log_likelihood=-8.5,
        n_iterations=12,
        n_reverts=1,
        convergence_status=status,
        learning_rate=0.005,
        accepted_log_likelihoods=(-8.5, -6.0, -5.0),
        model_version="0.1.0",
    )


class TestIRTEstimationResult:
    def test_dimensions(self) -> None:
        result = _result()
        assert result.n_persons == 4
        assert result.n_items == 3

    def test_converged(self) -> None:
        assert _result().converged
        assert not _result(ConvergenceStatus.MAX_ITERATIONS).converged

    def test_improvement(self) -> None:
        assert _result().improvement == 3.5

    def test_status_values(self) -> None:
        assert ConvergenceStatus.CONVERGED.value == "converged"
        assert ConvergenceStatus.MAX_ITERATIONS.value == "max_iterations"
