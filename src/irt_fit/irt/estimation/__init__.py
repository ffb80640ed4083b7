"""
IRT model estimation module.

This module provides infrastructure for estimating binary Item Response
Theory models by joint maximum likelihood with adaptive gradient ascent.

Key components:
- EstimationConfig: Configuration for estimation
- MissingStrategy / resolve_missing: Missing-data handling
- log_likelihood / compute_gradient: Objective and gradients
- GradientAscentEstimator: One estimator for 1PL, 2PL and 3PL
- IRTEstimationResult: Summary of a fit call
"""

from irt_fit.irt.estimation.config import (
    EstimationConfig,
    InitializationConfig,
    ParameterBounds,
)
from irt_fit.irt.estimation.data_models import IRTEstimationResult
from irt_fit.irt.estimation.enums import (
    ConvergenceStatus,
    MissingStrategy,
    ModelType,
)
from irt_fit.irt.estimation.estimator import (
    GradientAscentEstimator,
    RaschEstimator,
    ThreePLEstimator,
    TwoPLEstimator,
)
from irt_fit.irt.estimation.missing import resolve_missing, resolve_responses
from irt_fit.irt.estimation.parameters import IRTParameters

__all__ = [
    "ConvergenceStatus",
    "EstimationConfig",
    "GradientAscentEstimator",
    "IRTEstimationResult",
    "IRTParameters",
    "InitializationConfig",
    "MissingStrategy",
    "ModelType",
    "ParameterBounds",
    "RaschEstimator",
    "ThreePLEstimator",
    "TwoPLEstimator",
    "resolve_missing",
    "resolve_responses",
]
