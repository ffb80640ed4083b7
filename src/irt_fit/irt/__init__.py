"""
IRT (Item Response Theory) module.

This module provides:
- Binary response models (1PL, 2PL, 3PL)
- A gradient-ascent estimator shared by all three models
- Missing-data strategies for incomplete response matrices
"""

from irt_fit.irt.estimation import (
    EstimationConfig,
    GradientAscentEstimator,
    IRTEstimationResult,
    MissingStrategy,
    ModelType,
    RaschEstimator,
    ThreePLEstimator,
    TwoPLEstimator,
)
from irt_fit.irt.response_models import (
    RaschResponseModel,
    ResponseModel,
    ThreePLResponseModel,
    TwoPLResponseModel,
    get_response_model,
)

__all__ = [
    "EstimationConfig",
    "GradientAscentEstimator",
    "IRTEstimationResult",
    "MissingStrategy",
    "ModelType",
    "RaschEstimator",
    "RaschResponseModel",
    "ResponseModel",
    "ThreePLEstimator",
    "ThreePLResponseModel",
    "TwoPLEstimator",
    "TwoPLResponseModel",
    "get_response_model",
]
