"""
Core shared types and utilities for irt_fit.

This module provides foundational components used across multiple submodules,
decoupling the IRT estimators from the data loading and synthetic data layers.
"""

from irt_fit.core.constants import MISSING_VALUE
from irt_fit.core.data_models import ResponseMatrix
from irt_fit.core.errors import (
    ConfigurationError,
    ResponseValueError,
    ShapeError,
)
from irt_fit.core.utils import get_rng, logistic

__all__ = [
    "MISSING_VALUE",
    "ConfigurationError",
    "ResponseMatrix",
    "ResponseValueError",
    "ShapeError",
    "get_rng",
    "logistic",
]
