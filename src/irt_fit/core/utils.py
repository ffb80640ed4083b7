"""
Core utility functions shared across irt_fit modules.

This module provides foundational utilities used by both the IRT
estimators and the synthetic data generation layer.
"""

import numpy as np
from numpy.random import Generator
from numpy.typing import ArrayLike, NDArray
from scipy.special import expit


def get_rng(seed: int | None = None) -> Generator:
    """
    Create a numpy random Generator with optional seed.

    Args:
        seed: Random seed for reproducibility. If None, uses entropy.

    Returns:
        A numpy random Generator instance.
    """
    return np.random.default_rng(seed)


def logistic(x: ArrayLike) -> NDArray[np.float64]:
    """
    Compute the logistic function 1 / (1 + exp(-x)).

    Numerically stable: large-magnitude inputs saturate toward 0 or 1
    without overflow warnings.

    Args:
        x: Scalar or array of logits.

    Returns:
        Array (or numpy scalar) of probabilities in [0, 1].
    """
    result: NDArray[np.float64] = expit(np.asarray(x, dtype=np.float64))
    return result
