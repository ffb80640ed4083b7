"""
Log-likelihood and gradients for binary IRT estimation.

For observed cells (i, j) with resolved response v_ij and model probability
p_ij the objective is the Bernoulli log-likelihood
    LL = Σ_ij [v_ij log(p_ij + ε) + (1 - v_ij) log(1 - p_ij + ε)]
where ε keeps the logarithm finite when p_ij saturates.

Gradients use the residual e_ij = v_ij - p_ij (zero on skipped cells):
    ∂θ_i  = Σ_j f_ij
    ∂b_j  = -Σ_i f_ij
    ∂a_j  = Σ_i e_ij (θ_i - b_j) [(1 - c_j) for 3PL]
    ∂c_j  = Σ_i e_ij                          (3PL)
with f_ij = e_ij (1PL), e_ij a_j (2PL), e_ij a_j (1 - c_j) (3PL).
"""

import numpy as np
from numba import njit  # type: ignore
from numpy.typing import NDArray

from irt_fit.irt.estimation.missing import ResolvedResponses
from irt_fit.irt.estimation.parameters import IRTParameters
from irt_fit.irt.response_models import ResponseModel

# Added inside the logarithm so saturated probabilities never give log(0)
LOG_EPSILON = 1e-15


@njit  # type: ignore
def masked_bernoulli_log_likelihood(
    probs: NDArray[np.float64],
    values: NDArray[np.float64],
    observed: NDArray[np.bool_],
) -> float:
    """
    Sum Bernoulli log-likelihood over observed cells.

    Cells are visited in row-major order so the floating point sum is
    reproducible.

    Args:
        probs: P(correct), shape (n_persons, n_items).
        values: Resolved responses (0.0 or 1.0), same shape.
        observed: True for cells that enter the sum, same shape.

    Returns:
        Log-likelihood. 0.0 when no cell is observed.
    """
    n_rows, n_cols = probs.shape
    total = 0.0
    for i in range(n_rows):
        for j in range(n_cols):
            if not observed[i, j]:
                continue
            p = probs[i, j]
            if values[i, j] == 1.0:
                total += np.log(p + LOG_EPSILON)
            else:
                total += np.log((1.0 - p) + LOG_EPSILON)
    return total


def log_likelihood(
    params: IRTParameters,
    responses: ResolvedResponses,
    model: ResponseModel,
) -> float:
    """
    Log-likelihood of the resolved responses under current parameters.

    Args:
        params: Current parameters.
        responses: Responses after missing-data resolution.
        model: Response model of the variant being fitted.

    Returns:
        Scalar log-likelihood.
    """
    probs = np.ascontiguousarray(model.compute_probabilities(params))
    return float(
        masked_bernoulli_log_likelihood(
            probs, responses.values, responses.observed
        )
    )


def compute_gradient(
    params: IRTParameters,
    responses: ResolvedResponses,
    model: ResponseModel,
) -> IRTParameters:
    """
    Gradient of the log-likelihood for every parameter vector.

    Rows or columns without observed cells get an exactly zero gradient.

    Args:
        params: Current parameters.
        responses: Responses after missing-data resolution.
        model: Response model of the variant being fitted.

    Returns:
        Freshly allocated IRTParameters holding the gradients, with the
        same vectors and shapes as params.
    """
    probs = model.compute_probabilities(params)
    error = np.where(responses.observed, responses.values - probs, 0.0)
    terms = model.gradient_terms(error, params)

    gradient = params.zeros_like()
    gradient.abilities += terms.ability.sum(axis=1)
    gradient.difficulties -= terms.ability.sum(axis=0)

    if gradient.discriminations is not None:
        assert terms.discrimination is not None
        gradient.discriminations += terms.discrimination.sum(axis=0)

    if gradient.guessings is not None:
        assert terms.guessing is not None
        gradient.guessings += terms.guessing.sum(axis=0)

    return gradient
