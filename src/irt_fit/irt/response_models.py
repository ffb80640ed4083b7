"""
Binary response models for item response theory.

This module computes P(correct | ability, item) for the logistic IRT family:
    1PL (Rasch): P = σ(θ - b)
    2PL:         P = σ(a (θ - b))
    3PL:         P = c + (1 - c) σ(a (θ - b))

Each model also supplies its per-cell gradient terms and its clamping rule,
which is everything the gradient-ascent estimator needs to know about a
variant.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from irt_fit.core.errors import ConfigurationError
from irt_fit.core.utils import logistic
from irt_fit.irt.estimation.config import ParameterBounds
from irt_fit.irt.estimation.enums import ModelType
from irt_fit.irt.estimation.parameters import IRTParameters


def rasch_probability(
    theta: ArrayLike, difficulty: ArrayLike
) -> NDArray[np.float64]:
    """P(correct) under the 1PL model. Broadcasts like a numpy ufunc."""
    return logistic(np.subtract(theta, difficulty))


def two_pl_probability(
    theta: ArrayLike, discrimination: ArrayLike, difficulty: ArrayLike
) -> NDArray[np.float64]:
    """P(correct) under the 2PL model. Broadcasts like a numpy ufunc."""
    return logistic(
        np.multiply(discrimination, np.subtract(theta, difficulty))
    )


def three_pl_probability(
    theta: ArrayLike,
    discrimination: ArrayLike,
    difficulty: ArrayLike,
    guessing: ArrayLike,
) -> NDArray[np.float64]:
    """P(correct) under the 3PL model. Broadcasts like a numpy ufunc."""
    c = np.asarray(guessing, dtype=np.float64)
    result: NDArray[np.float64] = c + (1.0 - c) * two_pl_probability(
        theta, discrimination, difficulty
    )
    return result


@dataclass(frozen=True)
class GradientTerms:
    """
    Per-cell gradient contributions, each shaped (n_persons, n_items).

    Attributes:
        ability: Added to the person's ability gradient and subtracted
            from the item's difficulty gradient.
        discrimination: Added to the item's discrimination gradient.
        guessing: Added to the item's guessing gradient.
    """

    ability: NDArray[np.float64]
    discrimination: NDArray[np.float64] | None = None
    guessing: NDArray[np.float64] | None = None


class ResponseModel(ABC):
    """Abstract Base Class for binary logistic response models."""

    model_type: ClassVar[ModelType]
    parameter_names: ClassVar[tuple[str, ...]]
    probability_function: ClassVar[Callable[..., NDArray[np.float64]]]

    def probability(self, theta: float, **item_params: float) -> float:
        """
        P(correct) for one person and one item.

        Item parameters are passed by name: difficulty, and per model
        discrimination and guessing. A missing or unknown name raises
        TypeError.
        """
        return float(self.probability_function(theta, **item_params))

    @abstractmethod
    def compute_probabilities(
        self, params: IRTParameters
    ) -> NDArray[np.float64]:
        """
        Compute P(correct) for every person and item.

        Args:
            params: Current parameters.

        Returns:
            Array of shape (n_persons, n_items).
        """
        ...

    @abstractmethod
    def gradient_terms(
        self, error: NDArray[np.float64], params: IRTParameters
    ) -> GradientTerms:
        """
        Per-cell gradient contributions.

        Args:
            error: Observed minus predicted, shape (n_persons, n_items).
                Skipped cells must already be zero.
            params: Current parameters.

        Returns:
            GradientTerms for the parameters this model has.
        """
        ...

    def clamp(self, params: IRTParameters, bounds: ParameterBounds) -> None:
        """Clip bounded item parameters in place."""
        if params.discriminations is not None:
            np.clip(
                params.discriminations,
                *bounds.discrimination,
                out=params.discriminations,
            )
        if params.guessings is not None:
            np.clip(params.guessings, *bounds.guessing, out=params.guessings)

    @staticmethod
    def _centered(params: IRTParameters) -> NDArray[np.float64]:
        """θ_i - b_j on the (n_persons, n_items) grid."""
        result: NDArray[np.float64] = (
            params.abilities[:, np.newaxis]
            - params.difficulties[np.newaxis, :]
        )
        return result


class RaschResponseModel(ResponseModel):
    """
    1-Parameter Logistic (Rasch) model.

        P(correct | θ) = 1 / (1 + exp(-(θ - b)))
    """

    model_type = ModelType.RASCH
    parameter_names = ("abilities", "difficulties")
    probability_function = staticmethod(rasch_probability)

    def compute_probabilities(
        self, params: IRTParameters
    ) -> NDArray[np.float64]:
        return logistic(self._centered(params))

    def gradient_terms(
        self, error: NDArray[np.float64], params: IRTParameters
    ) -> GradientTerms:
        return GradientTerms(ability=error)


class TwoPLResponseModel(ResponseModel):
    """
    2-Parameter Logistic model.

        P(correct | θ) = 1 / (1 + exp(-a (θ - b)))

    Where a is the item discrimination: how sharply the probability rises
    around θ = b.
    """

    model_type = ModelType.TWO_PL
    parameter_names = ("abilities", "difficulties", "discriminations")
    probability_function = staticmethod(two_pl_probability)

    def compute_probabilities(
        self, params: IRTParameters
    ) -> NDArray[np.float64]:
        assert params.discriminations is not None
        return logistic(
            params.discriminations[np.newaxis, :] * self._centered(params)
        )

    def gradient_terms(
        self, error: NDArray[np.float64], params: IRTParameters
    ) -> GradientTerms:
        assert params.discriminations is not None
        a = params.discriminations[np.newaxis, :]
        return GradientTerms(
            ability=error * a,
            discrimination=error * self._centered(params),
        )


class ThreePLResponseModel(ResponseModel):
    """
    3-Parameter Logistic model.

        P(correct | θ) = c + (1 - c) / (1 + exp(-a (θ - b)))

    The guessing parameter c is the lower asymptote: the probability that
    even very low ability persons answer correctly.

    The guessing gradient is the plain residual (observed - predicted)
    summed over persons, not the analytic derivative of the 3PL
    log-likelihood with respect to c. Fitted values depend on this choice.
    """

    model_type = ModelType.THREE_PL
    parameter_names = (
        "abilities",
        "difficulties",
        "discriminations",
        "guessings",
    )
    probability_function = staticmethod(three_pl_probability)

    def compute_probabilities(
        self, params: IRTParameters
    ) -> NDArray[np.float64]:
        assert params.discriminations is not None
        assert params.guessings is not None
        c = params.guessings[np.newaxis, :]
        p_star = logistic(
            params.discriminations[np.newaxis, :] * self._centered(params)
        )
        result: NDArray[np.float64] = c + (1.0 - c) * p_star
        return result

    def gradient_terms(
        self, error: NDArray[np.float64], params: IRTParameters
    ) -> GradientTerms:
        assert params.discriminations is not None
        assert params.guessings is not None
        a = params.discriminations[np.newaxis, :]
        not_guessed = 1.0 - params.guessings[np.newaxis, :]
        return GradientTerms(
            ability=error * a * not_guessed,
            discrimination=error * self._centered(params) * not_guessed,
            guessing=error,
        )


_RESPONSE_MODELS: dict[ModelType, type[ResponseModel]] = {
    ModelType.RASCH: RaschResponseModel,
    ModelType.TWO_PL: TwoPLResponseModel,
    ModelType.THREE_PL: ThreePLResponseModel,
}


def get_response_model(model_type: ModelType | str) -> ResponseModel:
    """
    Instantiate the response model for a model type.

    Raises:
        ConfigurationError: If the model type is unknown.
    """
    model_type = ModelType.parse(model_type)
    try:
        return _RESPONSE_MODELS[model_type]()
    except KeyError as e:
        raise ConfigurationError(
            f"No response model registered for {model_type!r}"
        ) from e
