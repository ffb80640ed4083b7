"""
Starting value computation for IRT estimation.

Starting values are small uniform draws around the usual scale of each
parameter. Draws come from an explicitly passed Generator, in a fixed
order (abilities, difficulties, discriminations, guessings), so the same
seed always yields the same starting point.
"""

import numpy as np
from numpy.random import Generator
from numpy.typing import NDArray

from irt_fit.irt.estimation.config import InitializationConfig
from irt_fit.irt.estimation.parameters import IRTParameters
from irt_fit.irt.response_models import ResponseModel


def draw_uniform(
    rng: Generator, bounds: tuple[float, float], size: int
) -> NDArray[np.float64]:
    """Draw size values uniformly from [low, high)."""
    low, high = bounds
    result: NDArray[np.float64] = rng.uniform(low, high, size=size)
    return result


def initialize_parameters(
    model: ResponseModel,
    n_persons: int,
    n_items: int,
    rng: Generator,
    config: InitializationConfig | None = None,
) -> IRTParameters:
    """
    Draw starting values for every vector the model estimates.

    Args:
        model: Response model of the variant being fitted.
        n_persons: Number of persons.
        n_items: Number of items.
        rng: Random source.
        config: Uniform ranges per parameter type. Defaults if None.

    Returns:
        IRTParameters with the vectors listed in model.parameter_names.
    """
    config = config or InitializationConfig()

    abilities = draw_uniform(rng, config.ability, n_persons)
    difficulties = draw_uniform(rng, config.difficulty, n_items)

    discriminations = None
    if "discriminations" in model.parameter_names:
        discriminations = draw_uniform(rng, config.discrimination, n_items)

    guessings = None
    if "guessings" in model.parameter_names:
        guessings = draw_uniform(rng, config.guessing, n_items)

    return IRTParameters(
        abilities=abilities,
        difficulties=difficulties,
        discriminations=discriminations,
        guessings=guessings,
    )
