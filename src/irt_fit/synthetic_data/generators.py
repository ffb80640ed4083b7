"""
Orchestration layer for synthetic response data generation.

This module ties together true parameters, the response model and
missingness to generate complete response matrices with known answers,
for parameter recovery tests and benchmarks.
"""

import numpy as np
from numpy.random import Generator

from irt_fit.core.data_models import ResponseMatrix
from irt_fit.core.utils import get_rng
from irt_fit.irt.estimation.enums import ModelType
from irt_fit.irt.estimation.parameters import IRTParameters
from irt_fit.irt.response_models import get_response_model
from irt_fit.synthetic_data.data_models import GeneratedData
from irt_fit.synthetic_data.missingness import (
    MCARMissingness,
    MissingnessModel,
    NoMissingness,
)

DEFAULT_ABILITY_RANGE = (-2.0, 2.0)
DEFAULT_DIFFICULTY_RANGE = (-2.0, 2.0)
DEFAULT_DISCRIMINATION_RANGE = (0.5, 2.0)
DEFAULT_GUESSING_RANGE = (0.0, 0.25)


def sample_true_parameters(
    model_type: ModelType | str,
    n_persons: int,
    n_items: int,
    rng: Generator,
    ability_range: tuple[float, float] = DEFAULT_ABILITY_RANGE,
    difficulty_range: tuple[float, float] = DEFAULT_DIFFICULTY_RANGE,
) -> IRTParameters:
    """
    Draw generating parameters uniformly within realistic ranges.

    Args:
        model_type: Variant whose parameters are drawn.
        n_persons: Number of persons.
        n_items: Number of items.
        rng: Random number generator.
        ability_range: Range for abilities.
        difficulty_range: Range for difficulties.

    Returns:
        IRTParameters with the vectors the variant uses.
    """
    model = get_response_model(model_type)

    abilities = rng.uniform(*ability_range, size=n_persons)
    difficulties = rng.uniform(*difficulty_range, size=n_items)
    discriminations = None
    guessings = None
    if "discriminations" in model.parameter_names:
        discriminations = rng.uniform(
            *DEFAULT_DISCRIMINATION_RANGE, size=n_items
        )
    if "guessings" in model.parameter_names:
        guessings = rng.uniform(*DEFAULT_GUESSING_RANGE, size=n_items)

    return IRTParameters(
        abilities=abilities,
        difficulties=difficulties,
        discriminations=discriminations,
        guessings=guessings,
    )


def generate_responses(
    model_type: ModelType | str,
    n_persons: int,
    n_items: int,
    rng: Generator | None = None,
    missing_rate: float = 0.0,
    missingness: MissingnessModel | None = None,
) -> GeneratedData:
    """
    Simulate a binary response matrix from known parameters.

    Args:
        model_type: Response model used for simulation.
        n_persons: Number of persons.
        n_items: Number of items.
        rng: Random number generator. Defaults to an entropy-seeded one.
        missing_rate: MCAR missing rate, used when missingness is None.
        missingness: Missingness mechanism. Overrides missing_rate.

    Returns:
        GeneratedData with responses and the generating parameters.
    """
    if rng is None:
        rng = get_rng()
    model_type = ModelType.parse(model_type)
    model = get_response_model(model_type)

    true_parameters = sample_true_parameters(
        model_type, n_persons, n_items, rng
    )
    probs = model.compute_probabilities(true_parameters)
    responses = (rng.random(probs.shape) < probs).astype(np.int8)

    if missingness is None:
        missingness = (
            MCARMissingness(rate=missing_rate)
            if missing_rate > 0.0
            else NoMissingness()
        )
    responses = missingness.apply(responses, true_parameters.abilities, rng)

    return GeneratedData(
        responses=ResponseMatrix(responses=responses),
        true_parameters=true_parameters,
        model_type=model_type,
    )
