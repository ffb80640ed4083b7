"""Tests for starting value draws."""

import numpy as np

from irt_fit.core.utils import get_rng
from irt_fit.irt.estimation.config import InitializationConfig
from irt_fit.irt.estimation.starting_values import initialize_parameters
from irt_fit.irt.response_models import (
    RaschResponseModel,
    ThreePLResponseModel,
    TwoPLResponseModel,
)


class TestInitializeParameters:
    def test_vectors_per_model(self) -> None:
        rng = get_rng(0)
        assert initialize_parameters(
            RaschResponseModel(), 4, 3, rng
        ).names == ("abilities", "difficulties")
        assert (
            initialize_parameters(TwoPLResponseModel(), 4, 3, rng).guessings
            is None
        )
        params = initialize_parameters(ThreePLResponseModel(), 4, 3, rng)
        assert params.abilities.shape == (4,)
        assert params.difficulties.shape == (3,)
        assert params.discriminations is not None
        assert params.discriminations.shape == (3,)
        assert params.guessings is not None
        assert params.guessings.shape == (3,)

    def test_default_ranges(self) -> None:
        params = initialize_parameters(
            ThreePLResponseModel(), 500, 500, get_rng(1)
        )
        assert np.all(np.abs(params.abilities) <= 0.25)
        assert np.all(np.abs(params.difficulties) <= 0.25)
        assert params.discriminations is not None
        assert np.all(params.discriminations >= 0.5)
        assert np.all(params.discriminations <= 1.5)
        assert params.guessings is not None
        assert np.all(params.guessings >= 0.0)
        assert np.all(params.guessings <= 0.3)

    def test_custom_ranges(self) -> None:
        config = InitializationConfig(ability=(2.0, 2.0))
        params = initialize_parameters(
            RaschResponseModel(), 5, 2, get_rng(2), config
        )
        np.testing.assert_array_equal(params.abilities, 2.0)

    def test_same_seed_same_start(self) -> None:
        a = initialize_parameters(ThreePLResponseModel(), 6, 4, get_rng(7))
        b = initialize_parameters(ThreePLResponseModel(), 6, 4, get_rng(7))
        for (name, x), (_, y) in zip(a.items(), b.items(), strict=True):
            np.testing.assert_array_equal(x, y, err_msg=name)

    def test_shared_prefix_across_models(self) -> None:
        """Abilities and difficulties are drawn first for every model."""
        rasch = initialize_parameters(RaschResponseModel(), 6, 4, get_rng(7))
        three = initialize_parameters(ThreePLResponseModel(), 6, 4, get_rng(7))
        np.testing.assert_array_equal(rasch.abilities, three.abilities)
        np.testing.assert_array_equal(rasch.difficulties, three.difficulties)
