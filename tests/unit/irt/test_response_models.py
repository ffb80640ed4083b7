"""
Tests for the 1PL, 2PL and 3PL response models.
"""

import numpy as np
import pytest

from irt_fit.core.errors import ConfigurationError
from irt_fit.irt.estimation.config import ParameterBounds
from irt_fit.irt.estimation.enums import ModelType
from irt_fit.irt.estimation.parameters import IRTParameters
from irt_fit.irt.response_models import (
    RaschResponseModel,
    ThreePLResponseModel,
    TwoPLResponseModel,
    get_response_model,
    rasch_probability,
    three_pl_probability,
    two_pl_probability,
)


def _params(
    n_persons: int = 3,
    n_items: int = 2,
    with_a: bool = True,
    with_c: bool = True,
) -> IRTParameters:
    return IRTParameters(
        abilities=np.linspace(-1.0, 1.0, n_persons),
        difficulties=np.linspace(-0.5, 0.5, n_items),
        discriminations=np.full(n_items, 1.5) if with_a else None,
        guessings=np.full(n_items, 0.2) if with_c else None,
    )


class TestProbabilityFunctions:
    def test_rasch_half_at_difficulty(self) -> None:
        assert rasch_probability(0.7, 0.7) == pytest.approx(0.5)

    def test_rasch_known_value(self) -> None:
        expected = 1.0 / (1.0 + np.exp(-1.0))
        assert rasch_probability(1.0, 0.0) == pytest.approx(expected)

    def test_two_pl_reduces_to_rasch_with_unit_discrimination(self) -> None:
        theta = np.array([-2.0, 0.0, 1.5])
        np.testing.assert_allclose(
            two_pl_probability(theta, 1.0, 0.3),
            rasch_probability(theta, 0.3),
        )

    def test_two_pl_discrimination_sharpens(self) -> None:
        """Higher discrimination moves P further from 0.5 at the same θ."""
        low = two_pl_probability(1.0, 0.5, 0.0)
        high = two_pl_probability(1.0, 2.0, 0.0)
        assert high > low > 0.5

    def test_three_pl_lower_asymptote(self) -> None:
        """Very low ability persons still succeed with probability c."""
        p = three_pl_probability(-50.0, 1.0, 0.0, 0.25)
        assert p == pytest.approx(0.25)

    def test_three_pl_reduces_to_two_pl_without_guessing(self) -> None:
        theta = np.array([-1.0, 0.0, 2.0])
        np.testing.assert_allclose(
            three_pl_probability(theta, 1.2, 0.1, 0.0),
            two_pl_probability(theta, 1.2, 0.1),
        )

    def test_probabilities_strictly_inside_unit_interval(self) -> None:
        theta = np.linspace(-5, 5, 21)
        for p in (
            rasch_probability(theta, 0.0),
            two_pl_probability(theta, 1.3, 0.2),
            three_pl_probability(theta, 1.3, 0.2, 0.1),
        ):
            assert np.all(p > 0.0)
            assert np.all(p < 1.0)

    def test_extreme_logits_are_finite(self) -> None:
        p = rasch_probability(np.array([-800.0, 800.0]), 0.0)
        assert np.all(np.isfinite(p))


class TestResponseModels:
    def test_grid_shapes(self) -> None:
        params = _params(n_persons=4, n_items=3)
        for model in (
            RaschResponseModel(),
            TwoPLResponseModel(),
            ThreePLResponseModel(),
        ):
            assert model.compute_probabilities(params).shape == (4, 3)

    def test_grid_matches_scalar_functions(self) -> None:
        params = _params()
        probs = ThreePLResponseModel().compute_probabilities(params)
        assert params.discriminations is not None
        assert params.guessings is not None

        for i, theta in enumerate(params.abilities):
            for j, b in enumerate(params.difficulties):
                expected = three_pl_probability(
                    theta, params.discriminations[j], b, params.guessings[j]
                )
                assert probs[i, j] == pytest.approx(expected)

    def test_rasch_ignores_item_extras(self) -> None:
        """1PL uses only θ and b even if other vectors are present."""
        with_extras = _params()
        without = _params(with_a=False, with_c=False)
        np.testing.assert_array_equal(
            RaschResponseModel().compute_probabilities(with_extras),
            RaschResponseModel().compute_probabilities(without),
        )

    def test_parameter_names(self) -> None:
        assert RaschResponseModel.parameter_names == (
            "abilities",
            "difficulties",
        )
        assert "discriminations" in TwoPLResponseModel.parameter_names
        assert "guessings" not in TwoPLResponseModel.parameter_names
        assert "guessings" in ThreePLResponseModel.parameter_names


class TestGradientTerms:
    def test_rasch_terms_are_the_residual(self) -> None:
        error = np.array([[0.5, -0.25], [0.1, 0.0]])
        terms = RaschResponseModel().gradient_terms(error, _params(2, 2))

        np.testing.assert_array_equal(terms.ability, error)
        assert terms.discrimination is None
        assert terms.guessing is None

    def test_two_pl_terms(self) -> None:
        params = _params(2, 2, with_c=False)
        error = np.array([[0.5, -0.25], [0.1, 0.3]])
        terms = TwoPLResponseModel().gradient_terms(error, params)

        np.testing.assert_allclose(terms.ability, error * 1.5)
        centered = params.abilities[:, None] - params.difficulties[None, :]
        assert terms.discrimination is not None
        np.testing.assert_allclose(terms.discrimination, error * centered)
        assert terms.guessing is None

    def test_three_pl_terms(self) -> None:
        params = _params(2, 2)
        error = np.array([[0.5, -0.25], [0.1, 0.3]])
        terms = ThreePLResponseModel().gradient_terms(error, params)

        np.testing.assert_allclose(terms.ability, error * 1.5 * 0.8)
        centered = params.abilities[:, None] - params.difficulties[None, :]
        assert terms.discrimination is not None
        np.testing.assert_allclose(
            terms.discrimination, error * centered * 0.8
        )
        assert terms.guessing is not None
        np.testing.assert_array_equal(terms.guessing, error)


class TestClamp:
    def test_clamps_discrimination_and_guessing(self) -> None:
        params = IRTParameters(
            abilities=np.array([10.0]),
            difficulties=np.array([-10.0, 3.0]),
            discriminations=np.array([-1.0, 7.0]),
            guessings=np.array([-0.1, 0.9]),
        )
        ThreePLResponseModel().clamp(params, ParameterBounds())

        assert params.discriminations is not None
        assert params.guessings is not None
        np.testing.assert_array_equal(params.discriminations, [0.01, 5.0])
        np.testing.assert_array_equal(params.guessings, [0.0, 0.35])
        # Abilities and difficulties are never bounded
        np.testing.assert_array_equal(params.abilities, [10.0])
        np.testing.assert_array_equal(params.difficulties, [-10.0, 3.0])

    def test_clamp_keeps_arrays_in_place(self) -> None:
        discriminations = np.array([9.0])
        params = IRTParameters(
            abilities=np.zeros(1),
            difficulties=np.zeros(1),
            discriminations=discriminations,
        )
        TwoPLResponseModel().clamp(params, ParameterBounds())
        assert params.discriminations is discriminations
        assert discriminations[0] == 5.0


class TestGetResponseModel:
    @pytest.mark.parametrize(
        ("model_type", "expected"),
        [
            (ModelType.RASCH, RaschResponseModel),
            ("2pl", TwoPLResponseModel),
            ("3pl", ThreePLResponseModel),
        ],
    )
    def test_lookup(self, model_type: ModelType | str, expected: type) -> None:
        assert isinstance(get_response_model(model_type), expected)

    def test_unknown_model(self) -> None:
        with pytest.raises(ConfigurationError, match="ModelType"):
            get_response_model("4pl")


class TestSinglePairProbability:
    def test_rasch(self) -> None:
        p = RaschResponseModel().probability(0.5, difficulty=0.5)
        assert isinstance(p, float)
        assert p == pytest.approx(0.5)

    def test_two_pl(self) -> None:
        p = TwoPLResponseModel().probability(
            1.0, discrimination=2.0, difficulty=0.0
        )
        assert p == pytest.approx(1.0 / (1.0 + np.exp(-2.0)))

    def test_three_pl(self) -> None:
        p = ThreePLResponseModel().probability(
            0.0, discrimination=1.0, difficulty=0.0, guessing=0.2
        )
        assert p == pytest.approx(0.6)

    def test_missing_item_parameter(self) -> None:
        with pytest.raises(TypeError):
            TwoPLResponseModel().probability(0.0, difficulty=0.0)

    def test_unknown_item_parameter(self) -> None:
        with pytest.raises(TypeError):
            RaschResponseModel().probability(0.0, difficulty=0.0, slope=1.0)
