"""Tests for missingness models."""

import numpy as np
import pytest

from irt_fit.core.constants import MISSING_VALUE
from irt_fit.core.utils import get_rng
from irt_fit.synthetic_data.missingness import (
    AbilityDependentMissingness,
    MCARMissingness,
    NoMissingness,
)


def _responses(n_persons: int, n_items: int) -> np.ndarray:
    return get_rng(0).integers(0, 2, size=(n_persons, n_items)).astype(
        np.int8
    )


class TestNoMissingness:
    def test_keeps_everything(self) -> None:
        responses = _responses(20, 5)
        result = NoMissingness().apply(responses, np.zeros(20), get_rng(1))
        np.testing.assert_array_equal(result, responses)


class TestMCARMissingness:
    def test_rate_is_respected(self) -> None:
        responses = _responses(1000, 20)
        result = MCARMissingness(rate=0.2).apply(
            responses, np.zeros(1000), get_rng(1)
        )
        observed_rate = np.mean(result == MISSING_VALUE)
        assert observed_rate == pytest.approx(0.2, abs=0.02)

    def test_does_not_modify_input(self) -> None:
        responses = _responses(50, 5)
        original = responses.copy()
        MCARMissingness(rate=0.5).apply(responses, np.zeros(50), get_rng(1))
        np.testing.assert_array_equal(responses, original)

    def test_observed_cells_unchanged(self) -> None:
        responses = _responses(50, 5)
        result = MCARMissingness(rate=0.3).apply(
            responses, np.zeros(50), get_rng(1)
        )
        kept = result != MISSING_VALUE
        np.testing.assert_array_equal(result[kept], responses[kept])

    @pytest.mark.parametrize("rate", [-0.1, 1.0])
    def test_invalid_rate(self, rate: float) -> None:
        with pytest.raises(ValueError, match="rate"):
            MCARMissingness(rate=rate)


class TestAbilityDependentMissingness:
    def test_rates_by_ability(self) -> None:
        model = AbilityDependentMissingness(
            base_rate=0.02, ability_effect=0.05, max_rate=0.3
        )
        rates = model.missing_rates(np.array([1.0, 0.0, -2.0, -20.0]), 3)

        assert rates.shape == (4, 3)
        np.testing.assert_allclose(rates[:, 0], [0.02, 0.02, 0.12, 0.3])

    def test_low_ability_skips_more(self) -> None:
        n = 2000
        abilities = np.concatenate([np.full(n, 1.0), np.full(n, -3.0)])
        model = AbilityDependentMissingness(base_rate=0.02, ability_effect=0.1)
        result = model.apply(_responses(2 * n, 10), abilities, get_rng(2))

        missing = result == MISSING_VALUE
        assert missing[n:].mean() > missing[:n].mean()

    def test_invalid_parameters(self) -> None:
        with pytest.raises(ValueError):
            AbilityDependentMissingness(base_rate=1.2)
        with pytest.raises(ValueError):
            AbilityDependentMissingness(max_rate=1.0)
        with pytest.raises(ValueError):
            AbilityDependentMissingness(ability_effect=-0.1)
