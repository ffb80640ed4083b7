"""Tests for the IRT parameter container."""

import numpy as np
import pytest

from irt_fit.irt.estimation.parameters import IRTParameters


def _params() -> IRTParameters:
    return IRTParameters(
        abilities=np.array([0.1, -0.2, 0.3]),
        difficulties=np.array([0.0, 0.5]),
        discriminations=np.array([1.0, 1.2]),
    )


class TestIRTParameters:
    def test_names_skip_absent_vectors(self) -> None:
        assert _params().names == (
            "abilities",
            "difficulties",
            "discriminations",
        )
        assert _params().n_values == 7

    def test_copy_is_independent(self) -> None:
        params = _params()
        copied = params.copy()
        copied.abilities[0] = 99.0
        assert params.abilities[0] == 0.1
        assert copied.guessings is None

    def test_zeros_like(self) -> None:
        zeros = _params().zeros_like()
        assert zeros.names == _params().names
        for _, values in zeros.items():
            assert not values.any()

    def test_step(self) -> None:
        params = _params()
        gradient = params.zeros_like()
        gradient.abilities[:] = 1.0
        gradient.discriminations[:] = -2.0  # type: ignore[index]

        params.step(gradient, 0.1)

        np.testing.assert_allclose(params.abilities, [0.2, -0.1, 0.4])
        np.testing.assert_allclose(params.difficulties, [0.0, 0.5])
        np.testing.assert_allclose(
            params.discriminations, [0.8, 1.0]  # type: ignore[arg-type]
        )

    def test_restore_is_in_place(self) -> None:
        params = _params()
        abilities = params.abilities
        snapshot = params.copy()
        params.abilities += 5.0

        params.restore(snapshot)

        assert params.abilities is abilities
        np.testing.assert_array_equal(params.abilities, snapshot.abilities)

    def test_mean_abs_change(self) -> None:
        params = _params()
        other = params.copy()
        other.abilities[0] += 0.7
        other.difficulties[1] -= 0.7
        assert params.mean_abs_change(other) == pytest.approx(1.4 / 7)

    def test_mean_abs_change_identical(self) -> None:
        params = _params()
        assert params.mean_abs_change(params.copy()) == 0.0

    def test_as_dict_returns_copies(self) -> None:
        params = _params()
        result = params.as_dict()
        result["difficulties"][0] = 42.0
        assert params.difficulties[0] == 0.0
        assert list(result) == list(params.names)
