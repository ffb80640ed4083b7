import numpy as np

from irt_fit.core.utils import get_rng, logistic


def test_rng_reproducibility() -> None:
    rng1 = get_rng(42)
    rng2 = get_rng(42)
    assert rng1.random() == rng2.random()


class TestLogistic:
    def test_zero_is_half(self) -> None:
        assert logistic(0.0) == 0.5

    def test_symmetry(self) -> None:
        """σ(-x) = 1 - σ(x)."""
        x = np.linspace(-5, 5, 11)
        np.testing.assert_allclose(logistic(-x), 1.0 - logistic(x))

    def test_saturates(self) -> None:
        """Extreme logits give finite values in [0, 1]."""
        values = logistic(np.array([-1000.0, 1000.0]))
        assert np.all(np.isfinite(values))
        assert values[0] >= 0.0
        assert values[1] <= 1.0
        np.testing.assert_allclose(values, [0.0, 1.0], atol=1e-12)
