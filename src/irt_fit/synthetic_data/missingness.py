"""
Missing response mechanisms for simulated data.

Missingness is applied after responses are sampled, by overwriting cells
with MISSING_VALUE.

Supports:
- NoMissingness: every response is kept
- MCARMissingness: Missing Completely At Random
- AbilityDependentMissingness: Lower ability -> higher missing rate
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from numpy.random import Generator
from numpy.typing import NDArray

from irt_fit.core.constants import MISSING_VALUE


class MissingnessModel(ABC):
    """Abstract base class for missingness models."""

    @abstractmethod
    def missing_rates(
        self, abilities: NDArray[np.float64], n_items: int
    ) -> NDArray[np.float64]:
        """
        Probability that each cell is missing.

        Args:
            abilities: True abilities, shape (n_persons,).
            n_items: Number of items.

        Returns:
            Array of shape (n_persons, n_items) with values in [0, 1).
        """
        ...

    def apply(
        self,
        responses: NDArray[np.int8],
        abilities: NDArray[np.float64],
        rng: Generator,
    ) -> NDArray[np.int8]:
        """Return a copy of responses with sampled cells set missing."""
        rates = self.missing_rates(abilities, responses.shape[1])
        mask = rng.random(responses.shape) < rates
        result = responses.copy()
        result[mask] = MISSING_VALUE
        return result


@dataclass(frozen=True)
class NoMissingness(MissingnessModel):
    """No response is ever missing."""

    def missing_rates(
        self, abilities: NDArray[np.float64], n_items: int
    ) -> NDArray[np.float64]:
        return np.zeros((len(abilities), n_items), dtype=np.float64)


@dataclass(frozen=True)
class MCARMissingness(MissingnessModel):
    """Missing Completely At Random.

    Attributes:
        rate: Probability that any given response is missing, in [0, 1).
    """

    rate: float = 0.05

    def __post_init__(self) -> None:
        if not (0.0 <= self.rate < 1.0):
            raise ValueError(f"rate must be in [0, 1), got {self.rate}")

    def missing_rates(
        self, abilities: NDArray[np.float64], n_items: int
    ) -> NDArray[np.float64]:
        return np.full((len(abilities), n_items), self.rate, dtype=np.float64)


@dataclass(frozen=True)
class AbilityDependentMissingness(MissingnessModel):
    """Lower ability persons are more likely to skip items.

    rate(θ) = min(max_rate,
                  base_rate + ability_effect * max(0, threshold - θ))

    Attributes:
        base_rate: Base missing rate for all persons.
        ability_effect: Increase in missing rate per unit below threshold.
        ability_threshold: Ability level below which missingness increases.
        max_rate: Maximum missing rate for any person.
    """

    base_rate: float = 0.02
    ability_effect: float = 0.05
    ability_threshold: float = 0.0
    max_rate: float = 0.3

    def __post_init__(self) -> None:
        if not (0.0 <= self.base_rate < 1.0):
            raise ValueError(
                f"base_rate must be in [0, 1), got {self.base_rate}"
            )
        if not (0.0 <= self.max_rate < 1.0):
            raise ValueError(
                f"max_rate must be in [0, 1), got {self.max_rate}"
            )
        if self.ability_effect < 0.0:
            raise ValueError(
                f"ability_effect must be >= 0, got {self.ability_effect}"
            )

    def missing_rates(
        self, abilities: NDArray[np.float64], n_items: int
    ) -> NDArray[np.float64]:
        shortfall = np.maximum(0.0, self.ability_threshold - abilities)
        person_rates = np.minimum(
            self.max_rate, self.base_rate + self.ability_effect * shortfall
        )
        result: NDArray[np.float64] = np.repeat(
            person_rates[:, np.newaxis], n_items, axis=1
        )
        return result
