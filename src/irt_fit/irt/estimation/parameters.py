"""
Parameter containers for binary IRT models.

One IRTParameters instance holds every vector a model variant estimates:
    - abilities (theta), one per person
    - difficulties (b), one per item
    - discriminations (a), one per item, 2PL and 3PL only
    - guessings (c), one per item, 3PL only

Vectors a variant does not use are None. The same container is used for
gradients, so updates and snapshots can be expressed field by field.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import NDArray

PARAMETER_NAMES = ("abilities", "difficulties", "discriminations", "guessings")


@dataclass
class IRTParameters:
    """
    Person and item parameter vectors for one model instance.

    Attributes:
        abilities: Person abilities, shape (n_persons,).
        difficulties: Item difficulties, shape (n_items,).
        discriminations: Item discriminations, shape (n_items,), or None.
        guessings: Item lower asymptotes, shape (n_items,), or None.
    """

    abilities: NDArray[np.float64]
    difficulties: NDArray[np.float64]
    discriminations: NDArray[np.float64] | None = None
    guessings: NDArray[np.float64] | None = None

    def items(self) -> Iterator[tuple[str, NDArray[np.float64]]]:
        """Yield (name, vector) for every vector present, in fixed order."""
        for name in PARAMETER_NAMES:
            values = getattr(self, name)
            if values is not None:
                yield name, values

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.items())

    @property
    def n_values(self) -> int:
        """Total number of scalar parameters across all vectors."""
        return sum(values.size for _, values in self.items())

    def copy(self) -> Self:
        """Deep copy: every vector in the result is an independent array."""
        return type(self)(
            **{name: values.copy() for name, values in self.items()}
        )

    def zeros_like(self) -> Self:
        """Zero-filled container with the same vectors and shapes."""
        return type(self)(
            **{
                name: np.zeros_like(values, dtype=np.float64)
                for name, values in self.items()
            }
        )

    def step(self, gradient: "IRTParameters", learning_rate: float) -> None:
        """In place ascent step: param += learning_rate * gradient."""
        for name, values in self.items():
            values += learning_rate * getattr(gradient, name)

    def restore(self, snapshot: "IRTParameters") -> None:
        """Overwrite every vector in place with the snapshot's values."""
        for name, values in self.items():
            values[...] = getattr(snapshot, name)

    def mean_abs_change(self, other: "IRTParameters") -> float:
        """
        Mean absolute elementwise difference, pooled over all vectors.

        Returns 0.0 when there are no parameters at all.
        """
        total = 0.0
        count = 0
        for name, values in self.items():
            total += float(np.abs(values - getattr(other, name)).sum())
            count += values.size
        if count == 0:
            return 0.0
        return total / count

    def as_dict(self) -> dict[str, NDArray[np.float64]]:
        """Independent copies of the present vectors keyed by name."""
        return {name: values.copy() for name, values in self.items()}
