"""
Missing-data resolution for binary responses.

A missing response is handled according to a MissingStrategy:
    - IGNORE: the cell is skipped, it adds nothing to likelihood or gradient
    - TREAT_AS_INCORRECT: the cell counts as 0
    - TREAT_AS_CORRECT: the cell counts as 1
Observed cells always keep their value.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from irt_fit.core.constants import MISSING_VALUE
from irt_fit.core.data_models import ResponseMatrix, is_missing_cell
from irt_fit.irt.estimation.enums import MissingStrategy

_MISSING_FILL = {
    MissingStrategy.TREAT_AS_INCORRECT: 0,
    MissingStrategy.TREAT_AS_CORRECT: 1,
}


def _is_missing(cell: Any) -> bool:
    if is_missing_cell(cell):
        return True
    return bool(cell == MISSING_VALUE)


def resolve_missing(
    cell: Any, strategy: MissingStrategy
) -> tuple[int | None, bool]:
    """
    Resolve one raw response cell.

    Args:
        cell: 0, 1, or a missing marker (None, NaN, pd.NA or
            MISSING_VALUE).
        strategy: Missing-data strategy.

    Returns:
        (value, skip). skip is True only for a missing cell under IGNORE,
        in which case value is None.
    """
    if not _is_missing(cell):
        return int(cell), False
    if strategy == MissingStrategy.IGNORE:
        return None, True
    return _MISSING_FILL[strategy], False


@dataclass(frozen=True)
class ResolvedResponses:
    """
    Response matrix after missing-data resolution.

    Attributes:
        values: Float responses (0.0 or 1.0), shape (n_persons, n_items).
            Skipped cells hold 0.0 and must be masked out via observed.
        observed: True where the cell enters likelihood and gradient.
    """

    values: NDArray[np.float64]
    observed: NDArray[np.bool_]

    @property
    def n_observed(self) -> int:
        return int(self.observed.sum())


def resolve_responses(
    data: ResponseMatrix, strategy: MissingStrategy
) -> ResolvedResponses:
    """
    Apply resolve_missing to every cell of a response matrix at once.

    Args:
        data: Response matrix.
        strategy: Missing-data strategy.

    Returns:
        ResolvedResponses with C-contiguous arrays.
    """
    missing = data.missing_mask
    values = np.where(missing, 0, data.responses).astype(np.float64)

    if strategy == MissingStrategy.IGNORE:
        observed = ~missing
    else:
        values[missing] = float(_MISSING_FILL[strategy])
        observed = np.ones_like(missing, dtype=np.bool_)

    return ResolvedResponses(
        values=np.ascontiguousarray(values),
        observed=np.ascontiguousarray(observed),
    )
