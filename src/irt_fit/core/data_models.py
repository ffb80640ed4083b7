"""
Data models for IRT estimation input.

This module defines the data structure for:
- ResponseMatrix: persons x items binary responses with missing cells
"""

from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Real
from typing import Any, Self

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from irt_fit.core.constants import MISSING_VALUE, VALID_RESPONSE_CODES
from irt_fit.core.errors import ResponseValueError, ShapeError


def is_missing_cell(cell: Any) -> bool:
    """True for the missing markers None, NaN, pd.NA and NaT."""
    return bool(pd.api.types.is_scalar(cell) and pd.isna(cell))


def _encode_cell(cell: Any) -> int:
    """Map one raw cell (0, 1 or a missing marker) to its int8 code."""
    if is_missing_cell(cell):
        return MISSING_VALUE
    if isinstance(cell, (bool, np.bool_)):
        return int(cell)
    if isinstance(cell, Real) and cell in VALID_RESPONSE_CODES:
        return int(cell)
    raise ResponseValueError(
        f"Response cells must be 0, 1 or missing "
        f"(None/NaN/{MISSING_VALUE}), got {cell!r}"
    )


@dataclass(frozen=True)
class ResponseMatrix:
    """
    Binary response data for IRT estimation.

    Attributes:
        responses: Array of shape (n_persons, n_items). 1 is a correct
            response, 0 an incorrect one and MISSING_VALUE a missing one.
    """

    responses: NDArray[np.int8]

    def __post_init__(self) -> None:
        """Validate response matrix."""
        if not isinstance(self.responses, np.ndarray):
            raise ShapeError(
                f"responses must be a numpy array, got "
                f"{type(self.responses).__name__}"
            )
        if self.responses.ndim != 2:
            raise ShapeError(
                f"responses must be 2D, got shape {self.responses.shape}"
            )
        n_rows, n_cols = self.responses.shape
        if n_rows == 0 or n_cols == 0:
            raise ShapeError(
                f"responses must have at least one person and one item, "
                f"got shape {self.responses.shape}"
            )
        unexpected = set(np.unique(self.responses).tolist()) - (
            VALID_RESPONSE_CODES
        )
        if unexpected:
            raise ResponseValueError(
                f"Response values must be 0, 1 or {MISSING_VALUE}, "
                f"got {sorted(unexpected)}"
            )

    @classmethod
    def from_rows(cls, rows: Any) -> Self:
        """
        Build a response matrix from nested rows or a 2D array.

        Missing cells may be given as None or NaN. Pandas DataFrames and
        anything else exposing ``to_numpy`` are accepted as well.

        Args:
            rows: Sequence of equally sized rows, or a 2D array.

        Returns:
            Validated ResponseMatrix.

        Raises:
            ShapeError: If the rows are ragged or the matrix is empty.
            ResponseValueError: If a cell is not 0, 1 or missing.
        """
        if isinstance(rows, cls):
            return rows
        if hasattr(rows, "to_numpy"):
            rows = rows.to_numpy(dtype=np.float64)
        if isinstance(rows, np.ndarray) and rows.dtype != object:
            return cls._from_array(rows)

        row_list = list(rows)
        if not row_list:
            raise ShapeError("responses must have at least one person")

        for row in row_list:
            if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
                raise ShapeError(
                    f"Each row must be a sequence of responses, got {row!r}"
                )
        encoded = [[_encode_cell(cell) for cell in row] for row in row_list]
        widths = {len(row) for row in encoded}
        if len(widths) != 1:
            raise ShapeError(
                f"All rows must have the same number of items, "
                f"got lengths {sorted(widths)}"
            )

        return cls(responses=np.array(encoded, dtype=np.int8))

    @classmethod
    def _from_array(cls, array: NDArray[Any]) -> Self:
        if array.ndim != 2:
            raise ShapeError(f"responses must be 2D, got shape {array.shape}")
        if np.issubdtype(array.dtype, np.floating):
            array = np.where(np.isnan(array), MISSING_VALUE, array)
        # Checked on the source dtype so out-of-range codes cannot wrap
        valid = np.isin(array, list(VALID_RESPONSE_CODES))
        if not np.all(valid):
            bad = np.unique(array[~valid])[:5].tolist()
            raise ResponseValueError(
                f"Response values must be 0, 1 or missing "
                f"(NaN/{MISSING_VALUE}), got {bad}"
            )
        return cls(responses=array.astype(np.int8))

    @property
    def n_persons(self) -> int:
        """Number of persons (rows)."""
        return self.responses.shape[0]

    @property
    def n_items(self) -> int:
        """Number of items (columns)."""
        return self.responses.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_persons, self.n_items

    @property
    def missing_mask(self) -> NDArray[np.bool_]:
        """Boolean mask where True indicates missing response."""
        result: NDArray[np.bool_] = self.responses == MISSING_VALUE
        return result

    @property
    def valid_mask(self) -> NDArray[np.bool_]:
        """Boolean mask where True indicates valid (non-missing) response."""
        result: NDArray[np.bool_] = self.responses != MISSING_VALUE
        return result

    @property
    def n_missing(self) -> int:
        return int(self.missing_mask.sum())

    def proportion_correct(self) -> NDArray[np.float64]:
        """
        Proportion of correct responses per item, ignoring missing cells.

        Items with no valid responses get NaN.
        """
        valid = self.valid_mask
        n_valid = valid.sum(axis=0)
        n_correct = (self.responses == 1).sum(axis=0)
        with np.errstate(invalid="ignore", divide="ignore"):
            result: NDArray[np.float64] = np.where(
                n_valid > 0, n_correct / np.maximum(n_valid, 1), np.nan
            )
        return result
