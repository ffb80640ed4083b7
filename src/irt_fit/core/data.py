"""
CSV loading utilities for binary response data.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from irt_fit.core.data_models import ResponseMatrix
from irt_fit.core.errors import ResponseValueError, ShapeError

PERSON_ID_COLUMN = "person_id"


def load_csv_to_response_matrix(
    path: Path,
) -> tuple[list[str], list[str], ResponseMatrix]:
    """Load a CSV file with binary responses into a ResponseMatrix.

    Expected CSV columns:
        - person_id: unique identifier for each person
        - one column per item holding 1 (correct), 0 (incorrect) or an
          empty cell (missing)

    Returns:
        Tuple of (person_ids, item_ids, ResponseMatrix).

    Raises:
        ValueError: If CSV format is invalid or data is inconsistent.
    """
    df = pd.read_csv(path, dtype=str)

    if PERSON_ID_COLUMN not in df.columns:
        raise ValueError(f"CSV must have '{PERSON_ID_COLUMN}' column")

    item_ids = [str(c) for c in df.columns if c != PERSON_ID_COLUMN]
    if not item_ids:
        raise ShapeError("CSV must have at least one item column")

    person_ids: list[str] = df[PERSON_ID_COLUMN].tolist()

    try:
        values = (
            df[item_ids]
            .apply(pd.to_numeric)
            .to_numpy(dtype=np.float64, na_value=np.nan)
        )
    except (ValueError, TypeError) as e:
        raise ResponseValueError(
            f"Item columns must contain only 0, 1 or empty cells: {e}"
        ) from e

    return person_ids, item_ids, ResponseMatrix.from_rows(values)
