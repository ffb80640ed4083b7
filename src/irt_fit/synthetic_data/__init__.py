"""
Synthetic binary response data with known generating parameters.
"""

from irt_fit.synthetic_data.data_models import GeneratedData
from irt_fit.synthetic_data.generators import (
    generate_responses,
    sample_true_parameters,
)
from irt_fit.synthetic_data.missingness import (
    AbilityDependentMissingness,
    MCARMissingness,
    MissingnessModel,
    NoMissingness,
)

__all__ = [
    "AbilityDependentMissingness",
    "GeneratedData",
    "MCARMissingness",
    "MissingnessModel",
    "NoMissingness",
    "generate_responses",
    "sample_true_parameters",
]
