from dataclasses import dataclass

from irt_fit.core.data_models import ResponseMatrix
from irt_fit.irt.estimation.enums import ModelType
from irt_fit.irt.estimation.parameters import IRTParameters


@dataclass(frozen=True)
class GeneratedData:
    """
    Simulated responses together with the parameters that produced them.

    Attributes:
        responses: Simulated response matrix, with missingness applied.
        true_parameters: Generating abilities and item parameters.
        model_type: Response model used for simulation.
    """

    responses: ResponseMatrix
    true_parameters: IRTParameters
    model_type: ModelType
