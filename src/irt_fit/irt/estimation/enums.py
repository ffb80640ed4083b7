from enum import Enum
from typing import Self

from irt_fit.core.errors import ConfigurationError


class _ParsableEnum(str, Enum):
    @classmethod
    def parse(cls, value: "Self | str") -> Self:
        """Coerce a member or its string value, rejecting anything else."""
        try:
            return cls(value)
        except (ValueError, TypeError) as e:
            choices = ", ".join(repr(member.value) for member in cls)
            raise ConfigurationError(
                f"{cls.__name__} must be one of {choices}, got {value!r}"
            ) from e


class ConvergenceStatus(str, Enum):
    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"


class MissingStrategy(_ParsableEnum):
    IGNORE = "ignore"
    TREAT_AS_INCORRECT = "treat_as_incorrect"
    TREAT_AS_CORRECT = "treat_as_correct"


class ModelType(_ParsableEnum):
    RASCH = "1pl"
    TWO_PL = "2pl"
    THREE_PL = "3pl"
