"""
Exception types raised while validating inputs and configuration.

All of them subclass ValueError so callers that already guard model
construction with ``except ValueError`` keep working.
"""


class ConfigurationError(ValueError):
    """Invalid estimator configuration (unknown strategy, bad bounds, ...)."""


class ShapeError(ValueError):
    """Response data is not a non-empty rectangular matrix."""


class ResponseValueError(ValueError):
    """A response cell is not correct, incorrect or missing."""
