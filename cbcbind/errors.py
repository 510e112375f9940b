"""Exceptions raised while validating a problem before it reaches the engine.

Failures of the engine itself are not wrapped: they surface as
``pulp.PulpSolverError``, the exception pulp raises for its command line solvers."""


class ValidationError(ValueError):
    """Raised when a problem or its options are rejected before solving."""


class ShapeError(ValidationError):
    """Raised when a vector does not match the dimensions of the constraint matrix."""


class OptionError(ValidationError):
    """Raised when a CBC option name does not look like a command line flag."""
