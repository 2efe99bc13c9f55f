"""Domain-specific exceptions for valuation workflows."""


class ValidationError(ValueError):
    """Raised when valuation input data is incomplete or invalid."""


class NoApplicableMethodsError(RuntimeError):
    """Raised when no valuation method applies to the requested stage."""
