"""
Domain exceptions for navguard.

Only configuration problems are modelled here. Errors raised while a guard is
being evaluated are never wrapped: they propagate unmodified to the caller.
"""


class GuardError(Exception):
    """Base class for all navguard exceptions."""


class ConfigurationError(GuardError, ValueError):
    """
    Raised synchronously when a guard, matcher or policy is constructed
    with invalid arguments.

    Examples: an N-ary combinator with no children, an empty redirect or
    fallback path, or a policy document that does not satisfy the schema.
    """

    def __init__(self, message: str, field: str | None = None):
        """
        Args:
            message: Human-readable error message
            field: Name of the offending argument or policy key, if known
        """
        super().__init__(message)
        self.field = field
