"""Domain-level exceptions.

All billing errors are expressed as subclasses of BillingException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class BillingException(Exception):
    """Base class for all billing errors."""


class ValidationError(BillingException):
    """A value-object invariant or configuration rule was violated."""


class UnreachableError(BillingException):
    """The payment network could not be contacted.

    This is NOT a decline: the charge was never attempted.
    """
