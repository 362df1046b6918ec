"""
Custom exceptions for the logistics routing core.

This module defines the small hierarchy of exceptions used by logipath. Most
routing failures are *not* exceptions: unknown locations, an empty network or an
unreachable destination are reported through an empty ``PathResult`` carrying a
descriptive message. The classes below cover the remaining cases, where the
caller handed over data that cannot be read at all, or where the core itself
broke one of its own invariants.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    This exception is raised when a network document does not match the
    expected structure, before any graph is built from it.

    Examples:
        * A location list that is not a JSON array
        * A route whose distance is not a number
        * A document missing the ``locations`` key
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph operation fails.

    Examples:
        * Path reconstruction walking off the predecessor chain
        * A strategy producing a path whose totals do not reconcile
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class PathReconstructionError(GraphOperationError):
    """
    Raised when a predecessor chain cannot be walked back to the source.

    This signals a bug in a strategy's bookkeeping rather than a legitimate
    "no route" outcome, so it is kept distinct from the empty result.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * An unknown strategy name passed to the facade or the CLI
        * A negative memory limit
    """
