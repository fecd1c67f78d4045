class AnonymizationError(Exception):
    """Base exception for all anonymization-related errors."""


class PseudonymAllocationError(AnonymizationError, ValueError):
    """Raised when a pseudonym is requested for an invalid sequence index."""
