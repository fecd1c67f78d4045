class InsightDataError(Exception):
    """Base exception for insight data package errors."""


class PackageValidationError(InsightDataError):
    """Raised when a raw payload does not have the insight data package shape."""
