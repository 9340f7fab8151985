"""Custom exceptions for catalog loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when catalog files are missing or are not valid JSON."""


class DataValidationError(DataError):
    """Raised when catalog content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when a catalog entry clashes with or references other entries."""
