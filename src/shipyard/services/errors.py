"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a module cannot be created."""
