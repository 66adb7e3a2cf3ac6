"""Exceptions."""


class InvalidArgumentError(ValueError):
    """Raised when a cross-section cannot be used to compute water flow."""
