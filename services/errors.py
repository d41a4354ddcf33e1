"""
Errors raised by the provider adapters and the learning path service.
"""


class ProviderError(RuntimeError):
    """Raised when the Gemini SDK cannot be loaded or a model handle cannot be created."""


class PathValidationError(ValueError):
    """Raised when a generation request carries no usable skills."""
