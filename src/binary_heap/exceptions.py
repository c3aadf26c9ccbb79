class ConfigurationError(ValueError):
    """Raised when a heap is built or reconfigured with inconsistent arguments."""


class EmptyContainerError(RuntimeError):
    """Raised when reading from or removing out of an empty heap."""
