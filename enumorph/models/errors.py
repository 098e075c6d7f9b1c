"""Exceptions raised by enumorph."""


class InvalidConfigurationError(ValueError):
    """Raised when a converter or matcher is built with missing or invalid arguments."""
