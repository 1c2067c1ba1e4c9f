"""Exceptions raised by wordbreak components."""


class InvalidConfigurationError(ValueError):
    """Raised when a component is constructed without usable options."""
    pass
