"""Exceptions raised while configuring fraction conversion."""


class InvalidConfigurationError(ValueError):
    """Raised at construction time when options cannot be used."""


class InvalidArgumentError(InvalidConfigurationError, TypeError):
    """Raised when a value object is built from arguments of the wrong type."""
