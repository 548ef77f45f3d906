"""Errors raised by components that consume finished options."""


class ConfigurationError(ValueError):
    """Options cannot be used as given, e.g. a codec is missing."""
