"""Exceptions raised while generating passwords."""


class PasswordGenerationError(Exception):
    """Base class for errors that abort password generation."""

class ConfigurationError(PasswordGenerationError, ValueError):
    """The resolved options cannot produce a valid password (bad length/count, or an empty required character pool)."""

class EntropyUnavailable(PasswordGenerationError, RuntimeError):
    """The operating system's random source could not be read."""
