"""Exceptions raised by the password strength package."""


class PasswordStrengthError(Exception):
    """Base class for errors raised on purpose by this package."""

    pass


class InvalidInputError(PasswordStrengthError, ValueError):
    """Raised when a password or corpus is not valid, decodable text."""

    pass


class ConfigurationError(PasswordStrengthError, ValueError):
    """Raised when an environment setting cannot be parsed or is out of range."""

    pass
