"""
exceptions.py: Errors raised by the game package.
"""


class ConfigError(ValueError):
    """Raised when a configuration option is unknown or has an invalid value."""
