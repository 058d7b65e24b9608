"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are missing or inconsistent for the environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a provider implementation cannot be selected."""

    pass
