"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are present but unusable (e.g. an empty store URL)."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be resolved for the requested component."""

    pass
