"""Tabby error hierarchy.

All tabby-specific errors inherit from TabbyError for easy catching.
"""


class TabbyError(Exception):
    """Base error for all tabby operations."""


class ValidationError(TabbyError, ValueError):
    """A record violates a Sitemaps Protocol constraint."""


class ConfigError(TabbyError):
    """Invalid or missing configuration."""


class InputError(TabbyError):
    """URL records could not be read or have the wrong shape."""


class ExportError(TabbyError):
    """Error while writing generated documents."""
