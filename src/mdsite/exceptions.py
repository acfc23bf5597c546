"""Custom exceptions for mdsite."""


class MdsiteError(Exception):
    """Base exception for mdsite operations."""


class ConfigError(MdsiteError):
    """Project metadata or settings could not be loaded."""


class BuildError(MdsiteError):
    """Error while building the site tree."""


class UnresolvableLinkError(BuildError):
    """Category has no page or sub-category to link to."""


class RenderError(MdsiteError):
    """Template rendering failed for a page."""


class AssetError(MdsiteError):
    """Static or user asset copy failed (strict mode only)."""
