"""wxr error hierarchy.

All wxr-specific errors inherit from WxrError for easy catching.
"""


class WxrError(Exception):
    """Base error for all wxr operations."""


class ConfigError(WxrError):
    """Invalid or missing configuration."""


class ExportError(WxrError):
    """Error while building or writing the export document."""
