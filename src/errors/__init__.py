"""
Error handling for the translation consistency checker.

- Structured error hierarchy
- Context tracking for tolerated errors
"""

from .exceptions import (
    I18nCheckError,
    ConfigurationError,
    MissingBaseLanguageError,
    MalformedCatalogError,
    ReportExportError,
    SourceScanError,
)

from .handlers import ErrorContextManager

__all__ = [
    # Exceptions
    "I18nCheckError",
    "ConfigurationError",
    "MissingBaseLanguageError",
    "MalformedCatalogError",
    "ReportExportError",
    "SourceScanError",

    # Handlers
    "ErrorContextManager",
]
