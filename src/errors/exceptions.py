"""
Error hierarchy for the translation consistency checker.

Fatal conditions (bad configuration, a missing base language, an unreadable
catalog) are raised as exceptions. Per-key problems found while checking are
never raised: they are findings in the report.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class I18nCheckError(Exception):
    """
    Base exception for all checker errors.

    Carries an error code and a context dict so the CLI can log the failure
    as structured data.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(I18nCheckError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class MissingBaseLanguageError(I18nCheckError):
    """The base language was never loaded into the catalog."""

    def __init__(self, base_lang: str, available: Optional[list] = None, **kwargs):
        available = sorted(available or [])
        super().__init__(
            f"Base language '{base_lang}' not found in catalog",
            context={"base_lang": base_lang, "available_languages": available},
            **kwargs
        )
        self.base_lang = base_lang


class MalformedCatalogError(I18nCheckError):
    """A translation file could not be read or parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        language: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, context={"path": path, "language": language}, **kwargs)
        self.path = path


class SourceScanError(I18nCheckError):
    """A source file could not be read during usage scanning."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path}, **kwargs)
        self.path = path



class ReportExportError(I18nCheckError):
    """The report could not be written to its output file."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path}, **kwargs)
        self.path = path
