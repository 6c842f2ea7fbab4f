"""
Error hierarchy for i18n-sync.

Every error carries a machine-readable code and a context dict so the
top-level handler can log it as structured fields.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone


class I18nSyncError(Exception):
    """
    Base exception for all i18n-sync errors.

    Holds the error code, structured context and the underlying exception
    (if any) that triggered it.
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
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(I18nSyncError):
    """Invalid run settings."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class LocaleStoreError(I18nSyncError):
    """The translations root cannot be listed."""

    def __init__(self, message: str, root: Optional[str] = None, **kwargs):
        super().__init__(message, context={"root": root}, **kwargs)


class TranslationFileError(I18nSyncError):
    """A locale file exists but does not hold a translation tree."""

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        file: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, context={"locale": locale, "file": file}, **kwargs)


class KeyPathError(I18nSyncError):
    """A key path cannot be resolved or assigned."""

    def __init__(self, message: str, path: Optional[str] = None, segment: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path, "segment": segment}, **kwargs)
