"""
Error handling for i18n-sync:
- Structured error hierarchy
- Fatal error handler for CLI commands
"""

from .exceptions import (
    I18nSyncError,
    ConfigurationError,
    LocaleStoreError,
    TranslationFileError,
    KeyPathError,
)

from .handlers import (
    EXIT_OK,
    EXIT_FAILURE,
    handle_fatal_errors,
)

__all__ = [
    # Exceptions
    "I18nSyncError",
    "ConfigurationError",
    "LocaleStoreError",
    "TranslationFileError",
    "KeyPathError",

    # Handlers
    "EXIT_OK",
    "EXIT_FAILURE",
    "handle_fatal_errors",
]
