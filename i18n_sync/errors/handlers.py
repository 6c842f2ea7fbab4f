"""
Top-level error handling for i18n-sync commands.

Commands return a process exit code; anything that escapes them is logged
with its structured context and mapped to exit code 1.
"""

import functools
from typing import Callable

import structlog

from .exceptions import I18nSyncError

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def handle_fatal_errors(operation_name: str = None):
    """
    Turn uncaught errors of a command into exit code 1.

    Args:
        operation_name: Name used in log records, defaults to the function name
    """
    def decorator(func: Callable[..., int]) -> Callable[..., int]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> int:
            op_name = operation_name or func.__name__
            try:
                return func(*args, **kwargs)

            except I18nSyncError as e:
                logger.error("Fatal error, aborting run", operation=op_name, **e.to_dict())
                return EXIT_FAILURE

            except Exception as e:
                logger.exception("Unexpected error, aborting run", operation=op_name, error=str(e))
                return EXIT_FAILURE

        return wrapper

    return decorator
