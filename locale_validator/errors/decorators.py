"""
Error handling decorators.

Used at the outermost boundary of the CLI, where an unexpected fault has to be
turned into a failed-check signal instead of a traceback.
"""

import functools
from typing import Any, Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


def handle_errors(
    fallback: Optional[Callable[..., Any]] = None,
    operation_name: Optional[str] = None
):
    """
    Error handling decorator.

    Args:
        fallback: Called as ``fallback(error, *args, **kwargs)`` when the
            wrapped function raises; its return value is returned instead.
            Without a fallback the error is re-raised after logging.
        operation_name: Name for operation identification
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            op_name = operation_name or f"{func.__module__}.{func.__name__}"

            try:
                return func(*args, **kwargs)

            except Exception as e:
                logger.error("Unhandled error in operation", operation=op_name, error=str(e), exc_info=True)

                if fallback is None:
                    raise

                logger.info("Executing fallback function", operation=op_name)
                return fallback(e, *args, **kwargs)

        return wrapper

    return decorator
