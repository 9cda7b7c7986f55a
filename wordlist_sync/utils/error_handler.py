"""Error handling utilities and decorators"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

from ..exceptions import WordSyncError

T = TypeVar("T")
R = TypeVar("R")
P = ParamSpec("P")


def handle_errors_async(
    default_return: Any = None,
    log_level: int = logging.ERROR,
    operation_name: str | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator that turns exceptions of a coroutine into a logged default value.

    Args:
        default_return: Value to return when an error occurs
        log_level: Logging level for application errors
        operation_name: Custom operation name for logging (defaults to function name)
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            op_name = operation_name or func.__name__
            logger = logging.getLogger(func.__module__)

            try:
                return await func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, WordSyncError):
                    logger.log(log_level, f"Error in {op_name}: {e.message}")
                    if e.details:
                        logger.debug(f"Error details for {op_name}: {e.details}")
                else:
                    logger.log(
                        log_level, f"Unexpected error in {op_name}: {e}", exc_info=True
                    )

                return cast(T, default_return)

        return wrapper

    return decorator


class ErrorCollector:
    """Utility class for collecting and reporting multiple errors"""

    def __init__(self) -> None:
        self.errors: list[Exception] = []

    def add_error(self, error: Exception) -> None:
        """Add an error to the collection"""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Check if any errors were collected"""
        return len(self.errors) > 0

    def get_summary(self) -> str:
        """Get a summary of all collected errors"""
        if not self.errors:
            return "No errors"
        parts = [f"{len(self.errors)} errors:"]
        for i, error in enumerate(self.errors, 1):
            message = error.message if isinstance(error, WordSyncError) else str(error)
            parts.append(f"  {i}. {message}")
        return "\n".join(parts)


def safe_execute(
    func: Callable[P, R],
    default_return: R | None = None,
    *args: P.args,
    **kwargs: P.kwargs,
) -> R | None:
    """
    Safely execute a function and return default value on error.

    Args:
        func: Function to execute
        default_return: Value to return on error
        *args: Positional arguments for the function
        **kwargs: Keyword arguments for the function

    Returns:
        Function result or default_return on error
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        logger = logging.getLogger(__name__)
        name = getattr(func, "__name__", repr(func))
        logger.warning(f"Safe execution failed for {name}: {e}")
        return default_return
