"""Error handling decorators for standardized transport exception handling."""

import asyncio
import inspect
import logging
from functools import wraps
from typing import Callable, Optional

from ...domain.exceptions import ModbusClientError, TransportError


def handle_transport_errors(
    operation_name: str,
    logger: Optional[logging.Logger] = None,
):
    """Decorator for standardized transport error handling.

    Socket-level ``OSError`` is converted into :class:`TransportError` so
    callers only deal with the client's own error taxonomy. Classified
    failures are logged at debug level only; the use case that receives
    them reports the failed exchange.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)

    Example:
        @handle_transport_errors("TCP send")
        async def send(self, data: bytes) -> None:
            self._writer.write(data)
            await self._writer.drain()
    """

    def decorator(func: Callable):
        if not inspect.iscoroutinefunction(func):
            raise TypeError(
                f"handle_transport_errors requires a coroutine function, got {func!r}"
            )

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except asyncio.TimeoutError as err:
                log.warning("%s timed out: %s", operation_name, err)
                raise
            except ModbusClientError as err:
                log.debug("%s failed: %s", operation_name, err)
                raise
            except OSError as err:
                log.debug("%s socket error: %s", operation_name, err)
                raise TransportError(f"{operation_name} failed: {err}") from err
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise

        return async_wrapper

    return decorator
