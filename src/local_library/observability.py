"""Logfire tracing for the Local Library catalog."""

import functools
import logging
from collections.abc import Callable
from typing import Any

import logfire

from .config import LibraryConfig

logger = logging.getLogger(__name__)


def configure_observability(config: LibraryConfig, app: Any | None = None) -> bool:
    """
    Configure logfire and instrument the FastAPI app when tracing is enabled.

    Returns:
        True if tracing was configured
    """
    if not config.enable_tracing:
        logger.debug("Tracing disabled via configuration")
        return False

    logfire.configure(
        service_name=config.server_name,
        service_version=config.server_version,
        send_to_logfire="if-token-present" if config.send_to_logfire else False,
        console=False,
    )

    if app is not None:
        logfire.instrument_fastapi(app)

    logger.info("Tracing enabled for %s", config.server_name)
    return True


def trace_page(page_name: str):
    """Decorator that wraps an async page handler in a logfire span.

    If the first argument looks like a response writer, the status it ended
    up with is recorded on the span.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            with logfire.span(f"page.{page_name}", page=page_name) as span:
                result = await func(*args, **kwargs)

                status_code = getattr(args[0], "status_code", None) if args else None
                if isinstance(status_code, int):
                    span.set_attribute("response.status_code", status_code)
                if isinstance(result, list):
                    span.set_attribute("result.item_count", len(result))

                return result

        return wrapper

    return decorator
