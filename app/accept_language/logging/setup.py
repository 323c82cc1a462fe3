"""Structlog loggers for the accept_language package.

Importing the package never configures logging. Module loggers are lazy
structlog proxies, so events go through whatever configuration the host
application has installed. Applications without their own setup can call
``configure_logging()`` once at startup.
"""

import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from accept_language.configuration import get_settings


def get_module_logger(module_name: str) -> BoundLogger:
    """Get a lazy logger bound to a module's component and path.

    Args:
        module_name: Dotted module name, usually ``__name__``.

    Returns:
        Logger proxy; resolved against the structlog config on first use.
    """
    return structlog.stdlib.get_logger().bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> None:
    """Install a structlog pipeline and a root stdlib handler.

    Opt-in; meant for applications that have no logging setup of their own.

    Args:
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production. JSON output in
            production, console output otherwise.
    """
    settings = get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
