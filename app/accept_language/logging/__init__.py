"""Structured logging built on structlog.

Public API:
    - get_module_logger(): Lazy logger for a package module
    - configure_logging(): Opt-in setup for applications without their own
"""

from accept_language.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
