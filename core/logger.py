"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.

Components do not import the logger directly; they receive a bound logger
(``logger.bind(component=...)``) from the container at construction time.
"""

import sys
from pathlib import Path

from loguru import logger

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_configured = False


def _resolve_level(raw: str, debug: bool) -> str:
    if raw:
        level = raw.upper()
        if level in _LEVELS:
            return level
        return "INFO"
    return "DEBUG" if debug else "INFO"


def setup_logger() -> None:
    """Configure logger handlers. Only configures once even if called multiple times."""
    global _configured
    if _configured:
        return

    from .config import get_settings

    settings = get_settings()
    log_level = _resolve_level(settings.log_level, settings.debug)

    logger.remove()

    # Filter function to prevent duplicate logs from reloader processes
    def filter_reloader_logs(record):
        return record.get("name", "") not in ("__main__", "__mp_main__")

    logger.configure(extra={"component": "app"})

    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <magenta>{extra[component]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        filter=filter_reloader_logs,
    )

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # File logs always DEBUG to capture everything
    logger.add(
        log_dir / "app.log",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]} | {name}:{function}:{line} - {message}",
        level="DEBUG",
    )

    logger.add(
        log_dir / "error.log",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]} | {name}:{function}:{line} - {message}",
        level="ERROR",
    )

    _configured = True


def get_logger(component: str):
    """Return a logger bound to a component name."""
    return logger.bind(component=component)


__all__ = ["logger", "setup_logger", "get_logger"]
