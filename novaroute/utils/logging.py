"""Loguru sinks for the CLI and for applications embedding novaroute."""

import sys
from pathlib import Path

from loguru import logger

from novaroute.config.schema import LoggingConfig

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
DECISION_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(settings: LoggingConfig | None = None, verbose: bool = False) -> Path | None:
    """
    Replace loguru's sinks according to the logging settings.

    The console only shows `settings.level` and above (DEBUG when verbose).
    When `settings.log_file` is set, a second sink records every DEBUG
    routing decision there, so misrouted inputs can be traced afterwards.
    Nothing is written to disk otherwise.

    Returns:
        The resolved decision log path, or None when there is no file sink.
    """
    settings = settings or LoggingConfig()
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.level,
        format=CONSOLE_FORMAT,
    )

    if not settings.log_file:
        return None

    log_file = Path(settings.log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_file),
        level="DEBUG",
        format=DECISION_LOG_FORMAT,
        rotation=settings.rotation,
        retention=settings.retention,
        enqueue=True,
    )
    logger.debug(f"Decision log: {log_file}")
    return log_file
