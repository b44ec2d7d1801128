"""Logging setup shared by the API process and its tests."""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.catalog.runtime.config.config_data import ConfigData, LoggingConfig
from src.catalog.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers that are too chatty at INFO
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward records from the standard ``logging`` module to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Requests are already logged by the middleware
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else CONSOLE_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose,
        diagnose=verbose,
    )


def _intercept_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging(config: ConfigData | None = None) -> None:
    """Install the console and optional file sinks and route stdlib logging to loguru.

    Tracebacks carry variable values everywhere except production.
    """
    main_config = config or get_config()
    cfg = main_config.logging
    verbose = main_config.app.environment != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})
    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose)

    _intercept_stdlib_logging()

    logger.info(
        "Logging configured (level={}, format={}, file={})",
        cfg.level,
        cfg.format,
        cfg.file or "-",
    )
