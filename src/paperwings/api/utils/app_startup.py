"""Process-wide logging setup for the PaperWings API."""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.paperwings.runtime.config.config_data import LoggingConfig
from src.paperwings.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "{extra[environment]} | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Third-party loggers and the minimum level forwarded from each
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "pymysql": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (uvicorn, SQLAlchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Requests are logged by the HTTP middleware
        if record.name == "uvicorn.access":
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, debug_traces: bool) -> None:
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
        backtrace=debug_traces,
        diagnose=debug_traces,
    )


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in list(logging.root.manager.loggerDict.keys()):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging() -> None:
    """Install the console sink, the optional file sink and the stdlib bridge.

    Every record carries ``app`` and ``environment``; ``request_id`` is ``-``
    outside of a request.
    """
    config = get_config()
    cfg = config.logging
    environment = config.app.environment
    debug_traces = environment != "production"

    logger.remove()
    logger.configure(
        extra={"request_id": "-", "app": config.app.name, "environment": environment}
    )

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=debug_traces,
        diagnose=debug_traces,
    )
    if cfg.file:
        _add_file_sink(cfg, debug_traces)

    _route_stdlib_logging()

    logger.bind(log_level=cfg.level, log_format=cfg.format, log_file=cfg.file).info(
        "Logging configured for {}", config.app.name
    )
