"""
structlog on top of stdlib logging.

Loggers from get_logger() always hand events to stdlib loggers, so a library
caller that never runs setup_logging() gets ordinary `logging` behaviour and
nothing on stdout. The CLI calls setup_logging() to attach real handlers.
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
import structlog

_LOGGING_CONFIGURED = False

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Library etiquette: silent unless the application configures handlers
logging.getLogger("devinfo").addHandler(logging.NullHandler())


def _formatter(renderer) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )


def _build_handlers(log_file_path: Path | None, console_output: bool) -> list[logging.Handler]:
    handlers = []
    if log_file_path:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(file_handler)

    # stdout carries command output, diagnostics go to stderr
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer()))
        handlers.append(console_handler)

    return handlers or [logging.NullHandler()]


def setup_logging(log_level_name: str = "WARNING", log_file_path: Path = None, console_output: bool = False):
    """
    Attach devinfo's handlers to the root logger. Runs once per process.
    DEVINFO_LOG_LEVEL overrides log_level_name.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = os.environ.get("DEVINFO_LOG_LEVEL", log_level_name).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        handlers=_build_handlers(log_file_path, console_output),
        force=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None):
    # Bound to a stdlib logger up front so events never fall back to
    # structlog's default stdout printer.
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
