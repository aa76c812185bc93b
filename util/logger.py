# util/logger.py
import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from config.settings import settings

logging.captureWarnings(True)

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+")


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[37m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Only the console copy of a record is colorized.
        if getattr(record, "_colorize", False):
            lvl = record.levelname
            record.levelname = f"{self.COLORS.get(lvl, self.RESET)}{lvl}{self.RESET}"
        return super().format(record)


class TokenRedactionFilter(logging.Filter):
    """Masks admin bearer tokens that end up in log messages (e.g. echoed headers)."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if "Bearer" in msg:
            record.msg = _BEARER_RE.sub(r"\1<redacted>", msg)
            record.args = None
        return True


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(fmt)

    old_emit = ch.emit

    def emit_with_flag(record: logging.LogRecord):
        record._colorize = True  # type: ignore[attr-defined]
        return old_emit(record)

    ch.emit = emit_with_flag  # type: ignore[assignment]
    return ch


def _file_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    fh = RotatingFileHandler(
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    fh.setLevel(level)
    fh.setFormatter(fmt)
    return fh


def init_logger() -> logging.Logger:
    """
    Idempotent logger init:
    - Always logs to stdout (the host platform captures this).
    - Writes to LOG_DIR/LOG_FILE_NAME only when settings.LOG_TO_FILE is True;
      a read-only filesystem downgrades this to stdout-only with a warning.
    - Every handler masks bearer tokens.
    """
    root = logging.getLogger()
    if getattr(root, "_portfolio_admin_inited", False):
        return logging.getLogger(settings.LOGGER_NAME)

    level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    text_fmt = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    date_fmt = "%Y-%m-%dT%H:%M:%S%z"
    redact = TokenRedactionFilter()

    ch = _console_handler(level, ColoredFormatter(text_fmt, datefmt=date_fmt))
    ch.addFilter(redact)
    root.addHandler(ch)

    file_error = None
    if settings.LOG_TO_FILE:
        try:
            fh = _file_handler(level, logging.Formatter(text_fmt, datefmt=date_fmt))
            fh.addFilter(redact)
            root.addHandler(fh)
        except OSError as e:
            file_error = e

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    root._portfolio_admin_inited = True  # type: ignore[attr-defined]
    logger = logging.getLogger(settings.LOGGER_NAME)
    if file_error is not None:
        logger.warning("logger.file_disabled dir=%s err=%s", settings.LOG_DIR, file_error)
    logger.debug("Logger initialized", extra={"component": "bootstrap"})
    return logger
