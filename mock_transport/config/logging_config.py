import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from mock_transport.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

# Set by MockTransportSession for the duration of one simulated request
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _has_handler(logger: logging.Logger, handler_type: type, target: str) -> bool:
    for handler in logger.handlers:
        if type(handler) is handler_type and getattr(handler, "_mock_target", None) == target:
            return True
    return False


def setup_logging(level: str = "INFO", log_file: str | None = None):
    """
    Attach handlers for the `mock_transport` logger tree.

    Safe to call more than once: handlers are only added the first time for
    a given target.
    """
    logger = logging.getLogger("mock_transport")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = SafeFormatter(Config.LOG_FORMAT)

    if not _has_handler(logger, logging.StreamHandler, "stdout"):
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.addFilter(CorrelationIdFilter())
        stream_handler._mock_target = "stdout"
        logger.addHandler(stream_handler)

    # Set up file logging if log_file provided with rotation
    if log_file and not _has_handler(logger, RotatingFileHandler, log_file):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        file_handler._mock_target = log_file
        logger.addHandler(file_handler)

    logger.debug("Logging is set up.")
    return logger
