"""
Colorbox Structured Logging
Centralized logging configuration using loguru.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from colorbox.config import config


class StructuredLogger:
    """Structured logger for Colorbox services."""

    def __init__(self, **context: Any):
        """Initialize structured logger, optionally bound to fixed context."""
        self._context = context
        if not context:
            self._configure_logger()

    def _configure_logger(self):
        """Configure loguru logger with structured format."""
        # Remove default handler
        logger.remove()

        if config.LOG_JSON:
            logger.add(sys.stdout, level=config.LOG_LEVEL, serialize=True)
        else:
            logger.add(
                sys.stdout,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
                level=config.LOG_LEVEL,
            )

    def bind(self, **context: Any) -> "StructuredLogger":
        """Return a logger that adds context to every record, e.g. a request id."""
        return StructuredLogger(**{**self._context, **context})

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        fields = {**self._context, **(extra or {})}
        target = logger.bind(**fields) if fields else logger
        # depth=2 attributes the record to the caller, not this wrapper
        target.opt(depth=2).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with optional extra data."""
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
