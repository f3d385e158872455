import logging
import sys
from typing import Optional

from unixfs import config


class PayloadPreviewFilter(logging.Filter):
    """Filter to shorten raw node payloads in log records."""

    def __init__(self, preview_bytes: Optional[int] = None):
        super().__init__()
        if preview_bytes is None:
            preview_bytes = config.LOG_PAYLOAD_PREVIEW_BYTES
        self.preview_bytes = preview_bytes

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace bytes arguments with a bounded hex preview."""
        if hasattr(record, 'args') and record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._preview_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._preview_value(arg) for arg in record.args)

        return True

    def _preview_value(self, value):
        """Render bytes-like values as '<N bytes: hex...>'."""
        if isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            preview = raw[:self.preview_bytes].hex()
            if len(raw) > self.preview_bytes:
                preview += '...'
            return f'<{len(raw)} bytes: {preview}>'
        return value


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the logger to configure (e.g., 'unixfs')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to UNIXFS_LOG_LEVEL env var or INFO

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = config.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    handler.addFilter(PayloadPreviewFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
