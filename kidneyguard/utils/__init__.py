"""
Shared utilities.
"""
import logging
import sys

_ROOT_LOGGER = "kidneyguard"
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_configured = False


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    global _configured
    root = logging.getLogger(_ROOT_LOGGER)
    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a package logger, configuring the handler on first use."""
    if not _configured:
        from kidneyguard.config import settings
        configure_logging(settings.log_level)
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
