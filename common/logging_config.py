"""
Logging Configuration.

All package modules obtain their logger through ``get_logger`` so that they
share one handler layout. The level and format come from
``common.config.LibraryConfig``.
"""

import logging
import sys
import threading
from typing import Dict, Optional

from common.config import LibraryConfig, load_config

_config: LibraryConfig = load_config()
_loggers: Dict[str, logging.Logger] = {}
_lock = threading.Lock()


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger configured for the coordinate utilities.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Logging level. Defaults to the configured level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    with _lock:
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                _config.log_format,
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
        _loggers[name] = logger

    logger.setLevel(level if level is not None else _config.log_level)
    return logger


def configure_logging(config: Optional[LibraryConfig] = None) -> LibraryConfig:
    """Apply a configuration to every logger handed out so far.

    Parameters
    ----------
    config : LibraryConfig, optional
        Configuration to apply. Re-read from the environment when omitted.

    Returns
    -------
    LibraryConfig
        The configuration now in effect.
    """
    global _config

    with _lock:
        _config = config if config is not None else load_config()
        formatter = logging.Formatter(_config.log_format, datefmt='%Y-%m-%d %H:%M:%S')
        for logger in _loggers.values():
            logger.setLevel(_config.log_level)
            for handler in logger.handlers:
                handler.setFormatter(formatter)

    return _config
