"""
Library Configuration.

Settings are read once from environment variables. None of them change
numeric results; they only control diagnostics.

Environment Variables
---------------------
COORDFRAMES_LOG_LEVEL
    Level name for the package loggers (default ``WARNING``).
COORDFRAMES_LOG_FORMAT
    ``logging.Formatter`` format string for the stdout handler.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'

ENV_LOG_LEVEL = "COORDFRAMES_LOG_LEVEL"
ENV_LOG_FORMAT = "COORDFRAMES_LOG_FORMAT"


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for package diagnostics.

    Attributes
    ----------
    log_level : str
        Level name applied to package loggers.
    log_format : str
        Format string for log records.
    """
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        """Validate the level name."""
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {self.log_level!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> LibraryConfig:
    """Build a ``LibraryConfig`` from environment variables.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Source of variables, ``os.environ`` when omitted.

    Returns
    -------
    LibraryConfig
        Defaults overridden by whatever variables are set.
    """
    if environ is None:
        environ = os.environ
    return LibraryConfig(
        log_level=environ.get(ENV_LOG_LEVEL, "WARNING").upper(),
        log_format=environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT),
    )
