from dataclasses import dataclass
from typing import Optional
import logging
import os
import sys


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[str]


def load_settings() -> Settings:
    """
    Read settings from the environment.
    >>> import os
    >>> os.environ["EVMASM_LOG_LEVEL"] = "debug"
    >>> load_settings().log_level
    'DEBUG'
    >>> os.environ["EVMASM_LOG_LEVEL"] = "loud"
    >>> load_settings().log_level
    'WARNING'
    >>> del os.environ["EVMASM_LOG_LEVEL"]
    """
    level = (os.getenv("EVMASM_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Ignoring unknown EVMASM_LOG_LEVEL {level!r}")
        level = DEFAULT_LOG_LEVEL
    return Settings(
        log_level=level,
        log_file=os.getenv("EVMASM_LOG_FILE") or None,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL,log_file: Optional[str] = None, stream: bool = True) -> None:
    """Install handlers on the root logger. Only entry points call this."""
    handlers: list[logging.Handler] = []
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))  # Overwrites each run
    if stream:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=handlers, force=True)
