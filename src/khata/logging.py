import logging
import os
from typing import Optional

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _coerce_level(value: Optional[str]) -> int:
    if isinstance(value, str):
        return _LEVELS.get(value.upper().strip(), logging.WARNING)
    return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a configured stderr logger with consistent formatting.

    - Honors LOG_LEVEL (default WARNING) and LOG_FILE (optional path).
    - Logs go to stderr so command output on stdout stays clean.
    """
    logger = logging.getLogger(f"khata.{name}")
    if getattr(logger, "_khata_configured", False):
        return logger

    level = _coerce_level(os.environ.get("LOG_LEVEL", "WARNING"))
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    log_file = os.environ.get("LOG_FILE")
    if log_file:
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            logger.warning("LOG_FILE could not be opened; continuing without file logging")
        else:
            fh.setLevel(level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    logger.propagate = False
    setattr(logger, "_khata_configured", True)
    return logger
