"""Logging configuration."""

import re
import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

# Credentials that can end up in URLs or error text
_SECRETS = [
    (re.compile(r"(Bearer\s+)[^\s'\"]+"), r"\1***"),
    (re.compile(r"([?&]password=)[^&\s'\"]+"), r"\1***"),
]


def redact(message: str) -> str:
    """Mask bearer tokens and `password` query params."""
    for pattern, replacement in _SECRETS:
        message = pattern.sub(replacement, message)
    return message


def _patch(record):
    record["message"] = redact(record["message"])


def setup_logging(level: str = LOG_LEVEL, to_file: bool = False):
    """Console logging, plus a daily file when `to_file` is set. Secrets are masked in both."""
    logger.remove()
    logger.configure(patcher=_patch)

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "launchpad_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
