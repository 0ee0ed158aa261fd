"""Logging setup."""
import logging
import sys

from infrastructure.config import get_settings


def setup_logging() -> None:
    """Configure the root logger from settings"""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("passlib").setLevel(logging.WARNING)
