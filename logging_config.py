"""Centralized logging configuration."""

import logging
import sys

from config import settings


def setup_logging() -> None:
    """Configure logging for the application.

    Sets root logger level from settings.LOG_LEVEL and sends records to
    stderr so stdout carries only the lot report.
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
        datefmt="%H:%M:%S",
        level=getattr(logging, settings.LOG_LEVEL),
        stream=sys.stderr,
        force=True,
    )
