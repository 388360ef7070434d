"""
Centralized logging configuration for lustre-dev.
Keeps diagnostic logs off the user-facing console output by default.
"""

import logging
import os
import sys


def setup_logging(log_level: str | None = None) -> None:
    """
    Configure logging for the command line tool.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING")

    # Clear any existing handlers
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    # Diagnostics go to stderr, the console adapter owns stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )

    root.setLevel(log_level.upper())
    root.addHandler(handler)

    # Third-party noise stays quiet unless debugging
    if log_level.upper() != "DEBUG":
        logging.getLogger("asyncio").setLevel(logging.WARNING)
