"""Logging setup for the command-line entrypoint."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    name: str = "rsc_scanner",
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach a stderr handler and, optionally, a file handler to ``name``.

    Raises:
        OSError: if ``log_file`` or its parent directory cannot be created.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose or log_file else logging.INFO)

    # Console handler; stdout is reserved for the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger
