"""Logging setup: rich output on stderr, keeping stdout and the report clean."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """Route ccscan logs to stderr; DEBUG with ``verbose``, ERROR only with ``quiet``."""
    level = logging.ERROR if quiet else logging.DEBUG if verbose else logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), show_time=verbose, show_path=verbose, markup=False)
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(format="%(message)s", handlers=handlers, force=True)
    logging.getLogger("ccscan").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
