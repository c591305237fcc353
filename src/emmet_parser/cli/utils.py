"""Shared utilities for the CLI"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from emmet_parser.config import EmmetConfig, find_config_file

console = Console()

log = logging.getLogger(__name__)


def log_level(verbose: bool = False) -> int:
    """WARNING by default, INFO with -v, DEBUG whenever EMMET_DEBUG is set."""
    if os.environ.get("EMMET_DEBUG"):
        return logging.DEBUG
    return logging.INFO if verbose else logging.WARNING


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route the emmet_parser loggers to a rich handler on stderr.

    Markup goes to stdout, so diagnostics never mix with it. Timestamps
    appear from INFO down, source locations only at DEBUG.
    """
    level = log_level(verbose)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=level <= logging.INFO,
        show_path=level == logging.DEBUG,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("emmet_parser")
    root.setLevel(level)
    root.handlers = [handler]
    root.propagate = False
    return root


def load_config(config_path: Path | None) -> EmmetConfig:
    """Load the explicit config, else the nearest emmet.yaml, else defaults."""
    path = config_path or find_config_file()
    if path is None:
        log.info("No emmet.yaml found, using default settings")
        return EmmetConfig()

    log.info("Using config %s", path)
    return EmmetConfig.load(path)
