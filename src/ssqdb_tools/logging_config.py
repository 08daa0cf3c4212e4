"""Logging setup shared by both command-line tools.

Handlers always write to stderr or a file; stdout belongs to tool output.
Relative log file paths are taken from the directory the tool runs in.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import List

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_FILE = "ssqdb-tools.log"


def _file_handler(file_cfg: dict) -> logging.Handler:
    path = Path(file_cfg.get("path", DEFAULT_LOG_FILE))
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 3)),
        encoding="utf-8",
    )


def configure_logging(config: dict, verbose: bool = False) -> None:
    """Install the handlers described by the ``logging`` config section.

    ``verbose`` turns on DEBUG logging to stderr even when the config leaves
    logging disabled.
    """

    config = config or {}
    if not (verbose or config.get("enabled", False)):
        return

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)

    handlers: List[logging.Handler] = []
    if verbose or config.get("console", True):
        handlers.append(logging.StreamHandler(sys.stderr))
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_file_handler(file_cfg))
    if not handlers:
        return

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)
