from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol

ROOT_LOGGER = "ramdisk_linker"


class LogSink(Protocol):
    def info(self, msg: str, *args) -> None: ...

    def error(self, msg: str, *args) -> None: ...


def get_logger(name: str = ROOT_LOGGER, level: Optional[int] = None) -> logging.Logger:
    """
    Logger for `name`. The stdout handler lives on the package root logger only,
    so module loggers (get_logger(__name__)) propagate to it instead of
    printing twice. `level` adjusts the package root, e.g. for --verbose.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    if level is not None:
        root.setLevel(level)
    return logging.getLogger(name)
