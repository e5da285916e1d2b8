"""Logger factories used as profiler output sinks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO


def setup_console_logger(
    name: str = "timeprofiler", stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure a logger that writes bare messages to a stream (stdout by default)."""

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


class _LabelFilter(logging.Filter):
    """Give records that did not come from a profiler an empty ``label``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "label"):
            record.label = ""
        return True


def setup_file_logger(log_path: Path, mode: str = "w") -> logging.Logger:
    """Configure a file logger that tags each profiler line with its label.

    Lines look like ``<asctime> - INFO - [sort] Measured sort - Total runtime: 1500``.
    """

    logger = logging.getLogger(f"timeprofiler.{log_path.stem}")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    handler = logging.FileHandler(log_path, mode=mode)
    handler.addFilter(_LabelFilter())
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - [%(label)s] %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
