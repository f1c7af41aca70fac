from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("pathtable")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=config.format, force=True)
    logger.debug("Logging configured", extra={"level": config.level})


@contextmanager
def log_duration(target: logging.Logger, label: str) -> Iterator[None]:
    """Log how long the wrapped block took, at DEBUG."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        target.debug(f"{label} took {elapsed_ms:.2f}ms")
