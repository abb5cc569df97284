"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
from typing import Optional

from docmanager.config.settings import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    cfg = config or LoggingConfig()
    level = logging.getLevelName(cfg.level.upper()) if isinstance(cfg.level, str) else cfg.level
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=cfg.format)
    logging.getLogger("docmanager").setLevel(level)
