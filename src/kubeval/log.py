# src/kubeval/log.py
"""Logging do CLI: formato `[LEVEL] mensagem` em stdout e nível extra SUCCESS."""

from __future__ import annotations

import logging
import sys

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LOG_LEVELS = ("debug", "info", "warning", "error")


def setup_logging(log_level: str = "info") -> None:
    """Configura o root logger. Se já houver handlers (ex.: pytest), só ajusta o nível."""
    level = getattr(logging, (log_level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stdout, format="[%(levelname)s] %(message)s")
    logging.getLogger().setLevel(level)
