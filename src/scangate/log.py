# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for scangate."""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "scangate"
DEFAULT_LOG_LEVEL = os.getenv("SCANGATE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None, *, debug: bool = False) -> logging.Logger:
    """
    Configure standard logging for CLI/library use.

    ``debug`` (the scan's debug input) wins over ``level``. The level is also
    set on the package logger, so it applies even when the host process has
    already configured the root logger.
    """
    effective_level = "DEBUG" if debug else (level or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(level=numeric_level, format="%(levelname)s %(name)s: %(message)s")
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    return package_logger


__all__ = ["setup_logging"]
