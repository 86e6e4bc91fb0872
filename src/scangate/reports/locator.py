# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Locate the per-content-type reports written by the scanner."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

CONTENT_REPORT_PATTERN = re.compile(r"content-.*\.json")


def find_content_reports(search_dir: str | Path) -> list[Path]:
    """
    Return ``content-*.json`` files directly inside ``search_dir``, in listing order.

    A directory that cannot be listed yields an empty list; this is the only
    soft failure in the aggregation path.
    """
    directory = Path(search_dir)
    try:
        entries = os.listdir(directory)
    except OSError as exc:
        logger.debug("No report directory content found in %s: %s", directory, exc)
        return []

    content_files = [
        directory / name for name in entries if CONTENT_REPORT_PATTERN.fullmatch(name) and (directory / name).is_file()
    ]
    logger.debug("Content reports in %s: %s", directory, ", ".join(str(p) for p in content_files) or "-")
    return content_files


__all__ = ["CONTENT_REPORT_PATTERN", "find_content_reports"]
