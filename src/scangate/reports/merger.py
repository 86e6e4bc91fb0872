# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load content reports and merge them into a bill of materials."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from ..errors import ReportParseError, ReportReadError, ReportWriteError, StructuralError
from ..models import BillOfMaterials
from .locator import find_content_reports

logger = logging.getLogger(__name__)


def load_json_report(path: str | Path) -> Any:
    """Read and parse one JSON report, naming the file on any failure."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportReadError(path, str(exc)) from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReportParseError(path, str(exc)) from exc


def load_content_reports(paths: Iterable[str | Path]) -> list[Any]:
    """Parse every content report, in order."""
    return [load_json_report(path) for path in paths]


def merge_content(documents: Sequence[Any], paths: Sequence[str | Path] | None = None) -> list[Any]:
    """
    Concatenate the ``content`` arrays of ``documents`` in order.

    ``paths`` (parallel to ``documents``) is only used to name the offending
    file in errors. Records are passed through untouched.
    """
    merged: list[Any] = []
    for index, document in enumerate(documents):
        source = paths[index] if paths is not None and index < len(paths) else None
        label = f"content report #{index}"
        if not isinstance(document, dict):
            raise StructuralError(
                f"expected a JSON object, got {type(document).__name__}",
                path=source,
                level=label,
            )
        if "content" not in document:
            raise StructuralError("missing 'content' field", path=source, level=label)
        content = document["content"]
        if not isinstance(content, list):
            raise StructuralError(
                f"'content' must be an array, got {type(content).__name__}",
                path=source,
                level=label,
            )
        merged.extend(content)
    return merged


def build_bill_of_materials(search_dir: str | Path) -> BillOfMaterials:
    """Locate, load and merge every content report under ``search_dir``."""
    paths = find_content_reports(search_dir)
    documents = load_content_reports(paths)
    packages = merge_content(documents, paths)
    logger.debug("Merged %d records from %d content reports", len(packages), len(paths))
    return BillOfMaterials(packages=packages)


def write_bill_of_materials(bom: BillOfMaterials, path: str | Path) -> Path:
    """Persist ``bom`` as compact JSON, replacing any previous file."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(bom.to_json(), encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(target, str(exc)) from exc
    return target


__all__ = [
    "build_bill_of_materials",
    "load_content_reports",
    "load_json_report",
    "merge_content",
    "write_bill_of_materials",
]
