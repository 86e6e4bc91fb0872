# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Policy verdict extraction.

The scanner writes its policy evaluation as nested wrappers::

    [ { "<image id>": { "<image tag>": [ { "status": "pass", ... } ] } } ]

Arrays are read at index 0 and must not be empty. Objects must hold exactly
one key (one image id, one tag). Anything else means the scanner's output
format changed or the scan produced nothing to evaluate, so it is reported as
a StructuralError naming the level instead of picking an arbitrary key.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import StructuralError
from ..models import PolicyVerdict
from .merger import load_json_report

LEVEL_EVALUATIONS = "policy evaluation list"
LEVEL_IMAGE_ID = "image id mapping"
LEVEL_IMAGE_TAG = "image tag mapping"
LEVEL_RESULTS = "evaluation result list"
LEVEL_RESULT = "evaluation result"


def _first_element(value: Any, level: str, source: str | Path | None) -> Any:
    if not isinstance(value, list):
        raise StructuralError(f"expected an array, got {type(value).__name__}", path=source, level=level)
    if not value:
        raise StructuralError("expected at least one element, found none", path=source, level=level)
    return value[0]


def _sole_item(value: Any, level: str, source: str | Path | None) -> tuple[str, Any]:
    if not isinstance(value, Mapping):
        raise StructuralError(f"expected an object, got {type(value).__name__}", path=source, level=level)
    if not value:
        raise StructuralError("expected one key, found none", path=source, level=level)
    if len(value) > 1:
        keys = ", ".join(sorted(str(k) for k in value))
        raise StructuralError(f"expected one key, found {len(value)} ({keys})", path=source, level=level)
    key, inner = next(iter(value.items()))
    return str(key), inner


def extract_policy_verdict(evaluation: Any, *, source: str | Path | None = None) -> PolicyVerdict:
    """Descend evaluation -> image id -> image tag -> result and return its status."""
    by_image = _first_element(evaluation, LEVEL_EVALUATIONS, source)
    image_id, by_tag = _sole_item(by_image, LEVEL_IMAGE_ID, source)
    image_tag, results = _sole_item(by_tag, LEVEL_IMAGE_TAG, source)
    result = _first_element(results, LEVEL_RESULTS, source)

    if not isinstance(result, Mapping):
        raise StructuralError(f"expected an object, got {type(result).__name__}", path=source, level=LEVEL_RESULT)
    if "status" not in result:
        raise StructuralError("missing 'status' field", path=source, level=LEVEL_RESULT)
    status = result["status"]
    if not isinstance(status, str):
        raise StructuralError(f"'status' must be a string, got {type(status).__name__}", path=source, level=LEVEL_RESULT)

    return PolicyVerdict(status=status, image_id=image_id, image_tag=image_tag)


def load_policy_verdict(path: str | Path) -> PolicyVerdict:
    """Read the policy evaluation file at ``path`` and extract its verdict."""
    return extract_policy_verdict(load_json_report(path), source=path)


__all__ = ["extract_policy_verdict", "load_policy_verdict"]
