# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import json
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional


class ScanGateError(Exception):
    """Base class for every failure scangate surfaces to its caller."""


class ReportReadError(ScanGateError):
    """A report file could not be opened or read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read report {self.path}: {reason}")


class ReportParseError(ScanGateError):
    """A report file is not valid JSON."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid JSON in report {self.path}: {reason}")


class StructuralError(ScanGateError):
    """A parsed report does not have the shape the scan tool is expected to emit."""

    def __init__(self, message: str, *, path: str | Path | None = None, level: str | None = None):
        self.path = str(path) if path is not None else None
        self.level = level
        parts = [message]
        if level:
            parts.append(f"at {level}")
        if self.path:
            parts.append(f"in {self.path}")
        super().__init__(" ".join(parts))


class ReportWriteError(ScanGateError):
    """An output artifact could not be written."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to write {self.path}: {reason}")


class PolicyBundleError(ScanGateError):
    """A custom policy bundle is missing, unreadable or has no id."""


class ScanExecutionError(ScanGateError):
    """The external scan script failed, was not found or timed out."""

    def __init__(self, message: str, *, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)


class ErrorCategory(str, Enum):
    SCAN_FAILED = "SCAN_FAILED"
    REPORT_UNREADABLE = "REPORT_UNREADABLE"
    REPORT_MALFORMED = "REPORT_MALFORMED"
    OUTPUT_UNWRITABLE = "OUTPUT_UNWRITABLE"
    POLICY_BUNDLE_INVALID = "POLICY_BUNDLE_INVALID"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map scangate and stdlib exceptions to ErrorCategory.
    """
    if isinstance(exc, (ScanExecutionError, subprocess.CalledProcessError, subprocess.TimeoutExpired)):
        return ErrorCategory.SCAN_FAILED

    if isinstance(exc, PolicyBundleError):
        return ErrorCategory.POLICY_BUNDLE_INVALID

    if isinstance(exc, ReportWriteError):
        return ErrorCategory.OUTPUT_UNWRITABLE

    if isinstance(exc, (ReportParseError, StructuralError, json.JSONDecodeError)):
        return ErrorCategory.REPORT_MALFORMED

    if isinstance(exc, (ReportReadError, OSError)):
        return ErrorCategory.REPORT_UNREADABLE

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.SCAN_FAILED: "Image scan did not complete",
        ErrorCategory.REPORT_UNREADABLE: "Scan report could not be read",
        ErrorCategory.REPORT_MALFORMED: "Scan output has an unexpected format",
        ErrorCategory.OUTPUT_UNWRITABLE: "Scan outputs could not be written",
        ErrorCategory.POLICY_BUNDLE_INVALID: "Custom policy bundle is invalid",
        ErrorCategory.UNKNOWN_ERROR: "Unexpected error while processing scan results",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Unexpected error while processing scan results")


__all__ = [
    "ErrorCategory",
    "PolicyBundleError",
    "ReportParseError",
    "ReportReadError",
    "ReportWriteError",
    "ScanExecutionError",
    "ScanGateError",
    "StructuralError",
    "categorize_exception",
    "error_category_to_reason",
]
