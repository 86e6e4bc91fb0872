# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
scangate package entrypoint.

This package runs the Anchore inline scan against a container image inside a
CI job and turns its report directory into three outputs: a merged bill of
materials, the vulnerabilities report path, and the policy verdict. The
scanner is an external process; everything it writes is treated as untrusted
input and validated before it reaches an output.
"""

from .config import ScanSettings, load_scan_settings
from .errors import (
    ErrorCategory,
    PolicyBundleError,
    ReportParseError,
    ReportReadError,
    ReportWriteError,
    ScanExecutionError,
    ScanGateError,
    StructuralError,
)
from .log import setup_logging
from .models import BillOfMaterials, PolicyVerdict, ScanRequest, ScanResult
from .reports import (
    build_bill_of_materials,
    extract_policy_verdict,
    find_content_reports,
    load_content_reports,
    merge_content,
)
from .scan import ScanEngine, ScanInvoker
from .version import __version__

__all__ = [
    "BillOfMaterials",
    "ErrorCategory",
    "PolicyBundleError",
    "PolicyVerdict",
    "ReportParseError",
    "ReportReadError",
    "ReportWriteError",
    "ScanEngine",
    "ScanExecutionError",
    "ScanGateError",
    "ScanInvoker",
    "ScanRequest",
    "ScanResult",
    "ScanSettings",
    "StructuralError",
    "build_bill_of_materials",
    "extract_policy_verdict",
    "find_content_reports",
    "load_content_reports",
    "load_scan_settings",
    "merge_content",
    "setup_logging",
    "__version__",
]
