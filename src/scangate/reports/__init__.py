# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregation of the scanner's JSON output into bill of materials and policy verdict."""

from .locator import CONTENT_REPORT_PATTERN, find_content_reports
from .merger import (
    build_bill_of_materials,
    load_content_reports,
    load_json_report,
    merge_content,
    write_bill_of_materials,
)
from .policy import extract_policy_verdict, load_policy_verdict

__all__ = [
    "CONTENT_REPORT_PATTERN",
    "build_bill_of_materials",
    "extract_policy_verdict",
    "find_content_reports",
    "load_content_reports",
    "load_json_report",
    "load_policy_verdict",
    "merge_content",
    "write_bill_of_materials",
]
