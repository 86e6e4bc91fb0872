# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan engine: external scan followed by result aggregation."""

from __future__ import annotations

import logging

from ..config import ScanSettings, load_scan_settings
from ..models import ScanRequest, ScanResult
from ..reports import build_bill_of_materials, load_policy_verdict, write_bill_of_materials
from .bundle import resolve_policy_bundle
from .invoker import ScanInvoker

logger = logging.getLogger(__name__)


class ScanEngine:
    """Coordinates the inline scan and the aggregation of its reports for a single image."""

    def __init__(self, settings: ScanSettings | None = None, invoker: ScanInvoker | None = None):
        self.settings = settings or load_scan_settings()
        self.invoker = invoker or ScanInvoker(self.settings)

    def run(self, request: ScanRequest) -> ScanResult:
        bundle = resolve_policy_bundle(self.settings, request.custom_policy_path)
        self.invoker.run(request, bundle)
        return self.aggregate()

    def aggregate(self) -> ScanResult:
        """Build the outputs from whatever the scanner left in the report directory."""
        settings = self.settings
        bom_path = settings.bill_of_materials_path
        try:
            bom = build_bill_of_materials(settings.report_dir)
            write_bill_of_materials(bom, bom_path)
        except Exception as exc:
            logger.error("Error constructing bill of materials from scan output: %s", exc)
            raise

        verdict = load_policy_verdict(settings.policy_evaluation_path)
        build_failed = settings.fail_build and verdict.matches(settings.failing_status)
        if build_failed:
            logger.error("Image failed policy evaluation (%s)", verdict.status)

        return ScanResult(
            bill_of_materials_path=str(bom_path),
            vulnerabilities_path=str(settings.vulnerabilities_path),
            verdict=verdict,
            bill_of_materials=bom,
            build_failed=build_failed,
        )


__all__ = ["ScanEngine"]
