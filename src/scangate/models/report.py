# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for the bill of materials and the exposed scan outputs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .policy import PolicyVerdict

OUTPUT_BILL_OF_MATERIALS = "billofmaterials"
OUTPUT_VULNERABILITIES = "vulnerabilities"
OUTPUT_POLICY_CHECK = "policycheck"


@dataclass
class BillOfMaterials:
    """Merged content records from every content report of one scan."""

    packages: list[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.packages)

    def to_dict(self) -> dict[str, Any]:
        return {"packages": list(self.packages)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass
class ScanResult:
    """The three exposed outputs plus the objects they were derived from."""

    bill_of_materials_path: str
    vulnerabilities_path: str
    verdict: PolicyVerdict
    bill_of_materials: BillOfMaterials = field(default_factory=BillOfMaterials)
    build_failed: bool = False

    @property
    def policy_status(self) -> str:
        return self.verdict.status

    def to_outputs(self) -> dict[str, str]:
        """Named outputs in the order they are published."""
        return {
            OUTPUT_BILL_OF_MATERIALS: self.bill_of_materials_path,
            OUTPUT_VULNERABILITIES: self.vulnerabilities_path,
            OUTPUT_POLICY_CHECK: self.verdict.status,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "outputs": self.to_outputs(),
            "policy": self.verdict.to_dict(),
            "package_count": len(self.bill_of_materials),
            "build_failed": self.build_failed,
        }
