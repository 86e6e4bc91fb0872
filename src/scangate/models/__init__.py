# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for scangate."""

from .policy import PolicyVerdict
from .report import BillOfMaterials, ScanResult
from .scan import ScanRequest

__all__ = [
    "BillOfMaterials",
    "PolicyVerdict",
    "ScanRequest",
    "ScanResult",
]
