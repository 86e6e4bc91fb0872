# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan request model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScanRequest:
    image_reference: str
    dockerfile_path: str | None = None
    custom_policy_path: str | None = None
