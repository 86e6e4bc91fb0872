# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Policy verdict model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PolicyVerdict:
    """Status string taken verbatim from the scanner's policy evaluation."""

    status: str
    image_id: str | None = None
    image_tag: str | None = None

    def matches(self, failing_status: str) -> bool:
        # Exact comparison; the scanner's vocabulary is not normalized.
        return self.status == failing_status

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "image_id": self.image_id,
            "image_tag": self.image_tag,
        }

    def __str__(self) -> str:
        return self.status
