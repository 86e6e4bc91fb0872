# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Policy bundle resolution (bundled default or a custom bundle from the workspace)."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..config import ScanSettings
from ..errors import PolicyBundleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolicyBundle:
    path: Path
    name: str


def workspace_root() -> Path:
    return Path(os.getenv("GITHUB_WORKSPACE") or ".")


def load_custom_policy_bundle(custom_policy_path: str, *, workspace: Path | None = None) -> PolicyBundle:
    """Read a custom bundle relative to the workspace and take its ``id`` as the bundle name."""
    bundle_path = (workspace or workspace_root()) / custom_policy_path
    logger.debug("Loading custom bundle from %s", bundle_path)

    try:
        raw = bundle_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PolicyBundleError(f"Custom policy specified at {bundle_path} but not readable: {exc}") from exc
    try:
        bundle = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PolicyBundleError(f"Custom policy bundle {bundle_path} is not valid JSON: {exc}") from exc

    bundle_id = bundle.get("id") if isinstance(bundle, dict) else None
    if not bundle_id or not isinstance(bundle_id, str):
        raise PolicyBundleError(
            f"Could not extract id from custom policy bundle {bundle_path}. "
            "May be malformed json or not contain id property"
        )
    logger.info("Detected custom policy id: %s", bundle_id)
    return PolicyBundle(path=bundle_path, name=bundle_id)


def resolve_policy_bundle(settings: ScanSettings, custom_policy_path: str | None = None) -> PolicyBundle:
    if custom_policy_path:
        return load_custom_policy_bundle(custom_policy_path)
    return PolicyBundle(path=settings.default_policy_bundle_path, name=settings.policy_bundle_name)


__all__ = ["PolicyBundle", "load_custom_policy_bundle", "resolve_policy_bundle", "workspace_root"]
