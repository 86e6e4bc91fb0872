# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration: run the inline scan, then aggregate its reports."""

from .bundle import PolicyBundle, load_custom_policy_bundle, resolve_policy_bundle
from .engine import ScanEngine
from .invoker import ScanInvoker

__all__ = [
    "PolicyBundle",
    "ScanEngine",
    "ScanInvoker",
    "load_custom_policy_bundle",
    "resolve_policy_bundle",
]
