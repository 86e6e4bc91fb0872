# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for scangate."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENGINE_VERSION = "0.7.2"
DEFAULT_POLICY_BUNDLE = "critical_security_policy"
DEFAULT_REPORT_DIR = "./anchore-reports"
DEFAULT_LIB_DIR = "./lib"
DEFAULT_SCAN_SCRIPT = "inline_scan"

INLINE_SCAN_IMAGE = "docker.io/anchore/inline-scan:v{version}"
INLINE_SCAN_SLIM_IMAGE = "docker.io/anchore/inline-scan-slim:v{version}"

BILL_OF_MATERIALS_FILE = "content.json"
VULNERABILITIES_FILE = "vulnerabilities.json"
POLICY_EVALUATION_FILE = "policy_evaluation.json"
RUNNER_SCRIPT = "run_scan.sh"


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        return float(value) if value is not None and value.strip() else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_fail_build(value: str | bool | None) -> bool:
    """Only an explicit ``true`` (any case) enables failing the build."""
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() == "true"


@dataclass
class ScanSettings:
    """Per-run scan defaults; construct once and pass down."""

    engine_version: str = DEFAULT_ENGINE_VERSION
    report_dir: str = DEFAULT_REPORT_DIR
    lib_dir: str = DEFAULT_LIB_DIR
    scan_script: str = DEFAULT_SCAN_SCRIPT
    policy_bundle_name: str = DEFAULT_POLICY_BUNDLE
    fail_build: bool = False
    include_app_packages: bool = False
    debug: bool = False
    scan_timeout: float | None = None
    failing_status: str = "fail"

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _optional_float_env("SCANGATE_SCAN_TIMEOUT", cls.scan_timeout)
        if timeout is not None and timeout <= 0:
            timeout = None
        return cls(
            engine_version=_str_env("SCANGATE_ENGINE_VERSION", cls.engine_version),
            report_dir=_str_env("SCANGATE_REPORT_DIR", cls.report_dir),
            lib_dir=_str_env("SCANGATE_LIB_DIR", cls.lib_dir),
            scan_script=_str_env("SCANGATE_SCAN_SCRIPT", cls.scan_script),
            policy_bundle_name=_str_env("SCANGATE_POLICY_BUNDLE", cls.policy_bundle_name),
            fail_build=parse_fail_build(os.getenv("SCANGATE_FAIL_BUILD")),
            include_app_packages=_bool_env("SCANGATE_INCLUDE_APP_PACKAGES", cls.include_app_packages),
            debug=_bool_env("SCANGATE_DEBUG", cls.debug),
            scan_timeout=timeout,
        )

    @property
    def inline_scan_image(self) -> str:
        template = INLINE_SCAN_IMAGE if self.include_app_packages else INLINE_SCAN_SLIM_IMAGE
        return template.format(version=self.engine_version)

    @property
    def runner_path(self) -> Path:
        return Path(self.lib_dir) / RUNNER_SCRIPT

    @property
    def default_policy_bundle_path(self) -> Path:
        return Path(self.lib_dir) / f"{self.policy_bundle_name}.json"

    @property
    def bill_of_materials_path(self) -> Path:
        return Path(self.report_dir) / BILL_OF_MATERIALS_FILE

    @property
    def vulnerabilities_path(self) -> Path:
        return Path(self.report_dir) / VULNERABILITIES_FILE

    @property
    def policy_evaluation_path(self) -> Path:
        return Path(self.report_dir) / POLICY_EVALUATION_FILE


def load_scan_settings() -> ScanSettings:
    """Load scan settings from environment with sensible defaults."""
    return ScanSettings.from_env()
