# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""scangate CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from ..config import ScanSettings, load_scan_settings
from ..errors import ReportWriteError, ScanGateError, categorize_exception, error_category_to_reason
from ..log import setup_logging
from ..models import ScanRequest, ScanResult
from ..scan import ScanEngine

EXIT_OK = 0
EXIT_POLICY_FAILED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scan a container image with Anchore inline scan and gate on its policy verdict")
    parser.add_argument("image", help="Image reference to scan (e.g. docker.io/library/alpine:latest)")
    parser.add_argument("--dockerfile", dest="dockerfile_path", help="Dockerfile used to build the image")
    parser.add_argument(
        "--custom-policy-path",
        help="Policy bundle JSON, relative to $GITHUB_WORKSPACE (or the current directory)",
    )
    parser.add_argument(
        "--fail-build",
        action="store_true",
        help="Exit non-zero when the policy verdict is 'fail' (default from SCANGATE_FAIL_BUILD)",
    )
    parser.add_argument(
        "--include-app-packages",
        action="store_true",
        help="Use the full inline-scan image so application packages are reported",
    )
    parser.add_argument("--engine-version", help="Anchore engine version of the inline-scan image")
    parser.add_argument("--report-dir", help="Directory the scanner writes its reports into")
    parser.add_argument("--debug", action="store_true", help="Verbose logging, forwarded to the scan script")
    parser.add_argument(
        "--skip-scan",
        action="store_true",
        help="Do not run the scanner; aggregate an existing report directory",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON instead of name=value lines")
    parser.add_argument("--output-file", help="Append name=value outputs to this file")
    return parser


def _apply_args(settings: ScanSettings, args: argparse.Namespace) -> ScanSettings:
    if args.fail_build:
        settings.fail_build = True
    if args.include_app_packages:
        settings.include_app_packages = True
    if args.engine_version:
        settings.engine_version = args.engine_version
    if args.report_dir:
        settings.report_dir = args.report_dir
    if args.debug:
        settings.debug = True
    return settings


def _write_outputs(outputs: dict[str, str], path: str) -> None:
    target = Path(path)
    try:
        with target.open("a", encoding="utf-8") as handle:
            for name, value in outputs.items():
                handle.write(f"{name}={value}\n")
    except OSError as exc:
        raise ReportWriteError(target, str(exc)) from exc


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(result: ScanResult) -> None:
    for name, value in result.to_outputs().items():
        print(f"{name}={value}")
    if result.build_failed:
        print("Image failed Anchore policy evaluation")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = _apply_args(load_scan_settings(), args)
    setup_logging(debug=settings.debug)
    engine = ScanEngine(settings)
    request = ScanRequest(
        image_reference=args.image,
        dockerfile_path=args.dockerfile_path,
        custom_policy_path=args.custom_policy_path,
    )

    try:
        result = engine.aggregate() if args.skip_scan else engine.run(request)
        if args.output_file:
            _write_outputs(result.to_outputs(), args.output_file)
    except ScanGateError as exc:
        reason = error_category_to_reason(categorize_exception(exc))
        print(f"[scangate] {reason}: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        _print_json(result)
    else:
        _pretty_print(result)

    return EXIT_POLICY_FAILED if result.build_failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
