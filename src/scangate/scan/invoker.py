# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run the inline-scan wrapper script as a subprocess."""

from __future__ import annotations

import logging
import subprocess

from ..config import ScanSettings
from ..errors import ScanExecutionError
from ..models import ScanRequest
from .bundle import PolicyBundle

logger = logging.getLogger(__name__)


class ScanInvoker:
    """Builds the runner command line and waits for the scan to finish."""

    def __init__(self, settings: ScanSettings):
        self.settings = settings

    def build_command(self, request: ScanRequest, bundle: PolicyBundle) -> list[str]:
        command = [
            str(self.settings.runner_path),
            self.settings.scan_script,
            self.settings.inline_scan_image,
            request.image_reference,
            "true" if self.settings.debug else "false",
            str(bundle.path),
            bundle.name,
        ]
        if request.dockerfile_path:
            command.append(request.dockerfile_path)
        return command

    def run(self, request: ScanRequest, bundle: PolicyBundle) -> None:
        command = self.build_command(request, bundle)
        logger.debug("Image: %s", request.image_reference)
        logger.debug("Dockerfile path: %s", request.dockerfile_path)
        logger.debug("Inline Scan Image: %s", self.settings.inline_scan_image)
        logger.debug("Policy path for evaluation: %s", bundle.path)
        logger.debug("Policy name for evaluation: %s", bundle.name)
        logger.info("Analyzing image: %s", request.image_reference)

        try:
            subprocess.run(command, check=True, timeout=self.settings.scan_timeout)
        except (FileNotFoundError, PermissionError) as exc:
            raise ScanExecutionError(f"Scan runner {command[0]} could not be started: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ScanExecutionError(f"Scan of {request.image_reference} timed out after {exc.timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            raise ScanExecutionError(
                f"Scan of {request.image_reference} exited with status {exc.returncode}",
                returncode=exc.returncode,
            ) from exc


__all__ = ["ScanInvoker"]
