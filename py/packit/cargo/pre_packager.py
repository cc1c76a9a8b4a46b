# Copyright 2026 Flower Labs GmbH. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Run the pre-packaging script of a buildpack."""


import subprocess
from logging import INFO
from pathlib import Path

from packit.common.logger import log


class PrePackageError(Exception):
    """Exception raised when the pre-packaging script fails."""

    def __init__(self, reason: str, output: str = ""):
        super().__init__(f"{reason}\n{output}" if output else reason)
        self.output = output


class PrePackager:
    """Executes a buildpack's ``pre_package`` script."""

    def execute(self, script_path: str, root_dir: str | Path) -> None:
        """Run ``script_path`` through ``bash`` inside ``root_dir``.

        An empty ``script_path`` is a no-op. The combined stdout and stderr of the
        script is logged, and attached to the error if the script fails.
        """
        if not script_path:
            return

        log(INFO, "Executing pre-packaging script: %s", script_path)
        try:
            process = subprocess.run(
                ["bash", "-c", script_path],
                cwd=root_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
                text=True,
            )
        except OSError as err:
            raise PrePackageError(str(err)) from err

        for line in process.stdout.splitlines():
            log(INFO, "  %s", line)

        if process.returncode != 0:
            raise PrePackageError(
                f"exit status {process.returncode}", process.stdout.strip()
            )
