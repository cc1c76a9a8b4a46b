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
"""Copy a buildpack source tree before packaging it."""


import shutil
from logging import DEBUG
from pathlib import Path

from packit.common.logger import log


class DirectoryDuplicator:
    """Duplicates directory trees, keeping file modes and symlinks."""

    def duplicate(self, source_path: str | Path, dest_path: str | Path) -> None:
        """Copy the contents of ``source_path`` into ``dest_path``.

        ``dest_path`` may already exist. Symlinks are copied as symlinks, not
        followed.
        """
        log(DEBUG, "Duplicating %s to %s", source_path, dest_path)
        shutil.copytree(source_path, dest_path, symlinks=True, dirs_exist_ok=True)
