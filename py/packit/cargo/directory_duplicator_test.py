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
"""Tests for buildpack tree duplication."""


import os
import stat
from pathlib import Path

from .directory_duplicator import DirectoryDuplicator


def test_duplicate(tmp_path: Path) -> None:
    """The tree is copied with modes and symlinks intact."""
    # Prepare
    source = tmp_path / "source"
    (source / "bin").mkdir(parents=True)
    (source / "bin" / "build").write_text("#!/bin/sh\n")
    (source / "bin" / "build").chmod(0o755)
    os.symlink("build", source / "bin" / "detect")
    dest = tmp_path / "dest"
    dest.mkdir()

    # Execute
    DirectoryDuplicator().duplicate(source, dest)

    # Assert
    assert (dest / "bin" / "build").read_text() == "#!/bin/sh\n"
    assert stat.S_IMODE((dest / "bin" / "build").stat().st_mode) == 0o755
    assert os.readlink(dest / "bin" / "detect") == "build"
    assert (source / "bin" / "build").exists()
