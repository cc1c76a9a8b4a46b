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
"""Tests for the file system existence probe."""


import os
from pathlib import Path

import pytest

from .file_exists import file_exists


def test_file_exists_for_file(tmp_path: Path) -> None:
    """An existing file is reported."""
    # Prepare
    file_path = tmp_path / "some-file"
    file_path.write_text("hello file")

    # Execute & Assert
    assert file_exists(file_path)
    assert file_exists(str(file_path))


def test_file_exists_for_directory(tmp_path: Path) -> None:
    """An existing directory is reported."""
    assert file_exists(tmp_path)


def test_file_exists_missing(tmp_path: Path) -> None:
    """A missing path is not an error."""
    assert not file_exists(tmp_path / "some-file")
    assert not file_exists(tmp_path / "missing-dir" / "some-file")


def test_file_exists_dangling_symlink(tmp_path: Path) -> None:
    """A symlink to a missing file does not exist."""
    # Prepare
    os.symlink("missing", tmp_path / "link")

    # Execute & Assert
    assert not file_exists(tmp_path / "link")


@pytest.mark.skipif(os.geteuid() == 0, reason="file permissions are not enforced")
def test_file_exists_permission_denied(tmp_path: Path) -> None:
    """A path that cannot be inspected raises instead of returning False."""
    # Prepare
    file_path = tmp_path / "some-file"
    file_path.write_bytes(b"")
    tmp_path.chmod(0o000)

    # Execute & Assert
    try:
        with pytest.raises(PermissionError, match="Permission denied"):
            file_exists(file_path)
    finally:
        tmp_path.chmod(0o755)
