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
"""Tests for archive format detection."""


import io
import tarfile
import zipfile
from pathlib import Path

import pytest

from .archive import Archive
from .errors import FormatError


def _tar_bytes(mode: str) -> bytes:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode=mode) as tar:  # type: ignore[call-overload]
        info = tarfile.TarInfo("some-dir/some-file")
        info.size = len(b"tar content")
        tar.addfile(info, io.BytesIO(b"tar content"))
    return buf.getvalue()


def _zip_bytes() -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("some-dir/some-file", b"zip content")
    return buf.getvalue()


@pytest.mark.parametrize(
    "data, expected",
    [
        (_zip_bytes(), b"zip content"),
        (_tar_bytes("w"), b"tar content"),
        (_tar_bytes("w:gz"), b"tar content"),
        (_tar_bytes("w:bz2"), b"tar content"),
        (_tar_bytes("w:xz"), b"tar content"),
    ],
)
def test_decompress_detects_format(
    data: bytes, expected: bytes, tmp_path: Path
) -> None:
    """The archive format is detected from the stream contents."""
    # Execute
    Archive(io.BytesIO(data)).decompress(tmp_path)

    # Assert
    assert (tmp_path / "some-dir" / "some-file").read_bytes() == expected


def test_decompress_from_file(tmp_path: Path) -> None:
    """Buffered file objects are read without being wrapped."""
    # Prepare
    archive_path = tmp_path / "archive.zip"
    archive_path.write_bytes(_zip_bytes())
    destination = tmp_path / "destination"
    destination.mkdir()

    # Execute
    with archive_path.open("rb") as reader:
        Archive(reader).decompress(destination)

    # Assert
    assert (destination / "some-dir" / "some-file").read_bytes() == b"zip content"


def test_decompress_unknown_format(tmp_path: Path) -> None:
    """Data that is neither ZIP nor tar is rejected."""
    with pytest.raises(FormatError):
        Archive(io.BytesIO(b"something")).decompress(tmp_path)
