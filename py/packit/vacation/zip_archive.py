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
"""ZIP archive decompression."""


import io
import os
import stat
import zipfile
import zlib
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from packit.common.constant import (
    DEFAULT_DIR_MODE,
    DEFAULT_FILE_MODE,
    MSDOS_READ_ONLY_ATTR,
    ZIP_CREATE_SYSTEM_UNIX,
)

from .entry import ArchiveEntry, EntryKind
from .errors import FormatError
from .extract import extract_entries

ARCHIVE_FORMAT = "zip"


def zip_entry_kind_and_mode(info: zipfile.ZipInfo) -> tuple[EntryKind, int]:
    """Derive the entry type and permission bits of a ZIP member.

    Members written on Unix keep their mode in the upper 16 bits of the external
    attributes. Other members fall back to ``0o666``/``0o777``, without write
    permissions if the MS-DOS read-only attribute is set.
    """
    unix_mode = info.external_attr >> 16
    if info.create_system == ZIP_CREATE_SYSTEM_UNIX and unix_mode:
        if stat.S_ISLNK(unix_mode):
            return EntryKind.SYMLINK, stat.S_IMODE(unix_mode)
        if info.is_dir() or stat.S_ISDIR(unix_mode):
            return EntryKind.DIRECTORY, stat.S_IMODE(unix_mode)
        return EntryKind.REGULAR_FILE, stat.S_IMODE(unix_mode)

    if info.is_dir():
        kind, mode = EntryKind.DIRECTORY, DEFAULT_DIR_MODE
    else:
        kind, mode = EntryKind.REGULAR_FILE, DEFAULT_FILE_MODE
    if info.external_attr & MSDOS_READ_ONLY_ATTR:
        mode &= ~0o222
    return kind, mode


def iter_zip_entries(zf: zipfile.ZipFile) -> Iterator[ArchiveEntry]:
    """Yield the members of an open ZIP file in central directory order."""
    for info in zf.infolist():
        if not info.filename:
            raise FormatError(ARCHIVE_FORMAT, "archive member without a name")

        kind, mode = zip_entry_kind_and_mode(info)
        with zf.open(info) as content:
            yield ArchiveEntry(
                path=info.filename,
                kind=kind,
                mode=mode,
                size=info.file_size,
                content=content,
            )


class ZipArchive:
    """A ZIP archive read from a binary stream.

    ZIP files are read through their central directory, which needs random
    access. Streams that cannot seek are buffered in memory first.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self.reader = reader

    def decompress(self, destination: str | Path) -> None:
        """Extract the archive into the existing directory ``destination``."""
        try:
            zf = zipfile.ZipFile(_seekable(self.reader))
        except zipfile.BadZipFile as err:
            raise FormatError(ARCHIVE_FORMAT, err) from err

        with zf:
            try:
                extract_entries(iter_zip_entries(zf), os.fspath(destination))
            except (zipfile.BadZipFile, zlib.error, NotImplementedError) as err:
                # Corrupt member data or an unsupported compression method
                raise FormatError(ARCHIVE_FORMAT, err) from err


def _seekable(reader: BinaryIO) -> BinaryIO:
    if reader.seekable():
        return reader
    return io.BytesIO(reader.read())
