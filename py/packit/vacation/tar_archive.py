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
"""Tar archive decompression."""


import io
import os
import stat
import tarfile
from collections.abc import Iterator
from logging import DEBUG
from pathlib import Path
from typing import BinaryIO

from packit.common.logger import log

from .entry import ArchiveEntry, EntryKind
from .errors import FormatError
from .extract import extract_entries


def iter_tar_entries(
    tar: tarfile.TarFile, archive_format: str = "tar"
) -> Iterator[ArchiveEntry]:
    """Yield the supported members of a tar file in stream order.

    Hard links, devices and FIFOs have no counterpart in the extraction engine
    and are skipped.
    """
    for member in tar:
        if not member.name:
            raise FormatError(archive_format, "archive member without a name")

        content: BinaryIO | None
        if member.isdir():
            kind, content = EntryKind.DIRECTORY, io.BytesIO()
        elif member.isreg():
            kind, content = EntryKind.REGULAR_FILE, tar.extractfile(member)
        elif member.issym():
            kind, content = EntryKind.SYMLINK, io.BytesIO(os.fsencode(member.linkname))
        else:
            log(DEBUG, "Skipping unsupported tar member %s", member.name)
            continue

        if content is None:
            raise FormatError(archive_format, f"cannot read member {member.name}")

        with content:
            yield ArchiveEntry(
                path=member.name,
                kind=kind,
                mode=stat.S_IMODE(member.mode),
                size=member.size,
                content=content,
            )


class TarArchive:
    """An uncompressed tar archive read from a binary stream.

    The stream is read strictly forward; it is never seeked.
    """

    archive_format = "tar"
    open_mode = "r|"

    def __init__(self, reader: BinaryIO) -> None:
        self.reader = reader

    def decompress(self, destination: str | Path) -> None:
        """Extract the archive into the existing directory ``destination``."""
        try:
            with tarfile.open(fileobj=self.reader, mode=self.open_mode) as tar:
                extract_entries(
                    iter_tar_entries(tar, self.archive_format),
                    os.fspath(destination),
                )
        except (tarfile.TarError, EOFError) as err:
            raise FormatError(self.archive_format, err) from err


class TarGzipArchive(TarArchive):
    """A gzip compressed tar archive read from a binary stream."""

    archive_format = "tar.gz"
    open_mode = "r|gz"


class TarXZArchive(TarArchive):
    """An xz compressed tar archive read from a binary stream."""

    archive_format = "tar.xz"
    open_mode = "r|xz"
