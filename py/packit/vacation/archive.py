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
"""Archive decompression with format detection."""


import io
from pathlib import Path
from typing import BinaryIO, cast

from packit.common.constant import ZIP_EMPTY_MAGIC, ZIP_MAGIC

from .tar_archive import TarArchive
from .zip_archive import ZipArchive


class _CompressedTarArchive(TarArchive):
    """A tar archive with transparent gzip, bzip2 or xz decompression."""

    open_mode = "r|*"


class Archive:
    """An archive of any supported format read from a binary stream.

    ZIP archives are recognized by their leading signature. Anything else is read
    as a tar archive, optionally gzip, bzip2 or xz compressed.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self.reader = reader

    def decompress(self, destination: str | Path) -> None:
        """Extract the archive into the existing directory ``destination``."""
        reader = self.reader
        if not isinstance(reader, io.BufferedReader):
            reader = io.BufferedReader(cast(io.RawIOBase, reader))

        magic = reader.peek(len(ZIP_MAGIC))[: len(ZIP_MAGIC)]
        if magic in (ZIP_MAGIC, ZIP_EMPTY_MAGIC):
            ZipArchive(reader).decompress(destination)
        else:
            _CompressedTarArchive(reader).decompress(destination)
