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
"""Safe decompression of untrusted archives."""


from .archive import Archive
from .entry import ArchiveEntry, EntryKind
from .errors import (
    DirectoryCreateError,
    FileCreateError,
    FormatError,
    PathTraversalError,
    SymlinkCreateError,
    SymlinkTargetMissingError,
    VacationError,
)
from .path_safety import resolve
from .tar_archive import TarArchive, TarGzipArchive, TarXZArchive
from .zip_archive import ZipArchive

__all__ = [
    "Archive",
    "ArchiveEntry",
    "DirectoryCreateError",
    "EntryKind",
    "FileCreateError",
    "FormatError",
    "PathTraversalError",
    "SymlinkCreateError",
    "SymlinkTargetMissingError",
    "TarArchive",
    "TarGzipArchive",
    "TarXZArchive",
    "VacationError",
    "ZipArchive",
    "resolve",
]
